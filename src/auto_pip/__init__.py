""" A plugin for release automation that bumps the version in `setup.cfg` and publishes the package with Twine. """

__version__ = "0.1.0"
