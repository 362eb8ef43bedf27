""" Read the package metadata from a `setup.cfg` file and update the version number in it. """

from __future__ import annotations

import configparser
import dataclasses
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SetupCfgError(Exception):
    """Raised when the `setup.cfg` is missing or does not contain the expected metadata."""


@dataclasses.dataclass
class Author:
    name: str | None
    email: str | None


@dataclasses.dataclass
class PackageMetadata:
    """The fields of the `[metadata]` section that are relevant for a release."""

    name: str
    version: str | None
    author: Author
    url: str | None


class SetupCfg:
    """Represents the `setup.cfg` file of a package. The file is read again on every access, the object itself holds
    no state other than the path to the file."""

    FILENAME = "setup.cfg"
    SECTION = "metadata"

    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f'{type(self).__name__}(path="{self.path}")'

    @classmethod
    def find(cls, directory: Path | None = None) -> SetupCfg:
        """Locates the `setup.cfg` in *directory* (defaults to the current working directory) and validates that it
        contains the package name.

        Raises:
          SetupCfgError: If the file does not exist, cannot be parsed, has no `[metadata]` section or no `name`.
        """

        path = (directory or Path.cwd()) / cls.FILENAME
        if not path.is_file():
            raise SetupCfgError(f"No {cls.FILENAME} found")

        setup_cfg = cls(path)
        setup_cfg.read_metadata()
        return setup_cfg

    def parse(self) -> configparser.ConfigParser:
        logger.debug("Reading %s", self.path)
        parser = configparser.ConfigParser(interpolation=None)
        try:
            with self.path.open(encoding="utf-8") as fp:
                parser.read_file(fp)
        except configparser.Error as exc:
            raise SetupCfgError(f"Unable to parse {self.FILENAME}: {exc}") from exc
        return parser

    def read_metadata(self) -> PackageMetadata:
        parser = self.parse()
        if not parser.has_section(self.SECTION):
            raise SetupCfgError(f"No {self.SECTION} section of {self.FILENAME}")

        metadata = parser[self.SECTION]
        name = metadata.get("name")
        if not name:
            raise SetupCfgError(f"No name in {self.SECTION} section of {self.FILENAME}")

        email = metadata.get("author_email")
        if email is None:
            email = metadata.get("author-email")

        return PackageMetadata(
            name=name,
            version=metadata.get("version"),
            author=Author(metadata.get("author"), email),
            url=metadata.get("url"),
        )

    def read_version(self) -> str:
        """Returns the version number of the package.

        Raises:
          SetupCfgError: If there is no `version` in the `[metadata]` section.
        """

        version = self.read_metadata().version
        if not version:
            raise SetupCfgError(f"No version in {self.SECTION} section of {self.FILENAME}")
        return version

    def write_version(self, version: str, new_version: str) -> None:
        """Replaces the first occurrence of *version* in the file with *new_version*. This is a plain text
        replacement, so the rest of the file is preserved exactly."""

        with self.path.open(encoding="utf-8", newline="") as fp:
            content = fp.read()
        if version not in content:
            logger.debug("Version %r does not occur in %s, leaving it unchanged", version, self.path)
        with self.path.open("w", encoding="utf-8", newline="") as fp:
            fp.write(content.replace(version, new_version, 1))
        logger.debug("Updated version in %s from %s to %s", self.path, version, new_version)
