""" Publish Python packages configured with a `setup.cfg` using setuptools and Twine. """

from __future__ import annotations

import dataclasses
import typing as t
from pathlib import Path

from auto_pip.configuration import PipPluginOptions, load_plugin_options, validate_plugin_configuration
from auto_pip.host import make_logger
from auto_pip.plugins import AutoPlugin
from auto_pip.setup_cfg import Author, SetupCfg
from auto_pip.util.process import exec_command
from auto_pip.util.semver import VersionIncrementError, increment_version
from auto_pip.util.url import Repository, parse_repository_url

if t.TYPE_CHECKING:
    from auto_pip.host import Auto, AutoLogger


@dataclasses.dataclass
class CanaryResult:
    new_version: str
    details: str


def to_pep440_identifier(canary_identifier: str) -> str:
    """Rewrites a canary identifier like `-canary.1a2b3c4` into a suffix that yields a valid PEP 440 version when
    appended to a release version, like `-dev0+1a2b3c4`. Only the first occurrence of each pattern is replaced."""

    return canary_identifier.replace("-canary", "-dev", 1).replace(".", "+", 1).replace("dev+", "dev0+", 1)


def make_install_details(package_name: str, version: str) -> str:
    return "\n".join(
        [
            ":sparkles: Test out this PR via:\n",
            "```bash",
            f"pip install {package_name}=={version}",
            "```",
        ]
    )


class PipPlugin(AutoPlugin):
    """Manages the version number in the `[metadata]` section of `setup.cfg` and publishes the package with
    `setup.py` and Twine.

    The `setup.cfg` is located in *directory* (defaults to the current working directory) when the plugin is
    created. It must contain the package `name`, otherwise a #SetupCfgError is raised. All hooks read the
    file again when they are called."""

    name = "pip"

    #: The host's log channels, set in #apply().
    logger: AutoLogger

    def __init__(
        self,
        options: t.Mapping[str, t.Any] | PipPluginOptions | None = None,
        directory: Path | None = None,
    ) -> None:
        self.directory = directory or Path.cwd()
        self.setup_cfg = SetupCfg.find(self.directory)
        self.package_name = self.setup_cfg.read_metadata().name
        self.options = load_plugin_options(options)
        self.logger = make_logger()

    def apply(self, auto: Auto) -> None:
        self.logger = auto.logger
        auto.hooks.validate_config.tap(self.name, self.validate_config)
        auto.hooks.get_previous_version.tap(self.name, self.get_previous_version)
        auto.hooks.get_author.tap(self.name, self.get_author)
        auto.hooks.get_repository.tap(self.name, self.get_repository)
        auto.hooks.version.tap(self.name, self.version)
        auto.hooks.canary.tap(self.name, self.canary)
        auto.hooks.publish.tap(self.name, self.publish)

    # Hooks

    def validate_config(self, name: str, options: t.Any) -> list[str] | None:
        if name in (self.name, f"auto-plugin-{self.name}"):
            return validate_plugin_configuration(self.name, PipPluginOptions, options)
        return None

    def get_previous_version(self) -> str:
        return self.setup_cfg.read_version()

    def get_author(self) -> Author:
        return self.setup_cfg.read_metadata().author

    def get_repository(self) -> Repository | None:
        url = self.setup_cfg.read_metadata().url
        if not url:
            return None
        return parse_repository_url(url)

    def version(self, bump: str, dry_run: bool = False, quiet: bool = False) -> None:
        version, new_version = self.get_new_version(bump)

        if dry_run:
            self._report_dry_run(new_version, quiet)
            return

        self.setup_cfg.write_version(version, new_version)

    def canary(
        self,
        bump: str,
        canary_identifier: str,
        dry_run: bool = False,
        quiet: bool = False,
    ) -> CanaryResult | None:
        version, new_version = self.get_new_version(bump)
        canary_version = new_version + to_pep440_identifier(canary_identifier)

        if dry_run:
            self._report_dry_run(canary_version, quiet)
            return None

        self.setup_cfg.write_version(version, canary_version)

        self.logger.verbose.info("Running default release command")
        self._build()

        # The built distributions carry the normalized version, e.g. `0.2.0.dev0+1a2b3c4`.
        self._upload(canary_version.replace("-", ".", 1))

        self.logger.verbose.info("Successfully published canary version")

        return CanaryResult(canary_version, make_install_details(self.package_name, canary_version))

    def publish(self) -> None:
        version = self.setup_cfg.read_version()

        exec_command(
            "git",
            ["commit", "-am", f'"update version: {version} [skip ci]"', "--no-verify"],
            cwd=self.directory,
        )

        self.logger.verbose.info("Running default release command")
        self._build()
        self._upload(version)

    # Internals

    def get_new_version(self, bump: str) -> tuple[str, str]:
        """Returns the current version and the version incremented by the *bump* rule.

        Raises:
          SetupCfgError: If the `setup.cfg` contains no version.
          VersionIncrementError: If the version cannot be incremented.
        """

        version = self.setup_cfg.read_version()
        try:
            new_version = increment_version(version, bump)
        except VersionIncrementError as exc:
            raise VersionIncrementError(
                f'The version "{version}" parsed from {SetupCfg.FILENAME} was invalid and could not be incremented.'
            ) from exc
        return version, new_version

    def _report_dry_run(self, version: str, quiet: bool) -> None:
        if quiet:
            print(version)
        else:
            self.logger.log.info("Would have published: %s", version)

    def _build(self) -> None:
        exec_command("python3", ["setup.py", "bdist_wheel", "sdist"], cwd=self.directory)

    def _upload(self, version: str) -> None:
        args = ["-m", "twine", "upload"]
        if self.options.repository:
            args += ["--repository", self.options.repository]
        args += [f"dist/{self.package_name}-{version}*", "--verbose"]
        exec_command("python3", args, cwd=self.directory)
