""" A command-line interface that loads a plugin, attaches it to a standalone #Auto host and calls its hooks. This
allows running the release steps of a package without the release automation host. """

from __future__ import annotations

import logging
import textwrap
import typing as t

from cleo.application import Application as BaseCleoApplication  # type: ignore[import]
from cleo.commands.command import Command as _BaseCommand  # type: ignore[import]
from cleo.helpers import argument, option  # type: ignore[import]
from cleo.io.io import IO  # type: ignore[import]

from auto_pip import __version__
from auto_pip.configuration import PluginConfigurationError
from auto_pip.host import Auto
from auto_pip.plugins import AutoPlugin
from auto_pip.util.plugins import load_entrypoint
from auto_pip.util.process import exec_command

__all__ = ["Command", "Application", "InfoCommand", "VersionCommand", "CanaryCommand", "PublishCommand"]
logger = logging.getLogger(__name__)


class Command(_BaseCommand):
    help: str
    description: str

    def __init_subclass__(cls) -> None:
        if "help" not in vars(cls):
            first_line, remainder = (cls.__doc__ or "").partition("\n")[::2]
            cls.help = (first_line.strip() + "\n" + textwrap.dedent(remainder)).strip()
        if "description" not in vars(cls):
            cls.description = (cls.help.strip().splitlines()[0] if cls.help else None) or ""


class PluginCommand(Command):
    """Base class for commands that load a plugin and call its hooks."""

    options = [
        option(
            "plugin",
            None,
            "The name of the plugin to load from the <info>auto.plugins</info> entrypoint group.",
            flag=False,
            default="pip",
        ),
        option(
            "repository",
            "r",
            "The name of the repository to upload distributions to, as configured in <info>~/.pypirc</info>.",
            flag=False,
        ),
    ]

    def handle(self) -> int:
        plugin_name: str = self.option("plugin")
        plugin_options: dict[str, t.Any] = {}
        if self.option("repository"):
            plugin_options["repository"] = self.option("repository")

        auto = Auto()
        try:
            plugin = load_entrypoint(AutoPlugin, plugin_name)(plugin_options)  # type: ignore[type-abstract]
        except PluginConfigurationError as exc:
            return self.report_errors(exc.errors)
        plugin.apply(auto)

        errors = auto.hooks.validate_config.call(plugin_name, plugin_options)
        if errors:
            return self.report_errors(errors)

        return self.run_hooks(auto)

    def report_errors(self, errors: list[str]) -> int:
        for error in errors:
            self.line_error(f"error: {error}", "error")
        return 1

    def run_hooks(self, auto: Auto) -> int:
        raise NotImplementedError


class InfoCommand(PluginCommand):
    """Show the version, author and repository of the package."""

    name = "info"

    def run_hooks(self, auto: Auto) -> int:
        author = auto.hooks.get_author.call()
        repository = auto.hooks.get_repository.call()

        self.line(f"version: <info>{auto.hooks.get_previous_version.call()}</info>")
        if author is not None and (author.name or author.email):
            parts = []
            if author.name:
                parts.append(f"<info>{author.name}</info>")
            if author.email:
                parts.append(f"<comment>{author.email}</comment>")
            self.line("author: " + " ".join(parts))
        if repository is not None:
            self.line(f"repository: <info>{repository.owner}/{repository.repo}</info>")
        else:
            self.line("repository: <comment>none</comment>")
        return 0


class VersionCommand(PluginCommand):
    """Bump the version number of the package.

    The <info>bump</info> argument is one of <comment>major</comment>, <comment>premajor</comment>,
    <comment>minor</comment>, <comment>preminor</comment>, <comment>patch</comment>, <comment>prepatch</comment>
    and <comment>prerelease</comment>. With <info>--dry-run</info>, the new version is only reported. Combine it
    with <info>-q</info> to print nothing but the version number.
    """

    name = "version"
    arguments = [argument("bump", "The version bump rule to apply to the current version.")]
    options = [
        *PluginCommand.options,
        option("dry-run", "d", "Report the new version instead of writing it."),
    ]

    def run_hooks(self, auto: Auto) -> int:
        auto.hooks.version.call(
            bump=self.argument("bump"),
            dry_run=self.option("dry-run"),
            quiet=self.io.output.is_quiet(),
        )
        return 0


class CanaryCommand(PluginCommand):
    """Bump the version number to a canary version and publish the package.

    The canary version consists of the bumped version and the canary identifier, which defaults to
    <comment>-canary.{short commit sha}</comment>.
    """

    name = "canary"
    arguments = [argument("bump", "The version bump rule to apply to the current version.")]
    options = [
        *PluginCommand.options,
        option("canary-identifier", "i", "The identifier to append to the bumped version.", flag=False),
        option("dry-run", "d", "Report the canary version instead of publishing it."),
    ]

    def run_hooks(self, auto: Auto) -> int:
        canary_identifier = self.option("canary-identifier")
        if not canary_identifier:
            canary_identifier = "-canary." + exec_command("git", ["rev-parse", "--short", "HEAD"])

        result = auto.hooks.canary.call(
            bump=self.argument("bump"),
            canary_identifier=canary_identifier,
            dry_run=self.option("dry-run"),
            quiet=self.io.output.is_quiet(),
        )
        if result is not None:
            self.line(f"Published <info>{result.new_version}</info>")
            self.line(result.details)
        return 0


class PublishCommand(PluginCommand):
    """Commit the version number and publish the package."""

    name = "publish"

    def run_hooks(self, auto: Auto) -> int:
        auto.hooks.publish.call()
        return 0


class Application(BaseCleoApplication):
    def __init__(self, name: str = "auto-pip", version: str = __version__) -> None:
        super().__init__(name, version)
        for command in (InfoCommand(), VersionCommand(), CanaryCommand(), PublishCommand()):
            self.add(command)

    def render_error(self, error: Exception, io: IO) -> None:
        import subprocess as sp

        if isinstance(error, sp.CalledProcessError):
            msg = "Uncaught CalledProcessError raised for command %s (exit code: %s)."
            args: tuple[t.Any, ...] = (error.cmd, error.returncode)
            stdout: str | None = error.stdout.decode() if error.stdout else None
            stderr: str | None = error.stderr.decode() if error.stderr else None
            if stdout:
                msg += "\n  stdout:\n%s"
                args += (textwrap.indent(stdout, "    "),)
            if stderr:
                msg += "\n  stderr:\n%s"
                args += (textwrap.indent(stderr, "    "),)

            logger.error(msg, *args)

        return super().render_error(error, io)

    def _configure_io(self, io: IO) -> None:
        fmt = "%(message)s"
        verbose = False
        if io.input.has_parameter_option("-vvv"):
            fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
            level = logging.DEBUG
            verbose = True
        elif io.input.has_parameter_option("-vv"):
            level = logging.DEBUG
            verbose = True
        elif io.input.has_parameter_option(["-v", "--verbose"]):
            level = logging.INFO
            verbose = True
        elif io.input.has_parameter_option(["-q", "--quiet"]):
            level = logging.ERROR
        else:
            level = logging.WARNING

        logging.basicConfig(level=level, format=fmt)
        logging.getLogger("auto").setLevel(logging.ERROR if level >= logging.ERROR else logging.INFO)
        logging.getLogger("auto.verbose").setLevel(logging.INFO if verbose else logging.WARNING)

        super()._configure_io(io)
