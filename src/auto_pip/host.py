""" The contract between the release automation host and its plugins. The host owns a set of named lifecycle hooks
to which plugins attach handlers ("taps") in #AutoPlugin.apply(). The host then calls the hooks in its own order
during a release cycle. """

from __future__ import annotations

import dataclasses
import logging
import typing as t

R = t.TypeVar("R")

logger = logging.getLogger(__name__)


class Hook(t.Generic[R]):
    """A named hook that plugins can tap into. Calling the hook invokes all taps in the order they were registered.

    If the hook is a *bail* hook, the first tap that returns a value other than `None` stops the iteration and its
    value is returned to the caller. Otherwise all taps are called and the hook returns `None`. Exceptions raised by
    a tap are not caught and stop the iteration."""

    def __init__(self, name: str, bail: bool = False) -> None:
        self.name = name
        self.bail = bail
        self._taps: list[tuple[str, t.Callable[..., R | None]]] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, taps={self.taps!r})"

    @property
    def taps(self) -> list[str]:
        """The names of the plugins that tapped into this hook."""

        return [name for name, _ in self._taps]

    def tap(self, name: str, handler: t.Callable[..., R | None]) -> None:
        self._taps.append((name, handler))

    def call(self, *args: t.Any, **kwargs: t.Any) -> R | None:
        for name, handler in self._taps:
            logger.debug("Calling hook %s of plugin %s", self.name, name)
            result = handler(*args, **kwargs)
            if self.bail and result is not None:
                return result
        return None


@dataclasses.dataclass
class Hooks:
    """The lifecycle hooks available to plugins."""

    #: `(name: str, options: Any) -> list[str] | None`
    validate_config: Hook[list[str]] = dataclasses.field(default_factory=lambda: Hook("validate_config", True))

    #: `() -> str`
    get_previous_version: Hook[str] = dataclasses.field(default_factory=lambda: Hook("get_previous_version", True))

    #: `() -> Author`
    get_author: Hook[t.Any] = dataclasses.field(default_factory=lambda: Hook("get_author", True))

    #: `() -> Repository | None`
    get_repository: Hook[t.Any] = dataclasses.field(default_factory=lambda: Hook("get_repository", True))

    #: `(bump: str, dry_run: bool, quiet: bool) -> None`
    version: Hook[None] = dataclasses.field(default_factory=lambda: Hook("version"))

    #: `(bump: str, canary_identifier: str, dry_run: bool, quiet: bool) -> CanaryResult | None`
    canary: Hook[t.Any] = dataclasses.field(default_factory=lambda: Hook("canary", True))

    #: `() -> None`
    publish: Hook[None] = dataclasses.field(default_factory=lambda: Hook("publish"))


@dataclasses.dataclass
class AutoLogger:
    """The log channels the host exposes to plugins. Messages on #log are always shown to the user, messages on
    #verbose only when the host runs in verbose mode."""

    log: logging.Logger
    verbose: logging.Logger


def make_hooks() -> Hooks:
    return Hooks()


def make_logger(name: str = "auto") -> AutoLogger:
    return AutoLogger(logging.getLogger(name), logging.getLogger(f"{name}.verbose"))


@dataclasses.dataclass
class Auto:
    """The host as seen by a plugin."""

    hooks: Hooks = dataclasses.field(default_factory=make_hooks)
    logger: AutoLogger = dataclasses.field(default_factory=make_logger)
