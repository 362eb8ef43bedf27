from __future__ import annotations

import abc
import typing as t

if t.TYPE_CHECKING:
    from auto_pip.host import Auto


class AutoPlugin(abc.ABC):
    """A plugin for the release automation host. Plugins are constructed with their options and then attach their
    handlers to the host's hooks in #apply(). Plugins are discovered through the `auto.plugins` entrypoint group."""

    ENTRYPOINT = "auto.plugins"

    #: The name under which the plugin taps into the host's hooks. The host also passes this name to the
    #: `validate_config` hook.
    name: t.ClassVar[str]

    @abc.abstractmethod
    def __init__(self, options: t.Any = None) -> None: ...

    @abc.abstractmethod
    def apply(self, auto: Auto) -> None:
        """Register the plugin's handlers to the hooks of *auto*."""
