""" Helpers to load plugins from Python entry points. """

from __future__ import annotations

import logging
import typing as t

import importlib_metadata

T = t.TypeVar("T")

logger = logging.getLogger(__name__)


class NoSuchEntrypointError(RuntimeError):
    pass


def load_entrypoint(group: type[T], name: str) -> type[T]:
    """Load a single entrypoint from the group named by the `ENTRYPOINT` attribute of *group*. The loaded value
    must be a subclass of *group*.

    Raises:
      NoSuchEntrypointError: If no entrypoint with the given *name* exists.
      TypeError: If the entrypoint does not point to a subclass of *group*.
    """

    group_name: str = group.ENTRYPOINT  # type: ignore[attr-defined]

    for ep in importlib_metadata.entry_points(group=group_name, name=name):
        logger.debug("Loading entrypoint %s from %s", name, ep.value)
        value = ep.load()
        break
    else:
        raise NoSuchEntrypointError(f'no entrypoint "{name}" in group "{group_name}"')

    if not isinstance(value, type):
        raise TypeError(f'entrypoint "{name}" in group "{group_name}" is not a type (found "{type(value).__name__}")')
    if not issubclass(value, group):
        raise TypeError(f'entrypoint "{name}" in group "{group_name}" is not a subclass of {group.__name__}')

    return value
