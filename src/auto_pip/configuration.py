""" Options of the pip plugin and validation of raw plugin configuration. """

from __future__ import annotations

import dataclasses
import logging
import typing as t

import databind.json
from databind.core.converter import ConversionError

T = t.TypeVar("T")

logger = logging.getLogger(__name__)


class PluginConfigurationError(ValueError):
    """Raised when the raw options of a plugin do not match its options type."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("\n".join(errors))
        self.errors = errors


@dataclasses.dataclass
class PipPluginOptions:
    #: The name of a repository configured in `~/.pypirc` to upload distributions to. If not set, Twine
    #: uploads to PyPI.
    repository: str | None = None


def load_plugin_options(options: t.Mapping[str, t.Any] | PipPluginOptions | None) -> PipPluginOptions:
    """Converts the raw *options* of the plugin into a #PipPluginOptions object.

    Raises:
      PluginConfigurationError: If the options do not match the expected shape.
    """

    if options is None:
        return PipPluginOptions()
    if isinstance(options, PipPluginOptions):
        return options
    errors = validate_plugin_configuration("pip", PipPluginOptions, dict(options))
    if errors:
        raise PluginConfigurationError(errors)
    return databind.json.load(dict(options), PipPluginOptions)


def validate_plugin_configuration(plugin_name: str, options_type: type[T], options: t.Any) -> list[str]:
    """Validates the raw *options* against the *options_type* dataclass. Returns a list of error messages, which is
    empty if the options are valid. Unknown keys and values of the wrong type are errors."""

    try:
        databind.json.load(options, options_type)
    except ConversionError as exc:
        logger.debug("Invalid configuration for plugin %s: %s", plugin_name, exc)
        return [f'{plugin_name}: {exc}']
    return []
