import pytest

from auto_pip.plugin import PipPlugin
from auto_pip.plugins import AutoPlugin
from auto_pip.util import plugins
from auto_pip.util.plugins import NoSuchEntrypointError, load_entrypoint


class FakeEntryPoint:
    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = repr(value)
        self._loaded = value

    def load(self) -> object:
        return self._loaded


@pytest.fixture
def entry_points(monkeypatch: pytest.MonkeyPatch) -> dict:
    registry: dict = {}

    def _entry_points(group: str, name: str):
        return [FakeEntryPoint(name, registry[group][name])] if name in registry.get(group, {}) else []

    monkeypatch.setattr(plugins.importlib_metadata, "entry_points", _entry_points)
    return registry


def test__load_entrypoint(entry_points: dict):
    entry_points["auto.plugins"] = {"pip": PipPlugin}
    assert load_entrypoint(AutoPlugin, "pip") is PipPlugin  # type: ignore[type-abstract]


def test__load_entrypoint__missing(entry_points: dict):
    with pytest.raises(NoSuchEntrypointError, match='no entrypoint "npm" in group "auto.plugins"'):
        load_entrypoint(AutoPlugin, "npm")  # type: ignore[type-abstract]


def test__load_entrypoint__not_a_subclass(entry_points: dict):
    entry_points["auto.plugins"] = {"dict": dict, "func": len}
    with pytest.raises(TypeError, match="is not a subclass of AutoPlugin"):
        load_entrypoint(AutoPlugin, "dict")  # type: ignore[type-abstract]
    with pytest.raises(TypeError, match="is not a type"):
        load_entrypoint(AutoPlugin, "func")  # type: ignore[type-abstract]
