from __future__ import annotations

import dataclasses
import textwrap
import typing as t
from pathlib import Path

from pytest import MonkeyPatch, fixture


@dataclasses.dataclass
class ExecRecorder:
    """Replaces #auto_pip.util.process.exec_command() and records the commands instead of running them."""

    calls: list[tuple[str, list[str]]] = dataclasses.field(default_factory=list)
    stdout: str = ""

    def __call__(self, command: str, args: t.Sequence[str], cwd: Path | None = None) -> str:
        self.calls.append((command, list(args)))
        return self.stdout


@fixture
def exec_spy(monkeypatch: MonkeyPatch) -> ExecRecorder:
    recorder = ExecRecorder()
    monkeypatch.setattr("auto_pip.plugin.exec_command", recorder)
    monkeypatch.setattr("auto_pip.application.exec_command", recorder)
    return recorder


@fixture
def write_setup_cfg(tmp_path: Path, monkeypatch: MonkeyPatch) -> t.Callable[[str], Path]:
    """Returns a function that writes the dedented text to a `setup.cfg` in a temporary directory, which is also
    made the current working directory."""

    monkeypatch.chdir(tmp_path)

    def _write(content: str) -> Path:
        path = tmp_path / "setup.cfg"
        path.write_text(textwrap.dedent(content).strip())
        return path

    return _write
