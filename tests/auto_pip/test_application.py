from pathlib import Path

import pytest
from cleo.io.outputs.output import Verbosity  # type: ignore[import]
from cleo.testers.command_tester import CommandTester  # type: ignore[import]

from auto_pip.application import Application, CanaryCommand, InfoCommand, PublishCommand, VersionCommand
from auto_pip.plugin import PipPlugin


@pytest.fixture(autouse=True)
def pip_entrypoint(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("auto_pip.application.load_entrypoint", lambda group, name: PipPlugin)


@pytest.fixture
def package(write_setup_cfg) -> Path:
    return write_setup_cfg(
        """
        [metadata]
        name = test-package
        version = 0.1.0
        author = Example Author
        author_email = author@example.com
        url = https://github.com/example/test-package
        """
    )


def test__Application__registers_commands():
    app = Application()
    for name in ("info", "version", "canary", "publish"):
        assert app.has(name)


def test__InfoCommand(package):
    tester = CommandTester(InfoCommand())
    assert tester.execute() == 0
    output = tester.io.fetch_output()
    assert "version: 0.1.0" in output
    assert "author: Example Author author@example.com" in output
    assert "repository: example/test-package" in output


def test__VersionCommand__writes_version(package: Path, exec_spy):
    tester = CommandTester(VersionCommand())
    assert tester.execute("minor") == 0
    assert "version = 0.2.0" in package.read_text()
    assert exec_spy.calls == []


def test__VersionCommand__dry_run_quiet(package: Path, capsys: pytest.CaptureFixture[str]):
    tester = CommandTester(VersionCommand())
    assert tester.execute("major --dry-run", verbosity=Verbosity.QUIET) == 0
    assert capsys.readouterr().out == "1.0.0\n"
    assert "version = 0.1.0" in package.read_text()


def test__CanaryCommand__uses_commit_sha_as_default_identifier(package: Path, exec_spy):
    exec_spy.stdout = "1a2b3c4"
    tester = CommandTester(CanaryCommand())
    assert tester.execute("minor") == 0
    assert exec_spy.calls[0] == ("git", ["rev-parse", "--short", "HEAD"])
    assert exec_spy.calls[-1] == (
        "python3",
        ["-m", "twine", "upload", "dist/test-package-0.2.0.dev0+1a2b3c4*", "--verbose"],
    )
    assert "pip install test-package==0.2.0-dev0+1a2b3c4" in tester.io.fetch_output()


def test__CanaryCommand__dry_run(package: Path, exec_spy):
    tester = CommandTester(CanaryCommand())
    assert tester.execute("patch --canary-identifier=-canary.abc --dry-run") == 0
    assert exec_spy.calls == []
    assert "version = 0.1.0" in package.read_text()


def test__PublishCommand__with_repository(package, exec_spy):
    tester = CommandTester(PublishCommand())
    assert tester.execute("--repository testpypi") == 0
    assert [command for command, _ in exec_spy.calls] == ["git", "python3", "python3"]
    assert exec_spy.calls[-1][1][3:5] == ["--repository", "testpypi"]


def test__CanaryCommand__dry_run_quiet(package: Path, exec_spy, capsys: pytest.CaptureFixture[str]):
    tester = CommandTester(CanaryCommand())
    assert tester.execute("minor --canary-identifier=-canary.abc --dry-run", verbosity=Verbosity.QUIET) == 0
    assert capsys.readouterr().out == "0.2.0-dev0+abc\n"
    assert exec_spy.calls == []


def test__PluginCommand__reports_invalid_plugin_options(package: Path, monkeypatch: pytest.MonkeyPatch):
    class MisconfiguredPipPlugin(PipPlugin):
        def __init__(self, options=None):
            super().__init__({**(options or {}), "unknown": 1})

    monkeypatch.setattr("auto_pip.application.load_entrypoint", lambda group, name: MisconfiguredPipPlugin)
    tester = CommandTester(VersionCommand())
    assert tester.execute("minor") == 1
    assert "error: pip: " in tester.io.fetch_error()
    assert "version = 0.1.0" in package.read_text()
