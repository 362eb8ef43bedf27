import subprocess as sp
import sys
from pathlib import Path

import pytest

from auto_pip.util.process import exec_command


def test__exec_command__returns_stripped_stdout():
    assert exec_command(sys.executable, ["-c", "print('  hello  ')"]) == "hello"


def test__exec_command__runs_in_cwd(tmp_path: Path):
    assert exec_command(sys.executable, ["-c", "import os; print(os.getcwd())"], cwd=tmp_path) == str(
        tmp_path.resolve()
    )


def test__exec_command__raises_on_non_zero_exit_code():
    with pytest.raises(sp.CalledProcessError) as excinfo:
        exec_command(sys.executable, ["-c", "import sys; sys.stderr.write('oops'); sys.exit(3)"])
    assert excinfo.value.returncode == 3
    assert excinfo.value.stderr == b"oops"


def test__exec_command__raises_if_command_does_not_exist():
    with pytest.raises(FileNotFoundError):
        exec_command("this-command-does-not-exist-1a2b3c4", [])
