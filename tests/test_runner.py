from __future__ import annotations

import shlex
import sys
from pathlib import Path

import pytest

from mcp_starter.errors import CommandExecutionError
from mcp_starter.io.adapters.local import SubprocessExecutor
from mcp_starter.manifest import ScriptStep
from mcp_starter.runner import CommandRunner
from tests.fixtures.fake_io import RecordingExecutor, called_process_error

ROOT = Path("/home/tester/projects/Foo")


def test_run_splits_command_and_passes_directory(executor: RecordingExecutor):
    CommandRunner(executor).run('pip install -e ".[dev]"', ROOT)
    assert executor.calls == [(("pip", "install", "-e", ".[dev]"), ROOT)]


def test_run_without_directory_uses_current_directory(executor: RecordingExecutor):
    CommandRunner(executor).run("make")
    assert executor.calls == [(("make",), None)]


def test_run_wraps_non_zero_exit():
    executor = RecordingExecutor({"make": called_process_error("make", stderr="warning\nmake: *** No rule\n", returncode=2)})

    with pytest.raises(CommandExecutionError) as excinfo:
        CommandRunner(executor).run("make build", ROOT)

    error = excinfo.value
    assert error.command == "make build"
    assert error.returncode == 2
    assert str(error) == "Failed to execute command: make build (exit status 2: make: *** No rule)"
    assert excinfo.value.__cause__ is not None


def test_run_wraps_missing_program():
    executor = RecordingExecutor({"nope": FileNotFoundError(2, "No such file or directory", "nope")})

    with pytest.raises(CommandExecutionError, match="Failed to execute command: nope") as excinfo:
        CommandRunner(executor).run("nope --version")

    assert "No such file or directory" in str(excinfo.value)
    assert excinfo.value.returncode is None


def test_run_wraps_failures_when_current_directory_is_gone(monkeypatch: pytest.MonkeyPatch, caplog):
    def deleted_cwd():
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(Path, "cwd", deleted_cwd)
    caplog.set_level("DEBUG", logger="mcp_starter.runner")
    executor = RecordingExecutor({"make": called_process_error("make", returncode=2)})

    with pytest.raises(CommandExecutionError, match="exit status 2"):
        CommandRunner(executor).run("make build")

    assert executor.calls == [(("make", "build"), None)]


@pytest.mark.parametrize("command", ["", "   ", 'echo "unterminated'])
def test_run_rejects_unparseable_commands(executor: RecordingExecutor, command: str):
    with pytest.raises(CommandExecutionError):
        CommandRunner(executor).run(command)
    assert executor.calls == []


def test_run_scripts_in_declared_order(executor: RecordingExecutor):
    scripts = (
        ScriptStep(name="install", command="pip install -e ."),
        ScriptStep(name="tag", command="echo ${PROJECT_NAME}", working_directory="build"),
        ScriptStep(name="build", command="make build", working_directory="/foo/bar"),
    )

    CommandRunner(executor).run_scripts(ROOT, "Foo", scripts)

    assert executor.calls == [
        (("pip", "install", "-e", "."), ROOT),
        (("echo", "Foo"), ROOT / "build"),
        (("make", "build"), Path("/foo/bar")),
    ]


def test_run_scripts_stops_at_first_failure():
    executor = RecordingExecutor({"pip": called_process_error("pip")})
    scripts = (ScriptStep(command="pip install -e ."), ScriptStep(command="make build"))

    with pytest.raises(CommandExecutionError):
        CommandRunner(executor).run_scripts(ROOT, "Foo", scripts)

    assert executor.commands == ["pip install -e ."]


def test_subprocess_executor_runs_real_commands(tmp_path: Path):
    runner = CommandRunner(SubprocessExecutor())
    python = shlex.quote(sys.executable)

    runner.run(f"{python} -c \"open('marker.txt', 'w').write('ok')\"", tmp_path)
    assert (tmp_path / "marker.txt").read_text() == "ok"

    with pytest.raises(CommandExecutionError, match=r"exit status 3: boom"):
        runner.run(f"{python} -c \"import sys; sys.stderr.write('boom'); sys.exit(3)\"", tmp_path)
