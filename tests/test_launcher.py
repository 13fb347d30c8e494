"""Tests for the launcher module."""

import errno
import os
import signal
import subprocess
import time

import pytest

from bcsh.launcher import (
    STATUS_NOT_EXECUTABLE,
    STATUS_NOT_FOUND,
    Completed,
    LaunchFailed,
    Started,
    launch,
)
from bcsh.tokenizer import Command


def _reap(pid: int) -> None:
    os.kill(pid, signal.SIGTERM)
    try:
        os.waitpid(pid, 0)
    except ChildProcessError:
        pass


class TestForeground:
    def test_success(self):
        assert launch(Command(["true"])) == Completed(0)

    def test_failure_status(self):
        result = launch(Command(["false"]))
        assert isinstance(result, Completed)
        assert result.status != 0

    def test_exit_status_passed_through(self):
        assert launch(Command(["sh", "-c", "exit 3"])) == Completed(3)

    def test_blocks_until_child_exits(self):
        start = time.monotonic()
        launch(Command(["sleep", "0.3"]))
        assert time.monotonic() - start >= 0.3

    def test_path_search(self, tmp_path, monkeypatch):
        script = tmp_path / "hello-bcsh"
        script.write_text("#!/bin/sh\nexit 7\n")
        script.chmod(0o755)
        monkeypatch.setenv("PATH", f"{tmp_path}{os.pathsep}{os.environ.get('PATH', '')}")
        assert launch(Command(["hello-bcsh"])) == Completed(7)

    def test_child_inherits_cwd(self, isolated_cwd):
        launch(Command(["sh", "-c", "pwd > where.txt"]))
        written = (isolated_cwd / "where.txt").read_text().strip()
        assert os.path.realpath(written) == os.path.realpath(isolated_cwd)

    def test_interrupt_keeps_waiting(self, monkeypatch):
        class FakeProc:
            pid = 4242
            calls = 0

            def wait(self):
                FakeProc.calls += 1
                if FakeProc.calls == 1:
                    raise KeyboardInterrupt
                return -2

        monkeypatch.setattr(subprocess, "Popen", lambda argv, **kwargs: FakeProc())
        assert launch(Command(["anything"])) == Completed(-2)
        assert FakeProc.calls == 2


class TestExecFailure:
    def test_command_not_found(self, capsys):
        result = launch(Command(["nonexistent_command_xyz_123"]))
        assert result == Completed(STATUS_NOT_FOUND)
        err = capsys.readouterr().err
        assert "bcsh: nonexistent_command_xyz_123: command not found" in err

    def test_not_executable(self, tmp_path, capsys):
        script = tmp_path / "noexec.sh"
        script.write_text("#!/bin/sh\necho hi\n")
        script.chmod(0o644)
        result = launch(Command([str(script)]))
        assert result == Completed(STATUS_NOT_EXECUTABLE)
        assert "Permission denied" in capsys.readouterr().err

    def test_background_not_found_prints_no_notification(self, capsys):
        result = launch(Command(["nonexistent_command_xyz_123"], background=True))
        assert result == Completed(STATUS_NOT_FOUND)
        assert "started job" not in capsys.readouterr().out

    def test_custom_shell_name(self, capsys):
        launch(Command(["nonexistent_command_xyz_123"]), name="mysh")
        assert capsys.readouterr().err.startswith("mysh: ")


class TestProcessCreationFailure:
    def test_fork_failure(self, monkeypatch, capsys):
        def fail(argv, **kwargs):
            raise BlockingIOError(errno.EAGAIN, "Resource temporarily unavailable")

        monkeypatch.setattr(subprocess, "Popen", fail)
        result = launch(Command(["ls"]))
        assert isinstance(result, LaunchFailed)
        assert result.reason == "Resource temporarily unavailable"
        assert "bcsh: cannot create process" in capsys.readouterr().err


class TestBackground:
    def test_returns_immediately(self, capsys):
        start = time.monotonic()
        result = launch(Command(["sleep", "5"], background=True))
        elapsed = time.monotonic() - start
        try:
            assert isinstance(result, Started)
            assert elapsed < 2
            out = capsys.readouterr().out
            assert f"started job [sleep] pid [{result.pid}]" in out
        finally:
            _reap(result.pid)

    @pytest.mark.parametrize("argv", [["true"], ["sh", "-c", "exit 1"]])
    def test_pid_is_child(self, argv, capsys):
        result = launch(Command(argv, background=True))
        assert isinstance(result, Started)
        assert result.pid > 0
        pid, _ = os.waitpid(result.pid, 0)
        assert pid == result.pid
