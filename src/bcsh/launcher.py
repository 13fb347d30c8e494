"""Launch external programs in the foreground or the background."""

import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from typing import TypeAlias

from bcsh.config import SHELL_NAME, report
from bcsh.reaper import reset_child_disposition
from bcsh.tokenizer import Command

log = logging.getLogger(__name__)

STATUS_NOT_FOUND = 127
STATUS_NOT_EXECUTABLE = 126

# preexec_fn is POSIX only
_CHILD_SETUP = reset_child_disposition if os.name == "posix" else None


@dataclass(frozen=True)
class Completed:
    """A foreground child ran to completion."""

    status: int


@dataclass(frozen=True)
class Started:
    """A background child is running; the shell does not wait for it."""

    pid: int


@dataclass(frozen=True)
class LaunchFailed:
    """No child process could be created."""

    reason: str


LaunchResult: TypeAlias = Completed | Started | LaunchFailed


def launch(cmd: Command, name: str = SHELL_NAME) -> LaunchResult:
    """Start cmd as a child process.

    argv[0] is looked up on PATH. Foreground commands block until that
    child exits; background commands return as soon as the child exists.
    """
    try:
        proc = subprocess.Popen(cmd.argv, preexec_fn=_CHILD_SETUP)
    except OSError as e:
        # Popen sets filename only when the program image could not be run.
        if e.filename is None:
            reason = e.strerror or str(e)
            report(f"cannot create process: {reason}", name)
            return LaunchFailed(reason)
        return _exec_failed(cmd, e, name)

    log.debug("started %s pid=%d background=%s", cmd.name, proc.pid, cmd.background)

    if cmd.background:
        print(f"started job [{cmd.name}] pid [{proc.pid}]", flush=True)
        return Started(proc.pid)

    status = _wait(proc)
    log.debug("pid=%d exited with status %d", proc.pid, status)
    return Completed(status)


def _wait(proc: subprocess.Popen) -> int:
    """Wait for a foreground child. Ctrl-C reaches the child too, so keep waiting."""
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            print(file=sys.stderr)
            continue


def _exec_failed(cmd: Command, e: OSError, name: str) -> Completed:
    if isinstance(e, FileNotFoundError):
        report(f"{cmd.name}: command not found", name)
        return Completed(STATUS_NOT_FOUND)
    report(f"{cmd.name}: {e.strerror}", name)
    return Completed(STATUS_NOT_EXECUTABLE)
