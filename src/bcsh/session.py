"""State shared by the loop, the builtins and the launcher for one session."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from bcsh.config import ShellConfig
from bcsh.reaper import ReaperPolicy


@dataclass
class SessionState:
    """Everything one shell session reads or mutates.

    The working directory is the process's own: only `cd` changes it, and
    children inherit a snapshot of it when they are created.
    """

    config: ShellConfig = field(default_factory=ShellConfig)
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    reaper: ReaperPolicy = field(default_factory=ReaperPolicy)
    last_status: int = 0

    @property
    def home(self) -> str | None:
        return self.environ.get("HOME") or None

    @property
    def user(self) -> str | None:
        return self.environ.get("USER") or None

    @property
    def cwd(self) -> str | None:
        try:
            return os.getcwd()
        except OSError:
            return None
