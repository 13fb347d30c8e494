"""Prompt string shown before each read."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bcsh.session import SessionState

DEFAULT_USER = "user"
UNKNOWN_CWD = "?"


def get_prompt(session: "SessionState") -> str:
    user = session.user or DEFAULT_USER
    cwd = session.cwd or UNKNOWN_CWD
    return f"{user}@{session.config.name}:{cwd} $ "
