"""Split a normalized line into a Command, detecting the background marker."""

import logging
import re
from dataclasses import dataclass

log = logging.getLogger(__name__)

BACKGROUND = "&"

_DELIMITERS = re.compile(r"[ \t\r\n]+")


@dataclass
class Command:
    """A program or builtin name followed by its arguments."""

    argv: list[str]
    background: bool = False

    def __post_init__(self) -> None:
        if not self.argv:
            raise ValueError("command must have at least one argument")

    @property
    def name(self) -> str:
        return self.argv[0]

    @property
    def args(self) -> list[str]:
        return self.argv[1:]


def split_words(line: str) -> list[str]:
    """Split on runs of spaces, tabs and newlines. Never yields empty words."""
    return [word for word in _DELIMITERS.split(line) if word]


def tokenize(line: str) -> Command | None:
    """Tokenize a normalized line.

    A trailing standalone '&' marks the command for background execution and
    is removed from argv. Returns None when no command is left, which
    includes a line consisting of '&' alone.
    """
    words = split_words(line)
    if not words:
        return None

    background = False
    if words[-1] == BACKGROUND:
        background = True
        words.pop()
        if not words:
            log.debug("dropping lone background marker")
            return None

    cmd = Command(argv=words, background=background)
    log.debug("tokenized %r (background=%s)", cmd.argv, cmd.background)
    return cmd
