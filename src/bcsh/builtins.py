"""Built-in shell commands."""

import enum
import logging
import os
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from bcsh.config import report

if TYPE_CHECKING:
    from bcsh.session import SessionState
    from bcsh.tokenizer import Command

log = logging.getLogger(__name__)


class BuiltinResult(enum.Enum):
    NOT_BUILTIN = "not_builtin"
    HANDLED = "handled"
    EXIT_REQUESTED = "exit_requested"


BuiltinHandler: TypeAlias = Callable[[list[str], "SessionState"], BuiltinResult]


def builtin_cd(args: list[str], session: "SessionState") -> BuiltinResult:
    if args:
        target = args[0]
    else:
        target = session.home
        if target is None:
            report("cd: HOME not set", session.config.name)
            return BuiltinResult.HANDLED
    try:
        os.chdir(target)
    except OSError as e:
        report(f"cd: {target}: {e.strerror}", session.config.name)
        return BuiltinResult.HANDLED
    log.debug("cwd is now %s", target)
    return BuiltinResult.HANDLED


def builtin_exit(args: list[str], session: "SessionState") -> BuiltinResult:
    return BuiltinResult.EXIT_REQUESTED


BUILTIN_REGISTRY: dict[str, BuiltinHandler] = {
    "cd": builtin_cd,
    "exit": builtin_exit,
}


def dispatch(cmd: "Command", session: "SessionState") -> BuiltinResult:
    """Run cmd in the shell's own process if it names a builtin."""
    handler = BUILTIN_REGISTRY.get(cmd.name)
    if handler is None:
        return BuiltinResult.NOT_BUILTIN
    log.debug("builtin %s %r", cmd.name, cmd.args)
    return handler(cmd.args, session)
