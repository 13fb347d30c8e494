"""Shell configuration, logging setup and error reporting."""

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

SHELL_NAME = "bcsh"
DEBUG_ENV_VAR = "BCSH_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}

LOG_FORMAT = "bcsh[%(levelname)s] %(name)s: %(message)s"


@dataclass
class ShellConfig:
    """Settings for one shell process."""

    name: str = SHELL_NAME
    debug: bool = False
    reap_children: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ShellConfig":
        environ = os.environ if environ is None else environ
        flag = environ.get(DEBUG_ENV_VAR, "").strip().lower()
        return cls(debug=flag in _TRUTHY)


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling this more than once replaces the handler instead of stacking them.
    """
    logger = logging.getLogger(SHELL_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger


def report(message: str, name: str = SHELL_NAME) -> None:
    """Print a user-visible failure on stderr, prefixed with the shell name."""
    print(f"{name}: {message}", file=sys.stderr)
