"""Main shell loop: prompt, read, normalize, tokenize, dispatch, repeat."""

import argparse
import logging
import sys
from typing import TextIO

from bcsh import __version__
from bcsh.builtins import BuiltinResult, dispatch
from bcsh.config import ShellConfig, configure_logging, report
from bcsh.launcher import Completed, launch
from bcsh.normalizer import normalize
from bcsh.prompt import get_prompt
from bcsh.session import SessionState
from bcsh.tokenizer import tokenize

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_READ_ERROR = 1


class Shell:
    """Shell state and main loop."""

    def __init__(self, session: SessionState | None = None, stdin: TextIO | None = None) -> None:
        self.session = session or SessionState()
        self._stdin = stdin

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def name(self) -> str:
        return self.session.config.name

    def get_prompt(self) -> str:
        return get_prompt(self.session)

    def run_command(self, raw: str) -> bool:
        """Process one raw input line. Returns False when the loop must stop."""
        line = normalize(raw)
        if line is None:
            return True

        cmd = tokenize(line)
        if cmd is None:
            return True

        match dispatch(cmd, self.session):
            case BuiltinResult.EXIT_REQUESTED:
                return False
            case BuiltinResult.HANDLED:
                return True

        result = launch(cmd, self.name)
        if isinstance(result, Completed):
            self.session.last_status = result.status
        return True

    def read_line(self) -> str | None:
        """Show the prompt and read one line. Returns None at end of input."""
        print(self.get_prompt(), end="", flush=True)
        try:
            line = self.stdin.readline()
        except KeyboardInterrupt:
            print()
            return None
        if not line:
            if self.stdin.isatty():
                print()
            return None
        return line

    def run(self) -> int:
        """Main shell loop. Returns the process exit code."""
        if self.session.config.reap_children:
            self.session.reaper.install()
        try:
            while True:
                try:
                    line = self.read_line()
                except (OSError, UnicodeDecodeError) as e:
                    report(f"read error: {e}", self.name)
                    return EXIT_READ_ERROR
                if line is None:
                    return EXIT_OK
                try:
                    if not self.run_command(line):
                        return EXIT_OK
                except KeyboardInterrupt:
                    print(file=sys.stderr)
                    log.debug("interrupted, back to the prompt")
        finally:
            self.session.reaper.restore()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bcsh", description="A small interactive shell.")
    parser.add_argument("-d", "--debug", action="store_true", help="log debug messages to stderr")
    parser.add_argument(
        "--no-reap",
        action="store_true",
        help="leave SIGCHLD alone instead of discarding finished children",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)
    config = ShellConfig.from_env()
    if args.debug:
        config.debug = True
    if args.no_reap:
        config.reap_children = False
    configure_logging(config.debug)
    log.debug("starting with %s", config)

    shell = Shell(SessionState(config=config))
    return shell.run()
