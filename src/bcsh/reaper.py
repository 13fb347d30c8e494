"""Process-wide disposition for finished child processes."""

import logging
import signal

log = logging.getLogger(__name__)


def reset_child_disposition() -> None:
    """Give a freshly forked child the default SIGCHLD handling before exec.

    An ignored signal stays ignored across exec, so without this every
    program the shell starts would lose the exit statuses of its own children.
    """
    signum = getattr(signal, "SIGCHLD", None)
    if signum is not None:
        signal.signal(signum, signal.SIG_DFL)


class ReaperPolicy:
    """Let the kernel discard finished children instead of leaving zombies.

    Ignoring SIGCHLD applies to every child of the process. A foreground
    wait still blocks until its own child exits, but the kernel may already
    have thrown the exit status away, in which case the wait reports 0.
    """

    def __init__(self) -> None:
        self._signum = getattr(signal, "SIGCHLD", None)
        self._previous = None
        self.installed = False

    @property
    def supported(self) -> bool:
        return self._signum is not None

    def install(self) -> None:
        if self.installed or not self.supported:
            return
        self._previous = signal.signal(self._signum, signal.SIG_IGN)
        self.installed = True
        log.debug("SIGCHLD ignored, children are reaped automatically")

    def restore(self) -> None:
        if not self.installed:
            return
        previous = signal.SIG_DFL if self._previous is None else self._previous
        signal.signal(self._signum, previous)
        self._previous = None
        self.installed = False
        log.debug("SIGCHLD disposition restored")
