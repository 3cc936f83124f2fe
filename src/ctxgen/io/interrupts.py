"""Ctrl+C tracking for snapshot runs.

The first SIGINT of a run only raises a flag. The artifact writer checks the flag
before every write and the CLI turns it into exit code 130, so an interrupted run
stops between two complete pieces of output. A second SIGINT reaches whatever
handler was installed before, normally Python's ``KeyboardInterrupt``.
"""

import signal
from threading import Event
from types import FrameType
from typing import Any, Optional


class InterruptMonitor:
    """Records whether the user asked the current run to stop.

    Attributes:
        requested: Set once SIGINT has been received.

    Example:
        >>> monitor = InterruptMonitor()
        >>> monitor.interrupted
        False
        >>> monitor.requested.set()
        >>> monitor.check()
        Traceback (most recent call last):
        ...
        KeyboardInterrupt
    """

    def __init__(self) -> None:
        self.requested = Event()
        self._previous_handler: Any = signal.default_int_handler

    @property
    def interrupted(self) -> bool:
        return self.requested.is_set()

    def install(self) -> None:
        """Route SIGINT to this monitor. Must be called from the main thread."""
        previous = signal.signal(signal.SIGINT, self._on_sigint)
        if previous is not None and previous != self._on_sigint:
            self._previous_handler = previous

    def _on_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.requested.set()
        signal.signal(signal.SIGINT, self._previous_handler)

    def check(self) -> None:
        """Raise KeyboardInterrupt if SIGINT has been received."""
        if self.requested.is_set():
            raise KeyboardInterrupt()

    def reset(self) -> None:
        self.requested.clear()


# Shared by the CLI and the artifact writer
interrupt_monitor = InterruptMonitor()
