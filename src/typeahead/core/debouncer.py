"""
Debouncer - coalesces rapid query updates into a single delayed emission.
"""

import asyncio
from typing import Callable, Generic, TypeVar

from typeahead.logger import get_logger

logger = get_logger("debouncer")

T = TypeVar("T")


class Debouncer(Generic[T]):
    """
    Emit the most recent value once ``delay`` seconds pass without a new one.

    Each :meth:`push` restarts the window and never emits by itself. With a
    zero delay every push is emitted synchronously. Only one timer is ever
    pending; :meth:`cancel` drops it on teardown.
    """

    def __init__(self, delay: float, callback: Callable[[T], None]):
        """
        Initialize the debouncer.

        Args:
            delay: Quiet period in seconds
            callback: Receives the latest value when the window elapses
        """
        if delay < 0:
            raise ValueError(f"Debounce delay must be >= 0, got {delay}")
        self.delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None
        self._latest: T | None = None

    @property
    def pending(self) -> bool:
        """True while a timer is armed."""
        return self._handle is not None

    def push(self, value: T) -> None:
        """Record ``value`` and restart the quiet window."""
        self._latest = value
        self.cancel()

        if self.delay == 0:
            self._callback(value)
            return

        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def flush(self) -> None:
        """Emit the pending value now instead of waiting for the window."""
        if self._handle is not None:
            self._handle.cancel()
            self._fire()

    def cancel(self) -> None:
        """Drop the pending timer, if any, without emitting."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        logger.debug(f"Debounce window elapsed, emitting {self._latest!r}")
        self._callback(self._latest)
