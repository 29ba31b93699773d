"""Awaitable, cancellable processing delay."""

import asyncio
from typing import Awaitable, Callable, Optional, Set

from coding_specialist.config import AppConfig

Sleep = Callable[[float], Awaitable[None]]


class ProcessingDelay:
    """Pauses a dispatch before its report is published.

    The sleep function is injectable so tests can pass an ``AsyncMock``
    or use ``seconds=0`` to skip the pause entirely.
    """

    def __init__(self, seconds: float = 1.5, sleep: Optional[Sleep] = None):
        if seconds < 0:
            raise ValueError(f"Delay must be >= 0, got {seconds}")
        self.seconds = seconds
        self._sleep = sleep or asyncio.sleep
        self._pending: Set[asyncio.Future] = set()

    @classmethod
    def from_config(cls, config: AppConfig, sleep: Optional[Sleep] = None) -> "ProcessingDelay":
        return cls(config.processing_delay_seconds, sleep=sleep)

    @property
    def pending(self) -> int:
        """Number of waits currently suspended."""
        return len(self._pending)

    async def wait(self) -> None:
        """Suspend for ``seconds``. Raises CancelledError if cancelled."""
        if self.seconds <= 0:
            return
        task = asyncio.ensure_future(self._sleep(self.seconds))
        self._pending.add(task)
        try:
            await task
        finally:
            self._pending.discard(task)

    def cancel(self) -> int:
        """Cancel every in-flight wait. Returns how many were cancelled."""
        tasks = list(self._pending)
        for task in tasks:
            task.cancel()
        return len(tasks)
