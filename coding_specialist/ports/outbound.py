"""Outbound ports — interfaces the engine depends on."""

from datetime import datetime
from typing import Callable, Protocol, runtime_checkable

# Returns the timestamp stamped on a report
Clock = Callable[[], datetime]


@runtime_checkable
class DelayPort(Protocol):
    """Interface for the artificial processing pause."""

    async def wait(self) -> None: ...

    def cancel(self) -> int: ...
