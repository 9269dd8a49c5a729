"""Port interfaces the core depends on.

The handler only needs a byte sink and a clock; concrete implementations
live in ``gcplog.adapters``.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

# Returns nanoseconds since the Unix epoch (``time.time_ns``).
Clock = Callable[[], int]


@runtime_checkable
class WriterPort(Protocol):
    """Port for the sink that receives formatted log lines.

    Each call receives one complete, newline-terminated line.
    Examples: StreamWriter, InMemoryWriter, DiscardWriter.
    """

    def write(self, data: bytes) -> object:
        """Write one line. Failures are raised as exceptions."""
        ...
