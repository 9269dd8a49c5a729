"""Sink adapters implementing WriterPort."""

import io
import json
import threading
from typing import Any


class StreamWriter:
    """Writes lines to a stream and flushes after each one.

    Text streams are written through their binary ``buffer`` when they have
    one (``sys.stdout``), otherwise the line is decoded first.

    Args:
        stream: Binary or text stream.
    """

    def __init__(self, stream: Any) -> None:
        self._stream = stream
        self._binary = getattr(stream, "buffer", None)

    def write(self, data: bytes) -> None:
        if self._binary is not None:
            # Pending text output must reach the buffer before our bytes.
            self._stream.flush()
            self._binary.write(data)
            self._binary.flush()
            return
        if isinstance(self._stream, io.TextIOBase):
            self._stream.write(data.decode("utf-8"))
        else:
            self._stream.write(data)
        self._stream.flush()


class InMemoryWriter:
    """Collects written lines in memory.

    Suitable for testing: ``records()`` returns the parsed documents.
    """

    def __init__(self) -> None:
        self._lines: list[bytes] = []
        self._lock = threading.Lock()

    def write(self, data: bytes) -> None:
        with self._lock:
            self._lines.append(data)

    def lines(self) -> list[bytes]:
        """Return the raw lines written so far."""
        with self._lock:
            return list(self._lines)

    def records(self) -> list[dict[str, Any]]:
        """Return the written lines parsed as JSON objects."""
        return [json.loads(line) for line in self.lines()]

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()


class DiscardWriter:
    """Drops everything written to it."""

    def write(self, data: bytes) -> None:
        pass
