"""Core domain models for structured log records."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Level(IntEnum):
    """Ordered log levels.

    Values match the standard library ``logging`` levels, so any integer on
    that scale (``logging.CRITICAL``, custom levels) can be used as a level.
    """

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


@dataclass(frozen=True)
class SourceLocation:
    """Program location of the application code that emitted a record.

    Attributes:
        file: Absolute path of the source file.
        line: Line number within the file.
        function: Qualified function identifier (``module.qualname``).
    """

    file: str
    line: int
    function: str

    def as_dict(self) -> dict[str, str | int]:
        return {"file": self.file, "line": self.line, "function": self.function}


@dataclass(frozen=True)
class Attr:
    """A single key/value attribute."""

    key: str
    value: Any


@dataclass(frozen=True)
class LogRecord:
    """A log record as built by the facade for one logging call.

    Attributes:
        level: Numeric level (see ``Level``).
        message: The log message.
        time_ns: Nanoseconds since the Unix epoch, captured at call time.
        source: Resolved call site, if any.
        attrs: Record attributes in call order. Duplicate keys are kept.
    """

    level: int
    message: str
    time_ns: int
    source: SourceLocation | None = None
    attrs: tuple[Attr, ...] = field(default_factory=tuple)
