"""Cloud Logging handler: renders records and writes them to a sink."""

import threading
from collections.abc import Iterable
from typing import Any

from gcplog.core.encoding.gcp_json import build_document, encode_line
from gcplog.core.errors import HandlerError
from gcplog.core.extra import ExtraFields, default_extra_fields
from gcplog.core.models import Attr, Level, LogRecord
from gcplog.core.ports import WriterPort

DEFAULT_SOURCE_LEVELS = frozenset({Level.DEBUG, Level.ERROR})


class GCPHandler:
    """Handler that writes records as Cloud Logging structured JSON lines.

    Handlers are immutable. ``with_attrs`` and ``with_group`` return new
    handlers that share the sink, its write lock, the threshold and the
    extra fields store with their parent.

    Example:
        ```python
        handler = GCPHandler(StreamWriter(sys.stdout), Level.INFO)
        request_handler = handler.with_attrs([Attr("request_id", "abc")])
        ```
    """

    __slots__ = (
        "_writer",
        "_level",
        "_attrs",
        "_group",
        "_extra_fields",
        "_source_levels",
        "_lock",
    )

    def __init__(
        self,
        writer: WriterPort,
        level: int = Level.DEBUG,
        *,
        extra_fields: ExtraFields | None = None,
        source_levels: Iterable[int] = DEFAULT_SOURCE_LEVELS,
    ) -> None:
        """Initialize a root handler.

        Args:
            writer: Sink receiving one bytes line per record.
            level: Minimum level that is handled.
            extra_fields: Store rendered as the ``extra`` object. Defaults to
                the process-wide store.
            source_levels: Levels whose records carry a source location.
        """
        self._writer = writer
        self._level = level
        self._attrs: tuple[Attr, ...] = ()
        self._group = ""
        self._extra_fields = (
            extra_fields if extra_fields is not None else default_extra_fields()
        )
        self._source_levels = frozenset(source_levels)
        self._lock = threading.Lock()

    @property
    def level(self) -> int:
        return self._level

    @property
    def attrs(self) -> tuple[Attr, ...]:
        return self._attrs

    @property
    def group(self) -> str:
        """Group name set by the last ``with_group``. Not applied to output."""
        return self._group

    @property
    def extra_fields(self) -> ExtraFields:
        return self._extra_fields

    @property
    def source_levels(self) -> frozenset[int]:
        return self._source_levels

    def enabled(self, level: int) -> bool:
        """Report whether records at ``level`` are handled."""
        return level >= self._level

    def wants_source(self, level: int) -> bool:
        """Report whether records at ``level`` carry a source location."""
        return level in self._source_levels

    def handle(self, record: LogRecord) -> None:
        """Format a record and write it to the sink as one line.

        Args:
            record: The record to write.

        Raises:
            HandlerError: If the record cannot be serialized or the sink
                rejects the write. The record is dropped.
        """
        try:
            document = build_document(
                record,
                preset_attrs=self._attrs,
                extra=self._extra_fields.snapshot(),
                include_source=self.wants_source(record.level),
            )
            line = encode_line(document)
        except Exception as e:
            raise HandlerError(f"cannot serialize log record: {e}") from e

        try:
            with self._lock:
                self._writer.write(line)
        except Exception as e:
            raise HandlerError(f"cannot write log record: {e}") from e

    def with_attrs(self, attrs: Iterable[Attr]) -> "GCPHandler":
        """Return a handler whose preset attributes are extended by ``attrs``."""
        return self._derive(attrs=(*self._attrs, *attrs))

    def with_group(self, name: str) -> "GCPHandler":
        """Return a handler with the group replaced by ``name``."""
        return self._derive(group=name)

    def _derive(self, **changes: Any) -> "GCPHandler":
        clone = object.__new__(GCPHandler)
        for slot in self.__slots__:
            setattr(clone, slot, getattr(self, slot))
        for name, value in changes.items():
            setattr(clone, f"_{name}", value)
        return clone

    def __repr__(self) -> str:
        return (
            f"GCPHandler(level={self._level!r}, attrs={len(self._attrs)}, "
            f"group={self._group!r})"
        )
