"""Python logging handler adapter for gcplog.

This adapter bridges Python's standard library logging module to a
GCPHandler, so records from third-party libraries are rendered in the same
Cloud Logging format as records from the gcplog facade.
"""

import logging
import traceback

from gcplog.adapters.handler import GCPHandler
from gcplog.core.models import Attr, LogRecord, SourceLocation

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


class GCPLoggingHandler(logging.Handler):
    """Logging handler that writes log records through a GCPHandler.

    The threshold and source levels of the wrapped handler apply; the
    ``logging.Handler`` level can still filter records before that.

    Example:
        ```python
        from gcplog import GCPHandler, GCPLoggingHandler, StreamWriter

        handler = GCPHandler(StreamWriter(sys.stdout), Level.INFO)
        logging.getLogger().addHandler(GCPLoggingHandler(handler))
        ```
    """

    def __init__(self, handler: GCPHandler, level: int = logging.NOTSET) -> None:
        """Initialize the adapter.

        Args:
            handler: Handler that renders and writes the records.
            level: ``logging.Handler`` level.
        """
        super().__init__(level)
        self._handler = handler

    @property
    def handler(self) -> GCPHandler:
        return self._handler

    def to_record(self, record: logging.LogRecord) -> LogRecord:
        """Convert a ``logging.LogRecord`` into a gcplog record.

        Args:
            record: The standard library record.

        Returns:
            Record with the logger name and any ``extra`` fields as attributes.
        """
        attrs: list[Attr] = [Attr("logger", record.name)]

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and not key.startswith("_"):
                attrs.append(Attr(key, value))

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_value is not None:
                attrs.append(Attr("error", exc_value))
            if exc_type is not None:
                trace = traceback.format_exception(exc_type, exc_value, exc_tb)
                attrs.append(Attr("stack_trace", "".join(trace)))

        source = None
        if record.pathname:
            source = SourceLocation(
                file=record.pathname,
                line=record.lineno,
                function=f"{record.module}.{record.funcName or ''}",
            )

        return LogRecord(
            level=record.levelno,
            message=record.getMessage(),
            time_ns=round(record.created * 1_000_000) * 1000,
            source=source,
            attrs=tuple(attrs),
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record through the wrapped handler.

        Args:
            record: The log record to emit.
        """
        if not self._handler.enabled(record.levelno):
            return
        try:
            self._handler.handle(self.to_record(record))
        except Exception:
            self.handleError(record)
