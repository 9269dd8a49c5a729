"""gcplog - structured logging in the Google Cloud Logging JSON format.

Example:
    ```python
    import gcplog

    gcplog.new_logger("info")
    gcplog.merge_global_extra_fields({"service": "billing"})
    gcplog.info("disk low", pct=7)
    ```
"""

from gcplog.adapters.frameworks.asgi import RequestLoggerMiddleware
from gcplog.adapters.handler import DEFAULT_SOURCE_LEVELS, GCPHandler
from gcplog.adapters.logging import GCPLoggingHandler
from gcplog.adapters.logging_context import (
    bound_logger,
    from_context,
    reset_logger,
    with_logger,
)
from gcplog.adapters.sinks import DiscardWriter, InMemoryWriter, StreamWriter
from gcplog.config import (
    Settings,
    default_logger,
    get_source_levels,
    new_logger,
    parse_level,
    set_default_logger,
    set_source_levels,
)
from gcplog.core.attributes import normalize_attr, normalize_value
from gcplog.core.errors import GCPLogError, HandlerError
from gcplog.core.extra import ExtraFields, default_extra_fields
from gcplog.core.models import Attr, Level, LogRecord, SourceLocation
from gcplog.core.ports import WriterPort
from gcplog.core.severity import level_to_severity
from gcplog.core.source import caller
from gcplog.facade import (
    debug,
    debug_context,
    error,
    error_context,
    info,
    info_context,
    log,
    log_attrs,
    log_context,
    merge_global_extra_fields,
    warn,
    warn_context,
    warning,
    with_,
    with_attrs,
    with_group,
)
from gcplog.logger import Logger, discard

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SOURCE_LEVELS",
    "Attr",
    "DiscardWriter",
    "ExtraFields",
    "GCPHandler",
    "GCPLogError",
    "GCPLoggingHandler",
    "HandlerError",
    "InMemoryWriter",
    "Level",
    "LogRecord",
    "Logger",
    "RequestLoggerMiddleware",
    "Settings",
    "SourceLocation",
    "StreamWriter",
    "WriterPort",
    "bound_logger",
    "caller",
    "debug",
    "debug_context",
    "default_extra_fields",
    "default_logger",
    "discard",
    "error",
    "error_context",
    "from_context",
    "get_source_levels",
    "info",
    "info_context",
    "level_to_severity",
    "log",
    "log_attrs",
    "log_context",
    "merge_global_extra_fields",
    "new_logger",
    "normalize_attr",
    "normalize_value",
    "parse_level",
    "reset_logger",
    "set_default_logger",
    "set_source_levels",
    "warn",
    "warn_context",
    "warning",
    "with_",
    "with_attrs",
    "with_group",
    "with_logger",
]
