"""Cloud Logging structured JSON encoder for log records."""

import json
import time
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from gcplog.core.attributes import normalize_attr
from gcplog.core.models import Attr, LogRecord
from gcplog.core.severity import level_to_severity

SOURCE_LOCATION_KEY = "logging.googleapis.com/sourceLocation"


def format_timestamp(time_ns: int) -> str:
    """Format epoch nanoseconds as an RFC 3339 UTC timestamp.

    Fractional seconds keep nanosecond precision with trailing zeros
    trimmed, and are omitted entirely when zero.

    Args:
        time_ns: Nanoseconds since the Unix epoch.

    Returns:
        Timestamp such as ``2023-12-11T13:06:40.1234Z``.
    """
    seconds, nanos = divmod(time_ns, 1_000_000_000)
    text = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(seconds))
    if nanos:
        text += "." + f"{nanos:09d}".rstrip("0")
    return text + "Z"


def build_context(attrs: Iterable[Attr]) -> dict[str, Any]:
    """Normalize attributes into the context object. Later keys win."""
    context: dict[str, Any] = {}
    for attr in attrs:
        normalized = normalize_attr(attr)
        context[normalized.key] = normalized.value
    return context


def build_document(
    record: LogRecord,
    preset_attrs: Iterable[Attr] = (),
    extra: Mapping[str, Any] | None = None,
    include_source: bool = True,
) -> dict[str, Any]:
    """Build the output document for a record.

    Args:
        record: The record to render.
        preset_attrs: Handler attributes, applied before the record's own.
        extra: Process-wide extra fields.
        include_source: Whether the record's level gets a source location.

    Returns:
        Document dict with keys in wire order. The source location key is
        absent unless ``include_source`` is set and the record has one.
    """
    doc: dict[str, Any] = {
        "severity": level_to_severity(record.level),
        "message": record.message,
        "timestamp": format_timestamp(record.time_ns),
    }
    if include_source and record.source is not None:
        doc[SOURCE_LOCATION_KEY] = record.source.as_dict()
    doc["context"] = build_context([*preset_attrs, *record.attrs])
    doc["extra"] = dict(extra) if extra is not None else {}
    return doc


def _default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_line(document: Mapping[str, Any]) -> bytes:
    """Serialize a document as one compact, newline-terminated UTF-8 line.

    Raises:
        TypeError: If a value is not JSON serializable.
        ValueError: If a value cannot be encoded (NaN, circular reference).
    """
    text = json.dumps(
        document,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_default,
    )
    return (text + "\n").encode("utf-8")
