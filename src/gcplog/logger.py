"""Leveled logging facade over GCPHandler."""

import logging
import time
from typing import Any

from gcplog.adapters.handler import GCPHandler
from gcplog.adapters.sinks import DiscardWriter
from gcplog.core.attributes import AttrArg, to_attrs
from gcplog.core.errors import HandlerError
from gcplog.core.models import Attr, Level, LogRecord
from gcplog.core.ports import Clock
from gcplog.core.source import caller

_internal = logging.getLogger("gcplog")
_internal.addHandler(logging.NullHandler())


class Logger:
    """Structured logger that builds records and passes them to a handler.

    Attributes are given as keyword arguments, ``Attr`` instances or
    ``(key, value)`` pairs:

        ```python
        logger.info("disk low", pct=7)
        logger.error("upload failed", Attr("error", exc), bucket="media")
        ```

    ``stacklevel`` works like in ``logging.Logger.log``: code that wraps these
    methods passes ``stacklevel=2`` so the reported call site is its caller.
    """

    def __init__(self, handler: GCPHandler, *, clock: Clock | None = None) -> None:
        self._handler = handler
        self._clock = clock or time.time_ns

    @property
    def handler(self) -> GCPHandler:
        return self._handler

    def enabled(self, level: int) -> bool:
        return self._handler.enabled(level)

    def debug(
        self, msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any
    ) -> None:
        self._log(Level.DEBUG, msg, to_attrs(args, attrs), stacklevel)

    def info(
        self, msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any
    ) -> None:
        self._log(Level.INFO, msg, to_attrs(args, attrs), stacklevel)

    def warn(
        self, msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any
    ) -> None:
        self._log(Level.WARN, msg, to_attrs(args, attrs), stacklevel)

    warning = warn

    def error(
        self, msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any
    ) -> None:
        self._log(Level.ERROR, msg, to_attrs(args, attrs), stacklevel)

    def log(
        self,
        level: int,
        msg: str,
        *args: AttrArg,
        stacklevel: int = 1,
        **attrs: Any,
    ) -> None:
        """Log at an arbitrary level."""
        self._log(level, msg, to_attrs(args, attrs), stacklevel)

    def log_attrs(
        self, level: int, msg: str, *attrs: Attr, stacklevel: int = 1
    ) -> None:
        """Log at an arbitrary level with ``Attr`` arguments only."""
        self._log(level, msg, tuple(attrs), stacklevel)

    def with_(self, *args: AttrArg, **attrs: Any) -> "Logger":
        """Return a logger whose records all carry the given attributes."""
        return Logger(
            self._handler.with_attrs(to_attrs(args, attrs)), clock=self._clock
        )

    with_attrs = with_

    def with_group(self, name: str) -> "Logger":
        return Logger(self._handler.with_group(name), clock=self._clock)

    def _log(
        self, level: int, msg: str, attrs: tuple[Attr, ...], stacklevel: int
    ) -> None:
        if not self._handler.enabled(level):
            return

        time_ns = self._clock()
        source = None
        if self._handler.wants_source(level):
            # Frames above this one: the public entry point, then its caller.
            source = caller(stacklevel + 1)
        record = LogRecord(
            level=level, message=msg, time_ns=time_ns, source=source, attrs=attrs
        )
        try:
            self._handler.handle(record)
        except HandlerError:
            _internal.debug("dropped log record %r", msg, exc_info=True)

    def __repr__(self) -> str:
        return f"Logger({self._handler!r})"


def discard() -> Logger:
    """Return a logger that drops all output (useful for testing)."""
    return Logger(GCPHandler(DiscardWriter()))
