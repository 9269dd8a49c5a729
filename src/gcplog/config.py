"""Process-wide configuration and the default logger."""

import os
import sys
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from gcplog.adapters.handler import DEFAULT_SOURCE_LEVELS, GCPHandler
from gcplog.adapters.sinks import StreamWriter
from gcplog.core.models import Level
from gcplog.logger import Logger

_LEVEL_NAMES: dict[str, Level] = {
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
}

_STREAMS = {"stdout": lambda: sys.stdout, "stderr": lambda: sys.stderr}


def parse_level(name: str | None) -> Level:
    """Map a level name to a Level. Unrecognized names map to DEBUG."""
    if not name:
        return Level.DEBUG
    return _LEVEL_NAMES.get(name.strip().lower(), Level.DEBUG)


def parse_levels(names: str) -> frozenset[int]:
    """Parse a comma-separated list of level names, ignoring blanks."""
    return frozenset(parse_level(n) for n in names.split(",") if n.strip())


@dataclass(frozen=True)
class Settings:
    """Logger settings.

    Attributes:
        level: Minimum level that is written.
        source_levels: Levels whose records carry a source location.
        stream: Output stream name, "stdout" or "stderr".
    """

    level: Level = Level.DEBUG
    source_levels: frozenset[int] = field(
        default_factory=lambda: frozenset(DEFAULT_SOURCE_LEVELS)
    )
    stream: str = "stdout"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Read settings from ``GCPLOG_LEVEL``, ``GCPLOG_SOURCE_LEVELS`` and
        ``GCPLOG_STREAM``.

        Args:
            environ: Environment mapping. Defaults to ``os.environ``.

        Returns:
            Settings with defaults for unset variables.
        """
        env = os.environ if environ is None else environ
        source_levels = get_source_levels()
        if env.get("GCPLOG_SOURCE_LEVELS"):
            source_levels = parse_levels(env["GCPLOG_SOURCE_LEVELS"])
        stream = env.get("GCPLOG_STREAM", "stdout").strip().lower()
        if stream not in _STREAMS:
            stream = "stdout"
        return cls(
            level=parse_level(env.get("GCPLOG_LEVEL")),
            source_levels=source_levels,
            stream=stream,
        )

    def build_logger(self) -> Logger:
        writer = StreamWriter(_STREAMS[self.stream]())
        handler = GCPHandler(writer, self.level, source_levels=self.source_levels)
        return Logger(handler)


_lock = threading.Lock()
_source_levels: frozenset[int] = frozenset(DEFAULT_SOURCE_LEVELS)
_default_logger: Logger | None = None


def set_source_levels(levels: Iterable[int]) -> None:
    """Set the levels that get call-site information.

    Only loggers created afterwards are affected.
    """
    global _source_levels
    _source_levels = frozenset(levels)


def get_source_levels() -> frozenset[int]:
    return _source_levels


def new_logger(level: str = "debug") -> Logger:
    """Create a logger writing to stdout and install it as the default.

    Args:
        level: Level name ("debug", "info", "warn", "error"). Unrecognized
            names select DEBUG.

    Returns:
        The new default logger.
    """
    settings = Settings(level=parse_level(level), source_levels=_source_levels)
    logger = settings.build_logger()
    set_default_logger(logger)
    return logger


def set_default_logger(logger: Logger) -> None:
    global _default_logger
    with _lock:
        _default_logger = logger


def default_logger() -> Logger:
    """Return the default logger, creating it from the environment if unset."""
    global _default_logger
    logger = _default_logger
    if logger is not None:
        return logger
    with _lock:
        if _default_logger is None:
            _default_logger = Settings.from_env().build_logger()
        return _default_logger
