"""Module-level logging functions.

``debug``/``info``/``warn``/``error`` log through the process default logger;
the ``*_context`` variants log through the logger bound to the current
context (see ``gcplog.adapters.logging_context``).
"""

from collections.abc import Mapping
from typing import Any

from gcplog.adapters.logging_context import from_context
from gcplog.config import default_logger
from gcplog.core.attributes import AttrArg, to_attrs
from gcplog.core.extra import default_extra_fields
from gcplog.core.models import Attr, Level
from gcplog.logger import Logger


def merge_global_extra_fields(
    fields: Mapping[str, Any] | None = None, **kwargs: Any
) -> None:
    """Merge fields into the process-wide ``extra`` object."""
    default_extra_fields().merge(fields, **kwargs)


def debug(msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any) -> None:
    default_logger()._log(Level.DEBUG, msg, to_attrs(args, attrs), stacklevel)


def info(msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any) -> None:
    default_logger()._log(Level.INFO, msg, to_attrs(args, attrs), stacklevel)


def warn(msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any) -> None:
    default_logger()._log(Level.WARN, msg, to_attrs(args, attrs), stacklevel)


warning = warn


def error(msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any) -> None:
    default_logger()._log(Level.ERROR, msg, to_attrs(args, attrs), stacklevel)


def log(
    level: int, msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any
) -> None:
    default_logger()._log(level, msg, to_attrs(args, attrs), stacklevel)


def log_attrs(level: int, msg: str, *attrs: Attr, stacklevel: int = 1) -> None:
    default_logger()._log(level, msg, tuple(attrs), stacklevel)


def debug_context(
    msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any
) -> None:
    from_context()._log(Level.DEBUG, msg, to_attrs(args, attrs), stacklevel)


def info_context(
    msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any
) -> None:
    from_context()._log(Level.INFO, msg, to_attrs(args, attrs), stacklevel)


def warn_context(
    msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any
) -> None:
    from_context()._log(Level.WARN, msg, to_attrs(args, attrs), stacklevel)


def error_context(
    msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any
) -> None:
    from_context()._log(Level.ERROR, msg, to_attrs(args, attrs), stacklevel)


def log_context(
    level: int, msg: str, *args: AttrArg, stacklevel: int = 1, **attrs: Any
) -> None:
    from_context()._log(level, msg, to_attrs(args, attrs), stacklevel)


def with_(*args: AttrArg, **attrs: Any) -> Logger:
    """Derive a logger from the default one with extra attributes."""
    return default_logger().with_(*args, **attrs)


with_attrs = with_


def with_group(name: str) -> Logger:
    return default_logger().with_group(name)
