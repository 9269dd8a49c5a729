"""Attribute normalization to JSON-safe values."""

from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any

from gcplog.core.models import Attr

# An Attr, a (key, value) pair, or one half of an alternating key, value run.
AttrArg = Attr | tuple[str, Any] | str | object

# Key given to positional values that have no key.
BAD_KEY = "!BADKEY"


def duration_to_ms(value: timedelta) -> int:
    """Whole milliseconds in a duration, truncated toward zero."""
    micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    if micros < 0:
        return -(-micros // 1000)
    return micros // 1000


def normalize_value(value: Any) -> Any:
    """Convert an attribute value into a JSON-safe value.

    Classification is by value type only:

    - exceptions become their text (``str(exc)``)
    - ``timedelta`` durations become integer milliseconds
    - everything else is returned unchanged

    Args:
        value: Attribute value of any type.

    Returns:
        The normalized value.
    """
    if isinstance(value, BaseException):
        return str(value)
    if isinstance(value, timedelta):
        return duration_to_ms(value)
    return value


def normalize_attr(attr: Attr) -> Attr:
    """Normalize the value of a single attribute, keeping its key."""
    return Attr(attr.key, normalize_value(attr.value))


def to_attrs(
    args: Iterable[AttrArg] = (),
    kwargs: Mapping[str, Any] | None = None,
) -> tuple[Attr, ...]:
    """Collect positional and keyword attributes into an ordered tuple.

    Positional arguments are read left to right:

    - an ``Attr`` or a ``(key, value)`` pair is taken as is
    - a ``str`` is a key, paired with the argument after it
    - anything else, or a trailing key with no value, goes under ``BAD_KEY``

    Args:
        args: Positional attribute arguments.
        kwargs: Keyword attributes, appended after ``args``.

    Returns:
        Tuple of ``Attr`` in call order.
    """
    attrs: list[Attr] = []
    pending = list(args)
    i = 0
    while i < len(pending):
        arg = pending[i]
        i += 1
        if isinstance(arg, Attr):
            attrs.append(arg)
        elif isinstance(arg, tuple) and len(arg) == 2:
            attrs.append(Attr(str(arg[0]), arg[1]))
        elif isinstance(arg, str) and i < len(pending):
            attrs.append(Attr(arg, pending[i]))
            i += 1
        else:
            attrs.append(Attr(BAD_KEY, arg))
    if kwargs:
        attrs.extend(Attr(key, value) for key, value in kwargs.items())
    return tuple(attrs)
