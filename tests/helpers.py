"""Shared constants and helpers for tests."""

import inspect

# 2023-12-11T13:06:40.123456789Z
FIXED_TIME_NS = 1702300000_123456789


def next_line() -> int:
    """Line number of the statement after the caller's."""
    return inspect.currentframe().f_back.f_lineno + 1  # type: ignore[union-attr]
