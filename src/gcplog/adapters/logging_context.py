"""Context-local logger storage.

Binds a logger to the current execution context (thread or asyncio task)
so request-scoped code can log with request attributes without passing the
logger around.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

from gcplog.config import default_logger
from gcplog.logger import Logger

_current_logger: ContextVar[Logger | None] = ContextVar(
    "gcplog_logger", default=None
)


def with_logger(logger: Logger) -> Token[Logger | None]:
    """Bind ``logger`` to the current context.

    Returns:
        Token to pass to ``reset_logger`` to restore the previous binding.
    """
    return _current_logger.set(logger)


def reset_logger(token: Token[Logger | None]) -> None:
    _current_logger.reset(token)


@contextmanager
def bound_logger(logger: Logger) -> Iterator[Logger]:
    """Bind ``logger`` to the current context for the duration of a block."""
    token = with_logger(logger)
    try:
        yield logger
    finally:
        reset_logger(token)


def from_context() -> Logger:
    """Return the logger bound to the current context, or the default one."""
    logger = _current_logger.get()
    if logger is not None:
        return logger
    return default_logger()
