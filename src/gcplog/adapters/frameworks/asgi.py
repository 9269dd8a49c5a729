"""ASGI middleware that binds a request-scoped logger.

Framework-agnostic: works with any ASGI server or framework (FastAPI,
Starlette, Django ASGI) without depending on one.
"""

import uuid
from collections.abc import Callable, Coroutine
from typing import Any

from gcplog.adapters.logging_context import bound_logger, from_context
from gcplog.logger import Logger

# ASGI type aliases
Scope = dict[str, Any]
Receive = Callable[[], Coroutine[Any, Any, dict[str, Any]]]
Send = Callable[[dict[str, Any]], Coroutine[Any, Any, None]]
ASGIApp = Callable[[Scope, Receive, Send], Coroutine[Any, Any, None]]


def _extract_request_id(scope: Scope, header_name: str = "X-Request-ID") -> str:
    """Extract or generate a request ID from ASGI scope headers.

    Searches for the specified header (case-insensitive). If not found,
    generates a new UUID.

    Args:
        scope: ASGI scope dictionary containing request metadata.
        header_name: Name of the header to search for (default: "X-Request-ID").

    Returns:
        Request ID string (either from header or newly generated UUID).
    """
    header_bytes = header_name.lower().encode()
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    for name, value in headers:
        if name.lower() == header_bytes:
            return str(value.decode("utf-8", errors="replace"))

    return str(uuid.uuid4())


class RequestLoggerMiddleware:
    """ASGI middleware that binds a logger carrying the request ID.

    Inside the wrapped app, ``from_context()`` and the ``*_context`` logging
    functions use a logger derived with ``request_id``, ``method`` and
    ``path`` attributes.
    """

    def __init__(
        self,
        app: ASGIApp,
        logger: Logger | None = None,
        request_id_header: str = "X-Request-ID",
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application to wrap.
            logger: Base logger to derive from. Defaults to the logger bound
                to the context at request time.
            request_id_header: Name of the header to extract the request ID
                from (default: "X-Request-ID").
        """
        self.app = app
        self.logger = logger
        self.request_id_header = request_id_header

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI callable interface that processes requests through the wrapped app."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        base = self.logger if self.logger is not None else from_context()
        request_logger = base.with_(
            request_id=_extract_request_id(scope, self.request_id_header),
            method=scope.get("method", ""),
            path=scope.get("path", ""),
        )
        with bound_logger(request_logger):
            await self.app(scope, receive, send)
