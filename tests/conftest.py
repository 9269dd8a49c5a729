"""Shared test fixtures for all test modules."""

from collections.abc import Callable, Iterator

import pytest
from tests.helpers import FIXED_TIME_NS

try:
    import httpx
except ImportError:
    httpx = None

from gcplog import config
from gcplog.adapters.handler import GCPHandler
from gcplog.adapters.sinks import InMemoryWriter
from gcplog.core.extra import ExtraFields
from gcplog.core.models import Level
from gcplog.logger import Logger


@pytest.fixture
def writer() -> InMemoryWriter:
    """Provide an in-memory sink."""
    return InMemoryWriter()


@pytest.fixture
def extra_fields() -> ExtraFields:
    """Provide an isolated extra fields store."""
    return ExtraFields()


@pytest.fixture
def make_handler(
    writer: InMemoryWriter, extra_fields: ExtraFields
) -> Callable[..., GCPHandler]:
    """Factory fixture for handlers writing to ``writer``.

    Usage:
        handler = make_handler(Level.INFO)
    """

    def _make(level: int = Level.DEBUG, **kwargs: object) -> GCPHandler:
        kwargs.setdefault("extra_fields", extra_fields)
        return GCPHandler(writer, level, **kwargs)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def make_logger(
    make_handler: Callable[..., GCPHandler],
) -> Callable[..., Logger]:
    """Factory fixture for loggers with a fixed clock."""

    def _make(level: int = Level.DEBUG, **kwargs: object) -> Logger:
        return Logger(make_handler(level, **kwargs), clock=lambda: FIXED_TIME_NS)

    return _make


@pytest.fixture
def restore_defaults() -> Iterator[None]:
    """Restore the default logger and source levels after each test."""
    saved_logger = config._default_logger
    saved_levels = config.get_source_levels()
    yield
    config._default_logger = saved_logger
    config.set_source_levels(saved_levels)


@pytest.fixture
def global_extra(monkeypatch: pytest.MonkeyPatch) -> ExtraFields:
    """Replace the process-wide extra fields store for one test."""
    from gcplog.core import extra

    fresh = ExtraFields()
    monkeypatch.setattr(extra, "_default", fresh)
    return fresh


# === ASGI Test Fixtures ===


@pytest.fixture
def asgi_scope():
    """Factory fixture for creating ASGI scope dicts."""

    def _scope(method: str = "GET", path: str = "/test") -> dict[str, object]:
        return {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [],
        }

    return _scope


@pytest.fixture
def asgi_send_capture():
    """Fixture that returns a send callable and a responses list for capture.

    Returns a tuple of (send_func, responses_list) for recording ASGI messages.
    """

    responses: list[dict[str, object]] = []

    async def send(message: dict[str, object]) -> None:
        """Capture ASGI messages."""
        responses.append(message)

    return send, responses


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            async with asgi_test_client(app) as client:
                response = await client.get("/endpoint")
    """
    if httpx is None:
        pytest.skip("httpx not installed")

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
