"""BDD step definitions for handler features."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when
from tests.helpers import FIXED_TIME_NS

from gcplog.adapters.handler import GCPHandler
from gcplog.adapters.sinks import InMemoryWriter
from gcplog.config import parse_level
from gcplog.core.encoding.gcp_json import SOURCE_LOCATION_KEY
from gcplog.core.extra import ExtraFields
from gcplog.core.models import Attr, LogRecord, SourceLocation

LOCATION = SourceLocation(file="/app/app.py", line=7, function="app.main")


@dataclass
class HandlerScenarioContext:
    """Shared state between steps in a handler scenario."""

    sink: InMemoryWriter = field(default_factory=InMemoryWriter)
    extra: ExtraFields = field(default_factory=ExtraFields)
    handler: GCPHandler | None = None
    derived: GCPHandler | None = None

    def last_line(self) -> dict[str, Any]:
        return self.sink.records()[-1]


@pytest.fixture
def ctx() -> HandlerScenarioContext:
    """Fresh scenario context for each test."""
    return HandlerScenarioContext()


def _emit(
    handler: GCPHandler,
    message: str,
    level_name: str,
    attrs: tuple[Attr, ...] = (),
    source: SourceLocation | None = None,
) -> None:
    level = parse_level(level_name)
    if not handler.enabled(level):
        return
    handler.handle(
        LogRecord(
            level=level,
            message=message,
            time_ns=FIXED_TIME_NS,
            source=source,
            attrs=attrs,
        )
    )


# === Background Steps ===
@given("an in-memory sink")
def given_sink(ctx: HandlerScenarioContext) -> None:
    ctx.sink = InMemoryWriter()


@given(parsers.parse('a handler at level "{level:w}"'))
def given_handler(ctx: HandlerScenarioContext, level: str) -> None:
    ctx.handler = GCPHandler(ctx.sink, parse_level(level), extra_fields=ctx.extra)


# === Derivation ===
@when(parsers.parse('the handler is derived with attribute "{key}" = "{value}"'))
def when_derive(ctx: HandlerScenarioContext, key: str, value: str) -> None:
    assert ctx.handler is not None
    ctx.derived = ctx.handler.with_attrs([Attr(key, value)])


@when(
    parsers.parse(
        'the derived handler is derived again with attribute "{key}" = "{value}"'
    )
)
def when_derive_again(ctx: HandlerScenarioContext, key: str, value: str) -> None:
    assert ctx.derived is not None
    ctx.derived = ctx.derived.with_attrs([Attr(key, value)])


# === Logging ===
@when(
    parsers.parse(
        'the derived handler logs "{message}" at level "{level:w}" '
        'with attribute "{key}" = "{value}"'
    )
)
def when_derived_logs_with_attr(
    ctx: HandlerScenarioContext, message: str, level: str, key: str, value: str
) -> None:
    assert ctx.derived is not None
    _emit(ctx.derived, message, level, attrs=(Attr(key, value),))


@when(parsers.parse('the derived handler logs "{message}" at level "{level:w}"'))
def when_derived_logs(ctx: HandlerScenarioContext, message: str, level: str) -> None:
    assert ctx.derived is not None
    _emit(ctx.derived, message, level)


@when(
    parsers.parse(
        'the original handler logs "{message}" at level "{level:w}" '
        "with a source location"
    )
)
def when_original_logs_with_source(
    ctx: HandlerScenarioContext, message: str, level: str
) -> None:
    assert ctx.handler is not None
    _emit(ctx.handler, message, level, source=LOCATION)


@when(parsers.parse('the original handler logs "{message}" at level "{level:w}"'))
def when_original_logs(ctx: HandlerScenarioContext, message: str, level: str) -> None:
    assert ctx.handler is not None
    _emit(ctx.handler, message, level)


# === Extra fields ===
@when(parsers.parse('the extra field "{key}" is merged as "{value}"'))
def when_merge_extra(ctx: HandlerScenarioContext, key: str, value: str) -> None:
    ctx.extra.merge({key: value})


# === Assertions ===
@then(parsers.parse('the last line has severity "{severity}"'))
def then_severity(ctx: HandlerScenarioContext, severity: str) -> None:
    assert ctx.last_line()["severity"] == severity


@then(parsers.parse('the last line has context "{key}" = "{value}"'))
def then_context(ctx: HandlerScenarioContext, key: str, value: str) -> None:
    assert ctx.last_line()["context"][key] == value


@then("the last line has an empty context")
def then_empty_context(ctx: HandlerScenarioContext) -> None:
    assert ctx.last_line()["context"] == {}


@then(parsers.parse('the last line has extra "{key}" = "{value}"'))
def then_extra(ctx: HandlerScenarioContext, key: str, value: str) -> None:
    assert ctx.last_line()["extra"][key] == value


@then(parsers.parse("the sink has {count:d} lines"))
def then_line_count(ctx: HandlerScenarioContext, count: int) -> None:
    assert len(ctx.sink.lines()) == count


@then("the last line has no source location")
def then_no_source(ctx: HandlerScenarioContext) -> None:
    assert SOURCE_LOCATION_KEY not in ctx.last_line()


@then("the last line has a source location")
def then_source(ctx: HandlerScenarioContext) -> None:
    assert ctx.last_line()[SOURCE_LOCATION_KEY] == LOCATION.as_dict()
