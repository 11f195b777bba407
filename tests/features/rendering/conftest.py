"""BDD step definitions for rendering.feature."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from logrender.core.encoding.json_formatter import JSONFormatterOptions
from logrender.core.encoding.text_formatter import TextFormatterOptions
from logrender.core.fields import FIELD_KEY_TIME
from logrender.core.models import Level, LogEntry
from logrender.core.ports import Formatter


@dataclass
class RenderingContext:
    """Mutable state shared by the steps of one scenario."""

    timestamp: float = 0.0
    formatter: Formatter | None = None
    level: Level = Level.INFO
    message: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    output: bytes = b""


@pytest.fixture
def ctx() -> RenderingContext:
    """Fresh scenario context for each test."""
    return RenderingContext()


def _never_tty(out: object) -> bool:
    return False


@given(parsers.parse("the event time is {stamp}"))
def given_event_time(ctx: RenderingContext, stamp: str) -> None:
    """Fix the entry timestamp."""
    ctx.timestamp = datetime.fromisoformat(stamp).timestamp()


@given("a text formatter without colors")
def given_plain_text_formatter(ctx: RenderingContext) -> None:
    """Build a text formatter for a non-terminal sink."""
    ctx.formatter = TextFormatterOptions().build(None, terminal_probe=_never_tty)


@given("a text formatter with forced colors and no timestamp")
def given_colored_text_formatter(ctx: RenderingContext) -> None:
    """Build a colored text formatter without timestamps."""
    options = TextFormatterOptions(force_colors=True, disable_timestamp=True)
    ctx.formatter = options.build(None, terminal_probe=_never_tty)


@given("a JSON formatter")
def given_json_formatter(ctx: RenderingContext) -> None:
    """Build a JSON formatter with the default field map."""
    ctx.formatter = JSONFormatterOptions().build()


@given(parsers.parse('a JSON formatter with the time field renamed to "{name}"'))
def given_renamed_json_formatter(ctx: RenderingContext, name: str) -> None:
    """Build a JSON formatter with a renamed time field."""
    ctx.formatter = JSONFormatterOptions(field_map={FIELD_KEY_TIME: name}).build()


@given(parsers.re(r'an? (?P<level>\w+) entry with message "(?P<message>.*)"'))
def given_entry(ctx: RenderingContext, level: str, message: str) -> None:
    """Set the entry level and message."""
    ctx.level = Level.parse(level)
    ctx.message = message


@given(parsers.parse('the attribute "{key}" is the number {value:d}'))
def given_number_attribute(ctx: RenderingContext, key: str, value: int) -> None:
    """Add an integer attribute."""
    ctx.attributes[key] = value


@given(parsers.parse('the attribute "{key}" is the text "{value}"'))
def given_text_attribute(ctx: RenderingContext, key: str, value: str) -> None:
    """Add a text attribute."""
    ctx.attributes[key] = value


@given(parsers.parse('the attribute "{key}" is the error "{value}"'))
def given_error_attribute(ctx: RenderingContext, key: str, value: str) -> None:
    """Add an exception attribute."""
    ctx.attributes[key] = OSError(value)


@when("the entry is formatted")
def when_formatted(ctx: RenderingContext) -> None:
    """Render the entry with the scenario's formatter."""
    assert ctx.formatter is not None
    entry = LogEntry(
        timestamp=ctx.timestamp,
        level=ctx.level,
        message=ctx.message,
        attributes=ctx.attributes,
    )
    ctx.output = ctx.formatter.format(entry)


@then(parsers.parse("the output is the line '{line}'"))
def then_output_is_line(ctx: RenderingContext, line: str) -> None:
    """The output equals the line plus a newline."""
    assert ctx.output == line.encode() + b"\n"


@then("the output is one JSON object ending in a newline")
def then_one_json_object(ctx: RenderingContext) -> None:
    """The output decodes to a single JSON object."""
    assert ctx.output.endswith(b"\n")
    assert ctx.output.count(b"\n") == 1
    assert isinstance(json.loads(ctx.output), dict)


@then(parsers.re(r'the JSON field "(?P<key>[^"]+)" is "(?P<value>.*)"'))
def then_json_field(ctx: RenderingContext, key: str, value: str) -> None:
    """A decoded JSON field has the expected text value."""
    assert json.loads(ctx.output)[key] == value


@then(parsers.parse('the output has no JSON field "{key}"'))
def then_no_json_field(ctx: RenderingContext, key: str) -> None:
    """A decoded JSON object lacks the key."""
    assert key not in json.loads(ctx.output)


@then(
    parsers.parse('the output starts with the colored badge "{badge}" in color {color:d}')
)
def then_colored_badge(ctx: RenderingContext, badge: str, color: int) -> None:
    """The line opens with the escape-wrapped level abbreviation."""
    assert ctx.output.startswith(f"\x1b[{color}m{badge}\x1b[0m ".encode())
