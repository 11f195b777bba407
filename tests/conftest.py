"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from typing import Any

import pytest

from logrender.core.encoding.text_formatter import TextFormatter, TextFormatterOptions
from logrender.core.models import Level, LogEntry

# 2024-01-02T15:04:05Z
FIXED_TIMESTAMP = 1704207845.0
FIXED_TIME_TEXT = "2024-01-02T15:04:05Z"


@pytest.fixture
def fixed_timestamp() -> float:
    """Unix timestamp of 2024-01-02T15:04:05Z."""
    return FIXED_TIMESTAMP


@pytest.fixture
def make_entry() -> Callable[..., LogEntry]:
    """Factory fixture for creating LogEntry objects at a fixed time.

    Usage:
        def test_something(make_entry):
            entry = make_entry("hello", user="alice")
    """

    def _entry(
        message: str = "",
        level: Level = Level.INFO,
        timestamp: float = FIXED_TIMESTAMP,
        **attributes: Any,
    ) -> LogEntry:
        return LogEntry(
            timestamp=timestamp,
            level=level,
            message=message,
            attributes=attributes,
        )

    return _entry


@pytest.fixture
def build_text() -> Callable[..., TextFormatter]:
    """Factory fixture building a TextFormatter that never sees a terminal.

    Keyword arguments are passed to TextFormatterOptions.
    """

    def _build(**options: Any) -> TextFormatter:
        return TextFormatterOptions(**options).build(None, terminal_probe=no_tty)

    return _build


def no_tty(out: object) -> bool:
    """Terminal probe that always reports a non-terminal sink."""
    return False
