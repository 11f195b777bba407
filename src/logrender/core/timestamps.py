"""Timestamp layouts."""

from datetime import UTC, datetime

# RFC 3339 in UTC, e.g. 2024-01-02T15:04:05Z
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(timestamp: float, layout: str) -> str:
    """Format a Unix timestamp in UTC using a strftime layout."""
    return datetime.fromtimestamp(timestamp, tz=UTC).strftime(layout)
