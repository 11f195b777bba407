"""Port interfaces for formatters.

These protocols define the contracts that formatters and their option
objects implement. Callers depend only on these interfaces.
"""

from typing import IO, Any, Protocol, runtime_checkable

from logrender.core.models import LogEntry


@runtime_checkable
class Formatter(Protocol):
    """A built formatter rendering one event to bytes.

    Examples: JSONFormatter, TextFormatter.
    """

    def format(self, entry: LogEntry) -> bytes:
        """Render a log entry, including the trailing newline."""
        ...


@runtime_checkable
class FormatterFactory(Protocol):
    """Options object that builds a Formatter for an output sink."""

    def build(self, out: IO[Any] | None) -> Formatter:
        """Resolve defaults once and return an immutable formatter.

        Args:
            out: The sink the rendered bytes will be written to. Only used
                to probe terminal capabilities.
        """
        ...


class TerminalProbe(Protocol):
    """Decides whether a sink can display ANSI colors."""

    def __call__(self, out: IO[Any] | None) -> bool: ...
