"""Python logging handler adapter for logrender.

This adapter bridges Python's standard library logging module to the
logrender formatters, so records logged through ``logging`` are rendered as
JSON or key=value lines.
"""

import logging
import sys
import traceback
from typing import IO, Any

from logrender.core.models import Level, LogEntry
from logrender.core.ports import Formatter, FormatterFactory

# Attributes every LogRecord has; anything else on a record came from extra=.
_STANDARD_LOGRECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {
    "asctime",
    "message",
}

# Entry attribute name -> LogRecord attribute it is read from.
_RECORD_FIELDS = {
    "logger": "name",
    "module": "module",
    "funcName": "funcName",
    "lineno": "lineno",
    "pathname": "pathname",
    "process": "process",
    "thread": "threadName",
}

_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno", "pathname"]


def _exception_fields(record: logging.LogRecord) -> dict[str, str]:
    exc_type, exc_value, exc_tb = record.exc_info or (None, None, None)
    fields: dict[str, str] = {}
    if exc_type is not None:
        fields["exc_type"] = exc_type.__name__
    if exc_value is not None:
        fields["exc_message"] = str(exc_value)
    if exc_tb is not None:
        fields["exc_traceback"] = "".join(
            traceback.format_exception(exc_type, exc_value, exc_tb)
        )
    return fields


def record_to_entry(
    record: logging.LogRecord,
    include_attrs: list[str] | None = None,
) -> LogEntry:
    """Convert a stdlib log record into a LogEntry.

    Args:
        record: The log record to convert.
        include_attrs: Record fields to copy into the entry, any of
            "logger", "module", "funcName", "lineno", "pathname", "process"
            and "thread". Defaults to module, funcName, lineno and pathname.

    Returns:
        LogEntry carrying the record's time, level, message and attributes.
    """
    if include_attrs is None:
        include_attrs = _DEFAULT_INCLUDE_ATTRS

    attributes: dict[str, Any] = {
        key: getattr(record, _RECORD_FIELDS[key])
        for key in include_attrs
        if key in _RECORD_FIELDS
    }
    attributes.update(
        (key, value)
        for key, value in vars(record).items()
        if key not in _STANDARD_LOGRECORD_ATTRS
    )
    attributes.update(_exception_fields(record))

    return LogEntry(
        timestamp=record.created,
        level=Level.from_logging(record.levelno),
        message=record.getMessage(),
        attributes=attributes,
    )


class LogRenderHandler(logging.StreamHandler):
    """Logging handler that renders records with a logrender formatter.

    Example:
        ```python
        from logrender import LogRenderHandler, TextFormatterOptions

        handler = LogRenderHandler.from_options(TextFormatterOptions())
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        formatter: Formatter,
        stream: IO[str] | None = None,
        include_attrs: list[str] | None = None,
    ) -> None:
        """Initialize the handler with a built formatter.

        Args:
            formatter: Built JSONFormatter or TextFormatter.
            stream: Text stream to write to. Defaults to sys.stderr.
            include_attrs: LogRecord attributes to include, see
                record_to_entry().
        """
        super().__init__(stream)
        self._renderer = formatter
        self._include_attrs = include_attrs

    @classmethod
    def from_options(
        cls,
        options: FormatterFactory,
        stream: IO[str] | None = None,
        include_attrs: list[str] | None = None,
    ) -> "LogRenderHandler":
        """Build the formatter against the handler's stream.

        The terminal probe of text formatters sees the same stream the
        handler writes to.
        """
        if stream is None:
            stream = sys.stderr
        return cls(options.build(stream), stream, include_attrs)

    @property
    def renderer(self) -> Formatter:
        """The formatter used to render records."""
        return self._renderer

    def format(self, record: logging.LogRecord) -> str:
        """Render a record to text without the trailing newline.

        Raises:
            SerializationError: If the JSON formatter cannot encode the
                record. StreamHandler.emit() routes it to handleError().
        """
        entry = record_to_entry(record, self._include_attrs)
        rendered = self._renderer.format(entry)
        return rendered.decode("utf-8").removesuffix("\n")
