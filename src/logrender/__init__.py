"""logrender: render structured log entries as JSON or key=value lines."""

from logrender.adapters.logging import LogRenderHandler, record_to_entry
from logrender.core.encoding import (
    JSONFormatter,
    JSONFormatterOptions,
    TextFormatter,
    TextFormatterOptions,
)
from logrender.core.exceptions import LogRenderError, SerializationError
from logrender.core.fields import (
    FIELD_KEY_LEVEL,
    FIELD_KEY_MSG,
    FIELD_KEY_TIME,
    FieldMap,
    prefix_field_clashes,
)
from logrender.core.models import Level, LogEntry
from logrender.core.ports import Formatter, FormatterFactory
from logrender.core.timestamps import DEFAULT_TIMESTAMP_FORMAT

__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "FIELD_KEY_LEVEL",
    "FIELD_KEY_MSG",
    "FIELD_KEY_TIME",
    "FieldMap",
    "Formatter",
    "FormatterFactory",
    "JSONFormatter",
    "JSONFormatterOptions",
    "Level",
    "LogEntry",
    "LogRenderError",
    "LogRenderHandler",
    "SerializationError",
    "TextFormatter",
    "TextFormatterOptions",
    "prefix_field_clashes",
    "record_to_entry",
]
