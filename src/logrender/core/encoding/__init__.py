"""Formatters turning log entries into bytes."""

from logrender.core.encoding.json_formatter import JSONFormatter, JSONFormatterOptions
from logrender.core.encoding.text_formatter import TextFormatter, TextFormatterOptions

__all__ = [
    "JSONFormatter",
    "JSONFormatterOptions",
    "TextFormatter",
    "TextFormatterOptions",
]
