"""Human-readable key=value formatter for log entries.

Entries render either as plain ``key=value`` pairs, suitable for files and
log collectors, or as an aligned line with ANSI colors when the output is an
interactive terminal.
"""

import logging
import time
from dataclasses import dataclass
from typing import IO, Any

from logrender.core.fields import (
    FIELD_KEY_LEVEL,
    FIELD_KEY_MSG,
    FIELD_KEY_TIME,
    prefix_field_clashes,
)
from logrender.core.models import Level, LogEntry
from logrender.core.ports import TerminalProbe
from logrender.core.terminal import is_color_terminal
from logrender.core.timestamps import DEFAULT_TIMESTAMP_FORMAT, format_timestamp

logger = logging.getLogger(__name__)

RED = 31
YELLOW = 33
BLUE = 34
GRAY = 37

MESSAGE_WIDTH = 44

_LEVEL_COLORS = {
    Level.DEBUG: GRAY,
    Level.WARNING: YELLOW,
    Level.ERROR: RED,
    Level.FATAL: RED,
    Level.PANIC: RED,
}

_BARE_CHARACTERS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-."
)


def level_color(level: Level) -> int:
    """Return the ANSI color code used for a level."""
    return _LEVEL_COLORS.get(level, BLUE)


@dataclass
class TextFormatterOptions:
    """Settings for building a TextFormatter.

    Attributes:
        force_colors: Use colors even when the output is not a terminal.
        disable_colors: Never use colors.
        disable_timestamp: Omit the timestamp, useful when the log collector
            adds its own.
        full_timestamp: In colored output, print the formatted timestamp
            instead of the seconds elapsed since the formatter was built.
        timestamp_format: strftime layout. Empty means
            DEFAULT_TIMESTAMP_FORMAT.
        disable_sorting: Keep attribute mapping order instead of sorting keys.
        quote_empty_fields: Quote empty values.
        quote_character: Character wrapped around quoted values. Empty
            means a double quote.
    """

    force_colors: bool = False
    disable_colors: bool = False
    disable_timestamp: bool = False
    full_timestamp: bool = False
    timestamp_format: str = ""
    disable_sorting: bool = False
    quote_empty_fields: bool = False
    quote_character: str = ""

    def build(
        self,
        out: IO[Any] | None = None,
        terminal_probe: TerminalProbe = is_color_terminal,
    ) -> "TextFormatter":
        """Resolve defaults and the color decision into a TextFormatter.

        Args:
            out: Output sink, probed once for terminal support.
            terminal_probe: Callable deciding whether ``out`` shows colors.
        """
        timestamp_format = self.timestamp_format
        if not self.disable_timestamp and not timestamp_format:
            timestamp_format = DEFAULT_TIMESTAMP_FORMAT

        colored = (
            self.force_colors or terminal_probe(out)
        ) and not self.disable_colors
        logger.debug("built text formatter (colored=%s)", colored)
        return TextFormatter(
            disable_timestamp=self.disable_timestamp,
            full_timestamp=self.full_timestamp,
            timestamp_format=timestamp_format,
            disable_sorting=self.disable_sorting,
            quote_empty_fields=self.quote_empty_fields,
            quote_character=self.quote_character or '"',
            colored=colored,
            base_timestamp=time.time(),
        )


@dataclass(frozen=True)
class TextFormatter:
    """Renders entries as ``key=value`` lines.

    Build instances with TextFormatterOptions.build(); ``colored`` is fixed
    at that point.
    """

    disable_timestamp: bool
    full_timestamp: bool
    timestamp_format: str
    disable_sorting: bool
    quote_empty_fields: bool
    quote_character: str
    colored: bool
    base_timestamp: float

    def format(self, entry: LogEntry) -> bytes:
        """Render an entry as a single line terminated by a newline."""
        data = dict(entry.attributes)
        prefix_field_clashes(data)
        keys = list(data)
        if not self.disable_sorting:
            keys.sort()

        b = entry.buffer
        if b is None:
            b = bytearray()
        else:
            b.clear()

        if self.colored:
            self._print_colored(b, entry, data, keys)
        else:
            if not self.disable_timestamp:
                self._append_key_value(
                    b,
                    FIELD_KEY_TIME,
                    format_timestamp(entry.timestamp, self.timestamp_format),
                )
            self._append_key_value(b, FIELD_KEY_LEVEL, str(entry.level))
            if entry.message:
                self._append_key_value(b, FIELD_KEY_MSG, entry.message)
            for key in keys:
                self._append_key_value(b, key, data[key])

        b += b"\n"
        return bytes(b)

    def _print_colored(
        self,
        b: bytearray,
        entry: LogEntry,
        data: dict[str, Any],
        keys: list[str],
    ) -> None:
        color = level_color(entry.level)
        level_text = str(entry.level).upper()[:4]
        message = f"{entry.message:<{MESSAGE_WIDTH}}"

        if self.disable_timestamp:
            line = f"\x1b[{color}m{level_text}\x1b[0m {message} "
        elif not self.full_timestamp:
            elapsed = int(entry.timestamp - self.base_timestamp)
            line = f"\x1b[{color}m{level_text}\x1b[0m[{elapsed:04d}] {message} "
        else:
            stamp = format_timestamp(entry.timestamp, self.timestamp_format)
            line = f"\x1b[{color}m{level_text}\x1b[0m[{stamp}] {message} "
        _write(b, line)

        for key in keys:
            _write(b, f" \x1b[{color}m{key}\x1b[0m=")
            self._append_value(b, data[key])

    def needs_quoting(self, text: str) -> bool:
        """Return True if ``text`` must be wrapped in the quote character."""
        if self.quote_empty_fields and not text:
            return True
        return any(ch not in _BARE_CHARACTERS for ch in text)

    def _append_key_value(self, b: bytearray, key: str, value: Any) -> None:
        if b:
            b += b" "
        _write(b, key)
        b += b"="
        self._append_value(b, value)

    def _append_value(self, b: bytearray, value: Any) -> None:
        if isinstance(value, BaseException):
            value = str(value)
        elif not isinstance(value, str):
            _write(b, str(value))
            return
        if self.needs_quoting(value):
            _write(b, f"{self.quote_character}{value}{self.quote_character}")
        else:
            _write(b, value)


def _write(b: bytearray, text: str) -> None:
    b += text.encode("utf-8", "backslashreplace")
