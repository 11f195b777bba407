"""JSON line formatter for log entries."""

import json
import logging
from dataclasses import dataclass, field
from typing import IO, Any

from logrender.core.exceptions import SerializationError
from logrender.core.fields import (
    FIELD_KEY_LEVEL,
    FIELD_KEY_MSG,
    FIELD_KEY_TIME,
    RESERVED_FIELD_KEYS,
    FieldMap,
    prefix_field_clashes,
    resolve_field_key,
)
from logrender.core.models import LogEntry
from logrender.core.timestamps import DEFAULT_TIMESTAMP_FORMAT, format_timestamp

logger = logging.getLogger(__name__)


@dataclass
class JSONFormatterOptions:
    """Settings for building a JSONFormatter.

    Attributes:
        timestamp_format: strftime layout for the time field. Empty means
            DEFAULT_TIMESTAMP_FORMAT.
        disable_timestamp: Omit the time field entirely.
        field_map: Renames for the reserved fields, e.g.
            ``{FIELD_KEY_TIME: "@timestamp", FIELD_KEY_MSG: "@message"}``.
    """

    timestamp_format: str = ""
    disable_timestamp: bool = False
    field_map: FieldMap = field(default_factory=dict)

    def build(self, out: IO[Any] | None = None) -> "JSONFormatter":
        """Resolve field names and defaults into a JSONFormatter.

        Args:
            out: Output sink. Not inspected; accepted so both formatter
                kinds share one construction interface.
        """
        key_time: str | None = resolve_field_key(self.field_map, FIELD_KEY_TIME)
        timestamp_format = self.timestamp_format
        if self.disable_timestamp:
            key_time = None
        elif not timestamp_format:
            timestamp_format = DEFAULT_TIMESTAMP_FORMAT

        formatter = JSONFormatter(
            timestamp_format=timestamp_format,
            key_time=key_time,
            key_level=resolve_field_key(self.field_map, FIELD_KEY_LEVEL),
            key_msg=resolve_field_key(self.field_map, FIELD_KEY_MSG),
        )
        logger.debug(
            "built JSON formatter (time=%r level=%r msg=%r)",
            formatter.key_time,
            formatter.key_level,
            formatter.key_msg,
        )
        return formatter


@dataclass(frozen=True)
class JSONFormatter:
    """Renders each entry as one JSON object followed by a newline.

    Build instances with JSONFormatterOptions.build().

    Attributes:
        timestamp_format: Resolved strftime layout.
        key_time: Output name of the time field, or None when disabled.
        key_level: Output name of the level field.
        key_msg: Output name of the message field.
    """

    timestamp_format: str
    key_time: str | None
    key_level: str
    key_msg: str

    @property
    def reserved_keys(self) -> tuple[str, ...]:
        """Attribute names moved aside before the reserved fields are written.

        The literal time/level/msg names are always included, plus any
        renamed output names, whether or not the time field is emitted.
        """
        renamed = (self.key_time, self.key_level, self.key_msg)
        return tuple(
            dict.fromkeys(
                [*RESERVED_FIELD_KEYS, *(key for key in renamed if key is not None)]
            )
        )

    def format(self, entry: LogEntry) -> bytes:
        """Encode an entry as a JSON line.

        Args:
            entry: The log entry to encode.

        Returns:
            UTF-8 JSON object terminated by a newline.

        Raises:
            SerializationError: If an attribute value cannot be encoded.
        """
        data: dict[str, Any] = {}
        for key, value in entry.attributes.items():
            # exceptions have no JSON form, keep their message
            if isinstance(value, BaseException):
                data[key] = str(value)
            else:
                data[key] = value
        prefix_field_clashes(data, self.reserved_keys)

        if self.key_time is not None:
            data[self.key_time] = format_timestamp(
                entry.timestamp, self.timestamp_format
            )
        data[self.key_msg] = entry.message
        data[self.key_level] = str(entry.level)

        try:
            serialized = json.dumps(
                data,
                sort_keys=True,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            ).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(exc) from exc
        return serialized + b"\n"
