"""Reserved output field names and clash resolution."""

from collections.abc import Iterable, MutableMapping
from typing import Any

FIELD_KEY_MSG = "msg"
FIELD_KEY_LEVEL = "level"
FIELD_KEY_TIME = "time"

RESERVED_FIELD_KEYS = (FIELD_KEY_TIME, FIELD_KEY_MSG, FIELD_KEY_LEVEL)

CLASH_PREFIX = "fields."

# Maps a reserved field key to the name written in the output.
FieldMap = dict[str, str]


def resolve_field_key(field_map: FieldMap | None, key: str) -> str:
    """Return the output name for a reserved field key."""
    if field_map and key in field_map:
        return field_map[key]
    return key


def prefix_field_clashes(
    data: MutableMapping[str, Any],
    reserved: Iterable[str] = RESERVED_FIELD_KEYS,
) -> None:
    """Move attributes named like a reserved field to ``fields.<name>``.

    The mapping is modified in place. An attribute already named
    ``fields.<name>`` is overwritten by the moved value.

    Args:
        data: Attribute mapping to rewrite.
        reserved: Output names the formatter writes itself.
    """
    for key in reserved:
        if key in data:
            data[CLASH_PREFIX + key] = data.pop(key)
