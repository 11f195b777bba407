"""Terminal capability probe."""

import sys
from typing import IO, Any


def is_color_terminal(out: IO[Any] | None, platform: str | None = None) -> bool:
    """Return True if ``out`` is an interactive terminal on a non-Windows host."""
    if platform is None:
        platform = sys.platform
    if platform.startswith("win"):
        return False
    isatty = getattr(out, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed file
        return False
