"""Adapters connecting logrender formatters to other logging systems."""

from logrender.adapters.logging import LogRenderHandler, record_to_entry

__all__ = [
    "LogRenderHandler",
    "record_to_entry",
]
