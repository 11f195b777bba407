"""Core domain models for log rendering."""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Level(IntEnum):
    """Ordered log severity, highest severity last."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4
    PANIC = 5

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, text: str) -> "Level":
        """Parse a level name such as "info" or "WARN".

        Args:
            text: Level name, case-insensitive.

        Returns:
            The matching Level.

        Raises:
            ValueError: If the name is not a known level.
        """
        name = text.strip().lower()
        alias = _LEVEL_ALIASES.get(name)
        if alias is not None:
            return alias
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"not a valid log level: {text!r}") from None

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """Map a stdlib logging level number onto a Level."""
        if levelno > logging.CRITICAL:
            return cls.PANIC
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


_LEVEL_ALIASES = {
    "warn": Level.WARNING,
    "critical": Level.FATAL,
}


@dataclass(frozen=True)
class LogEntry:
    """A structured log event.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Severity of the event.
        message: The log message, may be empty.
        attributes: Additional structured fields.
        buffer: Optional caller-owned scratch buffer reused by text rendering.
    """

    timestamp: float
    level: Level
    message: str
    attributes: dict[str, Any] = field(default_factory=dict)
    buffer: bytearray | None = field(default=None, compare=False, repr=False)
