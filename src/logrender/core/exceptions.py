"""Exceptions raised by log formatters."""


class LogRenderError(Exception):
    """Base class for logrender errors."""


class SerializationError(LogRenderError):
    """An event could not be encoded by the JSON formatter.

    Attributes:
        cause: The exception raised by the encoder.
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"failed to marshal fields to JSON: {cause}")
        self.cause = cause
