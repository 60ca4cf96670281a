"""Errors raised by the Genius client.

Nothing here is retried or logged by the library; callers own presentation.
"""

from __future__ import annotations


class GeniusError(RuntimeError):
    """Base class for every error raised by this package."""


class TransportError(GeniusError):
    """Raised when the HTTP status of a response is not 200.

    The message is the raw response body, verbatim, whatever its shape.
    """

    def __init__(self, status_code: int, body: str, path: str | None = None) -> None:
        super().__init__(body)
        self.status_code = status_code
        self.body = body
        self.path = path


class ApplicationError(GeniusError):
    """Raised when ``meta.status`` in a 200 response is not 200."""

    def __init__(self, status: int, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.path = path


class TextFormatError(GeniusError, TypeError):
    """Raised when a structured text value cannot be flattened to a string."""

    def __init__(self, key: str, value: object) -> None:
        super().__init__(f"text value for {key!r} is {type(value).__name__}, expected str")
        self.key = key
        self.value = value
