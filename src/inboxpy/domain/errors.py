"""Error taxonomy for message mutations.

``ValidationError`` and ``ResolutionError`` are raised before any request is
dispatched and fail the whole call. ``TransportError`` is scoped to a single
request; the batch executor turns it into a ``Failure`` outcome.
"""

from __future__ import annotations


class InboxpyError(Exception):
    """Base class for inboxpy domain errors."""


class ValidationError(InboxpyError, ValueError):
    """Raised when call arguments are malformed."""


class ResolutionError(InboxpyError, LookupError):
    """Raised when a category name cannot be resolved to an identifier."""

    def __init__(self, message: str, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class TransportError(InboxpyError):
    """Raised by a transport when a single mutation request fails."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
