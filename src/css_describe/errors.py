"""Error hierarchy for selector description."""
from __future__ import annotations


class DescribeError(Exception):
    """Base error for all css_describe errors."""


class InvalidFragmentError(DescribeError, ValueError):
    """A grammar event was given a missing or empty text fragment."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} must be a non-empty string")


class EventScriptError(DescribeError):
    """Raised when an event script cannot be loaded."""

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"event {index}: {message}"
        super().__init__(message)
