"""Exception hierarchy for duration conversion."""

from typing import Any


class DurationError(Exception):
    """Base exception for values that cannot become a `Duration`."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class NegativeDurationError(DurationError, ValueError):
    """Raised when a conversion or subtraction would produce a negative span."""


class DurationOverflowError(DurationError, OverflowError):
    """Raised when a span exceeds `Duration.MAX`."""
