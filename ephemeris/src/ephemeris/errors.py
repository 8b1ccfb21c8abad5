"""Chart computation errors."""

from __future__ import annotations


class ChartError(Exception):
    """Base class for errors surfaced to chart callers."""


class InputValidationError(ChartError, ValueError):
    """Malformed or out-of-range chart input."""


class ProviderError(ChartError):
    """The ephemeris provider could not produce a longitude for a body."""

    def __init__(self, body: str, message: str) -> None:
        super().__init__(f"Ephemeris lookup failed for {body}: {message}")
        self.body = body
        self.message = message


class ChartTimeoutError(ChartError):
    """The chart deadline passed before all bodies were computed."""
