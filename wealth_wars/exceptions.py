"""
Custom exception hierarchy for the Wealth Wars engine.

Provides typed errors that can be handled consistently across
the engine, the prompt helpers and the CLI.
"""

from typing import Optional


class WealthWarsError(Exception):
    """Base exception for all game-related errors."""


class InvalidSetupError(WealthWarsError):
    """Game cannot be constructed from the given players or board."""


class OwnershipError(WealthWarsError):
    """Property ownership change would break owner/holdings consistency."""


class ValidationError(WealthWarsError):
    """Input validation failed."""


class InputParseError(ValidationError):
    """Text could not be parsed where a number was expected."""


class InputRangeError(ValidationError):
    """Number is outside the allowed range."""

    def __init__(self, value: int, low: int, high: Optional[int] = None):
        self.value = value
        self.low = low
        self.high = high
        if high is None:
            message = f"Please enter a number of at least {low}."
        else:
            message = f"Please enter a number between {low} and {high}."
        super().__init__(message)
