"""
Exception hierarchy for fourierkit.

Transform-size violations and singular spectral modes are reported as typed,
recoverable errors so callers decide whether a condition is reachable.
"""

from __future__ import annotations

from typing import Any


class FourierKitError(Exception):
    """Base exception for fourierkit operations."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidLengthError(FourierKitError, ValueError):
    """Raised when a transform length is zero or not a power of two."""

    def __init__(self, length: int, operation: str = "transform"):
        """
        Initialize invalid length error.

        Args:
            length: The rejected transform length
            operation: Name of the operation that rejected it
        """
        super().__init__(
            f"{operation} length must be a positive power of two, got {length}",
            details={"length": length, "operation": operation},
        )
        self.length = length
        self.operation = operation


class SingularModeError(FourierKitError, ArithmeticError):
    """Raised when a spectral multiplier is undefined for a non-zero mode."""

    def __init__(self, message: str, mode: tuple[int, ...], value: complex):
        super().__init__(message, details={"mode": mode, "value": value})
        self.mode = mode
        self.value = value
