"""Exceptions raised by the date value type."""

from __future__ import annotations


class TimeIndependentDateError(ValueError):
    """Base class for recoverable date construction and parsing failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TimeIndependentDateError):
    """Raised when a year or day falls outside its permitted range."""


class ParseError(TimeIndependentDateError):
    """Raised when text does not have the shape of a date in the requested order."""


class ClockError(RuntimeError):
    """Raised when the host clock reports a date that cannot exist.

    This signals a broken clock source rather than bad caller input, so it does
    not derive from ``TimeIndependentDateError``.
    """
