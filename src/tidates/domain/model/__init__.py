"""Public domain model surface."""

from __future__ import annotations

from tidates.domain.model.date import MAX_YEAR, MIN_YEAR, TimeIndependentDate
from tidates.domain.model.enums import EncodingOrder, Month
from tidates.domain.model.errors import (
    ClockError,
    ParseError,
    TimeIndependentDateError,
    ValidationError,
)

__all__ = [  # noqa: RUF022
    # value
    "TimeIndependentDate",
    "MAX_YEAR",
    "MIN_YEAR",
    # enums
    "EncodingOrder",
    "Month",
    # errors
    "ClockError",
    "ParseError",
    "TimeIndependentDateError",
    "ValidationError",
]
