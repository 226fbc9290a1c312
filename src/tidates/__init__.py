from __future__ import annotations

from importlib import metadata

from tidates.domain.model import (
    ClockError,
    EncodingOrder,
    Month,
    ParseError,
    TimeIndependentDate,
    TimeIndependentDateError,
    ValidationError,
)

try:
    __version__ = metadata.version("tidates")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "ClockError",
    "EncodingOrder",
    "Month",
    "ParseError",
    "TimeIndependentDate",
    "TimeIndependentDateError",
    "ValidationError",
    "__version__",
]
