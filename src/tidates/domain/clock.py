"""Clock seam used to seed the current-date factory."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

type DateParts = tuple[int, int, int]


class Clock(Protocol):
    def __call__(self) -> DateParts: ...


def local_today() -> DateParts:
    """Return today's ``(year, month, day)`` in the host's local calendar."""

    now = datetime.now()  # noqa: DTZ005
    return now.year, now.month, now.day


def fixed_clock(year: int, month: int, day: int) -> Clock:
    def _clock() -> DateParts:
        return year, month, day

    return _clock


__all__ = ["Clock", "DateParts", "fixed_clock", "local_today"]
