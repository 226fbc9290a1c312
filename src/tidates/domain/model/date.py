"""The time-independent date value object."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Final, Self

from tidates.domain.clock import local_today
from tidates.domain.model.enums import EncodingOrder, Month
from tidates.domain.model.errors import ClockError, ParseError, ValidationError

if TYPE_CHECKING:
    from tidates.domain.clock import Clock

log = logging.getLogger(__name__)

MIN_YEAR: Final[int] = 1000
MAX_YEAR: Final[int] = 9999

_ALLOWED_CHARACTERS: Final[frozenset[str]] = frozenset("0123456789-")
_SEPARATOR: Final[str] = "-"
_EXPECTED_COMPONENTS: Final[int] = 3
_MONTHS_PER_YEAR: Final[Decimal] = Decimal(12)
_DAYS_PER_YEAR: Final[Decimal] = Decimal(365)
_INTERVAL_QUANTUM: Final[Decimal] = Decimal("0.001")


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True, order=True)
class TimeIndependentDate:
    """A calendar day with no time of day and no time zone.

    Use it for coarse dates handed over by third parties. Such a value stands for
    roughly 48 hours of real time, so it should never be used where exact elapsed
    time matters. Instances order by ``(year, month, day)``.
    """

    year: int
    month: Month
    day: int

    def __post_init__(self) -> None:
        if not _is_integer(self.year):
            raise ValidationError(f"Year must be an integer, got {self.year!r}")
        if not _is_integer(self.day):
            raise ValidationError(f"Day must be an integer, got {self.day!r}")
        if not isinstance(self.month, Month):
            if not _is_integer(self.month):
                raise ValidationError(f"Month must be a Month, got {self.month!r}")
            try:
                object.__setattr__(self, "month", Month(self.month))
            except ValueError as exc:
                raise ValidationError(
                    f"Month out of bounds. Min value 1, max value 12, got {self.month}"
                ) from exc

        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise ValidationError(
                f"Year out of bounds. Min value {MIN_YEAR}, max value {MAX_YEAR}, "
                f"got {self.year}"
            )

        max_day = self.month.max_days(self.year)
        if not 1 <= self.day <= max_day:
            raise ValidationError(
                f"Day out of bounds. Min value 1, max value {max_day} for "
                f"{self.month.display_name} {self.year}, got {self.day}"
            )

    def __str__(self) -> str:
        return self.format(EncodingOrder.YEAR_FIRST)

    @classmethod
    def parse(cls, text: str, order: EncodingOrder = EncodingOrder.YEAR_FIRST) -> Self:
        """Build a date from ``text`` laid out according to ``order``.

        ``-``, ``_`` and ``/`` are all accepted as separators and may be mixed.
        Raises ``ParseError`` when the text is not shaped like a date and lets the
        constructor's ``ValidationError`` through when it is shaped like one but
        names a day that does not exist.
        """

        mask = order.format_mask
        if not isinstance(text, str):
            raise ParseError(
                f"Unable to parse a time-independent date in format {mask}. "
                f"Expected a string, received {type(text).__name__}"
            )

        normalized = text.replace("_", _SEPARATOR).replace("/", _SEPARATOR)
        if any(character not in _ALLOWED_CHARACTERS for character in normalized):
            raise ParseError(
                f"Unable to parse a time-independent date in format {mask}. "
                'Unexpected character encountered. Allowed characters: "0123456789-_/"'
            )

        components = [token for token in normalized.split(_SEPARATOR) if token]
        if len(components) != _EXPECTED_COMPONENTS:
            raise ParseError(
                f"Unable to parse a time-independent date in format {mask}. "
                f"Expected three integer groups, received {len(components)}"
            )

        year = _component_to_int(components[order.year_index], "YYYY", mask)
        raw_month = _component_to_int(
            _drop_leading_zero(components[order.month_index]), "MM", mask
        )
        try:
            month = Month(raw_month)
        except ValueError as exc:
            raise ParseError(
                f"Unable to parse a time-independent date in format {mask}. "
                "The MM component is not a valid month between 01 and 12"
            ) from exc
        day = _component_to_int(_drop_leading_zero(components[order.day_index]), "DD", mask)

        return cls(year=year, month=month, day=day)

    def format(self, order: EncodingOrder = EncodingOrder.YEAR_FIRST) -> str:
        """Return the zero-padded string form of this date in ``order``."""

        parts = ["", "", ""]
        parts[order.year_index] = f"{self.year:04d}"
        parts[order.month_index] = f"{self.month.value:02d}"
        parts[order.day_index] = f"{self.day:02d}"
        return _SEPARATOR.join(parts)

    def years_since(self, other: TimeIndependentDate) -> Decimal:
        """Approximate number of years elapsed since ``other``.

        Whole years plus month and day differences as fractions of 12 and 365,
        rounded half away from zero to three places. Expect an error of a day or
        two against the true elapsed time.
        """

        year_difference = Decimal(self.year - other.year)
        month_fraction = Decimal(self.month.value - other.month.value) / _MONTHS_PER_YEAR
        day_fraction = Decimal(self.day - other.day) / _DAYS_PER_YEAR
        difference = year_difference + month_fraction + day_fraction
        return difference.quantize(_INTERVAL_QUANTUM, rounding=ROUND_HALF_UP)

    def years_until(self, other: TimeIndependentDate) -> Decimal:
        """Approximate number of years from this date until ``other``."""

        return other.years_since(self)

    @classmethod
    def approximately_now(cls, clock: Clock = local_today) -> Self:
        """Return today's date as reported by ``clock``.

        The clock is trusted to produce a real date; anything else is a defect in
        the clock and raises ``ClockError`` instead of a recoverable error.
        """

        year, raw_month, day = clock()
        try:
            return cls(year=year, month=Month(raw_month), day=day)
        except ValueError as exc:
            log.critical("Clock produced an impossible date: %s-%s-%s", year, raw_month, day)
            raise ClockError(
                f"Unable to build a time-independent date from clock value "
                f"{year}-{raw_month}-{day}"
            ) from exc

    @classmethod
    def from_date(cls, value: date) -> Self:
        return cls(year=value.year, month=Month(value.month), day=value.day)

    def to_date(self) -> date:
        """Convert to ``datetime.date``.

        Raises ``ValueError`` for a February 29 that only exists under the
        simplified leap rule, such as 1900-02-29.
        """

        return date(self.year, self.month.value, self.day)


def _drop_leading_zero(token: str) -> str:
    return token[1:] if token.startswith("0") else token


def _component_to_int(token: str, label: str, mask: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise ParseError(
            f"Unable to parse a time-independent date in format {mask}. "
            f"Unable to translate the {label} component into an integer number"
        ) from exc


__all__ = ["MAX_YEAR", "MIN_YEAR", "TimeIndependentDate"]
