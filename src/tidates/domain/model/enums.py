"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Month(IntEnum):
    """Calendar months, valued by their 1-based ordinal."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    def max_days(self, year: int) -> int:
        """Return the last valid day of this month in ``year``.

        February uses a plain every-fourth-year rule: 1900 and 2100 count as leap
        years here even though the Gregorian calendar skips them.
        """

        match self:
            case Month.APRIL | Month.JUNE | Month.SEPTEMBER | Month.NOVEMBER:
                return 30
            case Month.FEBRUARY:
                return 29 if year % 4 == 0 else 28
            case _:
                return 31


class EncodingOrder(StrEnum):
    """Position of the year and day components in a date string."""

    YEAR_FIRST = "yearFirst"
    DAY_FIRST = "dayFirst"

    @property
    def format_mask(self) -> str:
        if self is EncodingOrder.DAY_FIRST:
            return "DD-MM-YYYY"
        return "YYYY-MM-DD"

    @property
    def year_index(self) -> int:
        return 2 if self is EncodingOrder.DAY_FIRST else 0

    @property
    def month_index(self) -> int:
        return 1

    @property
    def day_index(self) -> int:
        return 0 if self is EncodingOrder.DAY_FIRST else 2

    @classmethod
    def from_label(cls, label: str) -> EncodingOrder:
        """Resolve ``yearFirst``, ``year-first``, ``YEAR_FIRST`` and similar spellings."""

        key = label.strip().replace("-", "").replace("_", "").lower()
        for order in cls:
            if order.value.lower() == key:
                return order
        choices = ", ".join(order.value for order in cls)
        raise ValueError(f"Unknown encoding order {label!r} (expected one of: {choices})")
