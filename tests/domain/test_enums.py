from __future__ import annotations

import pytest

from tidates.domain.model import EncodingOrder, Month


def test_months_iterate_in_calendar_order() -> None:
    months = list(Month)

    assert len(months) == 12
    assert [month.value for month in months] == list(range(1, 13))
    assert months[0] is Month.JANUARY
    assert months[-1] is Month.DECEMBER


def test_month_display_names() -> None:
    assert Month.JANUARY.display_name == "January"
    assert Month.SEPTEMBER.display_name == "September"
    assert [month.display_name for month in Month][4] == "May"


@pytest.mark.parametrize(
    "month",
    [Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER],
)
def test_thirty_day_months(month: Month) -> None:
    assert month.max_days(2023) == 30
    assert month.max_days(2024) == 30


@pytest.mark.parametrize(
    "month",
    [
        Month.JANUARY,
        Month.MARCH,
        Month.MAY,
        Month.JULY,
        Month.AUGUST,
        Month.OCTOBER,
        Month.DECEMBER,
    ],
)
def test_thirty_one_day_months(month: Month) -> None:
    assert month.max_days(2023) == 31


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        (2023, 28),
        (2024, 29),
        (2000, 29),
        # every fourth year is a leap year, century years included
        (1900, 29),
        (2100, 29),
        (1001, 28),
    ],
)
def test_february_follows_four_year_rule(year: int, expected: int) -> None:
    assert Month.FEBRUARY.max_days(year) == expected


def test_month_lookup_rejects_out_of_range_ordinals() -> None:
    with pytest.raises(ValueError):
        Month(0)
    with pytest.raises(ValueError):
        Month(13)


def test_months_compare_by_ordinal() -> None:
    assert Month.JANUARY < Month.FEBRUARY
    assert Month.DECEMBER > Month.NOVEMBER
    assert max(Month) is Month.DECEMBER


def test_encoding_order_masks_and_positions() -> None:
    year_first = EncodingOrder.YEAR_FIRST
    day_first = EncodingOrder.DAY_FIRST

    assert year_first.format_mask == "YYYY-MM-DD"
    assert (year_first.year_index, year_first.month_index, year_first.day_index) == (0, 1, 2)
    assert day_first.format_mask == "DD-MM-YYYY"
    assert (day_first.year_index, day_first.month_index, day_first.day_index) == (2, 1, 0)


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("yearFirst", EncodingOrder.YEAR_FIRST),
        ("year-first", EncodingOrder.YEAR_FIRST),
        ("YEAR_FIRST", EncodingOrder.YEAR_FIRST),
        (" dayfirst ", EncodingOrder.DAY_FIRST),
        ("day_first", EncodingOrder.DAY_FIRST),
    ],
)
def test_encoding_order_from_label(label: str, expected: EncodingOrder) -> None:
    assert EncodingOrder.from_label(label) is expected


def test_encoding_order_from_label_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown encoding order"):
        EncodingOrder.from_label("monthFirst")
