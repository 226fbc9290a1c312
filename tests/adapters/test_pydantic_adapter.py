from __future__ import annotations

import pydantic
import pytest
from pydantic import BaseModel

from tidates.adapters.pydantic import PydanticTimeIndependentDate
from tidates.domain.model import Month, TimeIndependentDate


class ReleasePayload(BaseModel):
    title: str
    released: PydanticTimeIndependentDate
    reissued: PydanticTimeIndependentDate | None = None


def test_validates_from_a_single_string() -> None:
    payload = ReleasePayload.model_validate({"title": "OK Computer", "released": "1997/05/21"})

    assert payload.released == TimeIndependentDate(year=1997, month=Month.MAY, day=21)
    assert payload.reissued is None


def test_validates_from_json() -> None:
    payload = ReleasePayload.model_validate_json(
        '{"title": "Kid A", "released": "2000-10-02", "reissued": "2021-11-05"}'
    )

    assert payload.released == TimeIndependentDate(year=2000, month=Month.OCTOBER, day=2)
    assert payload.reissued == TimeIndependentDate(year=2021, month=Month.NOVEMBER, day=5)


def test_accepts_existing_values() -> None:
    value = TimeIndependentDate(year=2007, month=Month.OCTOBER, day=10)

    payload = ReleasePayload(title="In Rainbows", released=value)

    assert payload.released is value


def test_serializes_to_the_canonical_string() -> None:
    payload = ReleasePayload.model_validate({"title": "Amnesiac", "released": "2001_6_5"})

    assert payload.model_dump() == {
        "title": "Amnesiac",
        "released": "2001-06-05",
        "reissued": None,
    }
    assert payload.model_dump_json() == (
        '{"title":"Amnesiac","released":"2001-06-05","reissued":null}'
    )


@pytest.mark.parametrize(
    "raw",
    [
        {"year": 2001, "month": 6, "day": 5},
        20010605,
        ["2001", "06", "05"],
        "2001-06",
    ],
)
def test_rejects_other_shapes(raw: object) -> None:
    with pytest.raises(pydantic.ValidationError):
        ReleasePayload.model_validate({"title": "Amnesiac", "released": raw})


def test_surfaces_day_validation_message() -> None:
    with pytest.raises(pydantic.ValidationError, match="Day out of bounds"):
        ReleasePayload.model_validate({"title": "Hail to the Thief", "released": "2003-02-29"})


def test_json_schema_describes_a_date_string() -> None:
    schema = ReleasePayload.model_json_schema()["properties"]["released"]

    assert schema["type"] == "string"
    assert schema["format"] == "date"
