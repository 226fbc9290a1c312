"""SQLAlchemy column type persisting dates in their canonical string form."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String, TypeDecorator

from tidates.domain.model import EncodingOrder, TimeIndependentDate

if TYPE_CHECKING:
    from sqlalchemy import Dialect


class TimeIndependentDateType(TypeDecorator[TimeIndependentDate]):
    impl = String(10)
    cache_ok = True

    def process_bind_param(
        self, value: TimeIndependentDate | None, dialect: Dialect
    ) -> str | None:
        _ = dialect
        if value is None:
            return None
        if not isinstance(value, TimeIndependentDate):
            raise TypeError(f"Expected TimeIndependentDate, got {type(value).__name__}")
        return value.format(EncodingOrder.YEAR_FIRST)

    def process_result_value(
        self, value: str | None, dialect: Dialect
    ) -> TimeIndependentDate | None:
        _ = dialect
        if value is None:
            return None
        return TimeIndependentDate.parse(value, EncodingOrder.YEAR_FIRST)


__all__ = ["TimeIndependentDateType"]
