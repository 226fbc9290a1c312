"""Pydantic field type that carries a date as a single ``YYYY-MM-DD`` string."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from pydantic_core import core_schema

from tidates.domain.model import EncodingOrder, TimeIndependentDate

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue


def _decode(value: str) -> TimeIndependentDate:
    return TimeIndependentDate.parse(value, EncodingOrder.YEAR_FIRST)


def _encode(value: TimeIndependentDate) -> str:
    return value.format(EncodingOrder.YEAR_FIRST)


class _TimeIndependentDateAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        _ = (source_type, handler)
        from_string = core_schema.chain_schema(
            [
                core_schema.str_schema(strict=True),
                core_schema.no_info_plain_validator_function(_decode),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_string,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(TimeIndependentDate), from_string]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(_encode),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        _ = schema
        json_schema = handler(core_schema.str_schema())
        json_schema.update(format="date")
        return json_schema


PydanticTimeIndependentDate = Annotated[TimeIndependentDate, _TimeIndependentDateAnnotation]


__all__ = ["PydanticTimeIndependentDate"]
