"""Pydantic support for bounds."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from pydantic import PlainSerializer, PlainValidator
from pydantic_core import PydanticCustomError, core_schema

from ._bound import Bound, is_number
from ._errors import UnsupportedTypeError
from ._hook import parse_number
from ._parser import parse, to_bound

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core.core_schema import SerializationInfo


def _validate_bound(value: Any) -> Bound:
    """Validate a field value into a bound.

    Text must be a signed number. Plain numbers become bounds with `Sign.NONE`.
    """
    if isinstance(value, str):
        return parse(value)
    try:
        return to_bound(value)
    except UnsupportedTypeError as exc:
        raise PydanticCustomError(
            "bound_type",
            "Input should be a bound, a string or a number: {error}",
            {"error": str(exc)},
        ) from exc


def _validate_reading(value: Any) -> Bound | float:
    """Validate a field value into a bound or a plain float."""
    if isinstance(value, Bound):
        return value
    if isinstance(value, str):
        return parse_number(value)
    if is_number(value):
        return float(value)
    msg = f"Can't handle {type(value).__name__}!"
    raise PydanticCustomError(
        "reading_type",
        "Input should be a bound, a string or a number: {error}",
        {"error": msg},
    )


def _serialize_bound(value: Bound, info: SerializationInfo) -> Bound | str | float:
    """Dump a bound as its text in JSON, or as its value when it has no sign."""
    if not info.mode_is_json():
        return value
    if not value.sign.is_signed:
        return value.value
    return str(value)


def _serialize_reading(value: Bound | float, info: SerializationInfo) -> Bound | str | float:
    if isinstance(value, Bound):
        return _serialize_bound(value, info)
    return value


def bound_core_schema(source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:  # noqa: ARG001
    """Build the pydantic core schema used for fields annotated with `Bound`."""
    return core_schema.no_info_plain_validator_function(
        _validate_bound,
        serialization=core_schema.plain_serializer_function_ser_schema(_serialize_bound, info_arg=True),
    )


BoundOrFloat = Annotated[
    Bound | float,
    PlainValidator(_validate_reading),
    PlainSerializer(_serialize_reading, return_type=Any),
]
"""Field type for readings that are either a bound such as ``"<0.01"`` or a plain number."""
