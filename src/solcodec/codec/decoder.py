"""Fixed-layout binary decoder for Pydantic records.

This module provides the decode() function that converts packed on-chain bytes
back to a record instance.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError, LengthError
from .bytebuf import ByteReader
from .schema import FieldKind, FieldSchema, StructLayout

T = TypeVar("T", bound=BaseModel)


def decode(record_class: type[T], data: bytes) -> T:
    """Decode binary data to a record.

    Any byte pattern of sufficient length is a valid record; only the length
    is checked. Bytes beyond the layout size are ignored. Byte-array fields
    come back verbatim, padding included.

    Args:
        record_class: Record class to decode to
        data: Binary data, at least ``size()`` bytes long

    Returns:
        Decoded record instance

    Raises:
        SchemaError: If the record schema is invalid
        LengthError: If data is shorter than the layout

    Example:
        >>> counter = decode(Counter, bytes(8))
        >>> counter.count
        b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x00'
    """
    layout = StructLayout.from_model(record_class)
    values = decode_values(layout, data)

    try:
        return record_class.model_validate(values)
    except ValidationError as e:
        raise DecodeError(f"Failed to construct {record_class.__name__}: {e}") from e


def decode_values(layout: StructLayout, data: bytes) -> dict[str, Any]:
    """Decode binary data with a bare layout.

    Args:
        layout: Layout to decode with
        data: Binary data, at least ``layout.size()`` bytes long

    Returns:
        Field name to decoded value, in layout order

    Raises:
        LengthError: If data is shorter than the layout
    """
    if len(data) < layout.size():
        raise LengthError(
            f"{layout.name}: expected at least {layout.size()} bytes, got {len(data)}"
        )

    reader = ByteReader(data)
    values: dict[str, Any] = {}
    for field_schema in layout.fields:
        try:
            values[field_schema.name] = _decode_field(reader, field_schema)
        except IndexError as e:
            raise LengthError(
                f"Truncated data while decoding field {field_schema.name}: {e}"
            ) from e

    return values


def _decode_field(reader: ByteReader, field_schema: FieldSchema) -> Any:
    """Decode a single field value.

    Raises:
        IndexError: If data is truncated
    """
    if field_schema.kind is FieldKind.UNSIGNED_INT:
        return reader.read_uint(field_schema.width)

    return reader.read_bytes(field_schema.width)
