"""Fixed-layout binary encoder for Pydantic records.

This module provides the encode() function that converts a record instance to
its packed on-chain byte representation.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel

from ..exceptions import EncodeError
from ..models.base import BaseInstruction
from ..models.fields import check_fixed_bytes, check_uint
from .bytebuf import ByteWriter
from .schema import FieldKind, FieldSchema, StructLayout


def encode(record: BaseModel) -> bytes:
    """Encode a record to its fixed-size binary form.

    Fields are written in declaration order with no padding between them.
    Instruction records always carry their class discriminator, whatever the
    ``discriminator`` attribute holds.

    Args:
        record: Record instance to encode

    Returns:
        Exactly ``StructLayout.from_model(type(record)).size()`` bytes

    Raises:
        SchemaError: If the record schema is invalid
        ValueRangeError: If an integer does not fit its width
        BytesOverflowError: If a byte array is longer than its width
        EncodeError: If a field has the wrong type or is missing

    Example:
        >>> counter = Counter(count=bytes(8))
        >>> encode(counter)
        b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x00'
    """
    record_class = type(record)
    layout = StructLayout.from_model(record_class)

    values = {name: getattr(record, name, None) for name in layout.names()}

    if isinstance(record, BaseInstruction) and record_class.solcodec_discriminator is not None:
        values["discriminator"] = record_class.solcodec_discriminator

    return encode_values(layout, values)


def encode_values(layout: StructLayout, values: Mapping[str, Any]) -> bytes:
    """Encode a mapping of field values with a bare layout.

    Args:
        layout: Layout to encode with
        values: Field name to value; every layout field must be present

    Returns:
        Exactly ``layout.size()`` bytes

    Raises:
        ValueRangeError, BytesOverflowError, EncodeError: As for encode()
    """
    writer = ByteWriter()

    for field_schema in layout.fields:
        _encode_field(writer, field_schema, values.get(field_schema.name))

    return writer.to_bytes()


def _encode_field(writer: ByteWriter, field_schema: FieldSchema, value: Any) -> None:
    """Encode a single field value.

    Args:
        writer: ByteWriter to append to
        field_schema: Schema information for the field
        value: Field value to encode

    Raises:
        EncodeError: If value is invalid
    """
    if value is None:
        raise EncodeError(f"Field {field_schema.name} is required but got None")

    if field_schema.kind is FieldKind.UNSIGNED_INT:
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodeError(
                f"Field {field_schema.name}: expected int, got {type(value).__name__}"
            )

        check_uint(field_schema.name, value, field_schema.width)
        writer.write_uint(value, field_schema.width)
        return

    if field_schema.kind is FieldKind.FIXED_BYTES:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise EncodeError(
                f"Field {field_schema.name}: expected bytes, got {type(value).__name__}"
            )

        data = bytes(value)
        check_fixed_bytes(field_schema.name, data, field_schema.width)
        writer.write_bytes(data, field_schema.width)
        return

    raise EncodeError(f"Field {field_schema.name}: unsupported kind {field_schema.kind}")
