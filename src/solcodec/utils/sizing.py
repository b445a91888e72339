"""Record size calculation utilities.

This module provides functions to calculate the encoded size and field
offsets of records without actually encoding them.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..codec.schema import StructLayout


def _record_class(record_or_class: BaseModel | type[BaseModel]) -> type[BaseModel]:
    if isinstance(record_or_class, BaseModel):
        return type(record_or_class)
    return record_or_class


def encoded_size(record_or_class: BaseModel | type[BaseModel]) -> int:
    """Calculate the encoded size of a record in bytes.

    The size depends only on the schema, never on field values, so it can be
    used to allocate an account before any data exists.

    Args:
        record_or_class: Record instance or class

    Returns:
        Size in bytes

    Raises:
        SchemaError: If the schema is invalid

    Example:
        >>> encoded_size(Favorites)
        309
    """
    return StructLayout.from_model(_record_class(record_or_class)).size()


def field_sizes(record_or_class: BaseModel | type[BaseModel]) -> dict[str, int]:
    """Get the width in bytes of each field.

    Example:
        >>> field_sizes(Counter)
        {'count': 8}
    """
    layout = StructLayout.from_model(_record_class(record_or_class))
    return {field.name: field.width for field in layout.fields}


def field_offsets(record_or_class: BaseModel | type[BaseModel]) -> dict[str, int]:
    """Get the byte offset of each field.

    Example:
        >>> field_offsets(AddressInfo)
        {'name': 0, 'house_number': 50, 'street': 51, 'city': 101}
    """
    return StructLayout.from_model(_record_class(record_or_class)).offsets()
