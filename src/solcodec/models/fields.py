"""Field type helpers and utilities.

This module provides convenience functions for declaring fixed-width record
fields. Each helper returns a Pydantic ``FieldInfo`` carrying both the
validation constraints and the wire metadata (kind and width) that the codec
reads back during schema introspection.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..exceptions import BytesOverflowError, SchemaError, ValueRangeError

UINT_WIDTHS = (1, 2, 4, 8)

# Keys stored in json_schema_extra
KIND_KEY = "solcodec_kind"
WIDTH_KEY = "solcodec_width"

KIND_FIXED_BYTES = "fixed_bytes"
KIND_UNSIGNED_INT = "unsigned_int"


def FixedBytes(*, length: int, **kwargs: Any) -> FieldInfo:
    """Create a fixed-size byte array field.

    The field accepts any ``bytes`` value up to ``length`` bytes. Shorter
    values are zero-padded on the right when encoded; decoding always yields
    exactly ``length`` bytes. Longer values raise ``BytesOverflowError`` on
    construction, assignment and encode.

    Args:
        length: Field width in bytes (> 0)
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Raises:
        SchemaError: If length is not positive

    Example:
        >>> class Favorites(BaseAccount):
        ...     color: bytes = FixedBytes(length=50)
    """
    if not isinstance(length, int) or length <= 0:
        raise SchemaError(f"FixedBytes length must be a positive integer, got {length!r}")

    return cast(
        FieldInfo,
        Field(
            json_schema_extra={KIND_KEY: KIND_FIXED_BYTES, WIDTH_KEY: length},
            **kwargs,
        ),
    )


def UInt(*, width: int, **kwargs: Any) -> FieldInfo:
    """Create an unsigned little-endian integer field.

    Args:
        width: Width in bytes (1, 2, 4 or 8)
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo for values in ``[0, 2**(8*width) - 1]``. Values
        outside that range raise ``ValueRangeError``.

    Raises:
        SchemaError: If width is not supported

    Example:
        >>> class AddressInfo(BaseAccount):
        ...     house_number: int = UInt(width=1)
    """
    if width not in UINT_WIDTHS:
        raise SchemaError(f"UInt width must be one of {UINT_WIDTHS}, got {width!r}")

    return cast(
        FieldInfo,
        Field(
            json_schema_extra={KIND_KEY: KIND_UNSIGNED_INT, WIDTH_KEY: width},
            **kwargs,
        ),
    )


def U8(**kwargs: Any) -> FieldInfo:
    """Unsigned 8-bit integer field."""
    return UInt(width=1, **kwargs)


def U16(**kwargs: Any) -> FieldInfo:
    """Unsigned 16-bit integer field."""
    return UInt(width=2, **kwargs)


def U32(**kwargs: Any) -> FieldInfo:
    """Unsigned 32-bit integer field."""
    return UInt(width=4, **kwargs)


def U64(**kwargs: Any) -> FieldInfo:
    """Unsigned 64-bit integer field."""
    return UInt(width=8, **kwargs)


def uint_max(width: int) -> int:
    """Largest value of an unsigned integer ``width`` bytes wide."""
    return (1 << (8 * width)) - 1


def check_fixed_bytes(name: str, value: bytes, width: int) -> None:
    """Raise BytesOverflowError if value does not fit a ``width``-byte field."""
    if len(value) > width:
        raise BytesOverflowError(f"Field {name}: {len(value)} bytes exceed the {width}-byte field")


def check_uint(name: str, value: int, width: int) -> None:
    """Raise ValueRangeError if value does not fit a ``width``-byte unsigned integer."""
    max_value = uint_max(width)
    if value < 0 or value > max_value:
        raise ValueRangeError(
            f"Field {name}: value {value} out of range "
            f"[0, {max_value}] for a {width}-byte unsigned integer"
        )
