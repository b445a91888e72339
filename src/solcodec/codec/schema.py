"""Schema introspection for fixed-layout records.

This module turns Pydantic record models into packed layouts: an ordered list
of field descriptors, each either an unsigned little-endian integer or a
fixed-size byte array, with statically known offsets and total size.
"""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass
from typing import Any, Sequence

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from ..models.fields import (
    KIND_FIXED_BYTES,
    KIND_KEY,
    KIND_UNSIGNED_INT,
    UINT_WIDTHS,
    WIDTH_KEY,
)


class FieldKind(enum.Enum):
    """Wire shape of a field."""

    FIXED_BYTES = KIND_FIXED_BYTES
    UNSIGNED_INT = KIND_UNSIGNED_INT


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single field.

    Attributes:
        name: Field name
        kind: Wire shape (fixed bytes or unsigned integer)
        width: Width in bytes
    """

    name: str
    kind: FieldKind
    width: int

    def __post_init__(self) -> None:
        if not isinstance(self.width, int) or self.width <= 0:
            raise SchemaError(f"Field {self.name}: width must be > 0, got {self.width!r}")
        if self.kind is FieldKind.UNSIGNED_INT and self.width not in UINT_WIDTHS:
            raise SchemaError(
                f"Field {self.name}: unsigned integer width must be one of {UINT_WIDTHS}, "
                f"got {self.width}"
            )

    @classmethod
    def fixed_bytes(cls, name: str, width: int) -> FieldSchema:
        return cls(name, FieldKind.FIXED_BYTES, width)

    @classmethod
    def uint(cls, name: str, width: int) -> FieldSchema:
        return cls(name, FieldKind.UNSIGNED_INT, width)


class StructLayout:
    """Packed layout of an entire record.

    The layout is immutable once built. Field order is encode/decode order and
    there is no padding between fields.

    Example:
        >>> layout = StructLayout.from_model(Favorites)
        >>> layout.size()
        309
        >>> layout.offsets()["bump"]
        308
    """

    def __init__(self, fields: Sequence[FieldSchema], name: str = "struct") -> None:
        """Initialize a layout from field descriptors.

        Args:
            fields: Ordered field descriptors
            name: Display name used in error messages

        Raises:
            SchemaError: If two fields share a name
        """
        seen: set[str] = set()
        for field_schema in fields:
            if field_schema.name in seen:
                raise SchemaError(f"{name}: duplicate field name {field_schema.name!r}")
            seen.add(field_schema.name)

        self.name = name
        self.fields: tuple[FieldSchema, ...] = tuple(fields)

        offsets: dict[str, int] = {}
        offset = 0
        for field_schema in self.fields:
            offsets[field_schema.name] = offset
            offset += field_schema.width
        self._offsets = offsets
        self._size = offset

    @classmethod
    def from_model(cls, model_class: type[BaseModel]) -> StructLayout:
        """Return the (cached) layout of a Pydantic record class.

        Args:
            model_class: Record class to introspect

        Raises:
            SchemaError: If a field is not declared with a solcodec field helper
        """
        return _layout_for_model(model_class)

    def size(self) -> int:
        """Total width in bytes."""
        return self._size

    def offsets(self) -> dict[str, int]:
        """Byte offset of each field."""
        return dict(self._offsets)

    def names(self) -> list[str]:
        return [field_schema.name for field_schema in self.fields]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructLayout):
            return NotImplemented
        return self.fields == other.fields

    def __hash__(self) -> int:
        return hash(self.fields)

    def __repr__(self) -> str:
        return f"StructLayout({self.name!r}, size={self._size}, fields={list(self.names())})"


@functools.lru_cache(maxsize=None)
def _layout_for_model(model_class: type[BaseModel]) -> StructLayout:
    fields = [
        _extract_field_schema(name, field_info)
        for name, field_info in model_class.model_fields.items()
    ]
    return StructLayout(fields, name=model_class.__name__)


def _extract_field_schema(name: str, field_info: FieldInfo) -> FieldSchema:
    """Extract the wire descriptor from a Pydantic FieldInfo.

    Args:
        name: Field name
        field_info: Pydantic FieldInfo object

    Returns:
        FieldSchema with kind and width

    Raises:
        SchemaError: If the field lacks solcodec metadata or has the wrong type
    """
    annotation = field_info.annotation
    if annotation is None:
        raise SchemaError(f"Field {name} has no type annotation")

    extra: Any = field_info.json_schema_extra
    if not isinstance(extra, dict) or KIND_KEY not in extra:
        raise SchemaError(
            f"Field {name}: declare fields with FixedBytes() or UInt()/U8()/U16()/U32()/U64()"
        )

    kind = FieldKind(extra[KIND_KEY])
    width = extra[WIDTH_KEY]

    expected = bytes if kind is FieldKind.FIXED_BYTES else int
    if annotation is not expected:
        raise SchemaError(
            f"Field {name}: {kind.value} fields must be annotated as {expected.__name__}, "
            f"got {annotation}"
        )

    return FieldSchema(name=name, kind=kind, width=width)
