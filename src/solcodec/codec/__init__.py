"""Fixed-layout binary codec for solcodec.

This module provides encoding and decoding of packed, little-endian records.
"""

from __future__ import annotations

from .decoder import decode, decode_values
from .encoder import encode, encode_values
from .schema import FieldKind, FieldSchema, StructLayout

__all__ = [
    "encode",
    "encode_values",
    "decode",
    "decode_values",
    "FieldKind",
    "FieldSchema",
    "StructLayout",
]
