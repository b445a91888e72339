"""Pydantic record modeling for solcodec.

This module provides the record base classes and field helpers for defining
fixed-layout account state and instruction data using Pydantic.
"""

from __future__ import annotations

from .base import BaseAccount, BaseInstruction, BaseRecord
from .fields import U8, U16, U32, U64, FixedBytes, UInt
from .roles import AccountRole

__all__ = [
    "AccountRole",
    "BaseAccount",
    "BaseInstruction",
    "BaseRecord",
    "FixedBytes",
    "UInt",
    "U8",
    "U16",
    "U32",
    "U64",
]
