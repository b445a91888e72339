"""Utility functions for solcodec.

This module provides size calculation and fixed-width text helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, field_offsets, field_sizes
from .text import pad_str, unpad_str

__all__ = [
    # Sizing functions
    "encoded_size",
    "field_offsets",
    "field_sizes",
    # Text helpers
    "pad_str",
    "unpad_str",
]
