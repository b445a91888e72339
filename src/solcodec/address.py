"""Base58 account addresses."""

from __future__ import annotations

import base58

ADDRESS_LENGTH = 32

SYSTEM_PROGRAM_ADDRESS = "11111111111111111111111111111111"


def is_address(value: object) -> bool:
    """Return True if value is a base58 string decoding to 32 bytes."""
    if not isinstance(value, str) or not 32 <= len(value) <= 44:
        return False
    try:
        return len(base58.b58decode(value)) == ADDRESS_LENGTH
    except ValueError:
        return False


def address(value: str) -> str:
    """Validate and return an address.

    Raises:
        ValueError: If value is not a 32-byte base58 address
    """
    if not is_address(value):
        raise ValueError(f"Not a valid base58 address: {value!r}")
    return value


def address_from_bytes(data: bytes) -> str:
    """Encode 32 raw bytes as an address."""
    if len(data) != ADDRESS_LENGTH:
        raise ValueError(f"Address must be {ADDRESS_LENGTH} bytes, got {len(data)}")
    return base58.b58encode(bytes(data)).decode("ascii")
