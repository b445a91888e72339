"""Byte-level packing and unpacking utilities.

This module provides the low-level primitives for packed, byte-aligned
layouts. Integers are little-endian, matching the on-chain ``#[repr(C)]``
structs they describe.
"""

from __future__ import annotations

import struct

# Little-endian unsigned formats keyed by width in bytes
UINT_FORMATS: dict[int, str] = {1: "<B", 2: "<H", 4: "<I", 8: "<Q"}


class ByteWriter:
    """Appends fixed-width values to a byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_uint(7, width=1)
        >>> writer.write_bytes(b"red", width=50)
        >>> data = writer.to_bytes()
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_uint(self, value: int, width: int) -> None:
        """Write an unsigned integer in little-endian form.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            width: Width in bytes (1, 2, 4 or 8)

        Raises:
            ValueError: If width is unsupported or value doesn't fit in width bytes
        """
        fmt = UINT_FORMATS.get(width)
        if fmt is None:
            raise ValueError(f"width must be one of {sorted(UINT_FORMATS)}, got {width}")

        max_value = (1 << (8 * width)) - 1
        if value < 0 or value > max_value:
            raise ValueError(f"Value {value} does not fit in {width} bytes (range: 0 to {max_value})")

        self._buffer += struct.pack(fmt, value)

    def write_bytes(self, data: bytes, width: int | None = None) -> None:
        """Write raw bytes, zero-padding on the right up to ``width``.

        Args:
            data: Bytes to write
            width: Fixed field width; defaults to ``len(data)``

        Raises:
            ValueError: If data is longer than width
        """
        if width is None:
            width = len(data)
        if len(data) > width:
            raise ValueError(f"{len(data)} bytes do not fit in a {width}-byte field")

        self._buffer += data
        self._buffer += b"\x00" * (width - len(data))

    def byte_length(self) -> int:
        """Return the current number of bytes written."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Reads fixed-width values from a byte buffer.

    Example:
        >>> reader = ByteReader(data)
        >>> number = reader.read_bytes(8)
        >>> bump = reader.read_uint(1)
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Byte buffer to read
        """
        self._data = memoryview(bytes(data))
        self._position = 0

    def read_uint(self, width: int) -> int:
        """Read a little-endian unsigned integer.

        Args:
            width: Width in bytes (1, 2, 4 or 8)

        Returns:
            Unsigned integer value

        Raises:
            ValueError: If width is unsupported
            IndexError: If not enough bytes are available
        """
        fmt = UINT_FORMATS.get(width)
        if fmt is None:
            raise ValueError(f"width must be one of {sorted(UINT_FORMATS)}, got {width}")

        (value,) = struct.unpack_from(fmt, self._take(width))
        return int(value)

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes verbatim.

        Raises:
            IndexError: If not enough bytes are available
        """
        return bytes(self._take(num_bytes))

    def _take(self, num_bytes: int) -> memoryview:
        if self._position + num_bytes > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )
        chunk = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return chunk

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position
