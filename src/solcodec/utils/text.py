"""Text stored in fixed-size byte fields.

On-chain records keep names and labels as fixed byte arrays, NUL padded.
These helpers convert between text and such arrays. The codec itself never
applies them: decoded byte fields keep their padding.
"""

from __future__ import annotations

from ..exceptions import BytesOverflowError


def pad_str(text: str, width: int, encoding: str = "utf-8") -> bytes:
    """Encode text into exactly ``width`` bytes, NUL padded.

    Args:
        text: Text to encode
        width: Field width in bytes
        encoding: Text encoding (default UTF-8)

    Raises:
        BytesOverflowError: If the encoded text is longer than width

    Example:
        >>> pad_str("red", 5)
        b'red\\x00\\x00'
    """
    data = text.encode(encoding)
    if len(data) > width:
        raise BytesOverflowError(
            f"Text of {len(data)} bytes does not fit in a {width}-byte field: {text!r}"
        )
    return data + b"\x00" * (width - len(data))


def unpad_str(data: bytes, encoding: str = "utf-8") -> str:
    """Decode a NUL-padded byte field, stopping at the first NUL.

    Example:
        >>> unpad_str(b"red\\x00\\x00")
        'red'
    """
    end = data.find(b"\x00")
    if end != -1:
        data = data[:end]
    return bytes(data).decode(encoding)
