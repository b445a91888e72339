"""Unit tests for fixed-width text helpers."""

from __future__ import annotations

import pytest

from solcodec import BytesOverflowError, pad_str, unpad_str


class TestPadStr:
    """Test text padding."""

    def test_pads_with_nul(self) -> None:
        """Test short text is NUL padded to the width."""
        assert pad_str("red", 5) == b"red\x00\x00"

    def test_exact_fit(self) -> None:
        """Test text filling the whole field."""
        assert pad_str("abc", 3) == b"abc"

    def test_multibyte(self) -> None:
        """Test the width counts encoded bytes, not characters."""
        assert len(pad_str("café", 5)) == 5

        with pytest.raises(BytesOverflowError, match="does not fit"):
            pad_str("café", 4)

    def test_too_long(self) -> None:
        """Test long text is rejected."""
        with pytest.raises(BytesOverflowError, match="5 bytes does not fit in a 4-byte field"):
            pad_str("hello", 4)


class TestUnpadStr:
    """Test text unpadding."""

    def test_strips_padding(self) -> None:
        """Test decoding stops at the first NUL."""
        assert unpad_str(b"red\x00\x00") == "red"

    def test_no_padding(self) -> None:
        """Test full-width text."""
        assert unpad_str(b"abc") == "abc"

    def test_empty(self) -> None:
        """Test all-NUL fields."""
        assert unpad_str(b"\x00" * 50) == ""

    def test_roundtrip(self) -> None:
        """Test pad then unpad gives the text back."""
        assert unpad_str(pad_str("Main Street", 50)) == "Main Street"
