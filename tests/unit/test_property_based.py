"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from solcodec import (
    U8,
    U16,
    U32,
    U64,
    BaseAccount,
    BytesOverflowError,
    FixedBytes,
    ValueRangeError,
    decode,
    encode,
    pad_str,
    unpad_str,
)
from solcodec.programs.account_data import AddressInfo
from solcodec.programs.counter import counter_program


class Mixed(BaseAccount):
    """Account for property testing."""

    small: int = U8()
    label: bytes = FixedBytes(length=12)
    medium: int = U16()
    large: int = U32()
    huge: int = U64()


mixed_values = st.fixed_dictionaries(
    {
        "small": st.integers(min_value=0, max_value=2**8 - 1),
        "label": st.binary(min_size=0, max_size=12),
        "medium": st.integers(min_value=0, max_value=2**16 - 1),
        "large": st.integers(min_value=0, max_value=2**32 - 1),
        "huge": st.integers(min_value=0, max_value=2**64 - 1),
    }
)


class TestCodecProperties:
    """Property-based tests for codec."""

    @given(values=mixed_values)
    def test_encode_decode_roundtrip(self, values: dict) -> None:
        """Test decode(encode(r)) equals r with byte fields padded."""
        data = encode(Mixed(**values))
        decoded = decode(Mixed, data)

        assert len(data) == 27
        assert decoded.small == values["small"]
        assert decoded.medium == values["medium"]
        assert decoded.large == values["large"]
        assert decoded.huge == values["huge"]
        assert decoded.label == values["label"].ljust(12, b"\x00")

    @given(values=mixed_values)
    def test_encode_deterministic(self, values: dict) -> None:
        """Test encoding is deterministic."""
        assert encode(Mixed(**values)) == encode(Mixed(**values))

    @given(data=st.binary(min_size=151, max_size=300))
    def test_decode_encode_canonical(self, data: bytes) -> None:
        """Test any long-enough buffer decodes and re-encodes to its prefix."""
        assert encode(decode(AddressInfo, data)) == data[:151]

    @given(label=st.binary(min_size=13, max_size=64))
    def test_oversized_bytes_rejected(self, label: bytes) -> None:
        """Test oversized byte arrays are rejected on construction and encode."""
        with pytest.raises(BytesOverflowError):
            Mixed(small=0, label=label, medium=0, large=0, huge=0)

        record = Mixed.model_construct(small=0, label=label, medium=0, large=0, huge=0)
        with pytest.raises(BytesOverflowError):
            encode(record)

    @given(value=st.one_of(st.integers(max_value=-1), st.integers(min_value=2**16)))
    def test_out_of_range_integers_rejected(self, value: int) -> None:
        """Test integers outside the field width are rejected on construction."""
        with pytest.raises(ValueRangeError):
            Mixed(small=0, label=b"", medium=value, large=0, huge=0)


class TestDispatchProperties:
    """Property-based tests for discriminator dispatch."""

    @given(discriminator=st.integers(min_value=0, max_value=2), payload=st.binary(max_size=64))
    def test_payload_does_not_affect_dispatch(self, discriminator: int, payload: bytes) -> None:
        """Test only the leading byte selects the instruction."""
        instruction_class = counter_program.identify_instruction(bytes([discriminator]) + payload)

        assert instruction_class.solcodec_discriminator == discriminator


class TestTextProperties:
    """Property-based tests for text helpers."""

    # At most 4 UTF-8 bytes per character, so 12 characters always fit in 50 bytes
    @given(
        text=st.text(
            alphabet=st.characters(exclude_characters="\x00", exclude_categories=("Cs",)),
            max_size=12,
        )
    )
    def test_pad_unpad_roundtrip(self, text: str) -> None:
        """Test NUL-free text that fits survives padding."""
        assert unpad_str(pad_str(text, 50)) == text
