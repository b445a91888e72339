"""Unit tests for encoding/decoding."""

from __future__ import annotations

import pytest

from solcodec import (
    U8,
    U16,
    U32,
    U64,
    BaseAccount,
    BytesOverflowError,
    EncodeError,
    FixedBytes,
    LengthError,
    SchemaError,
    SolcodecError,
    StructLayout,
    ValueRangeError,
    decode,
    decode_values,
    encode,
    encode_values,
    encoded_size,
    field_offsets,
    field_sizes,
)
from solcodec.codec import FieldSchema
from solcodec.models import UInt
from solcodec.programs.account_data import AddressInfo
from solcodec.programs.counter import Counter
from solcodec.programs.favorites import Favorites


class Numbers(BaseAccount):
    """Account with every integer width."""

    a: int = U8()
    b: int = U16()
    c: int = U32()
    d: int = U64()


class Tagged(BaseAccount):
    """Mixed bytes and integer fields."""

    tag: bytes = FixedBytes(length=4)
    value: int = U16()


def favorites(**overrides: object) -> Favorites:
    values: dict[str, object] = {
        "number": (7).to_bytes(8, "little"),
        "color": b"red",
        "hobby1": b"swimming",
        "hobby2": b"chess",
        "hobby3": b"",
        "hobby4": b"",
        "hobby5": b"",
        "bump": 7,
    }
    values.update(overrides)
    return Favorites(**values)


class TestEncodeDecode:
    """Test basic encode/decode functionality."""

    def test_counter(self) -> None:
        """Test an 8-byte zero counter."""
        counter = Counter(count=bytes(8))
        data = encode(counter)

        assert data == b"\x00" * 8
        assert encoded_size(Counter) == 8

        decoded = decode(Counter, data)
        assert decoded == counter

    def test_favorites(self) -> None:
        """Test the 309-byte favorites layout."""
        data = encode(favorites())

        # 8 + 50 * 6 + 1
        assert len(data) == 309

        offsets = field_offsets(Favorites)
        color = data[offsets["color"] : offsets["color"] + 50]
        assert color[:3] == b"red"
        assert color[3:] == b"\x00" * 47
        assert data[-1] == 7

    def test_integers_little_endian(self) -> None:
        """Test integer fields are little-endian at their declared width."""
        record = Numbers(a=1, b=0x0203, c=0x04050607, d=0x08)
        data = encode(record)

        assert data == (
            b"\x01" b"\x03\x02" b"\x07\x06\x05\x04" b"\x08\x00\x00\x00\x00\x00\x00\x00"
        )
        assert decode(Numbers, data) == record

    def test_integer_extremes(self) -> None:
        """Test the largest value of every width."""
        record = Numbers(a=2**8 - 1, b=2**16 - 1, c=2**32 - 1, d=2**64 - 1)

        assert decode(Numbers, encode(record)) == record

    def test_short_bytes_are_zero_padded(self) -> None:
        """Test short byte arrays round-trip as their padded form."""
        data = encode(Tagged(tag=b"ab", value=1))

        assert data == b"ab\x00\x00\x01\x00"
        assert decode(Tagged, data).tag == b"ab\x00\x00"

    def test_decode_ignores_trailing_bytes(self) -> None:
        """Test buffers longer than the layout decode from the front."""
        decoded = decode(Counter, b"\x01" * 8 + b"\xff" * 4)

        assert decoded.count == b"\x01" * 8

    def test_decode_any_content(self) -> None:
        """Test that any byte pattern of the right length is valid."""
        decoded = decode(AddressInfo, bytes(range(151)))

        assert decoded.house_number == 50
        assert decoded.name == bytes(range(50))

    def test_encode_is_deterministic(self) -> None:
        """Test equal records give equal bytes."""
        assert encode(favorites()) == encode(favorites())


class TestEncodeErrors:
    """Test encoding error handling."""

    def test_oversized_bytes(self) -> None:
        """Test oversized byte arrays fail instead of truncating."""
        # Use model_construct to bypass Pydantic validation
        record = Tagged.model_construct(tag=b"toolong", value=1)

        with pytest.raises(BytesOverflowError, match="7 bytes exceed the 4-byte field"):
            encode(record)

    def test_negative_integer(self) -> None:
        """Test negative values are out of range."""
        record = Numbers.model_construct(a=-1, b=0, c=0, d=0)

        with pytest.raises(ValueRangeError, match="out of range"):
            encode(record)

    def test_integer_too_large(self) -> None:
        """Test values above the width are out of range."""
        record = Numbers.model_construct(a=0, b=2**16, c=0, d=0)

        with pytest.raises(ValueRangeError, match="Field b"):
            encode(record)

    def test_wrong_type(self) -> None:
        """Test type mismatches."""
        record = Tagged.model_construct(tag="text", value=1)

        with pytest.raises(EncodeError, match="expected bytes"):
            encode(record)

    def test_bool_is_not_an_integer(self) -> None:
        """Test booleans are rejected for integer fields."""
        record = Numbers.model_construct(a=True, b=0, c=0, d=0)

        with pytest.raises(EncodeError, match="expected int"):
            encode(record)

    def test_missing_field(self) -> None:
        """Test unset fields."""
        record = Tagged.model_construct(tag=b"ab")

        with pytest.raises(EncodeError, match="required"):
            encode(record)


class TestConstructionErrors:
    """Test width checks on normally constructed records."""

    def test_oversized_bytes(self) -> None:
        """Test oversized byte arrays are rejected on construction."""
        with pytest.raises(BytesOverflowError, match="51 bytes exceed the 50-byte field"):
            favorites(color=b"x" * 51)

    def test_integer_out_of_range(self) -> None:
        """Test out-of-range integers are rejected on construction."""
        with pytest.raises(ValueRangeError, match="Field bump: value 256 out of range"):
            favorites(bump=256)

        with pytest.raises(ValueRangeError):
            Numbers(a=0, b=0, c=-1, d=0)

    def test_caught_as_solcodec_error(self) -> None:
        """Test construction errors belong to the solcodec hierarchy."""
        with pytest.raises(SolcodecError):
            Tagged(tag=b"toolong", value=1)

    def test_assignment(self) -> None:
        """Test assignment runs the same checks."""
        record = Tagged(tag=b"ab", value=1)

        with pytest.raises(BytesOverflowError):
            record.tag = b"toolong"

        with pytest.raises(ValueRangeError):
            record.value = 2**16

        assert record.tag == b"ab"
        assert record.value == 1

    def test_exact_width_accepted(self) -> None:
        """Test values at the limit are valid."""
        record = Tagged(tag=b"abcd", value=2**16 - 1)

        assert encode(record) == b"abcd\xff\xff"


class TestDecodeErrors:
    """Test decoding error handling."""

    def test_truncated_data(self) -> None:
        """Test short buffers raise LengthError."""
        with pytest.raises(LengthError, match="expected at least 8 bytes, got 7"):
            decode(Counter, b"\x00" * 7)

    def test_empty_data(self) -> None:
        """Test empty buffers."""
        with pytest.raises(LengthError):
            decode(Favorites, b"")

    def test_one_byte_short(self) -> None:
        """Test a buffer missing only the last field."""
        with pytest.raises(LengthError):
            decode(Favorites, encode(favorites())[:-1])


class TestBareLayout:
    """Test encoding with hand-built layouts."""

    def test_encode_values(self) -> None:
        """Test encoding a mapping with an explicit layout."""
        layout = StructLayout(
            [FieldSchema.uint("discriminator", 1), FieldSchema.fixed_bytes("name", 4)]
        )

        data = encode_values(layout, {"discriminator": 3, "name": b"ab"})

        assert data == b"\x03ab\x00\x00"
        assert decode_values(layout, data) == {"discriminator": 3, "name": b"ab\x00\x00"}

    def test_layout_offsets(self) -> None:
        """Test offsets follow declaration order with no padding."""
        assert field_offsets(AddressInfo) == {
            "name": 0,
            "house_number": 50,
            "street": 51,
            "city": 101,
        }
        assert field_sizes(AddressInfo) == {
            "name": 50,
            "house_number": 1,
            "street": 50,
            "city": 50,
        }
        assert encoded_size(AddressInfo) == 151

    def test_layout_is_cached(self) -> None:
        """Test a model's layout is built once."""
        assert StructLayout.from_model(Favorites) is StructLayout.from_model(Favorites)


class TestSchemaErrors:
    """Test schema validation."""

    def test_zero_width_field(self) -> None:
        """Test zero-width fields are rejected."""
        with pytest.raises(SchemaError, match="width must be > 0"):
            FieldSchema.fixed_bytes("empty", 0)

        with pytest.raises(SchemaError, match="positive"):
            FixedBytes(length=0)

    def test_unsupported_integer_width(self) -> None:
        """Test odd integer widths are rejected."""
        with pytest.raises(SchemaError, match="width must be one of"):
            FieldSchema.uint("odd", 3)

        with pytest.raises(SchemaError, match="width must be one of"):
            UInt(width=16)

    def test_duplicate_field_names(self) -> None:
        """Test layouts reject repeated names."""
        with pytest.raises(SchemaError, match="duplicate field name"):
            StructLayout([FieldSchema.uint("a", 1), FieldSchema.uint("a", 2)])

    def test_plain_pydantic_field(self) -> None:
        """Test fields must use the solcodec helpers."""

        class Plain(BaseAccount):
            value: int = 0

        with pytest.raises(SchemaError, match="declare fields with"):
            StructLayout.from_model(Plain)

