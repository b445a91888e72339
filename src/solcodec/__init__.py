"""solcodec: Fixed-layout codecs for on-chain accounts and instructions

A Python library that maps strongly-typed, fixed-layout records (program
account state and instruction data) to and from flat byte buffers, and
dispatches raw instruction bytes by their leading discriminator.

Key Features:
- Pydantic-based record modeling
- Packed little-endian layouts with statically known sizes
- Loud failures: out-of-range integers and oversized byte arrays never truncate
- Maybe-account fetch semantics over a pluggable fetch service
- Duplicate-checked discriminator dispatch per program

Quick Start:
    >>> from solcodec import BaseAccount, FixedBytes, U8, encode, decode
    >>>
    >>> class Favorites(BaseAccount):
    ...     number: bytes = FixedBytes(length=8)
    ...     color: bytes = FixedBytes(length=50)
    ...     bump: int = U8()
    >>>
    >>> data = encode(Favorites(number=bytes(8), color=b"red", bump=7))
    >>> len(data)
    59
    >>> decoded = decode(Favorites, data)
"""

from __future__ import annotations

from .accounts import (
    Account,
    AccountType,
    MaybeAccount,
    MissingAccount,
    assert_account_exists,
    assert_accounts_exist,
)
from .address import SYSTEM_PROGRAM_ADDRESS, address, is_address
from .codec import (
    FieldKind,
    FieldSchema,
    StructLayout,
    decode,
    decode_values,
    encode,
    encode_values,
)
from .exceptions import (
    AccountNotFoundError,
    BytesOverflowError,
    DecodeError,
    DuplicateDiscriminatorError,
    EncodeError,
    InsufficientAccountsError,
    LengthError,
    MissingAccountError,
    SchemaError,
    SolcodecError,
    UnknownInstructionError,
    ValueRangeError,
)
from .instructions import (
    AccountMeta,
    Instruction,
    ParsedInstruction,
    build_instruction,
    parse_instruction,
)
from .models import (
    U8,
    U16,
    U32,
    U64,
    AccountRole,
    BaseAccount,
    BaseInstruction,
    BaseRecord,
    FixedBytes,
    UInt,
)
from .program import Program
from .utils import encoded_size, field_offsets, field_sizes, pad_str, unpad_str

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BaseRecord",
    "BaseAccount",
    "BaseInstruction",
    "encode",
    "decode",
    "encode_values",
    "decode_values",
    "FieldKind",
    "FieldSchema",
    "StructLayout",
    # Field helpers
    "FixedBytes",
    "UInt",
    "U8",
    "U16",
    "U32",
    "U64",
    # Accounts
    "Account",
    "AccountType",
    "MaybeAccount",
    "MissingAccount",
    "assert_account_exists",
    "assert_accounts_exist",
    # Instructions
    "AccountRole",
    "AccountMeta",
    "Instruction",
    "ParsedInstruction",
    "build_instruction",
    "parse_instruction",
    "Program",
    # Addresses
    "SYSTEM_PROGRAM_ADDRESS",
    "address",
    "is_address",
    # Exceptions
    "SolcodecError",
    "SchemaError",
    "DuplicateDiscriminatorError",
    "EncodeError",
    "ValueRangeError",
    "BytesOverflowError",
    "MissingAccountError",
    "DecodeError",
    "LengthError",
    "InsufficientAccountsError",
    "UnknownInstructionError",
    "AccountNotFoundError",
    # Sizing
    "encoded_size",
    "field_sizes",
    "field_offsets",
    # Text
    "pad_str",
    "unpad_str",
    # Version
    "__version__",
]
