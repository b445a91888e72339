"""Exception hierarchy for solcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from SolcodecError for easy catching of any solcodec-specific error.
"""

from __future__ import annotations


class SolcodecError(Exception):
    """Base exception for all solcodec errors."""

    pass


class SchemaError(SolcodecError):
    """Raised when a record schema or program definition is invalid.

    Examples:
        - Zero-width field
        - Unsupported integer width (only 1, 2, 4 and 8 bytes)
        - Unsupported field type
        - Instruction class without a discriminator
    """

    pass


class DuplicateDiscriminatorError(SchemaError):
    """Raised when two instructions of one program share a discriminator.

    This is a startup failure: it happens while the program is being
    registered, before any instruction bytes are dispatched.
    """

    pass


class EncodeError(SolcodecError):
    """Raised when encoding a record fails.

    Examples:
        - Field type mismatch
        - Unknown account role passed to an instruction builder
    """

    pass


class ValueRangeError(EncodeError):
    """Raised when an integer does not fit its unsigned field width."""

    pass


class BytesOverflowError(EncodeError):
    """Raised when a byte sequence is longer than its fixed-size field.

    Oversized input is never truncated.
    """

    pass


class MissingAccountError(EncodeError):
    """Raised when an instruction is built without a required account."""

    pass


class DecodeError(SolcodecError):
    """Raised when decoding binary data fails."""

    pass


class LengthError(DecodeError):
    """Raised when a buffer is shorter than the layout it is decoded with."""

    pass


class InsufficientAccountsError(DecodeError):
    """Raised when an instruction carries fewer accounts than it declares roles."""

    pass


class UnknownInstructionError(DecodeError):
    """Raised when instruction data matches no registered discriminator."""

    pass


class AccountNotFoundError(SolcodecError):
    """Raised when an account that must exist is absent on chain.

    Attributes:
        addresses: Addresses of every missing account
    """

    def __init__(self, addresses: list[str]) -> None:
        self.addresses = list(addresses)
        if len(self.addresses) == 1:
            message = f"Account not found at address: {self.addresses[0]}"
        else:
            message = f"Accounts not found at addresses: {', '.join(self.addresses)}"
        super().__init__(message)
