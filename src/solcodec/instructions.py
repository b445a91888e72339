"""Instruction codec: building and parsing program instructions.

An instruction is a discriminator-prefixed data payload plus an ordered list
of account metas. The account order is declared by the instruction class's
``solcodec_accounts`` roles and is part of the wire contract.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, Sequence, TypeVar, Union

from .address import address as validate_address
from .codec.bytebuf import ByteWriter
from .codec.decoder import decode
from .codec.encoder import encode, encode_values
from .codec.schema import FieldKind, StructLayout
from .exceptions import (
    EncodeError,
    InsufficientAccountsError,
    MissingAccountError,
    SchemaError,
)
from .models.base import BaseInstruction
from .models.roles import AccountRole

logger = logging.getLogger(__name__)

InstructionT = TypeVar("InstructionT", bound=BaseInstruction)


@dataclass(frozen=True)
class AccountMeta:
    """An account slot of a built instruction.

    Attributes:
        address: Account address
        is_signer: Whether the account signs the transaction
        is_writable: Whether the instruction writes to the account
    """

    address: str
    is_signer: bool = False
    is_writable: bool = False


AccountInput = Union[str, AccountMeta]


@dataclass(frozen=True)
class Instruction:
    """A built instruction, ready to hand to a transaction builder.

    Attributes:
        program_address: Program that executes the instruction
        accounts: Account metas in wire order
        data: Encoded instruction data, discriminator first
    """

    program_address: str
    accounts: tuple[AccountMeta, ...]
    data: bytes


@dataclass(frozen=True)
class ParsedInstruction(Generic[InstructionT]):
    """An instruction parsed back into named accounts and a data record.

    Attributes:
        instruction_type: Instruction class the data was decoded with
        accounts: Role name to account meta
        data: Decoded data record, discriminator included
        program_address: Program that executes the instruction, if known
        remaining_accounts: Accounts beyond the declared roles
    """

    instruction_type: type[InstructionT]
    accounts: dict[str, AccountMeta]
    data: InstructionT
    program_address: str | None = None
    remaining_accounts: tuple[AccountMeta, ...] = field(default=())


def instruction_layout(instruction_class: type[BaseInstruction]) -> StructLayout:
    """Return the data layout of an instruction, discriminator included.

    Raises:
        SchemaError: If the first field is not an unsigned ``discriminator``
    """
    layout = StructLayout.from_model(instruction_class)
    first = layout.fields[0] if layout.fields else None
    if first is None or first.name != "discriminator" or first.kind is not FieldKind.UNSIGNED_INT:
        raise SchemaError(
            f"{instruction_class.__name__}: the first field must be an unsigned 'discriminator'"
        )
    return layout


def discriminator_bytes(instruction_class: type[BaseInstruction]) -> bytes:
    """Encode an instruction class's discriminator.

    Raises:
        SchemaError: If the class has no discriminator or it does not fit
    """
    value = instruction_class.solcodec_discriminator
    if value is None:
        raise SchemaError(f"{instruction_class.__name__} has no solcodec_discriminator")

    width = instruction_layout(instruction_class).fields[0].width
    writer = ByteWriter()
    try:
        writer.write_uint(value, width)
    except (TypeError, ValueError) as e:
        raise SchemaError(f"{instruction_class.__name__}: invalid discriminator: {e}") from e
    return writer.to_bytes()


def build_instruction(
    instruction_class: type[InstructionT],
    accounts: Mapping[str, AccountInput | None] | None = None,
    data: InstructionT | Mapping[str, Any] | None = None,
    *,
    program_address: str,
    remaining_accounts: Sequence[AccountMeta] = (),
) -> Instruction:
    """Build an instruction from named accounts and data values.

    Accounts are resolved against the declared roles: an explicit value is
    used as given, an omitted (or None) value falls back to the role default,
    and an omitted required role is an error.

    Args:
        instruction_class: Instruction to build
        accounts: Role name to address or AccountMeta
        data: Data record, or a mapping of data-field values
        program_address: Program that executes the instruction
        remaining_accounts: Extra accounts appended after the declared roles

    Returns:
        The built instruction

    Raises:
        MissingAccountError: If a required role has no value and no default
        EncodeError: If a role name is unknown, an address is invalid, or the
            data does not encode

    Example:
        >>> ix = build_instruction(
        ...     Create,
        ...     {"maker": payer, "counter": counter_address},
        ...     program_address=COUNTER_PROGRAM_ADDRESS,
        ... )
        >>> ix.data
        b'\\x00'
    """
    metas = _resolve_accounts(instruction_class, accounts or {})
    metas.extend(remaining_accounts)

    return Instruction(
        program_address=program_address,
        accounts=tuple(metas),
        data=encode_instruction_data(instruction_class, data),
    )


def encode_instruction_data(
    instruction_class: type[InstructionT], data: InstructionT | Mapping[str, Any] | None = None
) -> bytes:
    """Encode instruction data, always prefixed with the discriminator."""
    if isinstance(data, instruction_class):
        return encode(data)

    discriminator = instruction_class.solcodec_discriminator
    if discriminator is None:
        raise SchemaError(f"{instruction_class.__name__} has no solcodec_discriminator")

    layout = instruction_layout(instruction_class)
    values = dict(data or {})
    unknown = set(values) - set(layout.names())
    if unknown:
        raise EncodeError(
            f"{instruction_class.__name__}: unknown data fields {sorted(unknown)}"
        )
    values["discriminator"] = discriminator
    return encode_values(layout, values)


def parse_instruction(
    instruction_class: type[InstructionT],
    accounts: Sequence[AccountInput],
    data: bytes,
    *,
    program_address: str | None = None,
) -> ParsedInstruction[InstructionT]:
    """Parse raw accounts and data with a known instruction class.

    Accounts are matched to roles by position. Accounts beyond the declared
    roles are kept as ``remaining_accounts``.

    Raises:
        InsufficientAccountsError: If fewer accounts than roles are supplied
        LengthError: If the data is shorter than the instruction layout
    """
    roles = instruction_class.solcodec_accounts
    if len(accounts) < len(roles):
        raise InsufficientAccountsError(
            f"{instruction_class.__name__}: expected at least {len(roles)} accounts, "
            f"got {len(accounts)}"
        )

    metas = [_as_meta(account) for account in accounts]
    return ParsedInstruction(
        instruction_type=instruction_class,
        accounts={role.name: meta for role, meta in zip(roles, metas)},
        data=decode(instruction_class, data),
        program_address=program_address,
        remaining_accounts=tuple(metas[len(roles) :]),
    )


def _resolve_accounts(
    instruction_class: type[BaseInstruction], supplied: Mapping[str, AccountInput | None]
) -> list[AccountMeta]:
    roles = instruction_class.solcodec_accounts
    unknown = set(supplied) - {role.name for role in roles}
    if unknown:
        raise EncodeError(
            f"{instruction_class.__name__}: unknown account roles {sorted(unknown)}"
        )

    metas: list[AccountMeta] = []
    for role in roles:
        value = supplied.get(role.name)
        if value is None:
            if role.default is None:
                raise MissingAccountError(
                    f"{instruction_class.__name__}: missing required account {role.name!r}"
                )
            logger.debug("%s: %s defaults to %s", instruction_class.__name__, role.name, role.default)
            value = role.default
        metas.append(_role_meta(role, value))
    return metas


def _role_meta(role: AccountRole, value: AccountInput) -> AccountMeta:
    if isinstance(value, AccountMeta):
        addr, is_signer, is_writable = value.address, value.is_signer, value.is_writable
    else:
        addr, is_signer, is_writable = value, False, False

    try:
        validate_address(addr)
    except ValueError as e:
        raise EncodeError(f"Account {role.name}: {e}") from e

    return AccountMeta(
        address=addr,
        is_signer=role.is_signer or is_signer,
        is_writable=role.is_writable or is_writable,
    )


def _as_meta(account: AccountInput) -> AccountMeta:
    if isinstance(account, AccountMeta):
        return account
    return AccountMeta(address=account)
