"""Program identity and discriminator dispatch.

A Program is the registry for one on-chain program: its address, its account
types and its instruction types. Registering instructions builds a
discriminator table; raw instruction bytes are then classified by comparing
their prefix against that table, without decoding the payload.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol, Sequence, TypeVar, Union

from .accounts import AccountType
from .address import address as validate_address
from .exceptions import DuplicateDiscriminatorError, SchemaError, UnknownInstructionError
from .instructions import (
    AccountInput,
    AccountMeta,
    Instruction,
    ParsedInstruction,
    build_instruction,
    discriminator_bytes,
    parse_instruction,
)
from .models.base import BaseAccount, BaseInstruction

logger = logging.getLogger(__name__)

AccountT = TypeVar("AccountT", bound=BaseAccount)
InstructionT = TypeVar("InstructionT", bound=BaseInstruction)

RAW_DATA_TYPES = (bytes, bytearray, memoryview)


class HasInstructionData(Protocol):
    """Anything carrying instruction bytes in a ``data`` attribute.

    Instruction, decoded transaction entries and similar records all qualify.
    """

    @property
    def data(self) -> bytes: ...


InstructionData = Union[bytes, bytearray, memoryview, HasInstructionData]


def instruction_bytes(instruction: InstructionData) -> bytes:
    """Return the raw data of an instruction or of raw bytes."""
    if isinstance(instruction, RAW_DATA_TYPES):
        return bytes(instruction)
    return bytes(instruction.data)


class Program:
    """Program identity: address plus every account and instruction layout.

    Example:
        >>> counter_program = Program("counter", COUNTER_PROGRAM_ADDRESS)
        >>> counter_program.register_instruction(Create)
        >>> counter_program.register_instruction(Increase)
        >>> counter_program.identify_instruction(b"\\x01")
        <class 'Increase'>
    """

    def __init__(self, name: str, address: str) -> None:
        """Initialize an empty program.

        Args:
            name: Program name
            address: Program address (base58)

        Raises:
            SchemaError: If the address is not valid
        """
        try:
            validate_address(address)
        except ValueError as e:
            raise SchemaError(f"Program {name}: {e}") from e

        self.name = name
        self.address = address
        self._instructions: list[tuple[bytes, type[BaseInstruction]]] = []
        self._accounts: dict[str, AccountType[Any]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_instruction(self, instruction_class: type[InstructionT]) -> type[InstructionT]:
        """Register an instruction class for dispatch.

        Can be used as a class decorator.

        Args:
            instruction_class: BaseInstruction subclass with solcodec_discriminator

        Returns:
            The same class

        Raises:
            SchemaError: If the class has no valid discriminator
            DuplicateDiscriminatorError: If another registered instruction has
                the same discriminator, or one that is a prefix of it
        """
        prefix = discriminator_bytes(instruction_class)

        for existing_prefix, existing in self._instructions:
            if existing is instruction_class:
                # Already registered, no-op
                return instruction_class
            if existing_prefix.startswith(prefix) or prefix.startswith(existing_prefix):
                raise DuplicateDiscriminatorError(
                    f"Program {self.name}: discriminator {prefix.hex()} of "
                    f"{instruction_class.__name__} conflicts with {existing.__name__} "
                    f"({existing_prefix.hex()})"
                )

        self._instructions.append((prefix, instruction_class))
        logger.debug(
            "Program %s: registered instruction %s (discriminator %s)",
            self.name,
            instruction_class.__name__,
            prefix.hex(),
        )
        return instruction_class

    def register_account(self, record_class: type[AccountT]) -> AccountType[AccountT]:
        """Register an account record class.

        Returns:
            AccountType bound to this program

        Raises:
            SchemaError: If an account with the same name is already registered
        """
        account_type = AccountType(record_class, program_address=self.address)
        existing = self._accounts.get(account_type.name)
        if existing is not None:
            if existing.record_class is record_class:
                return existing
            raise SchemaError(
                f"Program {self.name}: account {account_type.name} already registered"
            )

        self._accounts[account_type.name] = account_type
        logger.debug(
            "Program %s: registered account %s (%d bytes)",
            self.name,
            account_type.name,
            account_type.size(),
        )
        return account_type

    @property
    def instructions(self) -> list[type[BaseInstruction]]:
        """Registered instruction classes, in registration order."""
        return [instruction_class for _, instruction_class in self._instructions]

    @property
    def accounts(self) -> dict[str, AccountType[Any]]:
        """Registered account types by name."""
        return dict(self._accounts)

    def instruction(self, name: str) -> type[BaseInstruction]:
        """Look up a registered instruction class by name.

        Raises:
            KeyError: If no instruction has that name
        """
        for _, instruction_class in self._instructions:
            if instruction_class.record_name() == name or instruction_class.__name__ == name:
                return instruction_class
        raise KeyError(f"Program {self.name} has no instruction {name!r}")

    def account(self, name: str) -> AccountType[Any]:
        """Look up a registered account type by name."""
        try:
            return self._accounts[name]
        except KeyError:
            raise KeyError(f"Program {self.name} has no account {name!r}") from None

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def identify_instruction(self, instruction: InstructionData) -> type[BaseInstruction]:
        """Classify instruction data by its discriminator.

        Only the leading discriminator bytes are inspected.

        Args:
            instruction: Raw instruction data, or any object with a ``data``
                attribute (such as an Instruction)

        Returns:
            The matching instruction class

        Raises:
            UnknownInstructionError: If no registered discriminator matches
        """
        data = instruction_bytes(instruction)

        for prefix, instruction_class in self._instructions:
            if data[: len(prefix)] == prefix:
                logger.debug("Program %s: identified %s", self.name, instruction_class.__name__)
                return instruction_class

        head = data[:8].hex() or "<empty>"
        raise UnknownInstructionError(
            f"The provided instruction could not be identified as a {self.name} instruction "
            f"(program {self.address}, leading bytes {head})"
        )

    def parse_instruction(
        self,
        instruction: InstructionData,
        accounts: Sequence[AccountInput] | None = None,
    ) -> ParsedInstruction[BaseInstruction]:
        """Identify and parse an instruction.

        Args:
            instruction: Raw data, or any object with a ``data`` attribute.
                Its ``accounts`` and ``program_address`` attributes are used
                when present.
            accounts: Account list; overrides the instruction's own accounts

        Raises:
            UnknownInstructionError: If the discriminator is not registered
            InsufficientAccountsError: If too few accounts are supplied
            LengthError: If the data is too short for the identified layout
        """
        data = instruction_bytes(instruction)
        account_list: Sequence[AccountInput] = (
            accounts if accounts is not None else getattr(instruction, "accounts", ())
        )
        program_address = getattr(instruction, "program_address", None) or self.address

        instruction_class = self.identify_instruction(data)
        return parse_instruction(
            instruction_class, account_list, data, program_address=program_address
        )

    def build_instruction(
        self,
        instruction: str | type[InstructionT],
        accounts: Mapping[str, AccountInput | None] | None = None,
        data: Any = None,
        *,
        program_address: str | None = None,
        remaining_accounts: Sequence[AccountMeta] = (),
    ) -> Instruction:
        """Build one of this program's instructions.

        Args:
            instruction: Instruction class or registered name
            accounts: Role name to address or AccountMeta
            data: Data record, or a mapping of data-field values
            program_address: Override for the program address
            remaining_accounts: Extra accounts appended after the declared roles

        Raises:
            KeyError: If no instruction has that name
            SchemaError: If the class is not registered on this program
        """
        instruction_class = (
            self.instruction(instruction) if isinstance(instruction, str) else instruction
        )
        if instruction_class not in self.instructions:
            raise SchemaError(
                f"{instruction_class.__name__} is not an instruction of program {self.name}"
            )
        return build_instruction(
            instruction_class,
            accounts,
            data,
            program_address=program_address or self.address,
            remaining_accounts=remaining_accounts,
        )

    def __repr__(self) -> str:
        return (
            f"Program({self.name!r}, {self.address}, "
            f"instructions={[cls.__name__ for cls in self.instructions]}, "
            f"accounts={list(self._accounts)})"
        )
