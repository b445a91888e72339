"""Favorites program: a PDA holding a user's favorite number, color and hobbies."""

from __future__ import annotations

from typing import ClassVar

from ..address import SYSTEM_PROGRAM_ADDRESS
from ..models import U8, AccountRole, BaseAccount, BaseInstruction, FixedBytes
from ..program import Program

FAVORITES_PROGRAM_ADDRESS = "E4V6siQsowLXsu9akW4CT57ALDEMiMXerTzgYvy3yG7R"

# Width of every text field
TEXT_LENGTH = 50

favorites_program = Program("favorites", FAVORITES_PROGRAM_ADDRESS)


class Favorites(BaseAccount):
    """Favorites account state (309 bytes)."""

    number: bytes = FixedBytes(length=8)
    color: bytes = FixedBytes(length=TEXT_LENGTH)
    hobby1: bytes = FixedBytes(length=TEXT_LENGTH)
    hobby2: bytes = FixedBytes(length=TEXT_LENGTH)
    hobby3: bytes = FixedBytes(length=TEXT_LENGTH)
    hobby4: bytes = FixedBytes(length=TEXT_LENGTH)
    hobby5: bytes = FixedBytes(length=TEXT_LENGTH)
    bump: int = U8()


@favorites_program.register_instruction
class CreatePda(BaseInstruction):
    """Create the favorites PDA and store its data."""

    solcodec_discriminator: ClassVar[int | None] = 0
    solcodec_accounts: ClassVar[tuple[AccountRole, ...]] = (
        AccountRole("user", is_signer=True, is_writable=True),
        AccountRole("favorites", is_writable=True),
        AccountRole("system_program", default=SYSTEM_PROGRAM_ADDRESS),
    )

    number: bytes = FixedBytes(length=8)
    color: bytes = FixedBytes(length=TEXT_LENGTH)
    hobby1: bytes = FixedBytes(length=TEXT_LENGTH)
    hobby2: bytes = FixedBytes(length=TEXT_LENGTH)
    hobby3: bytes = FixedBytes(length=TEXT_LENGTH)
    hobby4: bytes = FixedBytes(length=TEXT_LENGTH)
    hobby5: bytes = FixedBytes(length=TEXT_LENGTH)
    bump: int = U8()


@favorites_program.register_instruction
class GetPda(BaseInstruction):
    """Log the stored favorites."""

    solcodec_discriminator: ClassVar[int | None] = 1
    solcodec_accounts: ClassVar[tuple[AccountRole, ...]] = (
        AccountRole("user", is_signer=True),
        AccountRole("favorites"),
    )


favorites_account = favorites_program.register_account(Favorites)
