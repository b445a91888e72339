"""Counter program: an 8-byte counter with create/increase/decrease."""

from __future__ import annotations

from typing import ClassVar

from ..address import SYSTEM_PROGRAM_ADDRESS
from ..models import AccountRole, BaseAccount, BaseInstruction, FixedBytes
from ..program import Program

COUNTER_PROGRAM_ADDRESS = "Fruv5QjqNDXvvYT2hw4FjhsT5aa11bHAPtMQH46mg3SS"

counter_program = Program("counter", COUNTER_PROGRAM_ADDRESS)


class Counter(BaseAccount):
    """Counter account state."""

    count: bytes = FixedBytes(length=8)


@counter_program.register_instruction
class Create(BaseInstruction):
    """Create the counter account."""

    solcodec_discriminator: ClassVar[int | None] = 0
    solcodec_accounts: ClassVar[tuple[AccountRole, ...]] = (
        AccountRole("maker", is_signer=True, is_writable=True, description="The payer of the counter"),
        AccountRole("counter", is_writable=True, description="The counter account"),
        AccountRole(
            "system_program", default=SYSTEM_PROGRAM_ADDRESS, description="The system program"
        ),
    )


@counter_program.register_instruction
class Increase(BaseInstruction):
    """Increment the counter."""

    solcodec_discriminator: ClassVar[int | None] = 1
    solcodec_accounts: ClassVar[tuple[AccountRole, ...]] = (
        AccountRole("authority", is_signer=True, is_writable=True, description="Counter authority"),
        AccountRole("counter", is_writable=True, description="The counter account"),
    )


@counter_program.register_instruction
class Decrease(BaseInstruction):
    """Decrement the counter."""

    solcodec_discriminator: ClassVar[int | None] = 2
    solcodec_accounts: ClassVar[tuple[AccountRole, ...]] = (
        AccountRole("authority", is_signer=True, is_writable=True, description="Counter authority"),
        AccountRole("counter", is_writable=True, description="The counter account"),
    )


counter_account = counter_program.register_account(Counter)
