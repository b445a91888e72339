"""Account-data program: stores a postal address in a fresh account."""

from __future__ import annotations

from typing import ClassVar

from ..address import SYSTEM_PROGRAM_ADDRESS
from ..models import U8, AccountRole, BaseAccount, BaseInstruction, FixedBytes
from ..program import Program

ACCOUNT_DATA_PROGRAM_ADDRESS = "EAUvJAw61MTaJbyV4tqFB4dEZuYHdYrtpGQ35hDsQ6Dw"

account_data_program = Program("account-data", ACCOUNT_DATA_PROGRAM_ADDRESS)


class AddressInfo(BaseAccount):
    """Address information (151 bytes). Text fields are UTF-8, NUL padded."""

    name: bytes = FixedBytes(length=50)
    house_number: int = U8()
    street: bytes = FixedBytes(length=50)
    city: bytes = FixedBytes(length=50)


@account_data_program.register_instruction
class CreateAddressInfo(BaseInstruction):
    solcodec_name: ClassVar[str | None] = "Create"
    solcodec_discriminator: ClassVar[int | None] = 0
    solcodec_accounts: ClassVar[tuple[AccountRole, ...]] = (
        AccountRole(
            "payer",
            is_signer=True,
            is_writable=True,
            description="The account that will pay for the transaction",
        ),
        AccountRole(
            "address_info",
            is_signer=True,
            is_writable=True,
            description="The address info account to create",
        ),
        AccountRole("system_program", default=SYSTEM_PROGRAM_ADDRESS, description="System Program"),
    )

    name: bytes = FixedBytes(length=50)
    house_number: int = U8()
    street: bytes = FixedBytes(length=50)
    city: bytes = FixedBytes(length=50)


address_info_account = account_data_program.register_account(AddressInfo)
