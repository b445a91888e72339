"""Account role declarations for instructions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountRole:
    """A named position in an instruction's account list.

    The order of roles on an instruction class is the order of accounts on
    the wire.

    Attributes:
        name: Role name, used as the key when building and parsing
        is_signer: Whether the account must sign the transaction
        is_writable: Whether the instruction writes to the account
        default: Address used when the caller supplies none
        description: Human-readable description
    """

    name: str
    is_signer: bool = False
    is_writable: bool = False
    default: str | None = None
    description: str = ""

    @property
    def required(self) -> bool:
        """Whether the caller must supply this account."""
        return self.default is None
