"""Account model: decoding and fetching on-chain account state.

An AccountType binds a record class to fetch semantics. Fetching yields a
*maybe-account*: either an ``Account`` carrying the decoded record and its
on-chain metadata, or a ``MissingAccount``. Required variants assert existence
and raise ``AccountNotFoundError`` instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Generic, Sequence, TypeVar, Union

from pydantic import BaseModel

from .codec.decoder import decode
from .codec.schema import StructLayout
from .exceptions import AccountNotFoundError, DecodeError
from .rpc.fetcher import AccountFetcher, EncodedAccount

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Account(Generic[T]):
    """An account that exists on chain, with decoded data.

    Attributes:
        address: Account address
        data: Decoded record
        owner: Address of the owning program
        lamports: Account balance in lamports
        executable: Whether the account holds a program
        space: Length of the raw account data in bytes
    """

    address: str
    data: T
    owner: str
    lamports: int = 0
    executable: bool = False
    space: int = 0

    exists: ClassVar[bool] = True


@dataclass(frozen=True)
class MissingAccount:
    """An account that is absent, or whose data could not be decoded.

    Attributes:
        address: Account address
        error: Decoding error for a slot that exists but is malformed
    """

    address: str
    error: Exception | None = None

    exists: ClassVar[bool] = False


MaybeAccount = Union[Account[T], MissingAccount]


def assert_account_exists(account: MaybeAccount[T]) -> Account[T]:
    """Return the account if it exists.

    Raises:
        AccountNotFoundError: If the account is missing
    """
    if isinstance(account, MissingAccount):
        raise AccountNotFoundError([account.address]) from account.error
    return account


def assert_accounts_exist(accounts: Sequence[MaybeAccount[T]]) -> list[Account[T]]:
    """Return all accounts if every one exists.

    Raises:
        AccountNotFoundError: Naming every missing address, if any is missing
    """
    missing = [account for account in accounts if isinstance(account, MissingAccount)]
    if missing:
        cause = next((account.error for account in missing if account.error is not None), None)
        raise AccountNotFoundError([account.address for account in missing]) from cause
    return [account for account in accounts if isinstance(account, Account)]


class AccountType(Generic[T]):
    """Fetch and decode accounts of one record type.

    Example:
        >>> counter_account = AccountType(Counter)
        >>> maybe = counter_account.fetch_maybe(fetcher, address)
        >>> if maybe.exists:
        ...     print(maybe.data.count)
    """

    def __init__(self, record_class: type[T], program_address: str | None = None) -> None:
        """Initialize an account type.

        Args:
            record_class: Record class of the account data
            program_address: Owning program, for display
        """
        self.record_class = record_class
        self.program_address = program_address
        self.layout = StructLayout.from_model(record_class)

    @property
    def name(self) -> str:
        return getattr(self.record_class, "solcodec_name", None) or self.record_class.__name__

    def size(self) -> int:
        """Account data size in bytes, for allocating the account on chain."""
        return self.layout.size()

    def decode_account(self, encoded: EncodedAccount) -> Account[T]:
        """Decode a raw account.

        Raises:
            LengthError: If the account data is shorter than the layout
        """
        return Account(
            address=encoded.address,
            data=decode(self.record_class, encoded.data),
            owner=encoded.owner,
            lamports=encoded.lamports,
            executable=encoded.executable,
            space=len(encoded.data),
        )

    def fetch_maybe(self, fetcher: AccountFetcher, address: str) -> MaybeAccount[T]:
        """Fetch one account, returning MissingAccount if it does not exist.

        Raises:
            LengthError: If the account exists but its data is too short
        """
        encoded = fetcher.fetch_raw(address)
        if encoded is None:
            logger.debug("%s account %s not found", self.name, address)
            return MissingAccount(address)
        return self.decode_account(encoded)

    def fetch(self, fetcher: AccountFetcher, address: str) -> Account[T]:
        """Fetch one account that must exist.

        Raises:
            AccountNotFoundError: If the account does not exist
        """
        return assert_account_exists(self.fetch_maybe(fetcher, address))

    def fetch_all_maybe(
        self, fetcher: AccountFetcher, addresses: Sequence[str]
    ) -> list[MaybeAccount[T]]:
        """Fetch several accounts, best effort.

        Results follow the input order. A slot that is absent, or whose data
        cannot be decoded, becomes a MissingAccount; the other slots are
        unaffected.
        """
        addresses = list(addresses)
        encoded_accounts: list[EncodedAccount | None] = []

        batch_size = fetcher.max_batch_size or max(len(addresses), 1)
        for start in range(0, len(addresses), batch_size):
            batch = addresses[start : start + batch_size]
            fetched = fetcher.fetch_raw_many(batch)
            if len(fetched) != len(batch):
                raise DecodeError(
                    f"Fetcher returned {len(fetched)} accounts for {len(batch)} addresses"
                )
            encoded_accounts.extend(fetched)
        logger.debug("Fetched %d %s accounts", len(addresses), self.name)

        results: list[MaybeAccount[T]] = []
        for address, encoded in zip(addresses, encoded_accounts):
            if encoded is None:
                results.append(MissingAccount(address))
                continue
            try:
                results.append(self.decode_account(encoded))
            except DecodeError as e:
                logger.warning("Could not decode %s account %s: %s", self.name, address, e)
                results.append(MissingAccount(address, error=e))
        return results

    def fetch_all(self, fetcher: AccountFetcher, addresses: Sequence[str]) -> list[Account[T]]:
        """Fetch several accounts that must all exist.

        Raises:
            AccountNotFoundError: If any account is missing or undecodable
        """
        return assert_accounts_exist(self.fetch_all_maybe(fetcher, addresses))

    def __repr__(self) -> str:
        return f"AccountType({self.name}, size={self.size()})"
