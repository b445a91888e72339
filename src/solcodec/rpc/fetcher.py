"""Abstract interface for account fetch services.

The codec never talks to a cluster itself. It is handed an AccountFetcher,
which returns raw account bytes and metadata; connections, retries and
commitment levels are the fetcher's business.

- AccountFetcher: Abstract interface
- InMemoryAccountFetcher: In-process implementation for tests and simulation
- RPC-backed fetchers: supplied by the application
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class EncodedAccount:
    """Raw account as returned by a fetch service.

    Attributes:
        address: Account address
        data: Raw account data
        owner: Address of the owning program
        lamports: Account balance in lamports
        executable: Whether the account holds a program
    """

    address: str
    data: bytes
    owner: str
    lamports: int = 0
    executable: bool = False


class AccountFetcher(ABC):
    """Abstract interface for fetching raw accounts.

    Implementations return ``None`` for accounts that do not exist. They must
    not raise for absence.

    Attributes:
        max_batch_size: Largest number of addresses ``fetch_raw_many`` accepts
            in one call, or None for no limit

    Examples:
        ```python
        class RpcAccountFetcher(AccountFetcher):
            max_batch_size = 100

            def fetch_raw(self, address):
                ...  # getAccountInfo

            def fetch_raw_many(self, addresses):
                ...  # getMultipleAccounts
        ```
    """

    max_batch_size: int | None = None

    @abstractmethod
    def fetch_raw(self, address: str) -> EncodedAccount | None:
        """Fetch one raw account.

        Args:
            address: Account address

        Returns:
            The raw account, or None if it does not exist
        """

    def fetch_raw_many(self, addresses: Sequence[str]) -> list[EncodedAccount | None]:
        """Fetch several raw accounts.

        The default implementation calls ``fetch_raw`` once per address.
        Fetchers with a batched endpoint should override it.

        Args:
            addresses: Account addresses

        Returns:
            One entry per address, in input order
        """
        return [self.fetch_raw(address) for address in addresses]
