"""In-memory account fetcher for tests and simulation.

InMemoryAccountFetcher stands in for a cluster: accounts are stored as raw
bytes in a dict and handed back exactly like an RPC-backed fetcher would,
including ``None`` for missing accounts and a batch size limit.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Sequence

from pydantic import BaseModel

from ..codec.encoder import encode
from .config import InMemoryFetcherConfig
from .fetcher import AccountFetcher, EncodedAccount

logger = logging.getLogger(__name__)


class InMemoryAccountFetcher(AccountFetcher):
    """Account fetcher backed by a dict.

    Attributes:
        config: Fetcher configuration
        calls: Number of fetch calls served (single and batched)

    Examples:
        ```python
        from solcodec.programs.counter import COUNTER_PROGRAM_ADDRESS, Counter, counter_account
        from solcodec.rpc import InMemoryAccountFetcher

        fetcher = InMemoryAccountFetcher()
        fetcher.set_record(address, Counter(count=bytes(8)), owner=COUNTER_PROGRAM_ADDRESS)

        account = counter_account.fetch(fetcher, address)
        ```
    """

    def __init__(self, config: InMemoryFetcherConfig | None = None) -> None:
        """Initialize an empty fetcher.

        Args:
            config: Fetcher configuration. If None, uses default config.
        """
        self.config = config if config is not None else InMemoryFetcherConfig()
        self.max_batch_size = self.config.max_batch_size
        self.calls = 0
        self._accounts: dict[str, EncodedAccount] = {}
        self._lock = Lock()

    def set_account(
        self,
        address: str,
        data: bytes,
        owner: str | None = None,
        lamports: int | None = None,
        executable: bool = False,
    ) -> EncodedAccount:
        """Store raw account data, replacing any existing account."""
        account = EncodedAccount(
            address=address,
            data=bytes(data),
            owner=owner if owner is not None else self.config.default_owner,
            lamports=lamports if lamports is not None else self.config.default_lamports,
            executable=executable,
        )
        with self._lock:
            self._accounts[address] = account
        logger.debug("Stored %d bytes at %s", len(account.data), address)
        return account

    def set_record(
        self,
        address: str,
        record: BaseModel,
        owner: str | None = None,
        lamports: int | None = None,
    ) -> EncodedAccount:
        """Encode a record and store it as account data."""
        return self.set_account(address, encode(record), owner=owner, lamports=lamports)

    def remove_account(self, address: str) -> None:
        """Delete an account; missing accounts are ignored."""
        with self._lock:
            self._accounts.pop(address, None)

    def fetch_raw(self, address: str) -> EncodedAccount | None:
        with self._lock:
            self.calls += 1
            return self._accounts.get(address)

    def fetch_raw_many(self, addresses: Sequence[str]) -> list[EncodedAccount | None]:
        """Fetch several accounts in one call.

        Raises:
            ValueError: If more addresses than ``max_batch_size`` are requested
        """
        if len(addresses) > self.config.max_batch_size:
            raise ValueError(
                f"Batch of {len(addresses)} addresses exceeds max_batch_size "
                f"{self.config.max_batch_size}"
            )

        with self._lock:
            self.calls += 1
            return [self._accounts.get(address) for address in addresses]
