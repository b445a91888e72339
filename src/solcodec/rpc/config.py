"""Configuration for the in-memory account fetcher."""

from __future__ import annotations

from dataclasses import dataclass

from ..address import SYSTEM_PROGRAM_ADDRESS, is_address


@dataclass
class InMemoryFetcherConfig:
    """Configuration for InMemoryAccountFetcher.

    Attributes:
        max_batch_size: Largest batch accepted by ``fetch_raw_many`` (default
            100, the ``getMultipleAccounts`` limit)
        default_owner: Owner recorded for accounts stored without one
        default_lamports: Balance recorded for accounts stored without one

    Examples:
        ```python
        from solcodec.rpc import InMemoryAccountFetcher, InMemoryFetcherConfig

        config = InMemoryFetcherConfig(max_batch_size=5)
        fetcher = InMemoryAccountFetcher(config)
        ```
    """

    max_batch_size: int = 100
    default_owner: str = SYSTEM_PROGRAM_ADDRESS
    default_lamports: int = 0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_batch_size <= 0:
            raise ValueError(f"max_batch_size must be > 0, got {self.max_batch_size}")

        if not is_address(self.default_owner):
            raise ValueError(f"default_owner must be a base58 address, got {self.default_owner!r}")

        if self.default_lamports < 0:
            raise ValueError(f"default_lamports must be >= 0, got {self.default_lamports}")
