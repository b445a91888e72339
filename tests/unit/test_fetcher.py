"""Unit tests for the in-memory account fetcher."""

from __future__ import annotations

import pytest

from solcodec import SYSTEM_PROGRAM_ADDRESS
from solcodec.address import address_from_bytes
from solcodec.programs.counter import COUNTER_PROGRAM_ADDRESS, Counter
from solcodec.rpc import InMemoryAccountFetcher, InMemoryFetcherConfig


def addr(seed: int) -> str:
    return address_from_bytes(bytes([seed]) * 32)


class TestInMemoryFetcherConfig:
    """Test fetcher configuration."""

    def test_default_config(self) -> None:
        """Test default configuration."""
        config = InMemoryFetcherConfig()

        assert config.max_batch_size == 100
        assert config.default_owner == SYSTEM_PROGRAM_ADDRESS
        assert config.default_lamports == 0

    def test_invalid_batch_size(self) -> None:
        """Test invalid batch size."""
        with pytest.raises(ValueError, match="max_batch_size must be > 0"):
            InMemoryFetcherConfig(max_batch_size=0)

    def test_invalid_owner(self) -> None:
        """Test invalid default owner."""
        with pytest.raises(ValueError, match="default_owner must be a base58 address"):
            InMemoryFetcherConfig(default_owner="not-an-address")

    def test_invalid_lamports(self) -> None:
        """Test invalid default balance."""
        with pytest.raises(ValueError, match="default_lamports must be >= 0"):
            InMemoryFetcherConfig(default_lamports=-1)


class TestInMemoryAccountFetcher:
    """Test InMemoryAccountFetcher functionality."""

    def test_missing_account(self, fetcher: InMemoryAccountFetcher) -> None:
        """Test missing accounts are None."""
        assert fetcher.fetch_raw(addr(1)) is None

    def test_set_account_defaults(self) -> None:
        """Test config defaults fill unset metadata."""
        fetcher = InMemoryAccountFetcher(
            InMemoryFetcherConfig(default_owner=COUNTER_PROGRAM_ADDRESS, default_lamports=5)
        )
        fetcher.set_account(addr(1), b"\x01\x02")

        account = fetcher.fetch_raw(addr(1))

        assert account is not None
        assert account.data == b"\x01\x02"
        assert account.owner == COUNTER_PROGRAM_ADDRESS
        assert account.lamports == 5

    def test_set_record(self, fetcher: InMemoryAccountFetcher) -> None:
        """Test records are stored encoded."""
        fetcher.set_record(addr(1), Counter(count=b"\x07"), owner=COUNTER_PROGRAM_ADDRESS)

        account = fetcher.fetch_raw(addr(1))

        assert account is not None
        assert account.data == b"\x07" + b"\x00" * 7
        assert account.owner == COUNTER_PROGRAM_ADDRESS

    def test_remove_account(self, fetcher: InMemoryAccountFetcher) -> None:
        """Test removed accounts are gone."""
        fetcher.set_account(addr(1), b"\x00")
        fetcher.remove_account(addr(1))
        fetcher.remove_account(addr(2))

        assert fetcher.fetch_raw(addr(1)) is None

    def test_fetch_many_order(self, fetcher: InMemoryAccountFetcher) -> None:
        """Test batched fetches keep input order and counts calls."""
        fetcher.set_account(addr(2), b"\x02")

        results = fetcher.fetch_raw_many([addr(1), addr(2)])

        assert results[0] is None
        assert results[1] is not None and results[1].data == b"\x02"
        assert fetcher.calls == 1

    def test_batch_limit(self) -> None:
        """Test oversized batches are rejected."""
        fetcher = InMemoryAccountFetcher(InMemoryFetcherConfig(max_batch_size=2))

        assert fetcher.max_batch_size == 2
        with pytest.raises(ValueError, match="exceeds max_batch_size"):
            fetcher.fetch_raw_many([addr(1), addr(2), addr(3)])
