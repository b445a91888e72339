"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from solcodec.address import address_from_bytes
from solcodec.rpc import InMemoryAccountFetcher


def make_address(seed: int) -> str:
    """Deterministic test address built from a repeated byte."""
    return address_from_bytes(bytes([seed]) * 32)


@pytest.fixture
def payer() -> str:
    """Payer / authority address."""
    return make_address(1)


@pytest.fixture
def counter_address() -> str:
    """Counter account address."""
    return make_address(2)


@pytest.fixture
def fetcher() -> InMemoryAccountFetcher:
    """Empty in-memory fetcher."""
    return InMemoryAccountFetcher()
