"""Account fetch service abstraction.

The codec consumes raw account bytes through the ``AccountFetcher``
interface and never manages connections itself.

## Available Fetchers

### InMemoryAccountFetcher
Dict-backed fetcher for tests and offline simulation. Honours a configurable
batch size limit like a real ``getMultipleAccounts`` endpoint.

### Application fetchers
Subclass ``AccountFetcher`` and implement ``fetch_raw`` (and optionally
``fetch_raw_many``) on top of any RPC client.
"""

from solcodec.rpc.config import InMemoryFetcherConfig
from solcodec.rpc.fetcher import AccountFetcher, EncodedAccount
from solcodec.rpc.memory import InMemoryAccountFetcher

__all__ = [
    "AccountFetcher",
    "EncodedAccount",
    "InMemoryAccountFetcher",
    "InMemoryFetcherConfig",
]
