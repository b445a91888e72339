#!/usr/bin/env python3
"""Counter program example for solcodec.

This example demonstrates:
1. Building instructions from named accounts
2. Identifying raw instruction data by discriminator
3. Storing and fetching account state with an in-memory fetcher
4. Handling missing accounts
"""

from __future__ import annotations

from solcodec import AccountNotFoundError, MissingAccount, encoded_size, field_offsets
from solcodec.address import address_from_bytes
from solcodec.programs.counter import (
    COUNTER_PROGRAM_ADDRESS,
    Counter,
    counter_account,
    counter_program,
)
from solcodec.rpc import InMemoryAccountFetcher


def main() -> None:
    """Run the counter example."""
    print("=" * 60)
    print("solcodec Counter Example")
    print("=" * 60)
    print()

    payer = address_from_bytes(bytes([1]) * 32)
    counter_address = address_from_bytes(bytes([2]) * 32)

    # Layout
    print("1. Counter account layout...")
    for field_name, offset in field_offsets(Counter).items():
        print(f"   {field_name} @ {offset}")
    print(f"   Total: {encoded_size(Counter)} bytes")
    print()

    # Build
    print("2. Building a Create instruction...")
    create = counter_program.build_instruction(
        "Create", {"maker": payer, "counter": counter_address}
    )
    print(f"   Data: {create.data.hex()}")
    for meta in create.accounts:
        flags = "".join(
            ("s" if meta.is_signer else "-", "w" if meta.is_writable else "-")
        )
        print(f"   [{flags}] {meta.address}")
    print()

    # Identify
    print("3. Identifying raw instruction data...")
    for data in (b"\x00", b"\x01", b"\x02"):
        instruction_class = counter_program.identify_instruction(data)
        print(f"   {data.hex()} -> {instruction_class.record_name()}")
    print()

    # Fetch
    print("4. Fetching account state...")
    fetcher = InMemoryAccountFetcher()
    maybe = counter_account.fetch_maybe(fetcher, counter_address)
    print(f"   Before create: exists={maybe.exists}")

    fetcher.set_record(
        counter_address,
        Counter(count=(3).to_bytes(8, "little")),
        owner=COUNTER_PROGRAM_ADDRESS,
    )
    account = counter_account.fetch(fetcher, counter_address)
    print(f"   After create: count={int.from_bytes(account.data.count, 'little')}")
    print(f"   Owner: {account.owner}")
    print()

    # Missing accounts
    print("5. Fetching a batch with a missing account...")
    other = address_from_bytes(bytes([3]) * 32)
    for result in counter_account.fetch_all_maybe(fetcher, [counter_address, other]):
        status = "missing" if isinstance(result, MissingAccount) else "found"
        print(f"   {result.address}: {status}")

    try:
        counter_account.fetch_all(fetcher, [counter_address, other])
    except AccountNotFoundError as e:
        print(f"   fetch_all raised: {e}")
    print()

    print("=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
