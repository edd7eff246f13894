#!/usr/bin/env python3
"""
Demo script for the memo service.

Walks through the memo lifecycle against a running server:
create, list, resolve, delete.

Usage:
    DATABASE_URL=redis://localhost:6379/0 BACKEND_PORT=3000 memo-service
    python scripts/demo.py [base_url]
"""

import asyncio
import sys

from memo_service.client import MemoClient
from memo_service.entities import Memo


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def print_memos(memos: list[Memo]) -> None:
    if not memos:
        print("  (no memos)")
    for memo in memos:
        mark = "x" if memo.done else " "
        print(f"  [{mark}] {memo.text}  ({memo.id}, {memo.timestamp.isoformat()})")


async def demo(base_url: str | None) -> None:
    async with MemoClient(base_url=base_url) as client:
        print_section("Creating memos")
        created = []
        for text in ["buy milk", "call mom", "water plants"]:
            memo = await client.create_memo(text)
            created.append(memo)
            print(f"  ✓ Created: {memo.text}")
        print_memos(await client.list_memos())

        print_section("Resolving a memo")
        await client.resolve_memo(created[0].id, True)
        print_memos(await client.list_memos())

        print_section("Deleting memos")
        for memo in created:
            await client.delete_memo(memo.id)
            print(f"  ✓ Deleted: {memo.text}")

        again = await client.delete_memo(created[0].id)
        print(f"  Deleting '{created[0].text}' again found it: {again}")
        print_memos(await client.list_memos())


def main() -> None:
    base_url = sys.argv[1] if len(sys.argv) > 1 else None
    asyncio.run(demo(base_url))


if __name__ == "__main__":
    main()
