# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Bounded-concurrency scheduler that preserves input order."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def clamp_workers(limit: int, item_count: int) -> int:
    """Worker count within [1, item_count]; 0 only when there is nothing to do."""
    if item_count <= 0:
        return 0
    return max(1, min(int(limit), item_count))


async def run_with_concurrency(
    items: Sequence[T],
    limit: int,
    worker: Callable[[T], Awaitable[R]],
) -> list[R]:
    """
    Run ``worker`` once per item with at most ``limit`` calls in flight.

    Workers share one cursor over ``enumerate(items)``; claiming the next index is a
    plain ``next()`` call with no await in between, so each index is claimed exactly
    once. Results land in the slot of their claimed index, so the returned list is in
    input order whatever the completion order.
    """
    results: list[R | None] = [None] * len(items)
    cursor = iter(enumerate(items))

    async def drain() -> None:
        for index, item in cursor:
            results[index] = await worker(item)

    await asyncio.gather(*(drain() for _ in range(clamp_workers(limit, len(items)))))
    return results  # type: ignore[return-value]
