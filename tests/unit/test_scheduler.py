# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio

import pytest

from apidiag.probe.scheduler import clamp_workers, run_with_concurrency


@pytest.mark.parametrize(
    ("limit", "count", "expected"),
    [(2, 3, 2), (0, 3, 1), (-4, 3, 1), (10, 3, 3), (5, 0, 0), (1, 1, 1)],
)
def test_clamp_workers(limit, count, expected):
    assert clamp_workers(limit, count) == expected


def test_results_follow_input_order_not_completion_order():
    delays = {"a": 0.03, "b": 0.0, "c": 0.01, "d": 0.0}
    completed: list[str] = []

    async def worker(item):
        await asyncio.sleep(delays[item])
        completed.append(item)
        return item.upper()

    results = asyncio.run(run_with_concurrency(list(delays), 4, worker))
    assert results == ["A", "B", "C", "D"]
    assert completed != ["a", "b", "c", "d"]


def test_each_item_is_processed_exactly_once():
    seen: list[int] = []

    async def worker(item):
        seen.append(item)
        await asyncio.sleep(0)
        return item * 2

    results = asyncio.run(run_with_concurrency(list(range(25)), 4, worker))
    assert results == [i * 2 for i in range(25)]
    assert sorted(seen) == list(range(25))


def test_in_flight_never_exceeds_limit():
    state = {"active": 0, "peak": 0}

    async def worker(item):
        state["active"] += 1
        state["peak"] = max(state["peak"], state["active"])
        await asyncio.sleep(0.001 * (item % 3))
        state["active"] -= 1
        return item

    asyncio.run(run_with_concurrency(list(range(12)), 3, worker))
    assert state["peak"] == 3


def test_non_positive_limit_still_runs_everything():
    async def worker(item):
        return item

    assert asyncio.run(run_with_concurrency([1, 2, 3], 0, worker)) == [1, 2, 3]


def test_empty_input():
    async def worker(item):  # pragma: no cover - never called
        return item

    assert asyncio.run(run_with_concurrency([], 5, worker)) == []
