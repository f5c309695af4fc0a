"""Loading gate keeps the busy flag honest on every exit path."""

from __future__ import annotations

import asyncio

import pytest

from booksearch.search.loading import LoadingGate


@pytest.mark.asyncio
async def test_busy_only_while_operation_runs():
    gate = LoadingGate()
    seen: list[bool] = []

    async def operation():
        seen.append(gate.is_busy)
        return "done"

    assert gate.is_busy is False
    assert await gate.run(operation) == "done"
    assert seen == [True]
    assert gate.is_busy is False


@pytest.mark.asyncio
async def test_released_when_operation_raises():
    gate = LoadingGate()

    async def operation():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await gate.run(operation)
    assert gate.is_busy is False


@pytest.mark.asyncio
async def test_released_when_cancelled():
    gate = LoadingGate()
    started = asyncio.Event()

    async def operation():
        started.set()
        await asyncio.sleep(10)

    task = asyncio.create_task(gate.run(operation))
    await started.wait()
    assert gate.is_busy is True
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert gate.is_busy is False


@pytest.mark.asyncio
async def test_overlapping_operations_keep_gate_busy():
    gate = LoadingGate()
    first_release = asyncio.Event()
    second_release = asyncio.Event()

    async def wait_for(event: asyncio.Event):
        await event.wait()

    first = asyncio.create_task(gate.run(lambda: wait_for(first_release)))
    second = asyncio.create_task(gate.run(lambda: wait_for(second_release)))
    await asyncio.sleep(0)

    first_release.set()
    await first
    assert gate.is_busy is True

    second_release.set()
    await second
    assert gate.is_busy is False


@pytest.mark.asyncio
async def test_hold_context_manager():
    gate = LoadingGate()
    async with gate.hold():
        assert gate.is_busy is True
    assert gate.is_busy is False
