from __future__ import annotations

import asyncio
from typing import List

import pytest

from bp_cli.core.store import InMemoryReadingRepository, ReadingRepository, StorageError
from bp_cli.core.submit import ReadingSubmitter, TransientOperationError, submit_reading


class BrokenRepository(ReadingRepository):
    def list(self):
        return []

    def insert(self, reading):
        raise StorageError("disk full")


def test_submit_waits_then_stores(reading_factory) -> None:
    delays: List[float] = []

    async def fake_sleep(seconds: float) -> None:
        delays.append(seconds)

    repo = InMemoryReadingRepository()
    submitter = ReadingSubmitter(repo, delay_seconds=1.5, sleep=fake_sleep)
    reading = reading_factory("r1", 120, 80)

    assert submit_reading(submitter, reading) is reading
    assert delays == [1.5]
    assert repo.list() == [reading]


def test_cancelled_submission_stores_nothing(reading_factory) -> None:
    repo = InMemoryReadingRepository()

    async def scenario() -> None:
        started = asyncio.Event()

        async def slow_sleep(seconds: float) -> None:
            started.set()
            await asyncio.sleep(3600)

        submitter = ReadingSubmitter(repo, delay_seconds=5, sleep=slow_sleep)
        task = asyncio.ensure_future(submitter.submit(reading_factory("r1", 120, 80)))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert repo.list() == []


def test_storage_failure_becomes_transient_error(reading_factory) -> None:
    async def no_sleep(seconds: float) -> None:
        return None

    submitter = ReadingSubmitter(BrokenRepository(), delay_seconds=0, sleep=no_sleep)
    with pytest.raises(TransientOperationError, match="could not store reading 120/80: disk full"):
        submit_reading(submitter, reading_factory("r1", 120, 80))


def test_default_sleep_with_zero_delay(reading_factory) -> None:
    repo = InMemoryReadingRepository()
    submit_reading(ReadingSubmitter(repo, delay_seconds=0), reading_factory("r1", 120, 80))
    assert len(repo.list()) == 1
