"""Asynchronous reading submission."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from bp_cli.core.models import Reading
from bp_cli.core.store import ReadingRepository, StorageError

log = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


class TransientOperationError(RuntimeError):
    """Raised when a reading could not be saved."""


class ReadingSubmitter:
    """Save readings after a simulated round trip.

    ``sleep`` is injectable so tests can run without real delays. Cancelling
    the submitting task before the delay completes leaves the store untouched.
    """

    def __init__(
        self,
        repository: ReadingRepository,
        delay_seconds: float = 1.0,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self.repository = repository
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    async def submit(self, reading: Reading) -> Reading:
        log.debug("Submitting reading %s (delay %.2fs)", reading.id, self.delay_seconds)
        await self._sleep(self.delay_seconds)
        try:
            return self.repository.insert(reading)
        except (StorageError, OSError) as exc:
            raise TransientOperationError(f"could not store reading {reading.pressure}: {exc}") from exc


def submit_reading(submitter: ReadingSubmitter, reading: Reading) -> Reading:
    """Run a submission to completion from synchronous code."""
    return asyncio.run(submitter.submit(reading))
