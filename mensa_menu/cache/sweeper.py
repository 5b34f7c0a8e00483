"""
Cache Retention Sweeper.

Deletes cache partitions whose date is older than the retention horizon of
their store (7 days for translations, 14 days for explanations by default).

Two triggers:
- schedule(): fire-and-forget sweep after a cache write, throttled so busy
  periods do not sweep on every request. The triggering request never waits
  for it and never sees its errors.
- start_background_sweep(): daily loop at SWEEP_HOUR, started from the
  application lifespan.

Usage:
    sweeper = CacheSweeper([(translation_store, 7), (explanation_store, 14)])
    deleted = await sweeper.sweep()
    # {"translations": ["2024-05-01"], "explanations": []}
"""

import asyncio
import logging
import time
from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

from ..normalizer import parse_date_key
from .base import PartitionedStore

logger = logging.getLogger(__name__)


class CacheSweeper:

    def __init__(
        self,
        targets: Sequence[Tuple[PartitionedStore, int]],
        today: Optional[Callable[[], date]] = None,
        min_interval_seconds: float = 3600,
        sweep_hour: int = 3,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._targets = list(targets)
        self._today = today or (lambda: datetime.now().date())
        self._min_interval = min_interval_seconds
        self._sweep_hour = sweep_hour
        self._clock = clock
        self._last_scheduled: Optional[float] = None
        self._pending: Set[asyncio.Task] = set()
        self._background_task: Optional[asyncio.Task] = None

    async def sweep(self) -> Dict[str, List[str]]:
        """
        Delete every partition older than its store's horizon.

        Partitions whose name is not a YYYY-MM-DD date are left alone.

        Returns:
            Deleted partition names per store kind
        """
        today = self._today()
        deleted: Dict[str, List[str]] = {}
        for store, horizon_days in self._targets:
            removed = []
            for partition in await store.list_partitions():
                partition_date = parse_date_key(partition)
                if partition_date is None:
                    continue
                age_days = (today - partition_date).days
                if age_days > horizon_days and await store.delete_partition(partition):
                    removed.append(partition)
            if removed:
                logger.info("[Cache Cleanup] Deleted %d old %s partitions: %s", len(removed), store.kind, removed)
            deleted[store.kind] = removed
        return deleted

    def schedule(self) -> Optional[asyncio.Task]:
        """
        Start a background sweep unless one ran within the minimum interval.

        Must be called from a running event loop. Returns the task, or None if
        the sweep was skipped.
        """
        now = self._clock()
        if self._last_scheduled is not None and now - self._last_scheduled < self._min_interval:
            return None
        self._last_scheduled = now

        task = asyncio.create_task(self._sweep_logged())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def wait_idle(self) -> None:
        """Wait for sweeps started by schedule() to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _sweep_logged(self) -> None:
        try:
            await self.sweep()
        except Exception as e:
            logger.error("[Cache Cleanup] Error: %s", e)

    # =========================================================================
    # Scheduled Sweep
    # =========================================================================

    async def start_background_sweep(self) -> None:
        """Start the daily sweep loop."""
        self._background_task = asyncio.create_task(self._background_sweep_loop())
        logger.info("Started background cache sweep task (runs daily at %d:00)", self._sweep_hour)

    async def stop_background_sweep(self) -> None:
        """Stop the daily sweep loop and wait for pending sweeps."""
        if self._background_task:
            self._background_task.cancel()
            try:
                await self._background_task
            except asyncio.CancelledError:
                pass
            self._background_task = None
            logger.info("Stopped background cache sweep task")
        await self.wait_idle()

    async def _background_sweep_loop(self) -> None:
        while True:
            try:
                now = datetime.now()
                target_time = now.replace(hour=self._sweep_hour, minute=0, second=0, microsecond=0)
                if now >= target_time:
                    target_time += timedelta(days=1)

                seconds_until_sweep = (target_time - now).total_seconds()
                logger.debug("Next cache sweep in %.0f seconds (at %s)", seconds_until_sweep, target_time)
                await asyncio.sleep(seconds_until_sweep)

                logger.info("Running scheduled cache sweep...")
                await self.sweep()

            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error("Error in background cache sweep: %s", e)
                # Wait an hour before retrying on error
                await asyncio.sleep(3600)
