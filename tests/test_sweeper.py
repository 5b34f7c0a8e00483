"""
Tests for the cache retention sweeper.
"""
import asyncio
import logging

from mensa_menu.cache import CacheSweeper, FileTranslationStore, MemoryExplanationStore, MemoryTranslationStore

from tests.helpers import TODAY


def _today():
    return TODAY


def _fill(store, partitions):
    for partition in partitions:
        asyncio.run(store.put(partition, "en", {"Eintopf": "Stew"}))


def _fill_explanations(store, partitions):
    for partition in partitions:
        asyncio.run(store._merge_entry(partition, "Eintopf", "en", "A hearty stew."))


class TestSweep:
    """Partitions older than the horizon are deleted, the rest kept."""

    def test_translation_horizon(self):
        store = MemoryTranslationStore(today=_today)
        _fill(store, ["2026-10-10", "2026-10-11", "2026-10-12", "2026-10-18"])
        sweeper = CacheSweeper([(store, 7)], today=_today)

        deleted = asyncio.run(sweeper.sweep())

        # 8 days old goes, exactly 7 and 6 days old stay
        assert deleted == {"translations": ["2026-10-10"]}
        assert asyncio.run(store.list_partitions()) == ["2026-10-11", "2026-10-12", "2026-10-18"]

    def test_explanation_horizon(self):
        store = MemoryExplanationStore(today=_today)
        _fill_explanations(store, ["2026-10-03", "2026-10-04", "2026-10-10"])
        sweeper = CacheSweeper([(store, 14)], today=_today)

        deleted = asyncio.run(sweeper.sweep())

        assert deleted == {"explanations": ["2026-10-03"]}
        assert asyncio.run(store.list_partitions()) == ["2026-10-04", "2026-10-10"]

    def test_each_store_uses_its_own_horizon(self):
        translations = MemoryTranslationStore(today=_today)
        explanations = MemoryExplanationStore(today=_today)
        _fill(translations, ["2026-10-08"])
        _fill_explanations(explanations, ["2026-10-08"])
        sweeper = CacheSweeper([(translations, 7), (explanations, 14)], today=_today)

        deleted = asyncio.run(sweeper.sweep())

        assert deleted == {"translations": ["2026-10-08"], "explanations": []}

    def test_non_date_partitions_are_left_alone(self, tmp_path):
        store = FileTranslationStore(tmp_path, today=_today)
        _fill(store, ["2026-09-01"])
        (tmp_path / "translations" / "legacy").mkdir()
        sweeper = CacheSweeper([(store, 7)], today=_today)

        asyncio.run(sweeper.sweep())

        assert asyncio.run(store.list_partitions()) == ["legacy"]

    def test_file_partition_directory_is_removed(self, tmp_path):
        store = FileTranslationStore(tmp_path, today=_today)
        _fill(store, ["2026-09-01"])
        sweeper = CacheSweeper([(store, 7)], today=_today)

        asyncio.run(sweeper.sweep())

        assert not (tmp_path / "translations" / "2026-09-01").exists()


class _BrokenStore(MemoryTranslationStore):

    async def _delete_partition(self, partition):
        raise RuntimeError("permission denied")


class TestSchedule:
    """Fire-and-forget sweeps after cache writes."""

    def test_schedule_runs_sweep_in_background(self):
        store = MemoryTranslationStore(today=_today)
        _fill(store, ["2026-09-01"])
        sweeper = CacheSweeper([(store, 7)], today=_today)

        async def run():
            task = sweeper.schedule()
            assert task is not None
            await sweeper.wait_idle()

        asyncio.run(run())

        assert asyncio.run(store.list_partitions()) == []

    def test_schedule_is_throttled(self):
        now = {"value": 1000.0}
        sweeper = CacheSweeper(
            [(MemoryTranslationStore(today=_today), 7)],
            today=_today,
            min_interval_seconds=60,
            clock=lambda: now["value"],
        )

        async def run():
            first = sweeper.schedule()
            second = sweeper.schedule()
            now["value"] += 61
            third = sweeper.schedule()
            await sweeper.wait_idle()
            return first, second, third

        first, second, third = asyncio.run(run())

        assert first is not None
        assert second is None
        assert third is not None

    def test_errors_are_logged_not_raised(self, caplog):
        store = _BrokenStore(today=_today)
        _fill(store, ["2026-09-01"])
        sweeper = CacheSweeper([(store, 7)], today=_today)

        async def run():
            sweeper.schedule()
            await sweeper.wait_idle()

        with caplog.at_level(logging.ERROR, logger="mensa_menu"):
            asyncio.run(run())

        assert any("[Cache Cleanup] Error" in record.getMessage() for record in caplog.records)


class TestBackgroundSweep:

    def test_start_and_stop(self):
        sweeper = CacheSweeper([(MemoryTranslationStore(today=_today), 7)], today=_today)

        async def run():
            await sweeper.start_background_sweep()
            assert sweeper._background_task is not None
            await sweeper.stop_background_sweep()
            assert sweeper._background_task is None

        asyncio.run(run())
