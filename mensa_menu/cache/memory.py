"""
In-memory cache stores.

Partitions live in process-local dicts and are replaced wholesale on write,
so a reader sees either the old or the new partition, never a mix. Contents
are lost on restart.
"""

from typing import Dict, List

from .base import ExplanationCacheStore, TranslationCacheStore


class MemoryTranslationStore(TranslationCacheStore):

    def __init__(self, today=None):
        super().__init__(today)
        # date -> language -> {name: translation}
        self._partitions: Dict[str, Dict[str, Dict[str, str]]] = {}

    async def _read_partition(self, date_key: str, language: str) -> Dict[str, str]:
        return dict(self._partitions.get(date_key, {}).get(language, {}))

    async def _merge_partition(self, date_key: str, language: str, entries: Dict[str, str]) -> None:
        by_language = self._partitions.get(date_key, {})
        merged = {**by_language.get(language, {}), **entries}
        self._partitions[date_key] = {**by_language, language: merged}

    async def _list_partitions(self) -> List[str]:
        return list(self._partitions)

    async def _delete_partition(self, partition: str) -> None:
        self._partitions.pop(partition, None)


class MemoryExplanationStore(ExplanationCacheStore):

    def __init__(self, today=None):
        super().__init__(today)
        # date -> dish -> {language: explanation}
        self._partitions: Dict[str, Dict[str, Dict[str, str]]] = {}

    async def _read_partition(self, partition: str) -> Dict[str, Dict[str, str]]:
        return {dish: dict(texts) for dish, texts in self._partitions.get(partition, {}).items()}

    async def _merge_entry(self, partition: str, dish_name: str, language: str, explanation: str) -> None:
        current = self._partitions.get(partition, {})
        entry = {**current.get(dish_name, {}), language: explanation}
        self._partitions[partition] = {**current, dish_name: entry}

    async def _list_partitions(self) -> List[str]:
        return list(self._partitions)

    async def _delete_partition(self, partition: str) -> None:
        self._partitions.pop(partition, None)
