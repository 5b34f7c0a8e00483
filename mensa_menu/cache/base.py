"""
Cache store interfaces.

Both stores are partitioned by calendar date (YYYY-MM-DD). Translation
partitions are keyed by the menu date; explanation partitions by the day the
explanation was generated, while lookups ignore the date because a dish's
explanation does not change from day to day.

The public methods of these base classes are the error boundary of the cache:
implementations raise CacheIOError from their underscore methods, and the
public methods log it and degrade to a cache miss (reads) or a dropped write
(writes). Callers never see storage errors.

Validity filters are applied here, at write time, so every implementation
stores only real translations and explanations.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Callable, Dict, Iterable, List, Optional

from ..errors import CacheIOError
from ..fallbacks import is_cacheable_explanation, is_cacheable_translation
from ..normalizer import language_code, parse_date_key, today_key

logger = logging.getLogger(__name__)


def _default_today() -> date:
    return datetime.now().date()


class PartitionedStore(ABC):
    """Common partition listing and deletion used by the sweeper."""

    kind: str = "cache"

    def __init__(self, today: Optional[Callable[[], date]] = None):
        self._today = today or _default_today

    def current_partition(self) -> str:
        return today_key(self._today())

    async def list_partitions(self) -> List[str]:
        """Names of all partitions, including ones that are not dates."""
        try:
            return sorted(await self._list_partitions())
        except CacheIOError as e:
            logger.warning("[%s] Could not list partitions: %s", self.kind, e)
            return []

    async def delete_partition(self, partition: str) -> bool:
        """Delete one partition. Returns False if the delete failed."""
        try:
            await self._delete_partition(partition)
        except CacheIOError as e:
            logger.error("[%s] Could not delete partition %s: %s", self.kind, partition, e)
            return False
        logger.info("[%s] Deleted partition %s", self.kind, partition)
        return True

    async def _dated_partitions_newest_first(self) -> List[str]:
        partitions = await self.list_partitions()
        return sorted((p for p in partitions if parse_date_key(p)), reverse=True)

    async def close(self) -> None:
        """Release resources held by the store."""

    @abstractmethod
    async def _list_partitions(self) -> List[str]:
        ...

    @abstractmethod
    async def _delete_partition(self, partition: str) -> None:
        ...


class TranslationCacheStore(PartitionedStore):
    """
    (date, language, original name) -> translated name.

    Writes merge into the existing partition: names in the new batch take the
    new value, names not in the batch keep their stored value.
    """

    kind = "translations"

    async def get(self, date_key: str, language, names: Iterable[str]) -> Dict[str, str]:
        """Cached translations for the subset of names present in the partition."""
        lang = language_code(language)
        try:
            partition = await self._read_partition(date_key, lang)
        except CacheIOError as e:
            logger.warning("[Translation Cache] Read failed for %s (%s): %s", date_key, lang, e)
            return {}

        found = {}
        for name in names:
            text = partition.get(name)
            if is_cacheable_translation(name, text):
                found[name] = text
        logger.debug(
            "[Translation Cache] %d/%d names cached for %s (%s)",
            len(found), len(partition), date_key, lang,
        )
        return found

    async def put(self, date_key: str, language, entries: Dict[str, str]) -> int:
        """
        Merge entries into the partition.

        Empty values and values equal to their key are dropped before writing.

        Returns:
            Number of entries written (0 if the write failed)
        """
        lang = language_code(language)
        valid = {
            name: text.strip()
            for name, text in entries.items()
            if is_cacheable_translation(name, text)
        }
        if not valid:
            return 0
        try:
            await self._merge_partition(date_key, lang, valid)
        except CacheIOError as e:
            logger.error("[Translation Cache] Failed to save translations for %s (%s): %s", date_key, lang, e)
            return 0
        logger.info("[Translation Cache] Saved %d translations for %s (%s)", len(valid), date_key, lang)
        return len(valid)

    async def lookup_any(self, language, names: Iterable[str]) -> Dict[str, str]:
        """
        Look names up across all dated partitions, newest partition first.

        Used to reuse translations of dishes that were on earlier menus.
        """
        lang = language_code(language)
        remaining = set(names)
        found: Dict[str, str] = {}
        for partition in await self._dated_partitions_newest_first():
            if not remaining:
                break
            try:
                stored = await self._read_partition(partition, lang)
            except CacheIOError as e:
                logger.warning("[Translation Cache] Skipping unreadable partition %s: %s", partition, e)
                continue
            for name in list(remaining):
                text = stored.get(name)
                if is_cacheable_translation(name, text):
                    found[name] = text
                    remaining.discard(name)
        return found

    @abstractmethod
    async def _read_partition(self, date_key: str, language: str) -> Dict[str, str]:
        """All entries of one (date, language) partition. Missing partition -> {}."""

    @abstractmethod
    async def _merge_partition(self, date_key: str, language: str, entries: Dict[str, str]) -> None:
        """Merge entries into one partition in a single atomic write."""


class ExplanationCacheStore(PartitionedStore):
    """
    (dish name, language) -> explanation text.

    Only texts passing is_cacheable_explanation are ever written, so a
    failure marker can never be served as if it were a real explanation.
    """

    kind = "explanations"

    async def get(self, dish_name: str, language) -> Optional[str]:
        lang = language_code(language)
        try:
            text = await self._lookup(dish_name, lang)
        except CacheIOError as e:
            logger.warning("[Explanation Cache] Read failed for %r (%s): %s", dish_name, lang, e)
            return None
        if not is_cacheable_explanation(text, lang):
            return None
        logger.info("[Explanation Cache] HIT for %r (%s)", dish_name, lang)
        return text

    async def put(self, dish_name: str, language, explanation: str) -> bool:
        """Store an explanation in today's partition. Returns True if written."""
        lang = language_code(language)
        if not is_cacheable_explanation(explanation, lang):
            logger.info("[Explanation Cache] Not caching fallback/empty text for %r (%s)", dish_name, lang)
            return False
        partition = self.current_partition()
        try:
            await self._merge_entry(partition, dish_name, lang, explanation.strip())
        except CacheIOError as e:
            logger.error("[Explanation Cache] Failed to save %r (%s): %s", dish_name, lang, e)
            return False
        logger.info("[Explanation Cache] Saved %r (%s)", dish_name, lang)
        return True

    async def _lookup(self, dish_name: str, language: str) -> Optional[str]:
        """Newest stored explanation across partitions. Override for indexed backends."""
        for partition in await self._dated_partitions_newest_first():
            try:
                stored = await self._read_partition(partition)
            except CacheIOError as e:
                logger.warning("[Explanation Cache] Skipping unreadable partition %s: %s", partition, e)
                continue
            entry = stored.get(dish_name)
            if isinstance(entry, dict) and is_cacheable_explanation(entry.get(language), language):
                return entry[language]
        return None

    @abstractmethod
    async def _read_partition(self, partition: str) -> Dict[str, Dict[str, str]]:
        """dish name -> {language: explanation} for one partition."""

    @abstractmethod
    async def _merge_entry(self, partition: str, dish_name: str, language: str, explanation: str) -> None:
        """Set one explanation, keeping the partition's other entries."""
