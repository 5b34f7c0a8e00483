"""
SQL cache stores (SQLAlchemy).

Both stores share the cache_entries table, separated by the kind column.
Each partition write runs in one transaction, so a reader sees all or none
of it. Queries run in a worker thread because the session API is blocking.
"""

import asyncio
import logging
from typing import Callable, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import CacheIOError
from ..fallbacks import is_cacheable_explanation
from ..models import CacheEntry
from .base import ExplanationCacheStore, TranslationCacheStore

logger = logging.getLogger(__name__)


class CacheEntryTable:
    """Blocking helpers over cache_entries for one kind of entry."""

    def __init__(self, session_factory: Callable[[], Session], kind: str):
        self._session_factory = session_factory
        self._kind = kind

    def read(self, partition: str, language: Optional[str] = None) -> List[Tuple[str, str, str]]:
        """(language, subject, text) rows of one partition."""
        with self._session_factory() as db:
            query = db.query(CacheEntry.language, CacheEntry.subject, CacheEntry.text).filter(
                CacheEntry.kind == self._kind,
                CacheEntry.partition_date == partition,
            )
            if language is not None:
                query = query.filter(CacheEntry.language == language)
            return [tuple(row) for row in query.all()]

    def upsert(self, partition: str, language: str, entries: Dict[str, str]) -> None:
        with self._session_factory() as db:
            try:
                existing = {
                    row.subject: row
                    for row in db.query(CacheEntry).filter(
                        CacheEntry.kind == self._kind,
                        CacheEntry.partition_date == partition,
                        CacheEntry.language == language,
                        CacheEntry.subject.in_(list(entries)),
                    )
                }
                for subject, text in entries.items():
                    row = existing.get(subject)
                    if row is not None:
                        row.text = text
                    else:
                        db.add(CacheEntry(
                            kind=self._kind,
                            partition_date=partition,
                            language=language,
                            subject=subject,
                            text=text,
                        ))
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                raise

    def texts_newest_first(self, subject: str, language: str) -> List[str]:
        with self._session_factory() as db:
            rows = (
                db.query(CacheEntry.text)
                .filter(
                    CacheEntry.kind == self._kind,
                    CacheEntry.subject == subject,
                    CacheEntry.language == language,
                )
                .order_by(CacheEntry.partition_date.desc())
                .all()
            )
            return [row[0] for row in rows]

    def partitions(self) -> List[str]:
        with self._session_factory() as db:
            rows = (
                db.query(CacheEntry.partition_date, func.count(CacheEntry.id))
                .filter(CacheEntry.kind == self._kind)
                .group_by(CacheEntry.partition_date)
                .all()
            )
            return [row[0] for row in rows]

    def delete(self, partition: str) -> int:
        with self._session_factory() as db:
            try:
                deleted = (
                    db.query(CacheEntry)
                    .filter(
                        CacheEntry.kind == self._kind,
                        CacheEntry.partition_date == partition,
                    )
                    .delete(synchronize_session=False)
                )
                db.commit()
                return deleted
            except SQLAlchemyError:
                db.rollback()
                raise

    async def run(self, fn, *args):
        """Run a blocking helper in a worker thread, mapping DB errors to CacheIOError."""
        try:
            return await asyncio.to_thread(fn, *args)
        except SQLAlchemyError as e:
            raise CacheIOError(f"{self._kind} query failed: {e}") from e


class SqlTranslationStore(TranslationCacheStore):

    def __init__(self, session_factory: Callable[[], Session], today=None):
        super().__init__(today)
        self._table = CacheEntryTable(session_factory, self.kind)

    async def _read_partition(self, date_key: str, language: str) -> Dict[str, str]:
        rows = await self._table.run(self._table.read, date_key, language)
        return {subject: text for _, subject, text in rows}

    async def _merge_partition(self, date_key: str, language: str, entries: Dict[str, str]) -> None:
        await self._table.run(self._table.upsert, date_key, language, entries)

    async def _list_partitions(self) -> List[str]:
        return await self._table.run(self._table.partitions)

    async def _delete_partition(self, partition: str) -> None:
        deleted = await self._table.run(self._table.delete, partition)
        logger.debug("[Translation Cache] Removed %d rows for %s", deleted, partition)


class SqlExplanationStore(ExplanationCacheStore):

    def __init__(self, session_factory: Callable[[], Session], today=None):
        super().__init__(today)
        self._table = CacheEntryTable(session_factory, self.kind)

    async def _read_partition(self, partition: str) -> Dict[str, Dict[str, str]]:
        rows = await self._table.run(self._table.read, partition)
        result: Dict[str, Dict[str, str]] = {}
        for language, subject, text in rows:
            result.setdefault(subject, {})[language] = text
        return result

    async def _lookup(self, dish_name: str, language: str) -> Optional[str]:
        texts = await self._table.run(self._table.texts_newest_first, dish_name, language)
        return next((text for text in texts if is_cacheable_explanation(text, language)), None)

    async def _merge_entry(self, partition: str, dish_name: str, language: str, explanation: str) -> None:
        await self._table.run(self._table.upsert, partition, language, {dish_name: explanation})

    async def _list_partitions(self) -> List[str]:
        return await self._table.run(self._table.partitions)

    async def _delete_partition(self, partition: str) -> None:
        deleted = await self._table.run(self._table.delete, partition)
        logger.debug("[Explanation Cache] Removed %d rows for %s", deleted, partition)
