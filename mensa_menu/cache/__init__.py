"""
Cache stores for translations and explanations.

    TranslationCacheStore   (date, language, name) -> translated name
    ExplanationCacheStore   (dish, language) -> explanation, partitioned by day
    CacheSweeper            deletes partitions past their retention horizon

Implementations: memory (MemoryTranslationStore, MemoryExplanationStore),
JSON files (FileTranslationStore, FileExplanationStore) and SQL
(SqlTranslationStore, SqlExplanationStore).
"""

from .base import ExplanationCacheStore, PartitionedStore, TranslationCacheStore
from .file import FileExplanationStore, FileTranslationStore
from .memory import MemoryExplanationStore, MemoryTranslationStore
from .sql import SqlExplanationStore, SqlTranslationStore
from .sweeper import CacheSweeper

__all__ = [
    "PartitionedStore",
    "TranslationCacheStore",
    "ExplanationCacheStore",
    "MemoryTranslationStore",
    "MemoryExplanationStore",
    "FileTranslationStore",
    "FileExplanationStore",
    "SqlTranslationStore",
    "SqlExplanationStore",
    "CacheSweeper",
]
