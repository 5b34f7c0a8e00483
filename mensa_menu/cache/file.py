"""
JSON-file cache stores.

Layout under the cache root:

    translations/<YYYY-MM-DD>/<language>.json     {"Gemüsepfanne": "Vegetable Pan", ...}
    explanations/<YYYY-MM-DD>/explanations.json   {"Gemüsepfanne": {"en": "...", "ko": "..."}, ...}

Files are plain JSON maps so entries written by older versions stay readable
for the whole retention window. Every write goes to a temporary file in the
same directory and is moved into place with os.replace, so readers never see
a half-written partition and a failed write leaves the previous file intact.

Blocking file I/O runs in a worker thread.
"""

import asyncio
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List

from ..errors import CacheIOError
from .base import ExplanationCacheStore, TranslationCacheStore

logger = logging.getLogger(__name__)

EXPLANATIONS_FILE = "explanations.json"


def _check_segment(segment: str) -> str:
    if not segment or segment in (".", "..") or "/" in segment or "\\" in segment:
        raise CacheIOError(f"Invalid cache path segment: {segment!r}")
    return segment


def _load_json(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> Dict[str, Any]:
    """Load a JSON object. A missing file is an empty partition."""
    try:
        return _load_json(path)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        raise CacheIOError(f"Could not read {path}: {e}") from e


def _write_json_atomic(path: Path, data: Dict[str, Any]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise
    except OSError as e:
        raise CacheIOError(f"Could not write {path}: {e}") from e


def _read_for_merge(path: Path) -> Dict[str, Any]:
    """
    Existing content for a read-modify-write.

    A file that is not a JSON object is replaced. Any other read error drops
    the write so the entries already on disk survive.
    """
    try:
        return _load_json(path)
    except FileNotFoundError:
        return {}
    except ValueError as e:
        logger.warning("Replacing corrupt cache file %s: %s", path, e)
        return {}
    except OSError as e:
        raise CacheIOError(f"Could not read {path}: {e}") from e


class _FileStoreMixin:
    """Directory-per-partition handling shared by both file stores."""

    def _init_root(self, root: Path) -> None:
        self._root = Path(root)

    def _partition_dir(self, partition: str) -> Path:
        return self._root / _check_segment(partition)

    def _list_sync(self) -> List[str]:
        if not self._root.exists():
            return []
        try:
            return [entry.name for entry in self._root.iterdir() if entry.is_dir()]
        except OSError as e:
            raise CacheIOError(f"Could not list {self._root}: {e}") from e

    def _delete_sync(self, partition: str) -> None:
        path = self._partition_dir(partition)
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            return
        except OSError as e:
            raise CacheIOError(f"Could not delete {path}: {e}") from e

    async def _list_partitions(self) -> List[str]:
        return await asyncio.to_thread(self._list_sync)

    async def _delete_partition(self, partition: str) -> None:
        await asyncio.to_thread(self._delete_sync, partition)


class FileTranslationStore(_FileStoreMixin, TranslationCacheStore):

    def __init__(self, root, today=None):
        super().__init__(today)
        self._init_root(Path(root) / "translations")

    def _path(self, date_key: str, language: str) -> Path:
        return self._partition_dir(date_key) / f"{_check_segment(language)}.json"

    def _merge_sync(self, date_key: str, language: str, entries: Dict[str, str]) -> int:
        path = self._path(date_key, language)
        merged = {**_read_for_merge(path), **entries}
        _write_json_atomic(path, merged)
        return len(merged)

    async def _read_partition(self, date_key: str, language: str) -> Dict[str, str]:
        return await asyncio.to_thread(_read_json, self._path(date_key, language))

    async def _merge_partition(self, date_key: str, language: str, entries: Dict[str, str]) -> None:
        total = await asyncio.to_thread(self._merge_sync, date_key, language, entries)
        logger.debug("[Translation Cache] %s/%s.json now holds %d entries", date_key, language, total)


class FileExplanationStore(_FileStoreMixin, ExplanationCacheStore):

    def __init__(self, root, today=None):
        super().__init__(today)
        self._init_root(Path(root) / "explanations")

    def _path(self, partition: str) -> Path:
        return self._partition_dir(partition) / EXPLANATIONS_FILE

    def _merge_sync(self, partition: str, dish_name: str, language: str, explanation: str) -> None:
        path = self._path(partition)
        current = _read_for_merge(path)
        entry = current.get(dish_name)
        if not isinstance(entry, dict):
            entry = {}
        current[dish_name] = {**entry, language: explanation}
        _write_json_atomic(path, current)

    async def _read_partition(self, partition: str) -> Dict[str, Dict[str, str]]:
        return await asyncio.to_thread(_read_json, self._path(partition))

    async def _merge_entry(self, partition: str, dish_name: str, language: str, explanation: str) -> None:
        await asyncio.to_thread(self._merge_sync, partition, dish_name, language, explanation)
