"""
Batch Translation Orchestrator.

Translates dish and section names through the cache:

1. Normalize the requested names (trim, dedupe, sort).
2. Read the (menu date, language) partition of the translation cache.
3. Optionally look the remaining names up in earlier partitions (global pool).
4. Send only the still-missing names to the generative backend, either in
   one prompt (batch_size=0) or in chunks of batch_size with at most
   max_concurrency calls in flight.
5. Keep every valid entry of every response, even when other chunks failed
   or a response covers only part of its chunk.
6. Write the new translations to the day's partition in one merge.
7. Return a translation for every requested name, falling back to the name
   itself, so the UI never shows a blank field.

Backend failures and timeouts never raise out of this module. Two concurrent
requests for the same uncached name may both call the backend; the later
write wins, and both callers get a valid translation.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..cache.base import TranslationCacheStore
from ..cache.sweeper import CacheSweeper
from ..errors import ServiceError, ValidationError
from ..fallbacks import is_cacheable_translation
from ..normalizer import normalize_names, resolve_date_key
from ..prompts import build_translation_prompt, parse_translation_response
from ..schemas.menu import DailyMenu, TranslationLanguage
from .applicator import apply_translations, collect_names

logger = logging.getLogger(__name__)


class CacheDisposition(str, Enum):
    """How a request was served. Sent to clients in the X-Cache header."""
    HIT = "HIT"            # everything came from the cache
    MISS = "MISS"          # the backend was needed and translated everything
    PARTIAL = "PARTIAL"    # some names fell back to their original text
    EMPTY = "EMPTY"        # nothing to translate


@dataclass
class TranslationResult:
    """Outcome of one translate_names call."""
    translations: Dict[str, str]
    disposition: CacheDisposition
    date_key: str
    language: str
    cached: List[str] = field(default_factory=list)
    translated: List[str] = field(default_factory=list)
    fallback: List[str] = field(default_factory=list)


def validate_translations(requested: Iterable[str], response: Dict[str, object]) -> Dict[str, str]:
    """
    Keep the usable entries of a backend response.

    An entry is kept when its key (after trimming) is one of the requested
    names and its value is a non-empty string different from the name.
    Unrequested keys are dropped.
    """
    wanted = set(requested)
    valid: Dict[str, str] = {}
    for key, value in response.items():
        if not isinstance(key, str):
            continue
        name = key.strip()
        if name in wanted and is_cacheable_translation(name, value):
            valid[name] = value.strip()
    return valid


def _to_language(language) -> str:
    try:
        return TranslationLanguage(language).value
    except ValueError:
        raise ValidationError("Language must be 'en' or 'ko'") from None


class TranslationService:

    def __init__(
        self,
        store: TranslationCacheStore,
        backend,
        sweeper: Optional[CacheSweeper] = None,
        batch_size: int = 0,
        max_concurrency: int = 6,
        timeout: float = 30.0,
        use_global_pool: bool = True,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Args:
            store: Translation cache store
            backend: Object with `async generate_text(prompt) -> str` raising ServiceError
            sweeper: Retention sweeper scheduled after cache writes (optional)
            batch_size: Names per backend call; 0 sends all missing names at once
            max_concurrency: Backend calls in flight when batch_size > 0
            timeout: Seconds before a backend call counts as failed
            use_global_pool: Reuse translations stored under earlier menu dates
            today: Clock for the default partition (tests)
        """
        self._store = store
        self._backend = backend
        self._sweeper = sweeper
        self._batch_size = max(0, batch_size or 0)
        self._max_concurrency = max(1, max_concurrency)
        self._timeout = timeout
        self._use_global_pool = use_global_pool
        self._today = today or (lambda: datetime.now().date())

    async def translate_names(
        self,
        names: Iterable[str],
        date_key: Optional[str],
        language,
    ) -> TranslationResult:
        """
        Translate names for one menu date and target language.

        Raises:
            ValidationError: If language is not a translation target
        """
        lang = _to_language(language)
        requested = normalize_names(names)
        cache_date = resolve_date_key(date_key, self._today())

        if not requested:
            return TranslationResult({}, CacheDisposition.EMPTY, cache_date, lang)

        cached = await self._store.get(cache_date, lang, requested)
        missing = [name for name in requested if name not in cached]

        pooled: Dict[str, str] = {}
        if missing and self._use_global_pool:
            pooled = await self._store.lookup_any(lang, missing)
            missing = [name for name in missing if name not in pooled]
            if pooled:
                logger.info("[Translation Cache] Reused %d translations from earlier days (%s)", len(pooled), lang)

        fresh = await self._translate_missing(missing, lang) if missing else {}

        to_store = {**pooled, **fresh}
        if to_store:
            await self._store.put(cache_date, lang, to_store)
            self._schedule_sweep()

        known = {**cached, **pooled, **fresh}
        translations = {name: known.get(name) or name for name in requested}
        fallback = [name for name in requested if name not in known]

        if fallback:
            disposition = CacheDisposition.PARTIAL
        elif missing or pooled:
            disposition = CacheDisposition.MISS
        else:
            disposition = CacheDisposition.HIT

        logger.info(
            "[Translation] %s for %s (%s): %d cached, %d reused, %d translated, %d fallback",
            disposition.value, cache_date, lang, len(cached), len(pooled), len(fresh), len(fallback),
        )
        return TranslationResult(
            translations=translations,
            disposition=disposition,
            date_key=cache_date,
            language=lang,
            cached=sorted({**cached, **pooled}),
            translated=sorted(fresh),
            fallback=fallback,
        )

    async def translate_menu(self, menu: DailyMenu, language) -> Tuple[DailyMenu, TranslationResult]:
        """Translate every item and unknown section name of a menu and apply them."""
        lang = _to_language(language)
        result = await self.translate_names(collect_names(menu, lang), menu.date, lang)
        return apply_translations(menu, result.translations, lang), result

    # =========================================================================
    # Backend Calls
    # =========================================================================

    def _chunks(self, names: List[str]) -> List[List[str]]:
        if not self._batch_size:
            return [names]
        return [names[i:i + self._batch_size] for i in range(0, len(names), self._batch_size)]

    async def _translate_missing(self, names: List[str], language: str) -> Dict[str, str]:
        chunks = self._chunks(names)
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def run(chunk: List[str]) -> Dict[str, str]:
            async with semaphore:
                return await self._translate_chunk(chunk, language)

        results = await asyncio.gather(*(run(chunk) for chunk in chunks))

        merged: Dict[str, str] = {}
        for result in results:
            merged.update(result)
        return merged

    async def _translate_chunk(self, names: List[str], language: str) -> Dict[str, str]:
        """One backend call. Returns the valid translations; never raises."""
        prompt = build_translation_prompt(names, language)
        try:
            response = await asyncio.wait_for(self._backend.generate_text(prompt), timeout=self._timeout)
            parsed = parse_translation_response(response)
        except asyncio.TimeoutError:
            logger.warning("[Translation] Backend timed out after %.1fs for %d names (%s)", self._timeout, len(names), language)
            return {}
        except ServiceError as e:
            logger.warning("[Translation] Backend failed for %d names (%s): %s", len(names), language, e)
            return {}

        valid = validate_translations(names, parsed)
        if len(valid) < len(names):
            logger.info(
                "[Translation] Incomplete response: %d of %d names translated (%s)",
                len(valid), len(names), language,
            )
        return valid

    def _schedule_sweep(self) -> None:
        if self._sweeper is not None:
            self._sweeper.schedule()
