"""
Explanation Orchestrator.

Cache-or-generate for dish explanations. Only genuine explanations are stored;
when the backend fails or answers with nothing usable, the caller gets the
fixed fallback text for the language and the cache stays untouched, so the
next request tries the backend again.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from ..cache.base import ExplanationCacheStore
from ..cache.sweeper import CacheSweeper
from ..errors import ServiceError, ValidationError
from ..fallbacks import explanation_fallback, is_cacheable_explanation
from ..prompts import build_explanation_prompt
from ..schemas.menu import AppLanguage
from .translation import CacheDisposition

logger = logging.getLogger(__name__)


@dataclass
class ExplanationResult:
    explanation: str
    disposition: CacheDisposition
    language: str

    @property
    def is_fallback(self) -> bool:
        return self.disposition == CacheDisposition.PARTIAL


class ExplanationService:

    def __init__(
        self,
        store: ExplanationCacheStore,
        backend,
        sweeper: Optional[CacheSweeper] = None,
        timeout: float = 30.0,
    ):
        self._store = store
        self._backend = backend
        self._sweeper = sweeper
        self._timeout = timeout

    async def explain(self, dish_name: str, language) -> ExplanationResult:
        """
        Explanation of a dish in one language.

        Disposition is HIT for cached text, MISS for freshly generated text,
        PARTIAL when the fallback text is returned, EMPTY for a blank name.

        Raises:
            ValidationError: If language is not an app language
        """
        try:
            lang = AppLanguage(language).value
        except ValueError:
            raise ValidationError("Language must be 'de', 'en' or 'ko'") from None

        name = (dish_name or "").strip()
        if not name:
            return ExplanationResult(explanation_fallback(lang), CacheDisposition.EMPTY, lang)

        cached = await self._store.get(name, lang)
        if cached is not None:
            return ExplanationResult(cached, CacheDisposition.HIT, lang)

        text = await self._generate(name, lang)
        if not is_cacheable_explanation(text, lang):
            logger.warning("[Explanation] No usable explanation for %r (%s), serving fallback", name, lang)
            return ExplanationResult(explanation_fallback(lang), CacheDisposition.PARTIAL, lang)

        text = text.strip()
        if await self._store.put(name, lang, text) and self._sweeper is not None:
            self._sweeper.schedule()
        return ExplanationResult(text, CacheDisposition.MISS, lang)

    async def _generate(self, dish_name: str, language: str) -> Optional[str]:
        prompt = build_explanation_prompt(dish_name, language)
        try:
            return await asyncio.wait_for(self._backend.generate_text(prompt), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning("[Explanation] Backend timed out after %.1fs for %r", self._timeout, dish_name)
        except ServiceError as e:
            logger.warning("[Explanation] Backend failed for %r (%s): %s", dish_name, language, e)
        return None
