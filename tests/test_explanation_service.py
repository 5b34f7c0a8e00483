"""
Tests for the explanation orchestrator.
"""
import asyncio

import pytest

from mensa_menu.errors import ServiceError, ValidationError
from mensa_menu.fallbacks import explanation_fallback
from mensa_menu.services import CacheDisposition, ExplanationService

from tests.helpers import FakeBackend

SCHNITZEL_EN = "Schnitzel is a thin, breaded and fried cutlet. It is a classic of German and Austrian cooking."


class TestExplain:
    """Cache-or-generate behavior."""

    def test_generated_explanation_is_cached(self, explanation_store):
        backend = FakeBackend(lambda prompt: SCHNITZEL_EN)
        service = ExplanationService(explanation_store, backend)

        first = asyncio.run(service.explain("Schnitzel", "en"))
        second = asyncio.run(service.explain("Schnitzel", "en"))

        assert first.explanation == SCHNITZEL_EN
        assert first.disposition == CacheDisposition.MISS
        assert second.disposition == CacheDisposition.HIT
        assert backend.calls == 1

    def test_prompt_names_dish_and_language(self, explanation_store):
        backend = FakeBackend(lambda prompt: "Ein Eintopf ist ein deftiges Gericht.")
        service = ExplanationService(explanation_store, backend)

        asyncio.run(service.explain("Eintopf", "de"))

        assert '"Eintopf"' in backend.prompts[0]
        assert "Deutsch" in backend.prompts[0]

    def test_languages_are_cached_separately(self, explanation_store):
        backend = FakeBackend(lambda prompt: SCHNITZEL_EN)
        service = ExplanationService(explanation_store, backend)

        asyncio.run(service.explain("Schnitzel", "en"))
        result = asyncio.run(service.explain("Schnitzel", "ko"))

        assert result.disposition == CacheDisposition.MISS
        assert backend.calls == 2

    def test_dish_name_is_trimmed(self, explanation_store):
        backend = FakeBackend(lambda prompt: SCHNITZEL_EN)
        service = ExplanationService(explanation_store, backend)

        asyncio.run(service.explain("  Schnitzel ", "en"))

        assert asyncio.run(explanation_store.get("Schnitzel", "en")) == SCHNITZEL_EN


class TestNoPoison:
    """Fallback texts are returned but never stored."""

    def test_backend_error_returns_fallback(self, explanation_store):
        backend = FakeBackend(lambda prompt: ServiceError("unavailable"))
        service = ExplanationService(explanation_store, backend)

        result = asyncio.run(service.explain("Schnitzel", "en"))

        assert result.explanation == explanation_fallback("en")
        assert result.is_fallback
        assert asyncio.run(explanation_store.get("Schnitzel", "en")) is None

    def test_backend_is_retried_after_failure(self, explanation_store):
        responses = [ServiceError("unavailable"), SCHNITZEL_EN]
        backend = FakeBackend(lambda prompt: responses.pop(0))
        service = ExplanationService(explanation_store, backend)

        asyncio.run(service.explain("Schnitzel", "en"))
        result = asyncio.run(service.explain("Schnitzel", "en"))

        assert result.explanation == SCHNITZEL_EN
        assert backend.calls == 2

    def test_fallback_text_from_backend_is_not_cached(self, explanation_store):
        backend = FakeBackend(lambda prompt: "Unable to generate explanation.")
        service = ExplanationService(explanation_store, backend)

        result = asyncio.run(service.explain("Schnitzel", "en"))

        assert result.explanation == explanation_fallback("en")
        assert asyncio.run(explanation_store.list_partitions()) == []

    def test_timeout_returns_localized_fallback(self, explanation_store):
        async def slow(prompt):
            await asyncio.sleep(1)
            return SCHNITZEL_EN

        service = ExplanationService(explanation_store, FakeBackend(slow), timeout=0.05)

        result = asyncio.run(service.explain("Schnitzel", "ko"))

        assert result.explanation == explanation_fallback("ko")
        assert result.disposition == CacheDisposition.PARTIAL


class TestRequestHandling:

    def test_blank_name_skips_backend(self, explanation_store):
        backend = FakeBackend(lambda prompt: SCHNITZEL_EN)
        service = ExplanationService(explanation_store, backend)

        result = asyncio.run(service.explain("   ", "en"))

        assert result.disposition == CacheDisposition.EMPTY
        assert backend.calls == 0

    def test_unknown_language_raises(self, explanation_store):
        service = ExplanationService(explanation_store, FakeBackend())

        with pytest.raises(ValidationError):
            asyncio.run(service.explain("Schnitzel", "fr"))
