"""
Tests for service wiring.
"""
import asyncio

import pytest

import mensa_menu.config as config_mod
from mensa_menu.cache import (
    FileTranslationStore,
    MemoryExplanationStore,
    MemoryTranslationStore,
    SqlExplanationStore,
)
from mensa_menu.container import build_container, build_stores

from tests.helpers import FakeBackend


class TestBuildStores:

    def test_memory(self):
        translations, _, engine = build_stores("memory")
        assert isinstance(translations, MemoryTranslationStore)
        assert engine is None

    def test_file_uses_cache_dir(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config_mod, "CACHE_DIR", str(tmp_path))

        translations, _, _ = build_stores("file")
        asyncio.run(translations.put("2026-10-18", "en", {"Eintopf": "Stew"}))

        assert isinstance(translations, FileTranslationStore)
        assert (tmp_path / "translations" / "2026-10-18" / "en.json").exists()

    def test_sql_creates_table(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config_mod, "CACHE_DB_URL", f"sqlite:///{tmp_path / 'cache.db'}")

        _, explanations, engine = build_stores("sql")
        try:
            assert isinstance(explanations, SqlExplanationStore)
            assert asyncio.run(explanations.put("Eintopf", "en", "A hearty stew."))
            assert asyncio.run(explanations.get("Eintopf", "en")) == "A hearty stew."
        finally:
            engine.dispose()

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            build_stores("redis")


class TestContainer:

    def test_close_closes_backend(self):
        backend = FakeBackend()
        container = build_container(
            translation_store=MemoryTranslationStore(),
            explanation_store=MemoryExplanationStore(),
            backend=backend,
        )

        asyncio.run(container.close())

        assert backend.closed

    def test_services_share_stores_and_sweeper(self):
        container = build_container(
            translation_store=MemoryTranslationStore(),
            explanation_store=MemoryExplanationStore(),
            backend=FakeBackend(),
        )

        assert container.translation_service._store is container.translation_store
        assert container.explanation_service._sweeper is container.sweeper
