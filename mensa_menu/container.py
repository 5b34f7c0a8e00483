"""
Service wiring.

Builds the cache stores, sweeper, backend and orchestrators from config and
hands them to the app as one object (app.state.container). Tests build their
own container with memory stores and a fake backend.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from functools import partial
from pathlib import Path
from typing import Any, Callable, Optional, Tuple

from fastapi import Request
from sqlalchemy.engine import Engine

from . import config
from .cache import (
    CacheSweeper,
    ExplanationCacheStore,
    FileExplanationStore,
    FileTranslationStore,
    MemoryExplanationStore,
    MemoryTranslationStore,
    SqlExplanationStore,
    SqlTranslationStore,
    TranslationCacheStore,
)
from .db import create_cache_engine, create_session_factory
from .llm_client import OpenAIBackend
from .scraper import fetch_menu
from .services import ExplanationService, MenuProvider, TranslationService

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    translation_store: TranslationCacheStore
    explanation_store: ExplanationCacheStore
    sweeper: CacheSweeper
    backend: Any
    translation_service: TranslationService
    explanation_service: ExplanationService
    menu_provider: MenuProvider
    engine: Optional[Engine] = field(default=None, repr=False)

    async def close(self) -> None:
        await self.sweeper.stop_background_sweep()
        await self.translation_store.close()
        await self.explanation_store.close()
        close_backend = getattr(self.backend, "close", None)
        if close_backend is not None:
            await close_backend()
        if self.engine is not None:
            self.engine.dispose()


def build_stores(
    backend_name: str = config.CACHE_BACKEND,
) -> Tuple[TranslationCacheStore, ExplanationCacheStore, Optional[Engine]]:
    """
    Create the translation and explanation stores for CACHE_BACKEND.

    Raises:
        ValueError: If the backend name is unknown
    """
    if backend_name == "memory":
        return MemoryTranslationStore(), MemoryExplanationStore(), None

    if backend_name == "file":
        root = Path(config.CACHE_DIR)
        return FileTranslationStore(root), FileExplanationStore(root), None

    if backend_name == "sql":
        engine = create_cache_engine(config.CACHE_DB_URL)
        session_factory = create_session_factory(engine)
        return SqlTranslationStore(session_factory), SqlExplanationStore(session_factory), engine

    raise ValueError(f"Unknown CACHE_BACKEND: {backend_name!r} (expected 'file', 'memory' or 'sql')")


def build_container(
    translation_store: Optional[TranslationCacheStore] = None,
    explanation_store: Optional[ExplanationCacheStore] = None,
    backend: Any = None,
    menu_provider: Optional[MenuProvider] = None,
    today: Optional[Callable[[], date]] = None,
) -> ServiceContainer:
    """
    Wire every service from config. Any argument overrides the configured part;
    today replaces the clock used for cache partitions and retention.
    """
    engine = None
    if translation_store is None or explanation_store is None:
        default_translations, default_explanations, engine = build_stores()
        translation_store = translation_store if translation_store is not None else default_translations
        explanation_store = explanation_store if explanation_store is not None else default_explanations

    if backend is None:
        backend = OpenAIBackend()

    sweeper = CacheSweeper(
        [
            (translation_store, config.TRANSLATION_RETENTION_DAYS),
            (explanation_store, config.EXPLANATION_RETENTION_DAYS),
        ],
        min_interval_seconds=config.SWEEP_MIN_INTERVAL_SECONDS,
        sweep_hour=config.SWEEP_HOUR,
        today=today,
    )

    translation_service = TranslationService(
        translation_store,
        backend,
        sweeper=sweeper,
        batch_size=config.TRANSLATION_BATCH_SIZE,
        max_concurrency=config.TRANSLATION_MAX_CONCURRENCY,
        timeout=config.BACKEND_TIMEOUT_SECONDS,
        use_global_pool=config.TRANSLATION_GLOBAL_POOL,
        today=today,
    )
    explanation_service = ExplanationService(
        explanation_store,
        backend,
        sweeper=sweeper,
        timeout=config.BACKEND_TIMEOUT_SECONDS,
    )

    if menu_provider is None:
        menu_provider = MenuProvider(
            fetch=partial(fetch_menu, config.MENU_URL, config.MENU_VENUE_NAME, config.MENU_FETCH_TIMEOUT),
            refresh_seconds=config.MENU_REFRESH_SECONDS,
        )

    logger.info(
        "Services ready (cache=%s, batch_size=%d, global_pool=%s)",
        type(translation_store).__name__, config.TRANSLATION_BATCH_SIZE, config.TRANSLATION_GLOBAL_POOL,
    )
    return ServiceContainer(
        translation_store=translation_store,
        explanation_store=explanation_store,
        sweeper=sweeper,
        backend=backend,
        translation_service=translation_service,
        explanation_service=explanation_service,
        menu_provider=menu_provider,
        engine=engine,
    )


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency: the container the app was created with."""
    return request.app.state.container
