import pytest
from fastapi.testclient import TestClient

import mensa_menu.config as config_mod
import mensa_menu.rate_limit as rate_limit_mod
from mensa_menu.app_factory import create_app
from mensa_menu.cache import MemoryExplanationStore, MemoryTranslationStore
from mensa_menu.container import build_container
from mensa_menu.services import MenuProvider
from tests.helpers import TODAY, FakeBackend, make_menu

# Test admin credentials
TEST_ADMIN_USERNAME = "testadmin"
TEST_ADMIN_PASSWORD = "testpassword123"


@pytest.fixture
def today():
    return lambda: TODAY


@pytest.fixture
def translation_store(today):
    return MemoryTranslationStore(today=today)


@pytest.fixture
def explanation_store(today):
    return MemoryExplanationStore(today=today)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def container(translation_store, explanation_store, backend, today):
    provider = MenuProvider(fetch=make_menu, refresh_seconds=300)
    return build_container(
        translation_store=translation_store,
        explanation_store=explanation_store,
        backend=backend,
        menu_provider=provider,
        today=today,
    )


@pytest.fixture
def client(container, monkeypatch):
    """FastAPI TestClient over memory stores and a FakeBackend.

    Sets test admin credentials. Rate limiting is disabled; tests that need
    it turn it back on.
    """
    monkeypatch.setattr(config_mod, "ADMIN_USERNAME", TEST_ADMIN_USERNAME)
    monkeypatch.setattr(config_mod, "ADMIN_PASSWORD", TEST_ADMIN_PASSWORD)
    original_enabled = rate_limit_mod.limiter.enabled
    rate_limit_mod.limiter.enabled = False
    app = create_app(container, background_sweep=False)
    with TestClient(app) as test_client:
        yield test_client
    rate_limit_mod.limiter.enabled = original_enabled
    rate_limit_mod.limiter.reset()


@pytest.fixture
def admin_auth():
    """Returns HTTP Basic Auth tuple for admin endpoints."""
    return (TEST_ADMIN_USERNAME, TEST_ADMIN_PASSWORD)
