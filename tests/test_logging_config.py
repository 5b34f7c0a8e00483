"""
Tests for logging configuration.
"""
import logging


class TestLoggingConfiguration:
    """Test logging setup and configuration."""

    def test_setup_logging_default_level(self, monkeypatch):
        """Test that setup_logging defaults to INFO level."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        from mensa_menu.logging_config import setup_logging
        setup_logging()

        logger = logging.getLogger("mensa_menu")
        assert logger.level == logging.INFO

    def test_setup_logging_respects_env_var(self, monkeypatch):
        """Test that LOG_LEVEL env var is respected."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        from mensa_menu.logging_config import setup_logging
        setup_logging()

        logger = logging.getLogger("mensa_menu")
        assert logger.level == logging.WARNING

    def test_setup_logging_explicit_level(self):
        """Test that explicit level parameter works."""
        from mensa_menu.logging_config import setup_logging
        setup_logging(level="error")

        logger = logging.getLogger("mensa_menu")
        assert logger.level == logging.ERROR

    def test_setup_logging_invalid_level_defaults_to_info(self):
        """Test that invalid level falls back to INFO."""
        from mensa_menu.logging_config import setup_logging
        setup_logging(level="INVALID_LEVEL")

        logger = logging.getLogger("mensa_menu")
        assert logger.level == logging.INFO

    def test_third_party_loggers_are_quieted(self):
        """Test that chatty client libraries only log warnings outside DEBUG."""
        from mensa_menu.logging_config import setup_logging
        setup_logging(level="INFO")

        for name in ("httpx", "openai", "sqlalchemy.engine"):
            assert logging.getLogger(name).level == logging.WARNING

    def test_cache_loggers_follow_app_level_by_default(self, monkeypatch):
        """Test that mensa_menu.cache uses the application level when unset."""
        monkeypatch.delenv("CACHE_LOG_LEVEL", raising=False)

        from mensa_menu.logging_config import setup_logging
        setup_logging(level="DEBUG")

        assert logging.getLogger("mensa_menu.cache").level == logging.DEBUG
        assert logging.getLogger("openai").level == logging.DEBUG

    def test_cache_log_level_env_var(self, monkeypatch):
        """Test that CACHE_LOG_LEVEL quiets cache hit/miss logs separately."""
        monkeypatch.setenv("CACHE_LOG_LEVEL", "warning")

        from mensa_menu.logging_config import setup_logging
        setup_logging(level="INFO")

        assert logging.getLogger("mensa_menu").level == logging.INFO
        assert logging.getLogger("mensa_menu.cache").level == logging.WARNING
        assert logging.getLogger("mensa_menu.cache.base").getEffectiveLevel() == logging.WARNING
