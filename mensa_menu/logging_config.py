"""
Logging setup for the Mensa Menu service.

Every cache lookup and write is logged at INFO under mensa_menu.cache
("[Translation Cache] HIT ...", "[Explanation Cache] Saved ..."). On a busy
day that is most of the log, so the cache loggers get their own level.

Usage:
    from mensa_menu.logging_config import setup_logging
    setup_logging()  # once, before the app is created

Environment variables:
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)
    CACHE_LOG_LEVEL: Level for mensa_menu.cache (default: same as LOG_LEVEL)
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Client libraries behind the backend, the scraper and the SQL store
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "urllib3", "sqlalchemy.engine")


def _resolve_level(value: Optional[str], default: str) -> str:
    if not value:
        return default
    value = value.strip().upper()
    return value if value in VALID_LEVELS else default


def setup_logging(level: Optional[str] = None, cache_level: Optional[str] = None) -> None:
    """
    Configure the root logger and the mensa_menu loggers.

    Args:
        level: Application log level. Falls back to LOG_LEVEL, then INFO.
               Unknown names also give INFO.
        cache_level: Level for mensa_menu.cache. Falls back to
                     CACHE_LOG_LEVEL, then the application level.
    """
    level = _resolve_level(level or os.getenv("LOG_LEVEL"), "INFO")
    cache_level = _resolve_level(cache_level or os.getenv("CACHE_LOG_LEVEL"), level)

    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    logging.getLogger("mensa_menu").setLevel(level)
    logging.getLogger("mensa_menu.cache").setLevel(cache_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if level == "DEBUG" else logging.WARNING)

    logging.getLogger(__name__).debug("Logging configured (app=%s, cache=%s)", level, cache_level)
