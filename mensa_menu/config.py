"""
Configuration Module for Mensa Menu
===================================

This module centralizes all configuration settings, environment variables, and
constants used throughout the Mensa Menu application. By consolidating
configuration in one place, we achieve:

1. **Single Source of Truth**: All environment variables and defaults are defined
   here, making it easy to see what configuration options exist.

2. **Easy Environment Management**: Different environments (dev, staging, prod)
   can override settings via environment variables without code changes.

3. **Type Safety**: Configuration values are parsed and typed at module load time,
   catching configuration errors early.

Configuration Categories:
-------------------------
- **Menu Source**: Where the daily menu is scraped from and how long a fetched
  menu is reused before the page is requested again.

- **Cache Storage**: Which cache backend holds translations and explanations
  (in-memory, JSON files, or a SQL database) and how long entries are retained.

- **Translation Strategy**: Batch size and concurrency for calls to the
  generative backend, and whether translations cached on earlier days are
  reused before asking the backend again.

- **Generative Backend**: Model name and request timeout.

- **Rate Limiting**: Protects the backend quota from bursts of requests.

- **CORS Settings**: Cross-Origin Resource Sharing configuration for frontend
  integration. Defaults allow all origins for development.

- **Admin Authentication**: HTTP Basic credentials for the /admin endpoints.

Environment Variables:
----------------------
- MENU_URL: Page the menu is scraped from
- MENU_VENUE_NAME: Venue block to extract from the page (default: "Mensa Süd")
- MENU_REFRESH_SECONDS: How long a fetched menu is reused (default: 300)
- CACHE_BACKEND: "file", "memory" or "sql" (default: "file")
- CACHE_DIR: Root directory of the file cache (default: ".translation-cache")
- CACHE_DB_URL: SQLAlchemy URL of the SQL cache (default: sqlite file)
- TRANSLATION_RETENTION_DAYS: Days translation partitions are kept (default: 7)
- EXPLANATION_RETENTION_DAYS: Days explanation partitions are kept (default: 14)
- TRANSLATION_BATCH_SIZE: Names per backend call, 0 = all at once (default: 0)
- TRANSLATION_MAX_CONCURRENCY: Parallel backend calls when chunked (default: 6)
- TRANSLATION_GLOBAL_POOL: Reuse translations from earlier days (default: "true")
- BACKEND_TIMEOUT_SECONDS: Upper bound for one backend call (default: 30)
- OPENAI_MODEL: Model used for translations and explanations
- RATE_LIMIT_TRANSLATE / RATE_LIMIT_EXPLAIN: "X per Y" limits
- RATE_LIMIT_ENABLED: Enable/disable rate limiting (default: "true")
- CORS_ORIGINS: Comma-separated allowed origins (default: "*")
- ADMIN_USERNAME: Username for the /admin endpoints (default: "admin")
- ADMIN_PASSWORD: Password for the /admin endpoints (required for admin access)

Usage:
------
    from mensa_menu.config import (
        TRANSLATION_RETENTION_DAYS,
        TRANSLATION_BATCH_SIZE,
        BACKEND_TIMEOUT_SECONDS,
    )
"""

import os
from typing import List


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# Menu Source Configuration
# =============================================================================
# The menu is scraped from the Studierendenwerk Rostock-Wismar page. Only the
# block for one venue is extracted.

MENU_URL: str = os.getenv(
    "MENU_URL",
    "https://www.stw-rw.de/de/mensen-und-cafeterien/speiseplaene.html",
)
MENU_VENUE_NAME: str = os.getenv("MENU_VENUE_NAME", "Mensa Süd")

# A fetched menu is served from memory for this long before scraping again
MENU_REFRESH_SECONDS: int = int(os.getenv("MENU_REFRESH_SECONDS", "300"))  # 5 minutes

# HTTP timeout for the menu page request (seconds)
MENU_FETCH_TIMEOUT: int = int(os.getenv("MENU_FETCH_TIMEOUT", "10"))


# =============================================================================
# Cache Storage Configuration
# =============================================================================
# Translations are partitioned by menu date, explanations by the day they were
# generated. Partitions older than the retention horizon are deleted by the
# sweeper.

CACHE_BACKEND: str = os.getenv("CACHE_BACKEND", "file").strip().lower()
CACHE_DIR: str = os.getenv("CACHE_DIR", ".translation-cache")
CACHE_DB_URL: str = os.getenv("CACHE_DB_URL", "sqlite:///mensa_cache.db")

TRANSLATION_RETENTION_DAYS: int = int(os.getenv("TRANSLATION_RETENTION_DAYS", "7"))
EXPLANATION_RETENTION_DAYS: int = int(os.getenv("EXPLANATION_RETENTION_DAYS", "14"))

# Minimum spacing between sweeps triggered by cache writes (seconds)
SWEEP_MIN_INTERVAL_SECONDS: int = int(os.getenv("SWEEP_MIN_INTERVAL_SECONDS", "3600"))

# Hour of day (local time) for the scheduled background sweep
SWEEP_HOUR: int = int(os.getenv("SWEEP_HOUR", "3"))


# =============================================================================
# Translation Strategy Configuration
# =============================================================================
# 0 sends every uncached name in one prompt. A positive value splits the
# uncached names into chunks of that size, translated concurrently.

TRANSLATION_BATCH_SIZE: int = int(os.getenv("TRANSLATION_BATCH_SIZE", "0"))
TRANSLATION_MAX_CONCURRENCY: int = int(os.getenv("TRANSLATION_MAX_CONCURRENCY", "6"))

# Look up translations stored under earlier menu dates before calling the backend
TRANSLATION_GLOBAL_POOL: bool = _env_bool("TRANSLATION_GLOBAL_POOL", "true")


# =============================================================================
# Generative Backend Configuration
# =============================================================================

OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
BACKEND_TIMEOUT_SECONDS: float = float(os.getenv("BACKEND_TIMEOUT_SECONDS", "30"))


# =============================================================================
# Rate Limiting Configuration
# =============================================================================
# Every translate/explain request may end in a paid backend call.
# Uses slowapi library with in-memory storage.

RATE_LIMIT_TRANSLATE: str = os.getenv("RATE_LIMIT_TRANSLATE", "30 per minute")
RATE_LIMIT_EXPLAIN: str = os.getenv("RATE_LIMIT_EXPLAIN", "60 per minute")
RATE_LIMIT_ENABLED: bool = _env_bool("RATE_LIMIT_ENABLED", "true")


def get_rate_limit_translate() -> str:
    """Return the current translate rate limit (allows dynamic override in tests)."""
    return RATE_LIMIT_TRANSLATE


def get_rate_limit_explain() -> str:
    """Return the current explain rate limit (allows dynamic override in tests)."""
    return RATE_LIMIT_EXPLAIN


# =============================================================================
# CORS Configuration
# =============================================================================
# Format: comma-separated list of origins, e.g., "https://mensa.example.org"
# Default "*" allows all origins (suitable for development only)

_cors_origins_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _cors_origins_env.split(",")
    if origin.strip()
] or ["*"]


# =============================================================================
# Admin Authentication Configuration
# =============================================================================
# HTTP Basic credentials for the /admin endpoints.
# Admin endpoints answer 503 until ADMIN_PASSWORD is set.

ADMIN_USERNAME: str = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")
