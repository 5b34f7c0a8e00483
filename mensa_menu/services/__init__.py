"""
Services for Mensa Menu.

- translation: Batch Translation Orchestrator (cache, global pool, backend)
- explanation: Explanation Orchestrator (cache-or-generate, fallback text)
- applicator: projects a translation map onto a DailyMenu
- menu: MenuProvider with last-known-good fallback
"""

from .applicator import apply_translations, collect_names
from .explanation import ExplanationResult, ExplanationService
from .menu import MenuProvider, MenuResult
from .translation import CacheDisposition, TranslationResult, TranslationService, validate_translations

__all__ = [
    "apply_translations",
    "collect_names",
    "CacheDisposition",
    "TranslationResult",
    "TranslationService",
    "validate_translations",
    "ExplanationResult",
    "ExplanationService",
    "MenuProvider",
    "MenuResult",
]
