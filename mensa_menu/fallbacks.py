"""
Fixed fallback texts and the validity checks that keep them out of the cache.

A fallback text is shown to the user when nothing better is available. It is
never stored, so a later request can still get a real explanation.
"""

from typing import Optional

from .normalizer import language_code

EXPLANATION_FALLBACK_BY_LANGUAGE = {
    "en": "Unable to generate explanation at this time.",
    "de": "Die Erklärung konnte nicht generiert werden.",
    "ko": "지금은 설명을 생성할 수 없습니다.",
}

# Texts older clients and backend wrappers have used as failure markers
KNOWN_FALLBACK_TEXTS = frozenset(EXPLANATION_FALLBACK_BY_LANGUAGE.values()) | {
    "Unable to generate explanation.",
    "Could not load explanation.",
    "Erklärung nicht verfügbar.",
}


def explanation_fallback(language) -> str:
    """Fallback explanation text for a language (English for unknown languages)."""
    return EXPLANATION_FALLBACK_BY_LANGUAGE.get(language_code(language), EXPLANATION_FALLBACK_BY_LANGUAGE["en"])


def is_cacheable_explanation(text: Optional[str], language) -> bool:
    """
    True if text is a genuine explanation that may be stored.

    Rejects empty text, any known fallback text, and this language's fallback.
    """
    if not isinstance(text, str):
        return False
    stripped = text.strip()
    if not stripped:
        return False
    if stripped in KNOWN_FALLBACK_TEXTS:
        return False
    return stripped != explanation_fallback(language)


def is_cacheable_translation(name: str, text: Optional[str]) -> bool:
    """True if text is a usable translation of name (non-empty and not an echo)."""
    if not isinstance(text, str):
        return False
    stripped = text.strip()
    return bool(stripped) and stripped != name.strip()
