"""
Name and date-key normalization.

Cache keys and backend batches are built from normalized names so the same
menu always produces the same keys and the same prompt.
"""

import re
from datetime import date, datetime
from typing import Iterable, List, Optional

DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def normalize_names(names: Iterable[str]) -> List[str]:
    """
    Trim, drop empty strings, dedupe, and sort names lexicographically.

    Non-string entries are ignored.

    Example:
        normalize_names([" Gemüsepfanne", "Gemüsepfanne", "", "Eintopf"])
        # ["Eintopf", "Gemüsepfanne"]
    """
    return sorted({name.strip() for name in names if isinstance(name, str) and name.strip()})


def today_key(today: Optional[date] = None) -> str:
    """Today's partition key (local date) as YYYY-MM-DD."""
    return (today or datetime.now().date()).isoformat()


def parse_date_key(value: str) -> Optional[date]:
    """Parse a YYYY-MM-DD key. Returns None for anything else."""
    if not isinstance(value, str) or not DATE_KEY_PATTERN.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def resolve_date_key(value: Optional[str], today: Optional[date] = None) -> str:
    """Use value when it is a valid YYYY-MM-DD key, otherwise today's key."""
    if value is not None and parse_date_key(value) is not None:
        return value
    return today_key(today)


def language_code(language) -> str:
    """Plain language code for an enum member or string ("en", "ko", ...)."""
    return getattr(language, "value", language)
