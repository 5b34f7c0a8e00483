"""
Schemas Package for Mensa Menu
==============================

Pydantic models used for the menu data, API request validation and response
serialization.

Schema Organization:
--------------------
- **menu.py**: DailyMenu, MenuSection, MenuItem, MenuPrices and language enums
- **requests.py**: Translate/explain request bodies and small response bodies

Usage:
------
    from mensa_menu.schemas import DailyMenu, TranslationLanguage
"""

from .menu import (
    AppLanguage,
    TranslationLanguage,
    DietaryCategory,
    MenuPrices,
    MenuItem,
    MenuSection,
    DailyMenu,
    display_field,
)
from .requests import (
    TranslationRequest,
    ExplanationRequest,
    ExplanationResponse,
    SweepResponse,
)

__all__ = [
    "AppLanguage",
    "TranslationLanguage",
    "DietaryCategory",
    "MenuPrices",
    "MenuItem",
    "MenuSection",
    "DailyMenu",
    "display_field",
    "TranslationRequest",
    "ExplanationRequest",
    "ExplanationResponse",
    "SweepResponse",
]
