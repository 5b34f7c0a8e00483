"""
Menu Schemas for Mensa Menu
===========================

This module defines the Pydantic models for the daily menu produced by the
scraper and returned (optionally translated) by the API.

Menu Structure:
---------------
    DailyMenu
      ├── date, mensaName (+ mensaNameEn / mensaNameKo), fetchedAt
      └── sections: [MenuSection]
            ├── id, name (+ nameEn / nameKo)
            └── items: [MenuItem]
                  ├── id, name (+ nameEn / nameKo)
                  ├── category: vegan | vegetarisch | Fisch | meat
                  ├── prices: {students, staff, guests}
                  └── allergens, additives: official short codes

Wire Format:
------------
Field names are snake_case in Python and camelCase on the wire, matching the
JSON the frontend already consumes:

    item = MenuItem.model_validate({"id": "item-0-0", "name": "Gemüsepfanne", ...})
    item.model_dump(by_alias=True, exclude_none=True)
    # {"id": "item-0-0", "name": "Gemüsepfanne", "nameEn": ..., ...}

Ownership:
----------
The scraper fills original names, categories, prices and codes. Translation
only ever writes the per-language display names (name_en / name_ko).
"""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AppLanguage(str, Enum):
    """Languages the UI can be shown in. German is the source language."""
    DE = "de"
    EN = "en"
    KO = "ko"


class TranslationLanguage(str, Enum):
    """Languages menu names can be translated into."""
    EN = "en"
    KO = "ko"


DietaryCategory = Literal["vegan", "vegetarisch", "Fisch", "meat"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MenuPrices(CamelModel):
    """Price table for one item. Values are display strings such as "2,90 €"."""
    students: str = "N/A"
    staff: str = "N/A"
    guests: str = "N/A"


class MenuItem(CamelModel):
    """
    A single dish on the daily menu.

    Attributes:
        id: Stable identifier within one menu (e.g., "item-1-0")
        name: Original German name
        name_en: English display name (set by translation)
        name_ko: Korean display name (set by translation)
        category: Dietary category tag
        prices: Students/staff/guests price table
        allergens: Allergen codes (e.g., "Gl.Wz", "Mi")
        additives: Additive codes ("1" to "10")
        last_served: Optional ISO date the dish was last on the menu
    """
    id: str
    name: str
    name_en: Optional[str] = None
    name_ko: Optional[str] = None
    category: DietaryCategory = "meat"
    prices: MenuPrices = MenuPrices()
    allergens: List[str] = []
    additives: List[str] = []
    last_served: Optional[str] = None


class MenuSection(CamelModel):
    """A counter/line of the cafeteria (e.g., "Mensa Classic") and its dishes."""
    id: str
    name: str
    name_en: Optional[str] = None
    name_ko: Optional[str] = None
    items: List[MenuItem] = []


class DailyMenu(CamelModel):
    """The menu of one venue for one day."""
    date: str
    mensa_name: str
    mensa_name_en: Optional[str] = None
    mensa_name_ko: Optional[str] = None
    sections: List[MenuSection] = []
    fetched_at: str


def display_field(language: TranslationLanguage) -> str:
    """Name of the per-language display-name field, e.g. "name_en"."""
    return f"name_{TranslationLanguage(language).value}"
