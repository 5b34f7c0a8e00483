"""
Menu Translation Applicator.

Pure functions that project a name -> translation map onto a DailyMenu.
Nothing here touches the cache or the backend, and the input menu is never
modified.
"""

from typing import Dict, List

from ..labels import MENSA_NAME_TRANSLATIONS, known_section_name
from ..schemas.menu import DailyMenu, TranslationLanguage, display_field


def collect_names(menu: DailyMenu, language) -> List[str]:
    """
    Names of a menu that need a translation: every item name plus section
    names missing from the fixed section table.
    """
    names = []
    for section in menu.sections:
        if known_section_name(section.name, language) is None:
            names.append(section.name)
        names.extend(item.name for item in section.items)
    return names


def apply_translations(menu: DailyMenu, translations: Dict[str, str], language) -> DailyMenu:
    """
    Return a copy of menu with the display names for language filled in.

    Sections use the fixed section table first, then translations, then the
    original name. Items use translations, then the original name. Names are
    looked up trimmed, the same way translate_names keys its result. Applying
    the same map twice gives the same menu as applying it once.
    """
    lang = TranslationLanguage(language)
    field_name = display_field(lang)

    sections = []
    for section in menu.sections:
        items = [
            item.model_copy(update={field_name: translations.get(item.name.strip()) or item.name}, deep=True)
            for item in section.items
        ]
        section_name = (
            known_section_name(section.name, lang)
            or translations.get(section.name.strip())
            or section.name
        )
        sections.append(section.model_copy(update={field_name: section_name, "items": items}))

    venue_field = f"mensa_{field_name}"
    return menu.model_copy(update={
        venue_field: MENSA_NAME_TRANSLATIONS.get(lang.value, menu.mensa_name),
        "sections": sections,
    })
