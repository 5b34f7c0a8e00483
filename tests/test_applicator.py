"""
Tests for applying translation maps to a menu.
"""
from mensa_menu.services import apply_translations, collect_names

from tests.helpers import make_menu

TRANSLATIONS = {
    "Schnitzel mit Pommes": "Schnitzel with French Fries",
    "Gemüsepfanne": "Vegetable Pan",
    "Tagesangebot": "Daily Special",
}


class TestCollectNames:

    def test_known_sections_are_skipped(self):
        names = collect_names(make_menu(), "en")

        assert "Mensa Classic" not in names
        assert "Tagesangebot" in names
        assert "Schnitzel mit Pommes" in names


class TestApplyTranslations:

    def test_items_sections_and_venue_are_filled(self):
        menu = apply_translations(make_menu(), TRANSLATIONS, "en")

        assert menu.mensa_name_en == "Mensa South"
        assert menu.sections[0].name_en == "Mensa Classic"
        assert menu.sections[1].name_en == "Daily Special"
        assert [item.name_en for item in menu.sections[1].items] == ["Vegetable Pan", "Vegetable Pan"]

    def test_missing_translation_uses_original_name(self):
        menu = apply_translations(make_menu(), {}, "ko")

        assert menu.mensa_name_ko == "멘자 남부"
        assert menu.sections[1].name_ko == "Tagesangebot"
        assert menu.sections[0].items[0].name_ko == "Schnitzel mit Pommes"
        assert menu.sections[0].items[0].name_en is None

    def test_input_is_not_modified(self):
        original = make_menu()

        apply_translations(original, TRANSLATIONS, "en")

        assert original.mensa_name_en is None
        assert original.sections[0].items[0].name_en is None

    def test_applying_twice_is_idempotent(self):
        once = apply_translations(make_menu(), TRANSLATIONS, "en")
        twice = apply_translations(once, TRANSLATIONS, "en")

        assert once == twice

    def test_other_fields_are_kept(self):
        menu = apply_translations(make_menu(), TRANSLATIONS, "en")
        item = menu.sections[0].items[0]

        assert item.prices.students == "3,50 €"
        assert item.allergens == ["Ei", "Gl.Wz"]
        assert item.additives == ["2"]

    def test_names_are_matched_after_trimming(self):
        menu = make_menu()
        menu.sections[1].name = "Tagesangebot "
        menu.sections[1].items[0].name = "  Gemüsepfanne"

        translated = apply_translations(menu, TRANSLATIONS, "en")

        assert translated.sections[1].name_en == "Daily Special"
        assert [item.name_en for item in translated.sections[1].items] == ["Vegetable Pan", "Vegetable Pan"]
