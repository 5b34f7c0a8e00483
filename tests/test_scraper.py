"""
Tests for the menu page scraper.
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from mensa_menu import scraper
from mensa_menu.errors import FetchError
from mensa_menu.scraper import detect_category, parse_menu_html, split_codes

MENU_PAGE = """
<html><body>
<dl>
  <dt>Mensa Nord</dt>
  <dd><table><tr><td class="mensa_col_55"><b>Falsche Mensa</b></td></tr></table></dd>
  <dt><h3>Mensa Süd</h3></dt>
  <dd>
    <table>
      <tr><td class="col_theke"><b>Mensa Classic</b></td></tr>
      <tr>
        <td class="mensa_col_55"><b>Schnitzel mit Pommes</b> <span>(Ei Gl.Wz, Mi 2 9)</span></td>
        <td class="mensa_col_15"><span>Stud.</span><b>3,50 €</b></td>
        <td class="mensa_col_15"><span>Bed.</span><b>5,20 €</b></td>
        <td class="mensa_col_15"><span>Gast</span><b>6,90 €</b></td>
      </tr>
      <tr>
        <td class="mensa_col_55"><b>Lachsfilet mit Reis</b> <span>(Fi)</span></td>
        <td class="mensa_col_15"><span>Stud.</span><b>4,10 €</b></td>
      </tr>
      <tr><td class="col_theke"><b>Mensa Life</b></td></tr>
      <tr>
        <td class="mensa_col_55"><b>Vegane Gemüsepfanne</b></td>
      </tr>
      <tr>
        <td class="mensa_col_55"><b>Käsespätzle (vegetarisch)</b> <span>(Ei Mi)</span></td>
      </tr>
    </table>
  </dd>
</dl>
</body></html>
"""


class TestParseMenuHtml:

    def test_sections_and_items(self):
        menu = parse_menu_html(MENU_PAGE, "Mensa Süd", menu_date="2026-10-18")

        assert menu.date == "2026-10-18"
        assert menu.mensa_name == "Mensa Süd"
        assert [s.name for s in menu.sections] == ["Mensa Classic", "Mensa Life"]
        assert [s.id for s in menu.sections] == ["section-0", "section-1"]
        assert [i.name for i in menu.sections[0].items] == ["Schnitzel mit Pommes", "Lachsfilet mit Reis"]
        assert [i.id for i in menu.sections[0].items] == ["item-1-0", "item-1-1"]

    def test_codes_and_prices(self):
        menu = parse_menu_html(MENU_PAGE, "Mensa Süd")
        schnitzel = menu.sections[0].items[0]

        assert schnitzel.allergens == ["Ei", "Gl.Wz", "Mi"]
        assert schnitzel.additives == ["2", "9"]
        assert schnitzel.prices.students == "3,50 €"
        assert schnitzel.prices.staff == "5,20 €"
        assert schnitzel.prices.guests == "6,90 €"

    def test_missing_prices_default(self):
        menu = parse_menu_html(MENU_PAGE, "Mensa Süd")
        salmon = menu.sections[0].items[1]

        assert salmon.prices.students == "4,10 €"
        assert salmon.prices.guests == "N/A"

    def test_categories(self):
        menu = parse_menu_html(MENU_PAGE, "Mensa Süd")
        categories = [item.category for section in menu.sections for item in section.items]

        assert categories == ["meat", "Fisch", "vegan", "vegetarisch"]

    def test_missing_venue_gives_empty_menu(self):
        menu = parse_menu_html(MENU_PAGE, "Mensa Ulmenstraße")

        assert menu.sections == []
        assert menu.mensa_name == "Mensa Ulmenstraße"

    def test_items_before_first_header_get_default_section(self):
        html = """
        <dl><dt>Mensa Süd</dt><dd><table>
          <tr><td class="mensa_col_55"><b>Eintopf</b></td></tr>
        </table></dd></dl>
        """
        menu = parse_menu_html(html, "Mensa Süd")

        assert menu.sections[0].id == "default"
        assert menu.sections[0].name == "Menu"
        assert menu.sections[0].items[0].name == "Eintopf"


class TestHelpers:

    def test_split_codes(self):
        assert split_codes("(Ei Gl.Wz, Mi 2 9 10)") == (["Ei", "Gl.Wz", "Mi"], ["2", "9", "10"])
        assert split_codes("") == ([], [])

    @pytest.mark.parametrize("name,category", [
        ("Vegane Bowl", "vegan"),
        ("Nudeln veget.", "vegetarisch"),
        ("Dorschfilet", "Fisch"),
        ("Gulasch", "meat"),
    ])
    def test_detect_category(self, name, category):
        assert detect_category(name) == category


class TestFetchMenu:

    def test_network_error_raises_fetch_error(self):
        with patch.object(scraper.requests, "get", side_effect=requests.ConnectionError("no route")):
            with pytest.raises(FetchError):
                scraper.fetch_menu("https://example.invalid/menu")

    def test_http_error_raises_fetch_error(self):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("503 Service Unavailable")
        with patch.object(scraper.requests, "get", return_value=response):
            with pytest.raises(FetchError):
                scraper.fetch_menu("https://example.invalid/menu")

    def test_page_is_parsed(self):
        response = MagicMock()
        response.text = MENU_PAGE
        with patch.object(scraper.requests, "get", return_value=response) as mock_get:
            menu = scraper.fetch_menu("https://example.invalid/menu", "Mensa Süd", timeout=5)

        assert len(menu.sections) == 2
        assert mock_get.call_args[1]["timeout"] == 5
