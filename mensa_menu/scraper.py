"""
Menu scraper for the Studierendenwerk Rostock-Wismar menu page.

The page lists every venue as a <dt> (venue name) followed by a <dd> holding
a table. Inside the table:

- a row with `td.col_theke b` starts a new section ("Mensa Classic", ...)
- a row with `td.mensa_col_55` is a dish: name in <b>, codes in <span>
  ("(Ei Gl.Wz Mi 2 9)"; the numbers 1-10 are additives, the rest allergens)
- `td.mensa_col_15` cells hold prices, labelled "Stud", "Bed" and "Gast"

Usage:
    menu = fetch_menu()  # raises FetchError
"""

import logging
import re
from datetime import datetime, timezone
from typing import List, Optional, Tuple

import requests
from bs4 import BeautifulSoup

from .config import MENU_FETCH_TIMEOUT, MENU_URL, MENU_VENUE_NAME
from .errors import FetchError
from .labels import ADDITIVE_CODES
from .schemas.menu import DailyMenu, MenuItem, MenuPrices, MenuSection

logger = logging.getLogger(__name__)

USER_AGENT = "MensaMenu/1.0 (menu translation service)"

CODE_SPLIT_PATTERN = re.compile(r"[\s,]+")

# Name fragments used to guess the dietary category; the page has no field for it
VEGAN_MARKERS = ("vegan",)
VEGETARIAN_MARKERS = ("vegetarisch", "veget.")
FISH_MARKERS = ("fisch", "lachs", "dorsch")


def split_codes(text: str) -> Tuple[List[str], List[str]]:
    """
    Split a code string into (allergens, additives).

    Example:
        split_codes("(Ei Gl.Wz, Mi 2 9)")
        # (["Ei", "Gl.Wz", "Mi"], ["2", "9"])
    """
    codes = [c.strip() for c in CODE_SPLIT_PATTERN.split(text.replace("(", "").replace(")", "")) if c.strip()]
    allergens = [c for c in codes if c not in ADDITIVE_CODES]
    additives = [c for c in codes if c in ADDITIVE_CODES]
    return allergens, additives


def detect_category(name: str) -> str:
    lower = name.lower()
    if any(marker in lower for marker in VEGAN_MARKERS):
        return "vegan"
    if any(marker in lower for marker in VEGETARIAN_MARKERS):
        return "vegetarisch"
    if any(marker in lower for marker in FISH_MARKERS):
        return "Fisch"
    return "meat"


def empty_menu(venue_name: str = MENU_VENUE_NAME, menu_date: Optional[str] = None) -> DailyMenu:
    return DailyMenu(
        date=menu_date or datetime.now().date().isoformat(),
        mensa_name=venue_name,
        sections=[],
        fetched_at=datetime.now(timezone.utc).isoformat(),
    )


def _parse_prices(row) -> MenuPrices:
    prices = MenuPrices()
    for cell in row.select("td.mensa_col_15"):
        label_tag = cell.find("span")
        value_tag = cell.find("b")
        label = label_tag.get_text(strip=True) if label_tag else ""
        value = value_tag.get_text(strip=True) if value_tag else ""
        if not value:
            continue
        if "Stud" in label:
            prices.students = value
        elif "Bed" in label:
            prices.staff = value
        elif "Gast" in label:
            prices.guests = value
    return prices


def parse_menu_html(html: str, venue_name: str = MENU_VENUE_NAME, menu_date: Optional[str] = None) -> DailyMenu:
    """
    Parse the menu page into a DailyMenu for one venue.

    A page without the venue yields an empty menu, not an error: on closing
    days the venue is simply missing.
    """
    soup = BeautifulSoup(html, "html.parser")
    menu = empty_menu(venue_name, menu_date)

    target_dt = next(
        (dt for dt in soup.find_all("dt") if venue_name in dt.get_text(" ", strip=True)),
        None,
    )
    content = target_dt.find_next_sibling("dd") if target_dt is not None else None
    if content is None:
        logger.warning("%s not found in menu page", venue_name)
        return menu

    sections: List[MenuSection] = []
    current: Optional[MenuSection] = None

    for row in content.select("table tr"):
        header = row.select_one("td.col_theke b")
        if header is not None:
            current = MenuSection(id=f"section-{len(sections)}", name=header.get_text(strip=True), items=[])
            sections.append(current)
            continue

        name_cell = row.select_one("td.mensa_col_55")
        if name_cell is None:
            continue

        if current is None:
            current = MenuSection(id="default", name="Menu", items=[])
            sections.append(current)

        name_tag = name_cell.find("b")
        name = name_tag.get_text(" ", strip=True) if name_tag else ""
        if not name:
            continue
        codes_tag = name_cell.find("span")
        allergens, additives = split_codes(codes_tag.get_text(" ", strip=True) if codes_tag else "")

        current.items.append(MenuItem(
            id=f"item-{len(sections)}-{len(current.items)}",
            name=name,
            category=detect_category(name),
            prices=_parse_prices(row),
            allergens=allergens,
            additives=additives,
        ))

    menu.sections = sections
    logger.info(
        "Parsed %s: %d sections, %d items",
        venue_name, len(sections), sum(len(s.items) for s in sections),
    )
    return menu


def fetch_menu(url: str = MENU_URL, venue_name: str = MENU_VENUE_NAME, timeout: int = MENU_FETCH_TIMEOUT) -> DailyMenu:
    """
    Download and parse today's menu.

    Raises:
        FetchError: If the page cannot be downloaded or parsed
    """
    try:
        response = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch menu: {e}") from e

    try:
        return parse_menu_html(response.text, venue_name)
    except (AttributeError, TypeError, ValueError) as e:
        raise FetchError(f"Failed to parse menu: {e}") from e
