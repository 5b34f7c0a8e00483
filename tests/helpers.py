"""
Helpers for tests: a recording backend double and a sample menu.
"""
import asyncio
import json
from datetime import date

from mensa_menu.schemas import DailyMenu, MenuItem, MenuPrices, MenuSection

TODAY = date(2026, 10, 18)
MENU_DATE = "2026-10-18"


def names_in_prompt(prompt):
    """German names listed in a translation prompt."""
    block = prompt.split("German names to translate:\n", 1)[1]
    block = block.split("\n\nExample output format", 1)[0]
    return json.loads(block)


class FakeBackend:
    """Recording stand-in for the generative backend.

    handler(prompt) returns the response text, or an exception instance to
    raise. It may also be a coroutine function.
    """

    def __init__(self, handler=None):
        self.prompts = []
        self.handler = handler or (lambda prompt: "{}")
        self.closed = False

    @property
    def calls(self):
        return len(self.prompts)

    async def generate_text(self, prompt):
        self.prompts.append(prompt)
        result = self.handler(prompt)
        if asyncio.iscoroutine(result):
            result = await result
        if isinstance(result, Exception):
            raise result
        return result

    async def close(self):
        self.closed = True


def translating_handler(mapping):
    """Handler that answers every translation prompt from mapping."""
    def handler(prompt):
        names = names_in_prompt(prompt)
        return json.dumps({name: mapping[name] for name in names if name in mapping}, ensure_ascii=False)
    return handler


def make_menu(menu_date=MENU_DATE):
    return DailyMenu(
        date=menu_date,
        mensa_name="Mensa Süd",
        fetched_at=f"{menu_date}T09:00:00+00:00",
        sections=[
            MenuSection(id="section-0", name="Mensa Classic", items=[
                MenuItem(
                    id="item-1-0",
                    name="Schnitzel mit Pommes",
                    category="meat",
                    prices=MenuPrices(students="3,50 €", staff="5,20 €", guests="6,90 €"),
                    allergens=["Ei", "Gl.Wz"],
                    additives=["2"],
                ),
            ]),
            MenuSection(id="section-1", name="Tagesangebot", items=[
                MenuItem(id="item-2-0", name="Gemüsepfanne", category="vegan"),
                MenuItem(id="item-2-1", name="Gemüsepfanne", category="vegan"),
            ]),
        ],
    )
