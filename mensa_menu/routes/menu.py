"""
Menu Routes for Mensa Menu
==========================

Endpoints:
----------
- GET /menu: Today's menu in German (translations are requested separately)
- GET /labels: Allergen, additive and category labels for the UI

The menu is served from the MenuProvider, so an unreachable menu page yields
the last good menu (X-Menu-Source: stale) or an empty one (empty), never an
error.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ..container import ServiceContainer, get_container
from ..labels import label_tables
from ..schemas import AppLanguage, DailyMenu

logger = logging.getLogger(__name__)

menu_router = APIRouter(tags=["Menu"])

MENU_CACHE_CONTROL = "public, s-maxage=300, stale-while-revalidate=600"


@menu_router.get("/menu", response_model=DailyMenu, response_model_exclude_none=True)
async def get_menu(
    response: Response,
    container: ServiceContainer = Depends(get_container),
) -> DailyMenu:
    result = await container.menu_provider.get_menu()
    response.headers["Cache-Control"] = MENU_CACHE_CONTROL
    response.headers["X-Menu-Source"] = result.source
    return result.menu


@menu_router.get("/labels")
def get_labels(language: str = Query(AppLanguage.EN.value)) -> dict:
    """Label and tooltip tables for allergen codes, additive numbers and categories."""
    try:
        lang = AppLanguage(language)
    except ValueError:
        raise HTTPException(status_code=400, detail="Language must be 'de', 'en' or 'ko'") from None
    return label_tables(lang)
