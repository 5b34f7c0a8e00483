"""
Translation Routes for Mensa Menu
=================================

Endpoints:
----------
- POST /translate: Translate a menu into English or Korean

Request body:
    {"menu": {...DailyMenu...}, "language": "ko"}

Response: the same menu with nameEn/nameKo (and mensaNameEn/mensaNameKo)
filled in. Every name gets a value; names the backend could not translate
keep their German text.

Response headers:
-----------------
- X-Cache: HIT, MISS, PARTIAL or EMPTY
- X-Cache-Date: cache partition the translations were read from/written to
- X-Language: target language
- X-Translated-Items: number of distinct dish names in the menu
- X-Translated-Names: number of distinct names looked up (dishes + sections)

Rate Limiting:
--------------
Limited per client IP (RATE_LIMIT_TRANSLATE, default 30/minute). A cache
miss costs a backend call.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from ..config import get_rate_limit_translate
from ..container import ServiceContainer, get_container
from ..rate_limit import limiter
from ..schemas import DailyMenu, TranslationRequest

logger = logging.getLogger(__name__)

translate_router = APIRouter(tags=["Translation"])


@translate_router.post("/translate", response_model=DailyMenu, response_model_exclude_none=True)
@limiter.limit(get_rate_limit_translate)
async def translate_menu(
    request: Request,
    response: Response,
    body: TranslationRequest,
    container: ServiceContainer = Depends(get_container),
) -> DailyMenu:
    translated, result = await container.translation_service.translate_menu(body.menu, body.language)

    unique_items = {item.name.strip() for section in body.menu.sections for item in section.items if item.name.strip()}

    response.headers["X-Cache"] = result.disposition.value
    response.headers["X-Cache-Date"] = result.date_key
    response.headers["X-Language"] = result.language
    response.headers["X-Translated-Items"] = str(len(unique_items))
    response.headers["X-Translated-Names"] = str(len(result.translations))
    return translated
