"""
Explanation Routes for Mensa Menu
=================================

Endpoints:
----------
- POST /explain: Short explanation of a dish for visitors

Request body:
    {"dishName": "Königsberger Klopse", "language": "en"}

Always answers 200 with an explanation once the body is valid. When the
backend is unavailable the explanation is a fixed fallback text
(X-Cache: PARTIAL) and nothing is cached.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from ..config import get_rate_limit_explain
from ..container import ServiceContainer, get_container
from ..rate_limit import limiter
from ..schemas import ExplanationRequest, ExplanationResponse

logger = logging.getLogger(__name__)

explain_router = APIRouter(tags=["Explanation"])


@explain_router.post("/explain", response_model=ExplanationResponse)
@limiter.limit(get_rate_limit_explain)
async def explain_dish(
    request: Request,
    response: Response,
    body: ExplanationRequest,
    container: ServiceContainer = Depends(get_container),
) -> ExplanationResponse:
    result = await container.explanation_service.explain(body.dish_name, body.language)
    response.headers["X-Cache"] = result.disposition.value
    return ExplanationResponse(explanation=result.explanation)
