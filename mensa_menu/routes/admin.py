"""
Admin Routes for Mensa Menu
===========================

Endpoints:
----------
- POST /admin/cache/sweep: Delete cache partitions past their retention
  horizon now instead of waiting for the daily sweep

All endpoints require admin authentication via HTTP Basic Auth.
"""

import logging

from fastapi import APIRouter, Depends

from ..auth import verify_admin_credentials
from ..container import ServiceContainer, get_container
from ..schemas import SweepResponse

logger = logging.getLogger(__name__)

admin_router = APIRouter(prefix="/admin", tags=["Admin"])


@admin_router.post("/cache/sweep", response_model=SweepResponse)
async def sweep_cache(
    _admin: str = Depends(verify_admin_credentials),
    container: ServiceContainer = Depends(get_container),
) -> SweepResponse:
    deleted = await container.sweeper.sweep()
    logger.info("Manual cache sweep deleted %d partitions", sum(len(v) for v in deleted.values()))
    return SweepResponse(deleted=deleted)
