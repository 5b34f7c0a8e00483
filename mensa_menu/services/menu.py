"""
Menu provider with a last-known-good fallback.

Fetched menus are reused for MENU_REFRESH_SECONDS. When a refresh fails, the
last good menu is served; when there has never been one, an empty menu is.
The response path never fails because the menu page is down.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..errors import FetchError
from ..scraper import empty_menu, fetch_menu
from ..schemas.menu import DailyMenu

logger = logging.getLogger(__name__)


@dataclass
class MenuResult:
    menu: DailyMenu
    source: str  # "live", "cached", "stale" or "empty"


class MenuProvider:

    def __init__(
        self,
        fetch: Callable[[], DailyMenu] = fetch_menu,
        refresh_seconds: float = 300,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetch = fetch
        self._refresh_seconds = refresh_seconds
        self._clock = clock
        self._last_good: Optional[DailyMenu] = None
        self._fetched_at: Optional[float] = None
        self._lock = asyncio.Lock()

    def _is_fresh(self) -> bool:
        return (
            self._last_good is not None
            and self._fetched_at is not None
            and self._clock() - self._fetched_at < self._refresh_seconds
        )

    async def get_menu(self) -> MenuResult:
        if self._is_fresh():
            return MenuResult(self._last_good, "cached")

        async with self._lock:
            # Another request may have refreshed while we waited
            if self._is_fresh():
                return MenuResult(self._last_good, "cached")

            try:
                menu = await asyncio.to_thread(self._fetch)
            except FetchError as e:
                if self._last_good is not None:
                    logger.warning("Menu refresh failed, serving last good menu from %s: %s", self._last_good.fetched_at, e)
                    return MenuResult(self._last_good, "stale")
                logger.error("Menu fetch failed and no previous menu is available: %s", e)
                return MenuResult(empty_menu(), "empty")

            self._last_good = menu
            self._fetched_at = self._clock()
            return MenuResult(menu, "live")
