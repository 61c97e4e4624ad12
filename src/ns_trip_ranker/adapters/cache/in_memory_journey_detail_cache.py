"""In-memory journey detail cache implementation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ns_trip_ranker.domain.contracts.journey_detail_cache import JourneyDetailCacheProtocol

if TYPE_CHECKING:
    from ns_trip_ranker.domain.models.journey_detail import JourneyDetail

logger = logging.getLogger(__name__)


class InMemoryJourneyDetailCache(JourneyDetailCacheProtocol):
    """Process-local cache of journey details by product number.

    Used when no cache table is configured, e.g. for local CLI runs.
    """

    def __init__(self) -> None:
        self._cache: dict[str, JourneyDetail] = {}

    async def get(self, product_number: str) -> JourneyDetail | None:
        return self._cache.get(product_number)

    async def put(self, product_number: str, detail: JourneyDetail) -> None:
        self._cache[product_number] = detail

    def __len__(self) -> int:
        return len(self._cache)
