"""Cache-backed resolution of journey details."""

import asyncio
import logging
from typing import TYPE_CHECKING

from ns_trip_ranker.domain.models import JourneyDetail

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ns_trip_ranker.domain.contracts import JourneyDetailCacheProtocol
    from ns_trip_ranker.domain.ports import JourneyDetailRepository


class CachedJourneyDetailResolver:
    """Resolves product numbers to journey details, consulting a cache first."""

    def __init__(
        self,
        cache: "JourneyDetailCacheProtocol",
        repository: "JourneyDetailRepository",
    ) -> None:
        """Initialize with a cache and a remote journey detail repository."""
        self._cache = cache
        self._repository = repository

    async def resolve(self, product_number: str) -> JourneyDetail:
        """Resolve one product number.

        On a cache hit the stored detail is returned without a remote call.
        On a miss the detail is fetched, written to the cache and returned.
        Cache and fetch errors propagate.
        """
        cached = await self._cache.get(product_number)
        if cached is not None:
            logger.debug(f"Journey detail cache hit for product {product_number}")
            return cached

        logger.debug(f"Journey detail cache miss for product {product_number}")
        detail = await self._repository.get_journey_detail(product_number)
        await self._cache.put(product_number, detail)
        return detail

    async def resolve_all(self, product_numbers: list[str]) -> list[JourneyDetail]:
        """Resolve several product numbers concurrently.

        Duplicates are resolved once. Results are in order of first
        appearance. The first failure fails the whole call.
        """
        distinct = list(dict.fromkeys(product_numbers))
        logger.info(f"Resolving journey details for {len(distinct)} product(s)")
        results = await asyncio.gather(*(self.resolve(number) for number in distinct))
        return list(results)
