"""Journey detail repository port."""

from typing import Protocol

from ns_trip_ranker.domain.models.journey_detail import JourneyDetail


class JourneyDetailRepository(Protocol):
    """Port for fetching the detail record of a train product."""

    async def get_journey_detail(self, product_number: str) -> JourneyDetail:
        """Fetch the journey detail for a product number."""
        ...
