"""Use case: rank trips between two stations by comfort."""

import logging
from typing import TYPE_CHECKING

from ns_trip_ranker.application.services.comfort_scoring import rank_by_comfort
from ns_trip_ranker.domain.exceptions import NoDataAvailableError
from ns_trip_ranker.domain.models import ComfortRanking, JourneyDetail, Trip, TripQuery

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ns_trip_ranker.application.services.journey_detail_resolver import (
        CachedJourneyDetailResolver,
    )
    from ns_trip_ranker.domain.ports import TripRepository


def find_detail_for(product_number: str, details: list[JourneyDetail]) -> JourneyDetail | None:
    """Return the first detail that covers the product number."""
    return next((detail for detail in details if detail.covers(product_number)), None)


def enrich_trips(trips: list[Trip], details: list[JourneyDetail]) -> list[Trip]:
    """Attach the matching journey detail to every leg.

    New trips and legs are returned; details are shared by reference.
    """
    enriched = []
    for trip in trips:
        legs = []
        for leg in trip.legs:
            detail = find_detail_for(leg.product_number, details)
            if detail is None:
                logger.warning(f"No journey detail found for product {leg.product_number}")
            legs.append(leg.with_journey_detail(detail))
        enriched.append(trip.model_copy(update={"legs": tuple(legs)}))
    return enriched


class ComfortRankingService:
    """Service ranking trips by comfort score."""

    def __init__(
        self,
        trip_repository: "TripRepository",
        detail_resolver: "CachedJourneyDetailResolver",
    ) -> None:
        """Initialize with a trip repository and a journey detail resolver."""
        self._trip_repository = trip_repository
        self._detail_resolver = detail_resolver

    async def rank_trips(self, query: TripQuery) -> ComfortRanking:
        """Search trips, enrich their legs and rank them by comfort.

        Raises:
            NoDataAvailableError: If the search returns no trips.
            UpstreamFailureError: If the trip search or a detail fetch fails upstream.
        """
        trips = await self._trip_repository.search_trips(query)
        if not trips:
            logger.info(
                f"No trips found from {query.arrival_station} to {query.departure_station}"
            )
            raise NoDataAvailableError()

        product_numbers = [number for trip in trips for number in trip.product_numbers]
        details = await self._detail_resolver.resolve_all(product_numbers)

        ranking = rank_by_comfort(enrich_trips(trips, details))
        logger.info(
            f"Ranked {len(ranking.trips)} trip(s), best score {ranking.best.score}, "
            f"worst score {ranking.worst.score}"
        )
        return ranking
