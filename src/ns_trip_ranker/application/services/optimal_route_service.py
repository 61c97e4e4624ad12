"""Use case: find the fastest trip between two stations."""

import logging
from typing import TYPE_CHECKING

from ns_trip_ranker.application.services.route_selection import select_fastest_trip
from ns_trip_ranker.domain.exceptions import NoDataAvailableError
from ns_trip_ranker.domain.models import Trip, TripQuery

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ns_trip_ranker.domain.ports import TripRepository


class OptimalRouteService:
    """Service selecting the fastest trip from a trip search."""

    def __init__(self, trip_repository: "TripRepository") -> None:
        """Initialize with a trip repository."""
        self._trip_repository = trip_repository

    async def find_optimal_trip(self, query: TripQuery) -> Trip:
        """Search trips and return the fastest one.

        Raises:
            NoDataAvailableError: If the search returns no trips.
            UpstreamFailureError: If the trip search fails upstream.
        """
        trips = await self._trip_repository.search_trips(query)
        if not trips:
            logger.info(
                f"No trips found from {query.arrival_station} to {query.departure_station}"
            )
            raise NoDataAvailableError()

        return select_fastest_trip(trips)
