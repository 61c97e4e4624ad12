"""Trip repository port."""

from typing import Protocol

from ns_trip_ranker.domain.models.trip import Trip
from ns_trip_ranker.domain.models.trip_query import TripQuery


class TripRepository(Protocol):
    """Port for searching trips between two stations."""

    async def search_trips(self, query: TripQuery) -> list[Trip]:
        """Search trips matching the query.

        Raises:
            UpstreamFailureError: If the upstream service answers with a non-2xx status.
        """
        ...
