"""NS trip repository adapter using the reisinformatie trips endpoint."""

import logging

from ns_trip_ranker.adapters.ns_api.http_client import NsHttpClient
from ns_trip_ranker.adapters.ns_api.trip_parser import TripParser
from ns_trip_ranker.domain.models import Trip, TripQuery
from ns_trip_ranker.domain.ports.trip_repository import TripRepository

logger = logging.getLogger(__name__)


class NsTripRepository(TripRepository):
    """Adapter searching trips through the NS API."""

    def __init__(self, http_client: NsHttpClient, trips_url: str) -> None:
        """Initialize with an NS HTTP client and the trips endpoint URL."""
        self._http_client = http_client
        self._trips_url = trips_url

    async def search_trips(self, query: TripQuery) -> list[Trip]:
        """Search trips for the query.

        Raises:
            UpstreamFailureError: If the API answers with a non-2xx status.
        """
        data = await self._http_client.get_json(self._trips_url, query.to_upstream_params())
        trips = TripParser.parse_trips(data)
        logger.debug(f"NS API returned {len(trips)} trip(s)")
        return trips
