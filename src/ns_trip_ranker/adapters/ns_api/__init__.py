"""NS API adapters for Nederlandse Spoorwegen."""

from ns_trip_ranker.adapters.ns_api.http_client import NsHttpClient
from ns_trip_ranker.adapters.ns_api.ns_journey_detail_repository import (
    NsJourneyDetailRepository,
)
from ns_trip_ranker.adapters.ns_api.ns_trip_repository import NsTripRepository

__all__ = ["NsHttpClient", "NsJourneyDetailRepository", "NsTripRepository"]
