"""Adapters layer - external system integrations."""

from ns_trip_ranker.adapters.cache import DynamoDbJourneyDetailCache, InMemoryJourneyDetailCache
from ns_trip_ranker.adapters.config import AppConfig
from ns_trip_ranker.adapters.ns_api import (
    NsHttpClient,
    NsJourneyDetailRepository,
    NsTripRepository,
)

__all__ = [
    "AppConfig",
    "DynamoDbJourneyDetailCache",
    "InMemoryJourneyDetailCache",
    "NsHttpClient",
    "NsJourneyDetailRepository",
    "NsTripRepository",
]
