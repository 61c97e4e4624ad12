"""Journey detail cache adapters."""

from ns_trip_ranker.adapters.cache.dynamodb_journey_detail_cache import (
    DynamoDbJourneyDetailCache,
)
from ns_trip_ranker.adapters.cache.in_memory_journey_detail_cache import (
    InMemoryJourneyDetailCache,
)

__all__ = ["DynamoDbJourneyDetailCache", "InMemoryJourneyDetailCache"]
