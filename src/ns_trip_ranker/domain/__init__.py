"""Domain layer - core business logic and models."""

from ns_trip_ranker.domain.models import (
    JourneyDetail,
    Leg,
    ScoredTrip,
    Trip,
    TripQuery,
)
from ns_trip_ranker.domain.ports import (
    JourneyDetailRepository,
    TripRepository,
)

__all__ = [
    "JourneyDetail",
    "JourneyDetailRepository",
    "Leg",
    "ScoredTrip",
    "Trip",
    "TripQuery",
    "TripRepository",
]
