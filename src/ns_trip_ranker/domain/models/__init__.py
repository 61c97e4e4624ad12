"""Domain models for NS trip ranking."""

from ns_trip_ranker.domain.models.comfort_ranking import ComfortRanking
from ns_trip_ranker.domain.models.handler_response import HandlerResponse
from ns_trip_ranker.domain.models.journey_detail import (
    JourneyDetail,
    JourneyStop,
    Stock,
    TrainPart,
)
from ns_trip_ranker.domain.models.scored_trip import ScoredTrip
from ns_trip_ranker.domain.models.trip import Leg, Product, Trip
from ns_trip_ranker.domain.models.trip_query import TripQuery

__all__ = [
    "ComfortRanking",
    "HandlerResponse",
    "JourneyDetail",
    "JourneyStop",
    "Leg",
    "Product",
    "ScoredTrip",
    "Stock",
    "TrainPart",
    "Trip",
    "TripQuery",
]
