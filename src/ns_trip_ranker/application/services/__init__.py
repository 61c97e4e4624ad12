"""Application services (use cases) for trip ranking."""

from ns_trip_ranker.application.services.comfort_ranking_service import ComfortRankingService
from ns_trip_ranker.application.services.comfort_scoring import comfort_score, rank_by_comfort
from ns_trip_ranker.application.services.journey_detail_resolver import (
    CachedJourneyDetailResolver,
)
from ns_trip_ranker.application.services.optimal_route_service import OptimalRouteService
from ns_trip_ranker.application.services.route_selection import select_fastest_trip

__all__ = [
    "CachedJourneyDetailResolver",
    "ComfortRankingService",
    "OptimalRouteService",
    "comfort_score",
    "rank_by_comfort",
    "select_fastest_trip",
]
