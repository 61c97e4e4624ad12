"""AWS Lambda adapters."""

from ns_trip_ranker.adapters.lambda_api.handlers import (
    check_optimal_route,
    check_optimal_route_handler,
    sort_route_by_comfort,
    sort_route_by_comfort_handler,
)

__all__ = [
    "check_optimal_route",
    "check_optimal_route_handler",
    "sort_route_by_comfort",
    "sort_route_by_comfort_handler",
]
