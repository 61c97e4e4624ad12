"""Ports (interfaces) for the ports-and-adapters architecture."""

from ns_trip_ranker.domain.ports.journey_detail_repository import JourneyDetailRepository
from ns_trip_ranker.domain.ports.trip_repository import TripRepository

__all__ = [
    "JourneyDetailRepository",
    "TripRepository",
]
