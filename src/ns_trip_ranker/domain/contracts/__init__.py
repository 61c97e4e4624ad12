"""Protocols for infrastructure collaborators."""

from ns_trip_ranker.domain.contracts.journey_detail_cache import JourneyDetailCacheProtocol

__all__ = ["JourneyDetailCacheProtocol"]
