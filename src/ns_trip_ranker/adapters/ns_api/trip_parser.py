"""Parser for NS trip search and journey detail responses."""

import logging
from typing import Any

from ns_trip_ranker.adapters.ns_api.constants import PAYLOAD_KEY, TRIPS_KEY
from ns_trip_ranker.domain.models import JourneyDetail, Trip

logger = logging.getLogger(__name__)


class TripParser:
    """Parses NS API responses into domain objects."""

    @staticmethod
    def extract_trips(data: dict[str, Any] | list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Extract the trip list from a trip search response.

        The canonical envelope is an object with a ``trips`` list; a bare list
        is accepted as the trip list itself.
        """
        if isinstance(data, dict):
            trips = data.get(TRIPS_KEY, [])
        else:
            trips = data

        if not isinstance(trips, list):
            raise ValueError(f"Unexpected trip search response: {type(trips).__name__}")
        return trips

    @staticmethod
    def parse_trips(data: dict[str, Any] | list[dict[str, Any]]) -> list[Trip]:
        """Parse a trip search response into trips."""
        return [Trip.model_validate(trip) for trip in TripParser.extract_trips(data)]

    @staticmethod
    def parse_journey_detail(data: Any, product_number: str) -> JourneyDetail:
        """Parse a journey detail response.

        Raises:
            ValueError: If the response has no payload.
        """
        payload = data.get(PAYLOAD_KEY) if isinstance(data, dict) else None
        if payload is None:
            raise ValueError(f"Journey detail response for train {product_number} has no payload")
        return JourneyDetail.model_validate(payload)
