"""Parsing of API Gateway proxy events into trip queries."""

import logging
from typing import Any

from ns_trip_ranker.domain.exceptions import MissingParametersError
from ns_trip_ranker.domain.models import TripQuery

logger = logging.getLogger(__name__)

MISSING_QUERY_STRING_PARAMETERS = "Missing query string parameters"
MISSING_REQUIRED_PARAMETERS = "Missing required query string parameters"

REQUIRED_PARAMETERS = ("arrivalStation", "departureStation", "departureDate")


def parse_trip_query(
    event: dict[str, Any],
    absent_message: str = MISSING_REQUIRED_PARAMETERS,
) -> TripQuery:
    """Build a trip query from the event's query string parameters.

    Args:
        event: API Gateway proxy event.
        absent_message: Error message used when the event carries no query
            string parameters at all.

    Raises:
        MissingParametersError: If parameters are absent, or any required one
            is missing or empty.
    """
    params = event.get("queryStringParameters")
    if params is None:
        raise MissingParametersError(absent_message)

    missing = [name for name in REQUIRED_PARAMETERS if not params.get(name)]
    if missing:
        logger.debug(f"Missing query string parameters: {', '.join(missing)}")
        raise MissingParametersError(MISSING_REQUIRED_PARAMETERS)

    return TripQuery(
        arrival_station=params["arrivalStation"],
        departure_station=params["departureStation"],
        departure_date=params["departureDate"],
    )
