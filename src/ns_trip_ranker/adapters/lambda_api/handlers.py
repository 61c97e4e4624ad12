"""AWS Lambda entry points for the trip handlers.

Both handlers receive API Gateway proxy events with the query string
parameters ``arrivalStation``, ``departureStation`` and ``departureDate``.

- ``check_optimal_route_handler`` returns the fastest trip.
- ``sort_route_by_comfort_handler`` returns the most and least comfortable trips.
"""

import asyncio
import logging
import traceback
from typing import Any

from ns_trip_ranker.adapters.config import AppConfig
from ns_trip_ranker.adapters.lambda_api.event_parser import (
    MISSING_QUERY_STRING_PARAMETERS,
    MISSING_REQUIRED_PARAMETERS,
    parse_trip_query,
)
from ns_trip_ranker.adapters.lambda_api.responses import lookup_error_response, to_proxy_result
from ns_trip_ranker.adapters.lambda_api.services_factory import (
    ServicesFactory,
    open_trip_services,
)
from ns_trip_ranker.domain.exceptions import TripLookupError
from ns_trip_ranker.domain.models import HandlerResponse

logger = logging.getLogger(__name__)


async def check_optimal_route(
    event: dict[str, Any], services_factory: ServicesFactory | None = None
) -> HandlerResponse:
    """Find the fastest trip for the event's query.

    Unexpected failures answer 500 with the error message, its stack trace
    and the original event.
    """
    try:
        query = parse_trip_query(event, absent_message=MISSING_QUERY_STRING_PARAMETERS)
        async with (services_factory or open_trip_services)() as services:
            trip = await services.optimal_route.find_optimal_trip(query)
        return HandlerResponse(status_code=200, body=trip.to_dict())
    except TripLookupError as e:
        logger.warning(f"Optimal route lookup failed: {e}")
        return lookup_error_response(e)
    except Exception as e:
        logger.exception("Unexpected error while checking optimal route")
        return HandlerResponse.error(
            500,
            str(e),
            stack="".join(traceback.format_exception(e)),
            input=event,
        )


async def sort_route_by_comfort(
    event: dict[str, Any], services_factory: ServicesFactory | None = None
) -> HandlerResponse:
    """Rank the trips for the event's query by comfort score."""
    try:
        query = parse_trip_query(event, absent_message=MISSING_REQUIRED_PARAMETERS)
        async with (services_factory or open_trip_services)() as services:
            ranking = await services.comfort_ranking.rank_trips(query)
        return HandlerResponse(
            status_code=200,
            body={"best": ranking.best.to_dict(), "worst": ranking.worst.to_dict()},
        )
    except TripLookupError as e:
        logger.warning(f"Comfort ranking failed: {e}")
        return lookup_error_response(e)
    except Exception as e:
        logger.exception("Unexpected error while sorting routes by comfort")
        return HandlerResponse.error(500, str(e))


def configure_logging() -> None:
    """Apply the configured log level to the root logger.

    The Lambda runtime installs its own handler, so basicConfig only takes
    effect when running outside of it.
    """
    level = AppConfig().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger().setLevel(level)


def check_optimal_route_handler(event: dict[str, Any], _context: Any) -> dict[str, Any]:
    """Lambda entry point for the fastest trip lookup."""
    configure_logging()
    return to_proxy_result(asyncio.run(check_optimal_route(event)))


def sort_route_by_comfort_handler(event: dict[str, Any], _context: Any) -> dict[str, Any]:
    """Lambda entry point for the comfort ranking."""
    configure_logging()
    return to_proxy_result(asyncio.run(sort_route_by_comfort(event)))
