"""Mapping of handler outcomes to API Gateway proxy results."""

import json
from typing import Any

from ns_trip_ranker.domain.exceptions import (
    NoDataAvailableError,
    TripLookupError,
    UpstreamFailureError,
)
from ns_trip_ranker.domain.models import HandlerResponse

JSON_HEADERS = {"Content-Type": "application/json"}


def lookup_error_response(error: TripLookupError) -> HandlerResponse:
    """Translate an expected lookup failure into a response."""
    if isinstance(error, UpstreamFailureError):
        return HandlerResponse(status_code=error.status_code, body=error.body)
    if isinstance(error, NoDataAvailableError):
        return HandlerResponse.error(404, str(error))
    # MissingParametersError and any other lookup failure
    return HandlerResponse.error(500, str(error))


def to_proxy_result(response: HandlerResponse) -> dict[str, Any]:
    """Render a response in the API Gateway proxy integration format."""
    return {
        "statusCode": response.status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(response.body, default=str),
    }
