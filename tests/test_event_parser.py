"""Tests for API Gateway event parsing."""

import pytest

from ns_trip_ranker.adapters.lambda_api.event_parser import (
    MISSING_QUERY_STRING_PARAMETERS,
    MISSING_REQUIRED_PARAMETERS,
    parse_trip_query,
)
from ns_trip_ranker.domain.exceptions import MissingParametersError
from ns_trip_ranker.domain.models import TripQuery

VALID_PARAMS = {
    "arrivalStation": "Amsterdam",
    "departureStation": "Rotterdam",
    "departureDate": "2023-10-10T10:00:00",
}


def test_when_all_parameters_present_then_query_is_built() -> None:
    """Given all three parameters, when parsing, then a query is returned."""
    query = parse_trip_query({"queryStringParameters": VALID_PARAMS})

    assert query == TripQuery(
        arrival_station="Amsterdam",
        departure_station="Rotterdam",
        departure_date="2023-10-10T10:00:00",
    )


def test_when_parameters_null_then_absent_message_is_used() -> None:
    """Given null parameters, when parsing, then the absent message is raised."""
    with pytest.raises(MissingParametersError) as exc_info:
        parse_trip_query(
            {"queryStringParameters": None}, absent_message=MISSING_QUERY_STRING_PARAMETERS
        )

    assert str(exc_info.value) == "Missing query string parameters"


def test_when_parameters_key_missing_then_treated_as_absent() -> None:
    """Given an event without the parameters key, when parsing, then it counts as absent."""
    with pytest.raises(MissingParametersError, match="^Missing required"):
        parse_trip_query({})


@pytest.mark.parametrize("missing", ["arrivalStation", "departureStation", "departureDate"])
def test_when_one_parameter_missing_then_required_message(missing: str) -> None:
    """Given a missing parameter, when parsing, then the required message is raised."""
    params = {k: v for k, v in VALID_PARAMS.items() if k != missing}

    with pytest.raises(MissingParametersError) as exc_info:
        parse_trip_query(
            {"queryStringParameters": params}, absent_message=MISSING_QUERY_STRING_PARAMETERS
        )

    assert str(exc_info.value) == MISSING_REQUIRED_PARAMETERS


def test_when_parameter_empty_then_treated_as_missing() -> None:
    """Given an empty parameter value, when parsing, then it counts as missing."""
    params = {**VALID_PARAMS, "departureDate": ""}

    with pytest.raises(MissingParametersError, match=MISSING_REQUIRED_PARAMETERS):
        parse_trip_query({"queryStringParameters": params})
