"""Tests for the command-line interface."""

from unittest.mock import AsyncMock, patch

import pytest

from ns_trip_ranker import cli
from ns_trip_ranker.domain.models import HandlerResponse


def test_build_event_maps_arguments_to_query_parameters() -> None:
    """Given CLI arguments, when building the event, then parameters are named as in the API."""
    event = cli.build_event("Amsterdam", "Rotterdam", "2023-10-10T10:00:00")

    assert event == {
        "queryStringParameters": {
            "arrivalStation": "Amsterdam",
            "departureStation": "Rotterdam",
            "departureDate": "2023-10-10T10:00:00",
        }
    }


def test_parser_accepts_comfort_command() -> None:
    """Given the comfort command, when parsing, then all positional args are read."""
    args = cli._setup_argparse().parse_args(
        ["comfort", "Amsterdam", "Rotterdam", "2023-10-10T10:00:00", "--json"]
    )

    assert args.command == "comfort"
    assert args.arrival_station == "Amsterdam"
    assert args.json is True


@pytest.mark.asyncio
async def test_optimal_command_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a successful lookup, when running optimal, then a summary is printed."""
    response = HandlerResponse(
        status_code=200,
        body={
            "plannedDurationInMinutes": 50,
            "actualDurationInMinutes": 55,
            "transfers": 1,
            "legs": [{"product": {"number": "3045"}}],
        },
    )
    argv = ["ns-trips", "optimal", "Amsterdam", "Rotterdam", "2023-10-10T10:00:00"]

    with (
        patch("sys.argv", argv),
        patch.object(cli, "configure_logging"),
        patch.object(cli, "check_optimal_route", AsyncMock(return_value=response)),
    ):
        await cli.main()

    output = capsys.readouterr().out
    assert "Fastest: planned 50 min, actual 55 min, 1 transfer(s)" in output
    assert "[trains: 3045]" in output


@pytest.mark.asyncio
async def test_failed_lookup_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a failed lookup, when running comfort, then the body is printed and exit is 1."""
    response = HandlerResponse.error(404, "No data available")
    argv = ["ns-trips", "comfort", "Amsterdam", "Rotterdam", "2023-10-10T10:00:00"]

    with (
        patch("sys.argv", argv),
        patch.object(cli, "configure_logging"),
        patch.object(cli, "sort_route_by_comfort", AsyncMock(return_value=response)),
        pytest.raises(SystemExit) as exc_info,
    ):
        await cli.main()

    assert exc_info.value.code == 1
    assert "No data available" in capsys.readouterr().out
