"""Command-line access to the trip handlers for local use."""

import asyncio
import json
import sys
from typing import Any

from ns_trip_ranker.adapters.lambda_api.handlers import (
    check_optimal_route,
    configure_logging,
    sort_route_by_comfort,
)
from ns_trip_ranker.domain.models import HandlerResponse


def build_event(arrival_station: str, departure_station: str, departure_date: str) -> dict[str, Any]:
    """Build an API Gateway style event from command-line arguments."""
    return {
        "queryStringParameters": {
            "arrivalStation": arrival_station,
            "departureStation": departure_station,
            "departureDate": departure_date,
        }
    }


def _print_trip_summary(label: str, trip: dict[str, Any]) -> None:
    """Print a one-line summary of a trip."""
    legs = trip.get("legs", [])
    products = ", ".join(str(leg.get("product", {}).get("number", "?")) for leg in legs)
    line = (
        f"{label}: planned {trip.get('plannedDurationInMinutes')} min, "
        f"actual {trip.get('actualDurationInMinutes', '-')} min, "
        f"{trip.get('transfers', 0)} transfer(s)"
    )
    if "comfortScore" in trip:
        line += f", comfort score {trip['comfortScore']}"
    if products:
        line += f" [trains: {products}]"
    print(line)


def _print_response(command: str, response: HandlerResponse, as_json: bool) -> None:
    if as_json or response.status_code != 200:
        print(json.dumps(response.body, indent=2, default=str))
        return

    if command == "optimal":
        _print_trip_summary("Fastest", response.body)
    else:
        _print_trip_summary("Best", response.body["best"])
        _print_trip_summary("Worst", response.body["worst"])


def _setup_argparse() -> Any:
    """Set up and configure argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="NS trip lookup helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fastest trip
  ns-trips optimal Amsterdam Rotterdam 2024-10-10T10:00:00

  # Most and least comfortable trips
  ns-trips comfort Amsterdam Rotterdam 2024-10-10T10:00:00 --json

Requires NS_API_KEY. Set NSPRODUCTCACHE_TABLE_NAME to use the DynamoDB cache.
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    for name, help_text in (
        ("optimal", "Find the fastest trip"),
        ("comfort", "Rank trips by comfort"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("arrival_station", help="Value for arrivalStation (search origin)")
        sub.add_argument("departure_station", help="Value for departureStation (search destination)")
        sub.add_argument("departure_date", help="Departure date and time, e.g. 2024-10-10T10:00:00")
        sub.add_argument("--json", action="store_true", help="Output the raw response body as JSON")

    return parser


async def main() -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging()
    event = build_event(args.arrival_station, args.departure_station, args.departure_date)

    if args.command == "optimal":
        response = await check_optimal_route(event)
    else:
        response = await sort_route_by_comfort(event)

    _print_response(args.command, response, args.json)
    if response.status_code != 200:
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
