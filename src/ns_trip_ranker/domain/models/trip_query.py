"""Trip query domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TripQuery:
    """Validated parameters of a trip search."""

    arrival_station: str
    departure_station: str
    departure_date: str  # passed through to the upstream API uninterpreted

    def to_upstream_params(self) -> dict[str, str]:
        """Map to the trip search query fields."""
        return {
            "fromStation": self.arrival_station,
            "toStation": self.departure_station,
            "dateTime": self.departure_date,
        }
