"""Scored trip domain model."""

from dataclasses import dataclass
from typing import Any

from ns_trip_ranker.domain.models.trip import Trip


@dataclass(frozen=True)
class ScoredTrip:
    """A trip paired with its comfort score."""

    trip: Trip
    score: int

    def to_dict(self) -> dict[str, Any]:
        return {**self.trip.to_dict(), "comfortScore": self.score}
