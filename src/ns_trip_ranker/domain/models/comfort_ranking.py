"""Comfort ranking domain model."""

from dataclasses import dataclass

from ns_trip_ranker.domain.models.scored_trip import ScoredTrip


@dataclass(frozen=True)
class ComfortRanking:
    """Trips ordered from most to least comfortable."""

    trips: tuple[ScoredTrip, ...]

    def __post_init__(self) -> None:
        if not self.trips:
            raise ValueError("ComfortRanking requires at least one trip")

    @property
    def best(self) -> ScoredTrip:
        return self.trips[0]

    @property
    def worst(self) -> ScoredTrip:
        return self.trips[-1]
