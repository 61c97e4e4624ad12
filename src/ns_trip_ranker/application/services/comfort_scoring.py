"""Comfort scoring and ranking of trips.

The comfort score of a trip is the sum over its legs of:

- the number of facility codes across all train parts in the actual stock
  of every stop of the leg's journey detail, and
- the crowd forecast points of the leg (LOW=5, MEDIUM=4, HIGH=3,
  VERY_HIGH=2, anything else=1),

minus the number of transfers of the trip.
"""

from ns_trip_ranker.domain.models import ComfortRanking, Leg, ScoredTrip, Trip

CROWD_FORECAST_POINTS = {
    "LOW": 5,
    "MEDIUM": 4,
    "HIGH": 3,
    "VERY_HIGH": 2,
}
DEFAULT_CROWD_FORECAST_POINTS = 1


def crowd_forecast_points(crowd_forecast: str | None) -> int:
    """Points for a crowd forecast category; unknown or missing scores lowest."""
    if crowd_forecast is None:
        return DEFAULT_CROWD_FORECAST_POINTS
    return CROWD_FORECAST_POINTS.get(crowd_forecast, DEFAULT_CROWD_FORECAST_POINTS)


def leg_score(leg: Leg) -> int:
    facilities = leg.journey_detail.facility_count if leg.journey_detail else 0
    return facilities + crowd_forecast_points(leg.crowd_forecast)


def comfort_score(trip: Trip) -> int:
    """Compute the comfort score of a trip with enriched legs."""
    return sum(leg_score(leg) for leg in trip.legs) - trip.transfers


def rank_by_comfort(trips: list[Trip]) -> ComfortRanking:
    """Score trips and order them from most to least comfortable.

    The input trips are not modified. Trips with equal scores keep their
    input order.

    Raises:
        ValueError: If trips is empty.
    """
    scored = [ScoredTrip(trip=trip, score=comfort_score(trip)) for trip in trips]
    scored.sort(key=lambda s: s.score, reverse=True)
    return ComfortRanking(trips=tuple(scored))
