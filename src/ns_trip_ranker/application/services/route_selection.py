"""Selection of the fastest trip by planned or actual duration."""

import logging

from ns_trip_ranker.domain.models import Trip

logger = logging.getLogger(__name__)


def select_fastest_trip(trips: list[Trip]) -> Trip:
    """Pick the trip with the shortest duration.

    The trip with the minimum planned duration and the trip with the minimum
    actual duration are found independently. The actual-duration candidate
    wins when its actual duration is not longer than the planned duration of
    the planned-duration candidate.

    Args:
        trips: Non-empty list of trips.

    Returns:
        The selected trip.

    Raises:
        ValueError: If trips is empty.
    """
    if not trips:
        raise ValueError("Cannot select a trip from an empty list")

    # min() keeps the first of equal elements, so ties stay in input order
    by_planned = min(trips, key=lambda t: t.planned_duration_in_minutes)
    by_actual = min(trips, key=lambda t: t.effective_actual_duration)

    if by_actual.effective_actual_duration <= by_planned.planned_duration_in_minutes:
        logger.debug(
            f"Selected trip by actual duration ({by_actual.effective_actual_duration} min)"
        )
        return by_actual

    logger.debug(f"Selected trip by planned duration ({by_planned.planned_duration_in_minutes} min)")
    return by_planned
