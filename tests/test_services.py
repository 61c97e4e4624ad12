"""Tests for application use-case services."""

import pytest

from ns_trip_ranker.application.services import (
    CachedJourneyDetailResolver,
    ComfortRankingService,
    OptimalRouteService,
)
from ns_trip_ranker.application.services.comfort_ranking_service import (
    enrich_trips,
    find_detail_for,
)
from ns_trip_ranker.domain.exceptions import NoDataAvailableError, UpstreamFailureError
from ns_trip_ranker.domain.models import TripQuery
from tests.fakes import (
    FakeJourneyDetailRepository,
    FakeTripRepository,
    RecordingCache,
    make_detail,
    make_leg,
    make_trip,
)


@pytest.fixture
def query() -> TripQuery:
    """Create a sample trip query."""
    return TripQuery(
        arrival_station="Amsterdam",
        departure_station="Rotterdam",
        departure_date="2023-10-10T10:00:00",
    )


class TestOptimalRouteService:
    """Tests for OptimalRouteService."""

    @pytest.mark.asyncio
    async def test_returns_fastest_trip(self, query: TripQuery) -> None:
        """Given two trips, when finding the optimal trip, then the fastest is returned."""
        fast = make_trip(50, 55)
        repository = FakeTripRepository([make_trip(60, 70), fast])

        result = await OptimalRouteService(repository).find_optimal_trip(query)

        assert result is fast
        assert repository.queries == [query]

    @pytest.mark.asyncio
    async def test_when_no_trips_then_no_data_available(self, query: TripQuery) -> None:
        """Given an empty search result, when finding the optimal trip, then NoData is raised."""
        service = OptimalRouteService(FakeTripRepository([]))

        with pytest.raises(NoDataAvailableError, match="No data available"):
            await service.find_optimal_trip(query)

    @pytest.mark.asyncio
    async def test_upstream_failure_propagates(self, query: TripQuery) -> None:
        """Given a failing trip search, when finding the optimal trip, then error propagates."""
        service = OptimalRouteService(
            FakeTripRepository(error=UpstreamFailureError(500, {"message": "Error"}))
        )

        with pytest.raises(UpstreamFailureError):
            await service.find_optimal_trip(query)


class TestEnrichment:
    """Tests for attaching journey details to legs."""

    def test_detail_is_matched_by_inclusion(self) -> None:
        """Given a detail listing several products, when matching, then any of them matches."""
        combined = make_detail(["100", "200"], [1])
        other = make_detail(["300"], [1])

        assert find_detail_for("200", [other, combined]) is combined
        assert find_detail_for("999", [other, combined]) is None

    def test_first_matching_detail_wins(self) -> None:
        """Given two details covering the same product, when matching, then the first wins."""
        first = make_detail(["100"], [1])
        second = make_detail(["100", "101"], [2])

        assert find_detail_for("100", [first, second]) is first

    def test_shared_product_gets_same_detail_instance(self) -> None:
        """Given two trips on the same train, when enriching, then they share the detail."""
        detail = make_detail(["100"], [1])
        trips = [make_trip(30, legs=[make_leg("100")]), make_trip(40, legs=[make_leg("100")])]

        enriched = enrich_trips(trips, [detail])

        assert enriched[0].legs[0].journey_detail is detail
        assert enriched[1].legs[0].journey_detail is detail
        assert trips[0].legs[0].journey_detail is None


class TestComfortRankingService:
    """Tests for ComfortRankingService."""

    @pytest.mark.asyncio
    async def test_ranks_enriched_trips(self, query: TripQuery) -> None:
        """Given trips and details, when ranking, then best and worst reflect facilities."""
        comfy = make_trip(40, legs=[make_leg("1", "MEDIUM")], uid="comfy")
        bare = make_trip(30, legs=[make_leg("2", "MEDIUM")], uid="bare")
        details = FakeJourneyDetailRepository(
            {"1": make_detail(["1"], [3, 3]), "2": make_detail(["2"], [0])}
        )
        resolver = CachedJourneyDetailResolver(RecordingCache(), details)
        service = ComfortRankingService(FakeTripRepository([bare, comfy]), resolver)

        ranking = await service.rank_trips(query)

        assert ranking.best.trip.to_dict()["uid"] == "comfy"
        assert ranking.best.score == 6 + 4
        assert ranking.worst.trip.to_dict()["uid"] == "bare"
        assert ranking.worst.score == 4

    @pytest.mark.asyncio
    async def test_fetches_each_product_once(self, query: TripQuery) -> None:
        """Given trips sharing a train, when ranking, then the train is fetched once."""
        trips = [
            make_trip(30, legs=[make_leg("1"), make_leg("2")], transfers=1),
            make_trip(35, legs=[make_leg("1")]),
        ]
        details = FakeJourneyDetailRepository(
            {"1": make_detail(["1"], [1]), "2": make_detail(["2"], [1])}
        )
        cache = RecordingCache()
        resolver = CachedJourneyDetailResolver(cache, details)
        service = ComfortRankingService(FakeTripRepository(trips), resolver)

        await service.rank_trips(query)

        assert sorted(details.requested) == ["1", "2"]
        assert sorted(cache.puts) == ["1", "2"]

    @pytest.mark.asyncio
    async def test_when_no_trips_then_no_data_available(self, query: TripQuery) -> None:
        """Given an empty search result, when ranking, then NoData is raised."""
        resolver = CachedJourneyDetailResolver(RecordingCache(), FakeJourneyDetailRepository())
        service = ComfortRankingService(FakeTripRepository([]), resolver)

        with pytest.raises(NoDataAvailableError):
            await service.rank_trips(query)
