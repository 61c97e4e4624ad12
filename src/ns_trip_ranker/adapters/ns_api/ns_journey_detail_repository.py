"""NS journey detail repository adapter."""

from ns_trip_ranker.adapters.ns_api.constants import TRAIN_PARAM
from ns_trip_ranker.adapters.ns_api.http_client import NsHttpClient
from ns_trip_ranker.adapters.ns_api.trip_parser import TripParser
from ns_trip_ranker.domain.models import JourneyDetail
from ns_trip_ranker.domain.ports.journey_detail_repository import JourneyDetailRepository


class NsJourneyDetailRepository(JourneyDetailRepository):
    """Adapter fetching journey details per train product from the NS API."""

    def __init__(self, http_client: NsHttpClient, journey_url: str) -> None:
        self._http_client = http_client
        self._journey_url = journey_url

    async def get_journey_detail(self, product_number: str) -> JourneyDetail:
        """Fetch the journey detail of a train.

        Raises:
            UpstreamFailureError: If the API answers with a non-2xx status.
            ValueError: If the response carries no payload.
        """
        data = await self._http_client.get_json(
            self._journey_url, {TRAIN_PARAM: product_number}
        )
        return TripParser.parse_journey_detail(data, product_number)
