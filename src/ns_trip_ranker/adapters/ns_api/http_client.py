"""HTTP client for NS API requests."""

import logging
import time
from typing import TYPE_CHECKING, Any

from ns_trip_ranker.adapters.api_request_logger import log_api_request, log_api_response
from ns_trip_ranker.adapters.ns_api.constants import DEFAULT_HEADERS, SUBSCRIPTION_KEY_HEADER
from ns_trip_ranker.domain.exceptions import UpstreamFailureError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class NsHttpClient:
    """HTTP client for the NS API using a shared aiohttp session."""

    def __init__(self, session: "ClientSession | None", api_key: str) -> None:
        """Initialize with an aiohttp session and the subscription key."""
        self._session = session
        self._headers = {**DEFAULT_HEADERS, SUBSCRIPTION_KEY_HEADER: api_key}

    async def _read_response(self, response: "ClientResponse", url: str) -> Any:
        """Decode a JSON response, raising on non-2xx statuses."""
        # NS error responses are JSON too; decode regardless of Content-Type
        data = await response.json(content_type=None)
        if not 200 <= response.status < 300:
            logger.warning(f"NS API returned status {response.status} for {url}")
            raise UpstreamFailureError(response.status, data)
        return data

    async def get_json(self, url: str, params: dict[str, str]) -> Any:
        """Perform a GET request and return the decoded JSON body.

        Args:
            url: Endpoint URL.
            params: Query parameters.

        Returns:
            Decoded JSON body of a successful response.

        Raises:
            UpstreamFailureError: If the API answers with a non-2xx status.
            RuntimeError: If no session is configured.
        """
        if not self._session:
            raise RuntimeError("NS API requires an aiohttp session")

        log_api_request(url, params=params, headers=self._headers)
        started = time.monotonic()
        async with self._session.get(url, params=params, headers=self._headers) as response:
            log_api_response(url, response.status, time.monotonic() - started)
            return await self._read_response(response, url)
