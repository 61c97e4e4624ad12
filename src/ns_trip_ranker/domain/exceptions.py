"""Error taxonomy for trip lookups."""

from typing import Any


class TripLookupError(Exception):
    """Base class for expected trip lookup failures."""


class MissingParametersError(TripLookupError):
    """Required query string parameters are absent or incomplete."""


class UpstreamFailureError(TripLookupError):
    """The NS API answered with a non-2xx status.

    The status code and decoded body are forwarded to the caller as-is.
    """

    def __init__(self, status_code: int, body: Any) -> None:
        super().__init__(f"Upstream request failed with status {status_code}")
        self.status_code = status_code
        self.body = body


class NoDataAvailableError(TripLookupError):
    """The trip search succeeded but returned no trips."""

    def __init__(self) -> None:
        super().__init__("No data available")
