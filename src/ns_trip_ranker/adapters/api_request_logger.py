"""Logging of outgoing NS API calls when NS_LOG_REQUESTS is enabled."""

import logging
import os
from collections.abc import Mapping
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "ocp-apim-subscription-key"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via NS_LOG_REQUESTS environment variable."""
    return os.getenv("NS_LOG_REQUESTS", "").lower() == "true"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Replace the values of credential-carrying headers."""
    return {k: REDACTED if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def describe_request(url: str, params: Mapping[str, str] | None = None) -> str:
    """Render a request as ``GET url?query`` with sorted parameters."""
    if not params:
        return f"GET {url}"
    return f"GET {url}?{urlencode(sorted(params.items()))}"


def log_api_request(
    url: str,
    params: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
) -> None:
    """Log an outgoing GET request if NS_LOG_REQUESTS is enabled.

    Args:
        url: Request URL without query string.
        params: Query parameters (optional).
        headers: Request headers (optional, credentials are redacted).
    """
    if not should_log_requests():
        return

    message = f"API Request: {describe_request(url, params)}"
    if headers:
        message += f" Headers: {redact_headers(headers)}"
    logger.info(message)


def log_api_response(url: str, status: int, elapsed_seconds: float) -> None:
    """Log the status and latency of a finished request if enabled."""
    if not should_log_requests():
        return
    logger.info(f"API Response: {status} from {url} in {elapsed_seconds * 1000:.0f}ms")
