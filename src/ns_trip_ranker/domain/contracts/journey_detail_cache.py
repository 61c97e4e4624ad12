"""Protocol for journey detail caching."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ns_trip_ranker.domain.models.journey_detail import JourneyDetail


class JourneyDetailCacheProtocol(Protocol):
    """Protocol for caching journey details by product number."""

    async def get(self, product_number: str) -> "JourneyDetail | None":
        """Get the cached journey detail for a product number.

        Args:
            product_number: The product number to look up (exact match).

        Returns:
            The cached detail, or None if not found.
        """
        ...

    async def put(self, product_number: str, detail: "JourneyDetail") -> None:
        """Store the journey detail for a product number.

        Args:
            product_number: The product number.
            detail: The detail to cache.
        """
        ...
