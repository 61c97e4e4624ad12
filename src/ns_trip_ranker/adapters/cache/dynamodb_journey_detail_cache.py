"""DynamoDB-backed journey detail cache.

Items are keyed by ``productNumber`` (string) and hold the journey detail
serialized as JSON text in the ``detail`` attribute. Items written as a
DynamoDB map (the format of tables filled by earlier deployments) are read
as well. Entries never expire.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import boto3

from ns_trip_ranker.domain.contracts.journey_detail_cache import JourneyDetailCacheProtocol
from ns_trip_ranker.domain.models.journey_detail import JourneyDetail

if TYPE_CHECKING:
    from ns_trip_ranker.adapters.config import AppConfig

logger = logging.getLogger(__name__)

KEY_ATTRIBUTE = "productNumber"
DETAIL_ATTRIBUTE = "detail"


class DynamoDbJourneyDetailCache(JourneyDetailCacheProtocol):
    """Journey detail cache stored in a DynamoDB table.

    boto3 is synchronous, so table calls run in a worker thread.
    """

    def __init__(self, table: Any) -> None:
        """Initialize with a boto3 DynamoDB Table resource."""
        self._table = table

    @classmethod
    def for_table(cls, table_name: str, region: str | None = None) -> DynamoDbJourneyDetailCache:
        """Create a cache for a table, using the default region when none is given."""
        dynamodb = boto3.resource("dynamodb", region_name=region)
        return cls(dynamodb.Table(table_name))

    @classmethod
    def from_config(cls, config: AppConfig) -> DynamoDbJourneyDetailCache:
        """Create a cache for the table configured in NSPRODUCTCACHE_TABLE_NAME."""
        if not config.nsproductcache_table_name:
            raise ValueError("nsproductcache_table_name must be set to use the DynamoDB cache")
        return cls.for_table(config.nsproductcache_table_name, config.aws_region)

    async def get(self, product_number: str) -> JourneyDetail | None:
        """Get the cached journey detail for a product number."""
        result = await asyncio.to_thread(
            self._table.get_item, Key={KEY_ATTRIBUTE: str(product_number)}
        )
        item = result.get("Item")
        if not item:
            return None
        stored = item[DETAIL_ATTRIBUTE]
        if isinstance(stored, str):
            return JourneyDetail.model_validate_json(stored)
        return JourneyDetail.model_validate(stored)

    async def put(self, product_number: str, detail: JourneyDetail) -> None:
        """Store the journey detail; an existing entry is overwritten."""
        item = {
            KEY_ATTRIBUTE: str(product_number),
            DETAIL_ATTRIBUTE: detail.model_dump_json(by_alias=True, exclude_unset=True),
        }
        await asyncio.to_thread(self._table.put_item, Item=item)
        logger.debug(f"Cached journey detail for product {product_number}")
