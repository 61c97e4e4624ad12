"""Wiring of use-case services to the NS API and the journey detail cache."""

import functools
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import dataclass

import aiohttp

from ns_trip_ranker.adapters.cache import DynamoDbJourneyDetailCache, InMemoryJourneyDetailCache
from ns_trip_ranker.adapters.config import AppConfig
from ns_trip_ranker.adapters.ns_api import NsHttpClient, NsJourneyDetailRepository, NsTripRepository
from ns_trip_ranker.application.services import (
    CachedJourneyDetailResolver,
    ComfortRankingService,
    OptimalRouteService,
)
from ns_trip_ranker.domain.contracts import JourneyDetailCacheProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TripServices:
    """Use-case services available to a single invocation."""

    optimal_route: OptimalRouteService
    comfort_ranking: ComfortRankingService
    journey_detail_cache: JourneyDetailCacheProtocol


ServicesFactory = Callable[[], AbstractAsyncContextManager[TripServices]]


@functools.cache
def _in_memory_cache() -> InMemoryJourneyDetailCache:
    logger.warning("NSPRODUCTCACHE_TABLE_NAME not set, using in-memory journey detail cache")
    return InMemoryJourneyDetailCache()


@functools.cache
def _dynamodb_cache(table_name: str, region: str | None) -> DynamoDbJourneyDetailCache:
    logger.info(f"Using DynamoDB journey detail cache table {table_name}")
    return DynamoDbJourneyDetailCache.for_table(table_name, region)


def create_journey_detail_cache(config: AppConfig) -> JourneyDetailCacheProtocol:
    """Use the DynamoDB table when configured, otherwise a process-local cache.

    Caches live for the whole process, so warm Lambda invocations share
    entries and the boto3 resource.
    """
    if config.nsproductcache_table_name:
        return _dynamodb_cache(config.nsproductcache_table_name, config.aws_region)
    return _in_memory_cache()


def clear_journey_detail_caches() -> None:
    """Forget the process-wide caches; the next invocation builds new ones."""
    _in_memory_cache.cache_clear()
    _dynamodb_cache.cache_clear()


def build_trip_services(
    http_client: NsHttpClient,
    config: AppConfig,
    cache: JourneyDetailCacheProtocol,
) -> TripServices:
    trip_repository = NsTripRepository(http_client, config.trips_url)
    detail_repository = NsJourneyDetailRepository(http_client, config.journey_url)
    resolver = CachedJourneyDetailResolver(cache, detail_repository)
    return TripServices(
        optimal_route=OptimalRouteService(trip_repository),
        comfort_ranking=ComfortRankingService(trip_repository, resolver),
        journey_detail_cache=cache,
    )


@asynccontextmanager
async def open_trip_services(config: AppConfig | None = None) -> AsyncIterator[TripServices]:
    """Open an aiohttp session and yield services bound to it.

    Configuration is read from the environment when not given. The session
    is per invocation; the journey detail cache is shared across invocations.
    """
    config = config or AppConfig()
    cache = create_journey_detail_cache(config)
    timeout = aiohttp.ClientTimeout(total=config.ns_api_timeout)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        http_client = NsHttpClient(session=session, api_key=config.ns_api_key)
        yield build_trip_services(http_client, config, cache)
