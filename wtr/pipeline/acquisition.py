"""Forecast acquisition: cache first, network on miss.

For one (source id, location code):

1. look the raw document up in today's cache partition;
2. on a hit, parse it and return the result, parse errors included;
3. on a miss, GET the document, parse it and only then cache the bytes.

Each call makes at most one network request and never retries.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from wtr.config.schema import WtrConfig
from wtr.errors import (
    AcquisitionHttpStatusError,
    AcquisitionParseError,
    AcquisitionTransportError,
    ParseError,
    TransportError,
)
from wtr.ingest.http_client import HttpClient, HttpxClient
from wtr.ingest.tiempo_client import SOURCE_ID, forecast_url
from wtr.ingest.tiempo_parser import TiempoParser
from wtr.models.common import LocationCode, SourceId
from wtr.models.forecast import Forecast
from wtr.storage.blob_store import DEFAULT_CACHE_DIR, FileBlobStore, NullBlobStore
from wtr.storage.day_cache import DayPartitionedCache

logger = logging.getLogger(__name__)

HTTP_OK = 200


class ForecastParser(Protocol):
    def parse(self, data: bytes) -> Forecast: ...


class ForecastAcquirer:
    def __init__(
        self,
        http: HttpClient,
        cache: DayPartitionedCache,
        parser: ForecastParser,
        url_builder: Callable[[str], str] = forecast_url,
    ):
        self.http = http
        self.cache = cache
        self.parser = parser
        self.url_builder = url_builder

    def acquire(self, source_id: SourceId, location_code: LocationCode) -> Forecast:
        cached = self.cache.get(source_id, location_code)
        if cached is not None:
            # A cached document that no longer parses is not refetched.
            return self.parser.parse(cached)
        return self._fetch_fresh(source_id, location_code)

    def _fetch_fresh(self, source_id: SourceId, location_code: LocationCode) -> Forecast:
        url = self.url_builder(location_code)
        logger.info("Fetching %s forecast for %s", source_id, location_code)
        try:
            resp = self.http.get(url)
        except TransportError as e:
            logger.error(
                "Forecast request failed for %s/%s: %s", source_id, location_code, e
            )
            raise AcquisitionTransportError(str(e)) from e

        if resp.status_code != HTTP_OK:
            logger.error(
                "Forecast request for %s/%s returned HTTP %d",
                source_id, location_code, resp.status_code,
            )
            raise AcquisitionHttpStatusError(resp.status_code)

        try:
            forecast = self.parser.parse(resp.body)
        except ParseError as e:
            logger.error(
                "Unparsable forecast for %s/%s: %s", source_id, location_code, e
            )
            raise AcquisitionParseError(str(e)) from e

        # Only documents that parsed are cached.
        try:
            self.cache.set(source_id, location_code, resp.body)
        except OSError as e:
            logger.warning(
                "Could not cache forecast for %s/%s: %s", source_id, location_code, e
            )
        return forecast


class TiempoForecastService:
    """Acquirer bound to the Tiempo source id."""

    source_id = SOURCE_ID

    def __init__(self, acquirer: ForecastAcquirer):
        self.acquirer = acquirer

    def get_forecast(self, location_code: LocationCode) -> Forecast:
        return self.acquirer.acquire(self.source_id, location_code)


def build_service(
    config: WtrConfig, http: HttpClient | None = None
) -> TiempoForecastService:
    """Wire the default collaborators from config."""
    tiempo = config.tiempo
    if http is None:
        http = HttpxClient(timeout=tiempo.timeout_seconds)

    if config.cache.enabled:
        root = Path(config.cache.directory) if config.cache.directory else DEFAULT_CACHE_DIR
        store = FileBlobStore(root)
    else:
        store = NullBlobStore()

    def url_builder(code: str) -> str:
        return forecast_url(
            code,
            affiliate_id=tiempo.affiliate_id,
            base_url=tiempo.base_url,
            lang=tiempo.lang,
        )

    acquirer = ForecastAcquirer(
        http=http,
        cache=DayPartitionedCache(store),
        parser=TiempoParser(),
        url_builder=url_builder,
    )
    return TiempoForecastService(acquirer)
