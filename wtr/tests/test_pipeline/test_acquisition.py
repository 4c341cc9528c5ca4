"""Tests for the cache-first acquisition pipeline with faked collaborators."""

from pathlib import Path
from unittest.mock import MagicMock

import httpx
import pytest
import respx

from wtr.config.schema import CacheConfig, TiempoConfig, WtrConfig
from wtr.errors import (
    AcquisitionHttpStatusError,
    AcquisitionParseError,
    AcquisitionTransportError,
    StructureError,
    TransportError,
    XmlSyntaxError,
)
from wtr.ingest.http_client import HttpClient, HttpResponse
from wtr.ingest.tiempo_parser import TiempoParser
from wtr.pipeline.acquisition import ForecastAcquirer, build_service
from wtr.storage.blob_store import FileBlobStore, NullBlobStore
from wtr.storage.day_cache import DayPartitionedCache


def _acquirer(http, cache: DayPartitionedCache, parser=None) -> ForecastAcquirer:
    return ForecastAcquirer(
        http=http,
        cache=cache,
        parser=parser or TiempoParser(),
        url_builder=lambda code: f"http://tiempo.test/{code}",
    )


def _http(status: int = 200, body: bytes = b"") -> MagicMock:
    http = MagicMock(spec=HttpClient)
    http.get.return_value = HttpResponse(status_code=status, body=body)
    return http


class TestNetworkPath:
    def test_orvieto_end_to_end(self, cache: DayPartitionedCache, orvieto_xml: bytes):
        http = _http(200, orvieto_xml)
        forecast = _acquirer(http, cache).acquire("tiempo", "30625")

        assert len(forecast.days) == 5
        http.get.assert_called_once_with("http://tiempo.test/30625")
        assert cache.get("tiempo", "30625") == orvieto_xml

    def test_http_500(self, cache: DayPartitionedCache):
        http = _http(500, b"<html>oops</html>")
        with pytest.raises(AcquisitionHttpStatusError) as exc_info:
            _acquirer(http, cache).acquire("tiempo", "30625")

        assert exc_info.value.status_code == 500
        assert exc_info.value.stage == "status"
        assert cache.get("tiempo", "30625") is None

    def test_transport_error(self, cache: DayPartitionedCache):
        http = MagicMock(spec=HttpClient)
        http.get.side_effect = TransportError("ConnectError: refused")

        with pytest.raises(AcquisitionTransportError, match="refused") as exc_info:
            _acquirer(http, cache).acquire("tiempo", "30625")

        assert isinstance(exc_info.value.__cause__, TransportError)
        assert cache.get("tiempo", "30625") is None

    def test_wrong_root_not_cached(self):
        cache = MagicMock(spec=DayPartitionedCache)
        cache.get.return_value = None
        http = _http(200, b"<error>bad affiliate</error>")

        with pytest.raises(AcquisitionParseError, match="missing report root") as exc_info:
            _acquirer(http, cache).acquire("tiempo", "30625")

        assert isinstance(exc_info.value.__cause__, StructureError)
        cache.set.assert_not_called()

    def test_syntax_error_not_cached(self, cache: DayPartitionedCache):
        http = _http(200, b"<report><location>")
        with pytest.raises(AcquisitionParseError) as exc_info:
            _acquirer(http, cache).acquire("tiempo", "30625")

        assert exc_info.value.stage == "parse"
        assert isinstance(exc_info.value.__cause__, XmlSyntaxError)
        assert cache.get("tiempo", "30625") is None


class TestCachePath:
    def test_hit_skips_network(self, cache: DayPartitionedCache, orvieto_xml: bytes):
        cache.set("tiempo", "30625", orvieto_xml)
        http = _http(500)

        forecast = _acquirer(http, cache).acquire("tiempo", "30625")

        assert len(forecast.days) == 5
        http.get.assert_not_called()

    def test_second_call_served_from_cache(self, cache: DayPartitionedCache, orvieto_xml: bytes):
        http = _http(200, orvieto_xml)
        acquirer = _acquirer(http, cache)

        first = acquirer.acquire("tiempo", "30625")
        second = acquirer.acquire("tiempo", "30625")

        assert first == second
        assert http.get.call_count == 1

    def test_unparsable_cache_entry_fails_without_refetch(
        self, cache: DayPartitionedCache, orvieto_xml: bytes
    ):
        cache.set("tiempo", "30625", b"<garbage")
        http = _http(200, orvieto_xml)

        with pytest.raises(XmlSyntaxError):
            _acquirer(http, cache).acquire("tiempo", "30625")

        http.get.assert_not_called()
        assert cache.get("tiempo", "30625") == b"<garbage"

    def test_different_codes_are_separate(self, cache: DayPartitionedCache, orvieto_xml: bytes):
        cache.set("tiempo", "30625", orvieto_xml)
        http = _http(500)
        with pytest.raises(AcquisitionHttpStatusError):
            _acquirer(http, cache).acquire("tiempo", "31553")
        http.get.assert_called_once()

    def test_unusable_cache_directory(self, tmp_path: Path, orvieto_xml: bytes):
        root = tmp_path / "libweather"
        root.write_bytes(b"not a directory")
        cache = DayPartitionedCache(FileBlobStore(root))
        http = _http(200, orvieto_xml)

        forecast = _acquirer(http, cache).acquire("tiempo", "30625")

        assert len(forecast.days) == 5
        http.get.assert_called_once()
        assert root.read_bytes() == b"not a directory"


class TestBuildService:
    @respx.mock
    def test_wires_config(self, tmp_path: Path, orvieto_xml: bytes):
        config = WtrConfig(
            tiempo=TiempoConfig(affiliate_id="secret", base_url="http://tiempo.test/index.php"),
            cache=CacheConfig(directory=str(tmp_path)),
        )
        route = respx.get(
            "http://tiempo.test/index.php?api_lang=it&localidad=30625&affiliate_id=secret&v=2&h=1"
        ).mock(return_value=httpx.Response(200, content=orvieto_xml))

        service = build_service(config)
        forecast = service.get_forecast("30625")
        service.get_forecast("30625")

        assert len(forecast.days) == 5
        assert route.call_count == 1
        cached = list(tmp_path.glob("*/tiempo-30625"))
        assert len(cached) == 1
        assert cached[0].read_bytes() == orvieto_xml

    def test_cache_disabled(self, orvieto_xml: bytes):
        config = WtrConfig(cache=CacheConfig(enabled=False))
        http = _http(200, orvieto_xml)

        service = build_service(config, http=http)
        service.get_forecast("30625")
        service.get_forecast("30625")

        assert isinstance(service.acquirer.cache.store, NullBlobStore)
        assert http.get.call_count == 2
