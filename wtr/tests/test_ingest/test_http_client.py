"""Tests for the httpx-backed HTTP client and Tiempo URLs."""

import httpx
import pytest
import respx

from wtr.errors import TransportError
from wtr.ingest.http_client import HttpxClient
from wtr.ingest.tiempo_client import forecast_url

URL = "http://api.ilmeteo.net/index.php?api_lang=it&localidad=30625&affiliate_id=abc&v=2&h=1"


class TestForecastUrl:
    def test_layout(self):
        assert forecast_url("30625", affiliate_id="abc") == URL

    def test_custom_base_and_lang(self):
        url = forecast_url("1", affiliate_id="k", base_url="https://t.example.com/api", lang="en")
        assert url == "https://t.example.com/api?api_lang=en&localidad=1&affiliate_id=k&v=2&h=1"


class TestHttpxClient:
    @respx.mock
    def test_success(self):
        respx.get(URL).mock(return_value=httpx.Response(200, content=b"<report/>"))
        resp = HttpxClient().get(URL)
        assert resp.status_code == 200
        assert resp.body == b"<report/>"

    @respx.mock
    def test_error_status_is_returned(self):
        respx.get(URL).mock(return_value=httpx.Response(500))
        resp = HttpxClient().get(URL)
        assert resp.status_code == 500

    @respx.mock
    def test_user_agent_header(self):
        route = respx.get(URL).mock(return_value=httpx.Response(200))
        HttpxClient().get(URL)
        assert route.called
        assert "wtr" in route.calls[0].request.headers["user-agent"]

    @respx.mock
    def test_follows_redirects(self):
        respx.get(URL).mock(
            return_value=httpx.Response(301, headers={"Location": "http://mirror.example.com/f"})
        )
        respx.get("http://mirror.example.com/f").mock(
            return_value=httpx.Response(200, content=b"moved")
        )
        assert HttpxClient().get(URL).body == b"moved"

    @respx.mock
    def test_transport_error(self):
        respx.get(URL).mock(side_effect=httpx.ConnectError("connection refused"))
        with pytest.raises(TransportError, match="ConnectError"):
            HttpxClient().get(URL)
