"""Tests for the upstream HTTP client."""

import asyncio

import httpx
import pytest

from api_proxy.models import CatFactsPage
from api_proxy.upstream import UpstreamClient, UpstreamError

URL = "https://catfact.ninja/facts"


def fetch(handler, model=CatFactsPage):
    async def run():
        client = UpstreamClient(transport=httpx.MockTransport(handler))
        try:
            return await client.fetch(URL, model)
        finally:
            await client.close()

    return asyncio.run(run())


def test_fetch_validates_body():
    page = fetch(lambda request: httpx.Response(200, json={"data": [{"fact": "A", "length": 1}]}))

    assert [item.fact for item in page.data] == ["A"]


def test_fetch_requests_json():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    fetch(handler)

    assert seen[0].method == "GET"
    assert seen[0].headers["accept"] == "application/json"


@pytest.mark.parametrize("status_code", [201, 301, 404, 500])
def test_only_200_is_success(status_code):
    with pytest.raises(UpstreamError) as excinfo:
        fetch(lambda request: httpx.Response(status_code, json={"data": []}))

    assert excinfo.value.status_code == status_code
    assert excinfo.value.url == URL


def test_invalid_json_is_upstream_error():
    with pytest.raises(UpstreamError, match="invalid JSON"):
        fetch(lambda request: httpx.Response(200, text="<html>not json</html>"))


def test_wrong_shape_is_upstream_error():
    with pytest.raises(UpstreamError, match="CatFactsPage"):
        fetch(lambda request: httpx.Response(200, json={"facts": []}))


def test_transport_error_is_upstream_error():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(UpstreamError, match="request failed") as excinfo:
        fetch(handler)

    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_timeout_is_upstream_error():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(UpstreamError, match="timeout"):
        fetch(handler)


def test_default_has_no_timeout():
    async def run():
        client = UpstreamClient()
        try:
            return client._client.timeout
        finally:
            await client.close()

    timeout = asyncio.run(run())

    assert timeout.read is None
    assert timeout.connect is None
