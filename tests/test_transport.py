import json
import os

import httpx
import pytest

from arizeclient.config import SDK_VERSION, Config, MissingAPIKeyError
from arizeclient.errors import BadRequestError, NotFoundError
from arizeclient.transport import Transport


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("ARIZE_"):
            monkeypatch.delenv(name, raising=False)


def _config():
    return Config(api_key="placeholder", api_host="example.com", api_scheme="http")


def _transport(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return Transport(_config(), client), client


def test_sends_headers_path_and_query():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"ok": True})

    transport, _ = _transport(handler)
    result = transport.request(
        "GET", "/v2/datasets", params={"name": "eval", "limit": 25, "cursor": None}
    )
    request = seen["request"]
    assert result == {"ok": True}
    assert request.method == "GET"
    assert request.url.host == "example.com"
    assert request.url.path == "/v2/datasets"
    assert request.url.params.get("name") == "eval"
    assert request.url.params.get("limit") == "25"
    assert "cursor" not in request.url.params
    assert request.headers["authorization"] == "placeholder"
    assert request.headers["sdk-version"] == SDK_VERSION
    assert request.headers["sdk-package-name"] == "arize"


def test_sends_json_body():
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        seen["type"] = request.headers.get("content-type")
        return httpx.Response(201, json={"id": "ds-new"})

    transport, _ = _transport(handler)
    body = {"name": "new-ds", "examples": [{"input": "hello"}]}
    result = transport.request("POST", "/v2/datasets", body=body)
    assert result == {"id": "ds-new"}
    assert seen["body"] == body
    assert seen["type"] == "application/json"


def test_empty_response_returns_none():
    transport, _ = _transport(lambda request: httpx.Response(204))
    assert transport.request("DELETE", "/v2/datasets/x") is None


def test_not_found_raises_typed_error():
    def handler(request):
        return httpx.Response(404, json={"title": "not found", "status": 404})

    transport, _ = _transport(handler)
    with pytest.raises(NotFoundError) as info:
        transport.request("GET", "/v2/datasets/missing")
    assert info.value.status_code == 404
    assert info.value.title == "not found"


def test_bad_request_keeps_body():
    raw = b'{"title":"invalid example"}'
    transport, _ = _transport(lambda request: httpx.Response(400, content=raw))
    with pytest.raises(BadRequestError) as info:
        transport.request("POST", "/v2/datasets/x/examples", body={"examples": []})
    assert info.value.body == raw.decode()


def test_missing_api_key_raises():
    with pytest.raises(MissingAPIKeyError):
        Transport(Config(api_host="example.com"), httpx.Client())


def test_config_is_resolved():
    transport, _ = _transport(lambda request: httpx.Response(204))
    assert transport.config.api_url() == "http://example.com"
    assert transport.config.flight_port == 443


def test_injected_client_left_open():
    with Transport(_config(), httpx.Client()) as transport:
        client = transport.http_client
    assert client.is_closed is False
    client.close()


def test_owned_client_closed_on_exit():
    with Transport(_config()) as transport:
        client = transport.http_client
        assert client.is_closed is False
    assert client.is_closed is True