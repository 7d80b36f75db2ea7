"""Unit tests for the low-level translate API client."""

import dataclasses

import httpx
import pytest

from google_translate.client import TranslateApiClient, _redact_key
from google_translate.config import RequestStyle

from conftest import TRANSLATE_URL, RecordingTransport


class StubClient:
    """Fake httpx.Client that only records whether it was closed."""

    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


def test_redact_key():
    assert _redact_key("") == "[EMPTY]"
    assert _redact_key("short") == "****"
    assert _redact_key("abcdefghijkl") == "abcd...ijkl"


def test_get_style_sends_everything_in_query(config):
    transport = RecordingTransport(translate=[{"data": {"translations": []}}])
    api = TranslateApiClient(config, http_client=transport.client())

    api.translate("hello world", "en", "fr")

    request = transport.requests[0]
    assert request.method == "GET"
    assert str(request.url).startswith(TRANSLATE_URL)
    assert request.url.params["key"] == "test-key-123456"
    assert request.url.params["q"] == "hello world"
    assert request.url.params["source"] == "en"
    assert request.url.params["target"] == "fr"
    assert request.content == b""


def test_post_style_sends_json_body(config):
    post_config = dataclasses.replace(config, request_style=RequestStyle.POST)
    transport = RecordingTransport(detect=[{"data": {"detections": [[{"language": "en"}]]}}])
    api = TranslateApiClient(post_config, http_client=transport.client())

    payload = api.detect("hello")

    request = transport.requests[0]
    assert request.method == "POST"
    assert dict(request.url.params) == {"key": "test-key-123456"}
    assert RecordingTransport.body(request) == {"q": "hello"}
    assert payload == {"data": {"detections": [[{"language": "en"}]]}}


def test_http_error_status_propagates(config):
    transport = RecordingTransport(translate=[{"error": {"code": 403}}], status_code=403)
    api = TranslateApiClient(config, http_client=transport.client())

    with pytest.raises(httpx.HTTPStatusError):
        api.translate("hello", "en", "fr")


def test_malformed_json_propagates(config):
    transport = RecordingTransport(detect=["not json"])
    api = TranslateApiClient(config, http_client=transport.client())

    with pytest.raises(ValueError):
        api.detect("hello")


def test_transport_error_propagates(config):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = TranslateApiClient(
        config,
        http_client=httpx.Client(transport=httpx.MockTransport(refuse)),
    )

    with pytest.raises(httpx.ConnectError):
        api.detect("hello")


def test_injected_client_is_not_closed(config):
    stub = StubClient()

    with TranslateApiClient(config, http_client=stub):
        pass

    assert stub.closed is False


def test_owned_client_is_closed(config, monkeypatch):
    stub = StubClient()
    monkeypatch.setattr(httpx, 'Client', lambda *a, **k: stub)

    api = TranslateApiClient(config)
    api.close()

    assert stub.closed is True
