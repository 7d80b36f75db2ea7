"""Shared fixtures: a recording httpx transport and a default config."""

import json

import httpx
import pytest

from google_translate.config import TranslatorConfig

TRANSLATE_URL = "https://translate.example.com/v2"
DETECT_URL = "https://translate.example.com/v2/detect"


class RecordingTransport:
    """httpx.MockTransport wrapper that replays JSON payloads per endpoint."""

    def __init__(self, translate=None, detect=None, status_code=200):
        self.translate_payloads = list(translate or [])
        self.detect_payloads = list(detect or [])
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/detect"):
            payloads = self.detect_payloads
        else:
            payloads = self.translate_payloads
        if not payloads:
            raise AssertionError(f"No stub payload for {request.url.path}")
        payload = payloads.pop(0)
        if isinstance(payload, (bytes, str)):
            return httpx.Response(self.status_code, content=payload)
        return httpx.Response(self.status_code, json=payload)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    @staticmethod
    def body(request: httpx.Request) -> dict:
        return json.loads(request.content)


@pytest.fixture
def config():
    return TranslatorConfig(
        api_key="test-key-123456",
        translate_url=TRANSLATE_URL,
        detect_url=DETECT_URL,
        target_lang="fr",
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for name in (
        'GOOGLE_TRANSLATE_API_KEY',
        'GOOGLE_TRANSLATE_URL',
        'GOOGLE_TRANSLATE_DETECT_URL',
        'GOOGLE_TRANSLATE_REQUEST_STYLE',
        'GOOGLE_TRANSLATE_TIMEOUT',
        'GOOGLE_TRANSLATE_STORAGE_PATH',
        'GOOGLE_TRANSLATE_CACHE_ENABLED',
    ):
        monkeypatch.delenv(name, raising=False)
    yield
