"""Google Translate v2 REST client.

This module sends detect/translate requests and returns the parsed JSON
payloads. It uses httpx for the transport; request style (GET with query
string or POST with JSON body) is chosen by the configuration.
"""
import logging
from typing import Optional

import httpx

from google_translate.config import RequestStyle, TranslatorConfig

logger = logging.getLogger(__name__)

# Suppress httpx request logs; the API key travels in the query string
logging.getLogger('httpx').setLevel(logging.ERROR)


def _redact_key(key: str) -> str:
    """Redact API key for safe logging.

    Args:
        key: API key to redact

    Returns:
        Redacted key string
    """
    if not key:
        return "[EMPTY]"
    if len(key) <= 8:
        return "****"
    return f"{key[:4]}...{key[-4:]}"


class TranslateApiClient:
    """Low-level client for the translate and detect endpoints.

    Features:
    - GET (query string) or POST (JSON body) request styles
    - Connection pooling via httpx
    - Injectable httpx.Client for custom transports and tests

    Transport errors, non-2xx statuses and malformed JSON are raised as the
    underlying httpx/json exceptions.
    """

    def __init__(
        self,
        config: TranslatorConfig,
        http_client: Optional[httpx.Client] = None
    ):
        """Initialize API client.

        Args:
            config: Translator configuration (key, endpoints, style, timeout)
            http_client: Pre-built httpx client; created from config when None
        """
        self.config = config
        self._owns_client = http_client is None
        self.client = http_client or httpx.Client(timeout=httpx.Timeout(config.timeout))
        logger.debug(
            "Translate client ready (style=%s, key=%s)",
            config.request_style.value,
            _redact_key(config.api_key)
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the HTTP client if this instance created it"""
        if self._owns_client:
            self.client.close()

    def _send(self, url: str, payload: dict) -> dict:
        """Send payload to url using the configured request style."""
        key_param = {"key": self.config.api_key}
        if self.config.request_style is RequestStyle.POST:
            response = self.client.post(url, params=key_param, json=payload)
        else:
            response = self.client.get(url, params={**key_param, **payload})
        response.raise_for_status()
        return response.json()

    def detect(self, text: str) -> dict:
        """Request language detection for text.

        Returns:
            Parsed detect response
        """
        logger.debug("Detect request to %s (%d chars)", self.config.detect_url, len(text))
        return self._send(self.config.detect_url, {"q": text})

    def translate(self, text: str, source: str, target: str) -> dict:
        """Request translation of text from source to target.

        Returns:
            Parsed translate response
        """
        logger.debug(
            "Translate request to %s (%s -> %s, %d chars)",
            self.config.translate_url,
            source,
            target,
            len(text)
        )
        return self._send(
            self.config.translate_url,
            {"q": text, "source": source, "target": target}
        )
