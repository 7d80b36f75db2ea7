"""High-level detect/translate operations with optional response caching."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from google_translate.cache import ResponseCache
from google_translate.client import TranslateApiClient
from google_translate.config import TranslatorConfig, get_storage_path, is_cache_enabled
from google_translate.exceptions import ConfigurationError, DetectionError

logger = logging.getLogger(__name__)

_MAX_LOG_SNIPPET = 40

# Cache-miss marker for ResponseCache.lookup
_MISS = object()


def _snip(text: str, length: int = _MAX_LOG_SNIPPET) -> str:
    """Return a compact single-line snippet for logging."""

    cleaned = " ".join(text.split())
    if len(cleaned) <= length:
        return cleaned
    return cleaned[: length - 3] + "..."


def extract_language(response: Any) -> str:
    """Return the first detected language from a detect response.

    Raises:
        DetectionError: No data.detections in the response, or an
            unexpected shape inside it
    """
    data = response.get("data") if isinstance(response, dict) else None
    if not isinstance(data, dict) or "detections" not in data:
        raise DetectionError("Could not detect provided text language.")
    try:
        return data["detections"][0][0]["language"]
    except (IndexError, KeyError, TypeError) as exc:
        raise DetectionError(f"Unexpected detections payload: {exc!r}") from exc


def extract_translation(response: Any) -> Optional[str]:
    """Return the first translatedText, or None when there are no translations."""

    data = response.get("data") if isinstance(response, dict) else None
    translations = data.get("translations") if isinstance(data, dict) else None
    if translations:
        return translations[0]["translatedText"]
    return None


class Translator:
    """Detects and translates text through the Google Translate API.

    The configuration, HTTP client and cache are all injected. Without a
    cache every translate() hits the network; with one, responses are
    reused by exact (source, target, text) match.
    """

    def __init__(
        self,
        config: TranslatorConfig,
        *,
        http_client: Optional[httpx.Client] = None,
        cache: Optional[ResponseCache] = None,
        api: Optional[TranslateApiClient] = None,
    ):
        self.config = config
        self._owns_api = api is None
        self.api = api or TranslateApiClient(config, http_client=http_client)
        self.cache = cache

    @classmethod
    def from_env(
        cls,
        *,
        cache_enabled: Optional[bool] = None,
        storage_path: Optional[str] = None,
        **overrides: Any,
    ) -> Translator:
        """Create a translator from environment settings.

        Args:
            cache_enabled: Whether to attach the JSON cache (defaults to env)
            storage_path: Storage root for the cache file (defaults to env)
            **overrides: TranslatorConfig fields taking precedence over env
        """
        config = TranslatorConfig.from_env(**overrides)
        if cache_enabled is None:
            cache_enabled = is_cache_enabled()
        cache = None
        if cache_enabled:
            cache = ResponseCache.for_storage_root(storage_path or get_storage_path())
        return cls(config, cache=cache)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Close the API client if this instance created it"""
        if self._owns_api:
            self.api.close()

    def detect(self, text: str) -> str:
        """Detect the language of text.

        Returns:
            Language code of the first detection

        Raises:
            DetectionError: Response has no usable detections
        """
        language = extract_language(self.api.detect(text))
        logger.debug("Detected '%s' for '%s'", language, _snip(text))
        return language

    def translate(self, text: str, auto_detect: bool = True) -> Optional[str]:
        """Translate text into the configured target language.

        Args:
            text: Text to translate
            auto_detect: Detect the source language when none is configured

        Returns:
            First translation, or None if the API returned no translations

        Raises:
            ConfigurationError: No target language, or no source language
                with auto_detect turned off
        """
        target = self.config.target_lang
        if not target:
            raise ConfigurationError("No target language was set.")

        source = self.config.source_lang
        if not source:
            if not auto_detect:
                raise ConfigurationError(
                    "No source language was set with autodetect turned off."
                )
            source = self.detect(text)

        response = _MISS
        if self.cache is not None:
            response = self.cache.lookup(source, target, text, default=_MISS)

        if response is not _MISS:
            logger.debug("Cache hit (%s -> %s): '%s'", source, target, _snip(text))
        else:
            response = self.api.translate(text, source, target)
            if self.cache is not None:
                self.cache.store(source, target, text, response)

        return extract_translation(response)

    def flush_cache(self) -> None:
        """Persist the attached cache, if any."""
        if self.cache is not None:
            self.cache.flush()
