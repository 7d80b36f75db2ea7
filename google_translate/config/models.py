"""Client configuration value and request style selection."""
from __future__ import annotations

import dataclasses
import enum
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from google_translate.config.constants import (
    DEFAULT_DETECT_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_TRANSLATE_URL,
)
from google_translate.config.settings import (
    ENV_API_KEY,
    ENV_DETECT_URL,
    ENV_REQUEST_STYLE,
    ENV_TIMEOUT,
    ENV_TRANSLATE_URL,
)
from google_translate.exceptions import ConfigurationError


def _or_default(value: Any, default: Any) -> Any:
    """Treat None and empty strings (unset env vars) as missing."""
    if value is None or value == '':
        return default
    return value


class RequestStyle(enum.Enum):
    """How parameters are sent to the remote API.

    GET: key and parameters in the query string.
    POST: key in the query string, parameters as a JSON body.
    """

    GET = "get"
    POST = "post"

    @classmethod
    def parse(cls, value: Any) -> RequestStyle:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown request style {value!r}; expected 'get' or 'post'."
            ) from None


@dataclass(frozen=True)
class TranslatorConfig:
    """Immutable settings for one translator instance.

    Build it once and pass it to the client; use with_languages() to derive
    a config for a different language pair.
    """

    api_key: str
    translate_url: str = DEFAULT_TRANSLATE_URL
    detect_url: str = DEFAULT_DETECT_URL
    source_lang: Optional[str] = None
    target_lang: Optional[str] = None
    request_style: RequestStyle = RequestStyle.GET
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.api_key:
            raise ConfigurationError("No google api key was provided.")
        # Normalise loosely typed inputs coming from env/mappings
        object.__setattr__(self, 'request_style', RequestStyle.parse(self.request_style))
        try:
            timeout = float(self.timeout)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid timeout {self.timeout!r}") from None
        if timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {timeout}")
        object.__setattr__(self, 'timeout', timeout)

    def with_languages(
        self,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ) -> TranslatorConfig:
        """Return a copy with the given language pair.

        Args:
            source: Source language code (None means auto-detect)
            target: Target language code (None keeps the current target)
        """
        return dataclasses.replace(
            self,
            source_lang=source,
            target_lang=target if target is not None else self.target_lang,
        )

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> TranslatorConfig:
        """Build a config from host options (api_key, translate_url, detect_url, ...).

        Unknown keys are ignored; missing URLs fall back to the public
        Google endpoints.
        """
        return cls(
            api_key=options.get('api_key') or '',
            translate_url=options.get('translate_url') or DEFAULT_TRANSLATE_URL,
            detect_url=options.get('detect_url') or DEFAULT_DETECT_URL,
            source_lang=options.get('source_lang') or None,
            target_lang=options.get('target_lang') or None,
            request_style=options.get('request_style') or RequestStyle.GET,
            timeout=_or_default(options.get('timeout'), DEFAULT_TIMEOUT),
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> TranslatorConfig:
        """Build a config from GOOGLE_TRANSLATE_* environment variables.

        Keyword overrides take precedence over the environment.
        """
        options = {
            'api_key': os.getenv(ENV_API_KEY, ''),
            'translate_url': os.getenv(ENV_TRANSLATE_URL, ''),
            'detect_url': os.getenv(ENV_DETECT_URL, ''),
            'request_style': os.getenv(ENV_REQUEST_STYLE, ''),
            'timeout': os.getenv(ENV_TIMEOUT, ''),
        }
        options.update({key: value for key, value in overrides.items() if value is not None})
        return cls.from_mapping(options)
