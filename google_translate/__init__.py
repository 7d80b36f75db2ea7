"""Thin client for the Google Translate v2 REST API with a JSON response cache."""

from google_translate.cache import ResponseCache
from google_translate.client import TranslateApiClient
from google_translate.config import RequestStyle, TranslatorConfig
from google_translate.exceptions import (
    CacheError,
    ConfigurationError,
    DetectionError,
    TranslateError,
)
from google_translate.translator import Translator

__all__ = [
    'CacheError',
    'ConfigurationError',
    'DetectionError',
    'RequestStyle',
    'ResponseCache',
    'TranslateApiClient',
    'TranslateError',
    'Translator',
    'TranslatorConfig',
]
