"""Environment-based settings and runtime configuration.

All settings that depend on environment variables or runtime state.
"""
import os

# Environment variable names
ENV_API_KEY = 'GOOGLE_TRANSLATE_API_KEY'
ENV_TRANSLATE_URL = 'GOOGLE_TRANSLATE_URL'
ENV_DETECT_URL = 'GOOGLE_TRANSLATE_DETECT_URL'
ENV_REQUEST_STYLE = 'GOOGLE_TRANSLATE_REQUEST_STYLE'
ENV_TIMEOUT = 'GOOGLE_TRANSLATE_TIMEOUT'
ENV_STORAGE_PATH = 'GOOGLE_TRANSLATE_STORAGE_PATH'
ENV_CACHE_ENABLED = 'GOOGLE_TRANSLATE_CACHE_ENABLED'

_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def get_storage_path() -> str:
    """Return the storage root the response cache lives under.

    Reads GOOGLE_TRANSLATE_STORAGE_PATH, defaults to 'storage'.
    """
    return os.getenv(ENV_STORAGE_PATH, '').strip() or 'storage'


def is_cache_enabled() -> bool:
    """Return False when GOOGLE_TRANSLATE_CACHE_ENABLED is set to a false value."""
    value = os.getenv(ENV_CACHE_ENABLED, '1').strip().lower()
    return value not in _FALSE_VALUES
