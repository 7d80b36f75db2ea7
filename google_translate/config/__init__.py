"""Centralized configuration for the translate client.

Package structure:
- settings.py: Environment-based configuration (variable names, storage root)
- constants.py: Static constants (endpoints, cache file layout)
- models.py: RequestStyle and the immutable TranslatorConfig

All exports are re-exported here.
"""

# Re-export environment settings
from google_translate.config.settings import (
    ENV_API_KEY,
    ENV_CACHE_ENABLED,
    ENV_DETECT_URL,
    ENV_REQUEST_STYLE,
    ENV_STORAGE_PATH,
    ENV_TIMEOUT,
    ENV_TRANSLATE_URL,
    get_storage_path,
    is_cache_enabled,
)

# Re-export static constants
from google_translate.config.constants import (
    CACHE_DIR_MODE,
    CACHE_FILENAME,
    CACHE_JSON_INDENT,
    CACHE_SUBDIR,
    DEFAULT_DETECT_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_TRANSLATE_URL,
)

# Re-export configuration models
from google_translate.config.models import (
    RequestStyle,
    TranslatorConfig,
)

__all__ = [
    # Settings
    'ENV_API_KEY',
    'ENV_CACHE_ENABLED',
    'ENV_DETECT_URL',
    'ENV_REQUEST_STYLE',
    'ENV_STORAGE_PATH',
    'ENV_TIMEOUT',
    'ENV_TRANSLATE_URL',
    'get_storage_path',
    'is_cache_enabled',
    # Constants
    'CACHE_DIR_MODE',
    'CACHE_FILENAME',
    'CACHE_JSON_INDENT',
    'CACHE_SUBDIR',
    'DEFAULT_DETECT_URL',
    'DEFAULT_TIMEOUT',
    'DEFAULT_TRANSLATE_URL',
    # Models
    'RequestStyle',
    'TranslatorConfig',
]
