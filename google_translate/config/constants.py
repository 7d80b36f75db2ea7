"""Static constants and lookup tables.

Configuration values that don't change at runtime.
"""

# Google Translate v2 REST endpoints
DEFAULT_TRANSLATE_URL = "https://translation.googleapis.com/language/translate/v2"
DEFAULT_DETECT_URL = "https://translation.googleapis.com/language/translate/v2/detect"

# HTTP transport
DEFAULT_TIMEOUT = 10.0  # seconds

# Cache file layout (relative to the storage root)
CACHE_SUBDIR = "vendor/ddctd143/google-translate"
CACHE_FILENAME = "translator_cache.JSON"
CACHE_DIR_MODE = 0o775  # rwx for owner and group
CACHE_JSON_INDENT = 4
