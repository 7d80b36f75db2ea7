"""Exception types raised by the translate client."""


class TranslateError(Exception):
    """Base exception for translate client errors"""
    pass


class ConfigurationError(TranslateError):
    """Raised when the API key, target or source language is missing"""
    pass


class DetectionError(TranslateError):
    """Raised when a detect response has no usable detections"""
    pass


class CacheError(TranslateError):
    """Raised when the cache file does not hold a JSON object"""
    pass
