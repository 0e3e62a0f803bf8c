"""
System failure error classifications.

These exceptions represent failures outside the analytics core: the
market-data provider, the key-value store and configuration loading.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class UpstreamFailureError(SystemFailureError):
    """Market-data fetch failed or returned an unusable payload."""

    def __init__(self, message: str, symbol: Optional[str] = None,
                 endpoint: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol
        self.endpoint = endpoint


class SymbolNotFoundError(UpstreamFailureError):
    """Provider has no data for the requested symbol."""


class RateLimitedError(UpstreamFailureError):
    """Provider refused the request because the API quota is exhausted."""

    def __init__(self, message: str, provider_note: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.provider_note = provider_note
        self.recoverable = True


class PersistenceError(SystemFailureError):
    """Key-value store read or write failures."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.key = key


class ConfigurationError(SystemFailureError):
    """Configuration file or overrides could not be loaded."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
