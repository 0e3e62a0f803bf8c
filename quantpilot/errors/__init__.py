"""
Error classification system for the QuantPilot analytics core.

Data quality errors describe problems with a price series or payload that a
caller can detect and handle. System failures describe the provider, the
key-value store and configuration. The indicator and analytics engines raise
neither; their guards resolve to None, 0 or an insufficient-data result.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MissingDataError,
    MalformedDataError,
    InsufficientDataError,
)
from .system_failures import (
    SystemFailureError,
    UpstreamFailureError,
    SymbolNotFoundError,
    RateLimitedError,
    PersistenceError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MissingDataError",
    "MalformedDataError",
    "InsufficientDataError",
    # System Failures
    "SystemFailureError",
    "UpstreamFailureError",
    "SymbolNotFoundError",
    "RateLimitedError",
    "PersistenceError",
    "ConfigurationError",
]
