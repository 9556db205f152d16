"""
Grantha - Core Module

Foundational components shared by every other package:
- Unified error handling
- Resilience patterns (retry, throttle/cooldown)
- Bounded LRU cache
- Result type

Nothing in core imports from the rest of the project.

Usage:
    from core import GranthaError, LRUCache, Result, RetryPolicy, Throttle
"""

from core.cache import CacheStats, LRUCache
from core.errors import (
    ErrorContext,
    ErrorSeverity,
    GenerationError,
    GranthaConfigError,
    GranthaError,
    ModelUnavailableError,
    RateLimitedError,
    SynonymTableError,
    VerseFetchError,
    VerseNetworkError,
    VerseNotFoundError,
)
from core.resilience import RetryConfig, RetryPolicy, Throttle
from core.types import Result

__all__ = [
    # Errors
    "ErrorContext",
    "ErrorSeverity",
    "GenerationError",
    "GranthaConfigError",
    "GranthaError",
    "ModelUnavailableError",
    "RateLimitedError",
    "SynonymTableError",
    "VerseFetchError",
    "VerseNetworkError",
    "VerseNotFoundError",
    # Resilience
    "RetryConfig",
    "RetryPolicy",
    "Throttle",
    # Cache
    "CacheStats",
    "LRUCache",
    # Types
    "Result",
]
