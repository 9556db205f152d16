"""
Grantha - Resilience Patterns

Implements the pacing and retry behaviour used around the external
generation service:
- Retry Policy: configurable retry with exponential backoff
- Throttle: minimum spacing between calls plus a cooldown window that
  is opened after the service reports a quota problem

All patterns integrate with OpenTelemetry for observability.
"""

from __future__ import annotations

import asyncio
import functools
import random
import time
from dataclasses import dataclass, field
from typing import (
    Awaitable,
    Callable,
    Optional,
    Set,
    Type,
    TypeVar,
    ParamSpec,
)

from opentelemetry import trace

T = TypeVar("T")
P = ParamSpec("P")

tracer = trace.get_tracer(__name__)


# =============================================================================
# RETRY
# =============================================================================


@dataclass
class RetryConfig:
    """Configuration for retry policy."""

    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    exponential_base: float = 2.0
    jitter: bool = True
    retryable_exceptions: Set[Type[Exception]] = field(
        default_factory=lambda: {Exception}
    )
    non_retryable_exceptions: Set[Type[Exception]] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.base_delay < 0:
            raise ValueError("base_delay must be >= 0")


class RetryPolicy:
    """
    Configurable retry policy with exponential backoff.

    Usage:
        policy = RetryPolicy(RetryConfig(max_attempts=3))

        @policy.wrap
        async def call_model():
            ...
    """

    def __init__(
        self,
        config: Optional[RetryConfig] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.config = config or RetryConfig()
        self._sleep = sleep

    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay for given attempt number."""
        delay = min(
            self.config.base_delay * (self.config.exponential_base ** attempt),
            self.config.max_delay
        )

        if self.config.jitter:
            delay *= (0.5 + random.random())

        return delay

    def is_retryable(self, exception: Exception) -> bool:
        """Check if exception should trigger retry."""
        exc_type = type(exception)

        if any(issubclass(exc_type, t) for t in self.config.non_retryable_exceptions):
            return False

        return any(issubclass(exc_type, t) for t in self.config.retryable_exceptions)

    def wrap(
        self,
        func: Callable[P, Awaitable[T]],
    ) -> Callable[P, Awaitable[T]]:
        """Wrap a coroutine function with retry logic."""

        @functools.wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            last_exception: Optional[Exception] = None

            for attempt in range(self.config.max_attempts):
                with tracer.start_as_current_span(
                    f"retry.attempt_{attempt}",
                ) as span:
                    span.set_attribute("retry.attempt", attempt)
                    span.set_attribute("retry.max_attempts", self.config.max_attempts)

                    try:
                        return await func(*args, **kwargs)
                    except Exception as e:
                        last_exception = e
                        span.set_attribute("retry.exception", type(e).__name__)

                        if not self.is_retryable(e):
                            raise

                        if attempt < self.config.max_attempts - 1:
                            delay = self.calculate_delay(attempt)
                            span.set_attribute("retry.delay_seconds", delay)
                            await self._sleep(delay)

            raise last_exception  # type: ignore

        return async_wrapper


# =============================================================================
# THROTTLE
# =============================================================================


class Throttle:
    """
    Spaces calls at least ``min_gap`` seconds apart and tracks a cooldown
    window during which calls must be refused.

    The clock and sleep function are injectable so tests can run without
    real delays.

    Usage:
        throttle = Throttle(min_gap=1.5)
        remaining = throttle.cooldown_remaining()
        if remaining > 0:
            ...refuse...
        await throttle.wait()
    """

    def __init__(
        self,
        min_gap: float = 1.5,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.min_gap = min_gap
        self._clock = clock
        self._sleep = sleep
        self._last_call: Optional[float] = None
        self._cooldown_until = 0.0
        self._lock = asyncio.Lock()

    async def wait(self) -> None:
        """Sleep until the minimum gap since the previous call has passed."""
        async with self._lock:
            if self._last_call is not None:
                pause = self._last_call + self.min_gap - self._clock()
                if pause > 0:
                    await self._sleep(pause)
            self._last_call = self._clock()

    def start_cooldown(self, seconds: float) -> None:
        """Refuse calls for ``seconds`` and push the next call slot past the window."""
        until = self._clock() + seconds
        self._cooldown_until = max(self._cooldown_until, until)
        self._last_call = self._cooldown_until

    def cooldown_remaining(self) -> float:
        """Seconds left in the current cooldown window (0 when none)."""
        return max(0.0, self._cooldown_until - self._clock())

    @property
    def in_cooldown(self) -> bool:
        return self.cooldown_remaining() > 0
