"""
Grantha - Result Type

Parsing reports failures as values instead of exceptions. A failed
Result keeps a human-readable error next to a machine-readable reason
(an enum member such as ``ParseFailure.CHAPTER_OUT_OF_RANGE``), so callers
can tell failure modes apart without reading messages.

Usage:
    from core.types import Result

    result = resolve_reference("John 99:1")
    if result.is_success:
        print(result.value)
    else:
        print(result.reason, result.error)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success value or failure message plus reason."""

    payload: Optional[T] = None
    error: Optional[str] = None
    reason: Optional[Enum] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @property
    def value(self) -> T:
        if self.is_failure:
            raise ValueError(f"Cannot get value from failed result: {self.error}")
        return self.payload  # type: ignore

    def unwrap_or(self, default: T) -> T:
        return default if self.is_failure else self.payload  # type: ignore

    def map(self, fn: Callable[[T], R]) -> "Result[R]":
        """Transform the value of a success; failures pass through unchanged."""
        if self.is_failure:
            return Result(error=self.error, reason=self.reason)
        return Result(payload=fn(self.payload))  # type: ignore

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.success({self.payload!r})"
        return f"Result.failure({self.error!r}, reason={self.reason})"

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(payload=value)

    @classmethod
    def failure(cls, error: str, reason: Optional[Enum] = None) -> "Result[T]":
        return cls(error=error, reason=reason)
