"""
Grantha - Generation Adapter

Request/response access to the text generation service.

``GenerationClient`` wraps any ``TextGenerator`` backend with the pacing
the service needs:
- a minimum gap between calls (``Throttle``)
- a cooldown window opened by a quota response, during which calls are
  refused immediately with ``RateLimitedError``
- retry with backoff for overloaded-model responses
- classification of backend failures into the ``GenerationError`` family

``LangChainBackend`` adapts any ``langchain_core`` chat model.
"""
from __future__ import annotations

import math
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from opentelemetry import trace

from analysis.prompts import SYSTEM_INSTRUCTION
from config import GenerationConfig
from core.errors import GenerationError, ModelUnavailableError, RateLimitedError
from core.resilience import RetryConfig, RetryPolicy, Throttle
from observability.logging import get_logger

logger = get_logger("grantha.integrations.generation")
tracer = trace.get_tracer(__name__)

UNAVAILABLE_MARKERS: Sequence[str] = ('"code":503', "503", "model is overloaded", "overloaded", "UNAVAILABLE")
RATE_LIMIT_MARKERS: Sequence[str] = ("429", "RESOURCE_EXHAUSTED")


@runtime_checkable
class TextGenerator(Protocol):
    """Anything that turns a prompt into text."""

    async def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        system_instruction: Optional[str] = None,
    ) -> str:
        ...


def classify_failure(error: Exception, model: Optional[str] = None) -> GenerationError:
    """Map a backend exception onto the generation error family."""
    if isinstance(error, GenerationError):
        return error
    raw = str(error)
    if any(marker in raw for marker in UNAVAILABLE_MARKERS):
        return ModelUnavailableError(model_name=model, cause=error)
    if any(marker in raw for marker in RATE_LIMIT_MARKERS):
        return RateLimitedError(model_name=model, cause=error)
    return GenerationError(raw or "Text generation failed.", model_name=model, cause=error)


class GenerationClient:
    """
    Paced, classified access to a ``TextGenerator`` backend.

    Usage:
        client = GenerationClient(LangChainBackend(chat_model))
        text = await client.generate(prompt)
    """

    def __init__(
        self,
        backend: TextGenerator,
        throttle: Optional[Throttle] = None,
        retry_policy: Optional[RetryPolicy] = None,
        cooldown_seconds: float = 4.0,
        model: Optional[str] = None,
    ):
        self.backend = backend
        self.throttle = throttle or Throttle()
        self.retry_policy = retry_policy or RetryPolicy(RetryConfig(
            max_attempts=2,
            retryable_exceptions={ModelUnavailableError},
        ))
        self.cooldown_seconds = cooldown_seconds
        self.model = model

    @classmethod
    def from_config(cls, backend: TextGenerator, config: Optional[GenerationConfig] = None) -> "GenerationClient":
        config = config or GenerationConfig()
        return cls(
            backend,
            throttle=Throttle(min_gap=config.min_gap_seconds),
            retry_policy=RetryPolicy(RetryConfig(
                max_attempts=config.max_attempts,
                retryable_exceptions={ModelUnavailableError},
            )),
            cooldown_seconds=config.cooldown_seconds,
            model=config.model,
        )

    async def _attempt(self, prompt: str, model: Optional[str], system_instruction: Optional[str]) -> str:
        await self.throttle.wait()
        try:
            text = await self.backend.generate(prompt, model=model, system_instruction=system_instruction)
        except Exception as e:
            error = classify_failure(e, model)
            if isinstance(error, RateLimitedError):
                self.throttle.start_cooldown(self.cooldown_seconds)
                error.retry_after = self.cooldown_seconds
            logger.warning("Generation failed", model=model, error_code=error.error_code)
            if error is e:
                raise
            raise error from e
        return (text or "").strip()

    async def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        system_instruction: Optional[str] = None,
    ) -> str:
        """Generate text, refusing immediately while a cooldown is open."""
        model = model or self.model
        remaining = self.throttle.cooldown_remaining()
        if remaining > 0:
            raise RateLimitedError(
                f"AI cooling down. Try again in {math.ceil(remaining)}s.",
                retry_after=remaining,
                model_name=model,
            )

        with tracer.start_as_current_span("generation.generate") as span:
            span.set_attribute("grantha.model", model or "")
            span.set_attribute("grantha.prompt_length", len(prompt))
            attempt = self.retry_policy.wrap(self._attempt)
            return await attempt(prompt, model, system_instruction)


class LangChainBackend:
    """
    ``TextGenerator`` over a ``langchain_core`` chat model.

    The chat model is already bound to its model and temperature; the
    ``model`` argument only labels logs and errors.
    """

    def __init__(self, chat_model: BaseChatModel, system_instruction: str = SYSTEM_INSTRUCTION):
        self.chat_model = chat_model
        self.system_instruction = system_instruction

    async def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        system_instruction: Optional[str] = None,
    ) -> str:
        messages = [
            SystemMessage(content=system_instruction or self.system_instruction),
            HumanMessage(content=prompt),
        ]
        response = await self.chat_model.ainvoke(messages)
        return _message_text(response.content)


def _message_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)
