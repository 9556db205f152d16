"""
Tests for integrations/generation.py - pacing, cooldown, retry and
failure classification around a text generation backend.
"""
import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from config import GenerationConfig
from core.errors import GenerationError, ModelUnavailableError, RateLimitedError
from integrations.generation import (
    GenerationClient,
    LangChainBackend,
    TextGenerator,
    _message_text,
    classify_failure,
)


@pytest.fixture
def make_client(fast_throttle, no_wait_retry):
    def build(backend):
        return GenerationClient(
            backend,
            throttle=fast_throttle,
            retry_policy=no_wait_retry,
            cooldown_seconds=4.0,
            model="test-model",
        )

    return build


class TestClassifyFailure:

    @pytest.mark.parametrize("message,error_type", [
        ('{"error": {"code":503, "status": "UNAVAILABLE"}}', ModelUnavailableError),
        ("The model is overloaded. Please try again later.", ModelUnavailableError),
        ("429 Too Many Requests", RateLimitedError),
        ("RESOURCE_EXHAUSTED: quota", RateLimitedError),
        ("something else broke", GenerationError),
    ])
    def test_markers(self, message, error_type):
        error = classify_failure(RuntimeError(message), "m")
        assert type(error) is error_type
        assert error.model_name == "m"
        assert isinstance(error.cause, RuntimeError)

    def test_generation_errors_pass_through(self):
        original = RateLimitedError(retry_after=2)
        assert classify_failure(original) is original

    def test_empty_message(self):
        assert classify_failure(RuntimeError()).message == "Text generation failed."


class TestGenerationClient:

    @pytest.mark.asyncio
    async def test_returns_stripped_text(self, make_client, scripted_generator):
        backend = scripted_generator(["  answer \n"])
        client = make_client(backend)
        assert await client.generate("prompt", system_instruction="sys") == "answer"
        assert backend.prompts == ["prompt"]
        assert backend.system_instructions == ["sys"]

    @pytest.mark.asyncio
    async def test_calls_are_paced(self, make_client, scripted_generator, fake_clock):
        client = make_client(scripted_generator(default="ok"))
        await client.generate("one")
        await client.generate("two")
        assert fake_clock.sleeps == [pytest.approx(1.5)]

    @pytest.mark.asyncio
    async def test_rate_limit_opens_cooldown(self, make_client, scripted_generator, fake_clock):
        backend = scripted_generator([RuntimeError("429 RESOURCE_EXHAUSTED")], default="ok")
        client = make_client(backend)

        with pytest.raises(RateLimitedError) as exc_info:
            await client.generate("one")
        assert exc_info.value.retry_after == 4.0

        with pytest.raises(RateLimitedError) as exc_info:
            await client.generate("two")
        assert exc_info.value.message == "AI cooling down. Try again in 4s."
        assert backend.prompts == ["one"]

        fake_clock.now += 4.0
        assert await client.generate("three") == "ok"

    @pytest.mark.asyncio
    async def test_cooldown_message_rounds_up(self, make_client, scripted_generator, fake_clock):
        client = make_client(scripted_generator(default="ok"))
        client.throttle.start_cooldown(4.0)
        fake_clock.now += 1.2
        with pytest.raises(RateLimitedError) as exc_info:
            await client.generate("x")
        assert exc_info.value.message == "AI cooling down. Try again in 3s."

    @pytest.mark.asyncio
    async def test_overloaded_model_is_retried(self, make_client, scripted_generator):
        backend = scripted_generator([RuntimeError("503 model is overloaded")], default="ok")
        client = make_client(backend)
        assert await client.generate("prompt") == "ok"
        assert backend.prompts == ["prompt", "prompt"]

    @pytest.mark.asyncio
    async def test_overloaded_twice_gives_up(self, make_client, scripted_generator):
        backend = scripted_generator([RuntimeError("503"), RuntimeError("503")], default="ok")
        client = make_client(backend)
        with pytest.raises(ModelUnavailableError) as exc_info:
            await client.generate("prompt")
        assert exc_info.value.model_name == "test-model"

    @pytest.mark.asyncio
    async def test_other_failures_are_not_retried(self, make_client, scripted_generator):
        backend = scripted_generator([ValueError("bad request")], default="ok")
        client = make_client(backend)
        with pytest.raises(GenerationError) as exc_info:
            await client.generate("prompt")
        assert exc_info.value.message == "bad request"
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert len(backend.prompts) == 1

    @pytest.mark.asyncio
    async def test_none_reply_is_empty_text(self, make_client, scripted_generator):
        client = make_client(scripted_generator([lambda prompt: None]))
        assert await client.generate("prompt") == ""

    def test_from_config(self, scripted_generator):
        config = GenerationConfig(
            model="m", min_gap_seconds=0.5, cooldown_seconds=9.0, max_attempts=3,
        )
        client = GenerationClient.from_config(scripted_generator(), config)
        assert client.model == "m"
        assert client.cooldown_seconds == 9.0
        assert client.throttle.min_gap == 0.5
        assert client.retry_policy.config.max_attempts == 3

    def test_scripted_generator_satisfies_protocol(self, scripted_generator):
        assert isinstance(scripted_generator(), TextGenerator)


class TestLangChainBackend:

    @pytest.mark.asyncio
    async def test_generates_with_chat_model(self):
        backend = LangChainBackend(FakeListChatModel(responses=["Genesis 1:1; John 1:1"]))
        assert await backend.generate("prompt") == "Genesis 1:1; John 1:1"

    @pytest.mark.asyncio
    async def test_wrapped_by_client(self, make_client):
        client = make_client(LangChainBackend(FakeListChatModel(responses=[" text "])))
        assert await client.generate("prompt") == "text"

    def test_list_content(self):
        content = ["a", {"type": "text", "text": "b"}, {"type": "image_url", "image_url": "x"}]
        assert _message_text(content) == "ab"
        assert _message_text("plain") == "plain"
