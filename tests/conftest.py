"""
Grantha - Test Configuration

Pytest fixtures and configuration for all tests.
"""
from typing import Callable, List, Optional

import pytest

from core.cache import LRUCache
from core.resilience import RetryConfig, RetryPolicy, Throttle
from data.schemas import FullVerse, ParsedReference, VerseText


GREEK_INTERLINEAR = """**1. Greek Text:**
Ἐν ἀρχῇ ἦν ὁ λόγος

---

**2. English Transliteration:**
En archē ēn ho logos

---

**3. Smooth English Translation:**
In the beginning was the Word.

---

**4. Word-by-Word Analysis:**
Ἐν (en) - in
ἀρχῇ (archē) - beginning
ἦν (ēn) - was
ὁ (ho) - the
λόγος (logos) - word"""


MESSY_GREEK_INTERLINEAR = """1. Greek Text
Ἐν ἀρχῇ ἦν ὁ λόγος
2) transliteration:
En archē ēn ho logos
**3. Smooth English Translation**
In the beginning was the Word.
## 4. Word by Word Analysis:
Ἐν (en) - in ἀρχῇ (archē) - beginning. ἦν (ēn) - was"""


HEBREW_INTERLINEAR = """**1. Hebrew Text:**
בְּרֵאשִׁית בָּרָא אֱלֹהִים

---

**2. English Transliteration:**
bərē'šîṯ bārā' 'ĕlōhîm

---

**3. Smooth English Translation:**
In the beginning God created.

---

**4. Word-by-Word Analysis:**
בְּרֵאשִׁית (bərē'šîṯ) - in the beginning
בָּרָא (bārā') - created
אֱלֹהִים ('ĕlōhîm) - God"""


@pytest.fixture
def greek_interlinear() -> str:
    return GREEK_INTERLINEAR


@pytest.fixture
def messy_greek_interlinear() -> str:
    return MESSY_GREEK_INTERLINEAR


@pytest.fixture
def hebrew_interlinear() -> str:
    return HEBREW_INTERLINEAR


@pytest.fixture
def sample_greek_text() -> str:
    """Sample Greek text for testing."""
    return "Ἐν ἀρχῇ ἦν ὁ λόγος καὶ ὁ λόγος ἦν πρὸς τὸν θεόν"


class FakeClock:
    """Manually advanced monotonic clock; ``sleep`` advances it."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fast_throttle(fake_clock) -> Throttle:
    return Throttle(min_gap=1.5, clock=fake_clock, sleep=fake_clock.sleep)


@pytest.fixture
def no_wait_retry(fake_clock) -> RetryPolicy:
    from core.errors import ModelUnavailableError

    return RetryPolicy(
        RetryConfig(max_attempts=2, jitter=False, retryable_exceptions={ModelUnavailableError}),
        sleep=fake_clock.sleep,
    )


class ScriptedGenerator:
    """TextGenerator test double returning scripted replies in order."""

    def __init__(self, replies: Optional[List[object]] = None, default: str = ""):
        self.replies = list(replies or [])
        self.default = default
        self.prompts: List[str] = []
        self.system_instructions: List[Optional[str]] = []

    async def generate(self, prompt: str, model: Optional[str] = None, system_instruction: Optional[str] = None) -> str:
        self.prompts.append(prompt)
        self.system_instructions.append(system_instruction)
        reply = self.replies.pop(0) if self.replies else self.default
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(prompt)
        return reply


@pytest.fixture
def scripted_generator() -> Callable[..., ScriptedGenerator]:
    return ScriptedGenerator


class RecordingFetcher:
    """VerseFetcher test double producing one verse per requested start verse."""

    def __init__(self, error: Optional[Exception] = None, empty: bool = False):
        self.error = error
        self.empty = empty
        self.requests: List[List[ParsedReference]] = []

    async def fetch_verses(self, references):
        self.requests.append(list(references))
        if self.error:
            raise self.error
        if self.empty:
            return []
        return [
            FullVerse(
                book=ref.book,
                chapter=ref.chapter,
                verse=ref.start_verse,
                text=VerseText(kjv=f"kjv {ref.label}", esv=f"web {ref.label}", niv=f"web {ref.label}"),
            )
            for ref in references
        ]


@pytest.fixture
def recording_fetcher() -> Callable[..., RecordingFetcher]:
    return RecordingFetcher


@pytest.fixture
def small_cache() -> LRUCache:
    return LRUCache(max_size=8)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "property: marks property-based tests using Hypothesis")
    config.addinivalue_line("markers", "slow: marks tests as slow")
