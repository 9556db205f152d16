"""
Grantha - Verse Study Service

Produces the AI study text for one verse: cross-references, historical
context or an interlinear analysis, in English or Telugu.

English text is always generated first and cached; Telugu requests reuse
it. The Telugu interlinear is localized locally (Telugu headers,
transliterations in Telugu script) before the translation request, so a
failed translation still yields a Telugu-reader document.
"""
from __future__ import annotations

from typing import Optional, Tuple

from analysis import prompts
from analysis.reshaper import AnalysisReshaper
from config import CacheConfig
from core.cache import LRUCache
from core.errors import GenerationError
from data.schemas import AnalysisKind, Language, SourceScript, VerseReference
from integrations.generation import TextGenerator
from observability.logging import LogContext, get_logger

logger = get_logger("grantha.pipeline.study")

CacheKey = Tuple[str, int, int, str, str]


class VerseStudyService:
    """
    Verse study text with a bounded, injected cache.

    Usage:
        service = VerseStudyService(generator, LRUCache(max_size=256))
        service = VerseStudyService.from_config(generator, get_config().cache)
        text = await service.get_analysis(
            VerseReference("John", 1, 1), AnalysisKind.INTERLINEAR, Language.TELUGU
        )
    """

    def __init__(
        self,
        generator: TextGenerator,
        cache: Optional[LRUCache[str]] = None,
        reshaper: Optional[AnalysisReshaper] = None,
    ):
        self.generator = generator
        self.cache = cache if cache is not None else LRUCache(max_size=512)
        self.reshaper = reshaper or AnalysisReshaper()

    @classmethod
    def from_config(cls, generator: TextGenerator, config: Optional[CacheConfig] = None) -> "VerseStudyService":
        config = config or CacheConfig()
        return cls(generator, LRUCache(max_size=config.max_size, ttl_seconds=config.ttl_seconds))

    @staticmethod
    def cache_key(verse_ref: VerseReference, kind: AnalysisKind, language: Language) -> CacheKey:
        return (verse_ref.book, verse_ref.chapter, verse_ref.verse, kind.value, language.value)

    @staticmethod
    def is_new_testament(book: str) -> bool:
        return prompts.is_new_testament(book)

    async def get_analysis(
        self,
        verse_ref: VerseReference,
        kind: AnalysisKind,
        language: Language = Language.ENGLISH,
    ) -> str:
        key = self.cache_key(verse_ref, kind, language)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        with LogContext(reference=verse_ref.label, kind=kind.value, language=language.value):
            english = await self._english(verse_ref, kind)
            if language == Language.ENGLISH:
                return english

            if kind == AnalysisKind.INTERLINEAR:
                result = await self._telugu_interlinear(english)
            else:
                result = await self._generate(prompts.outline_translation_prompt(english))

        self.cache.put(key, result)
        return result

    async def ask(self, message: str, language: Language = Language.ENGLISH) -> str:
        """Free-form question to the scholar persona."""
        return await self.generator.generate(
            prompts.chat_prompt(message, language),
            system_instruction=prompts.CHAT_SYSTEM_INSTRUCTION,
        )

    # -------------------------------------------------------------------------
    # Generation steps
    # -------------------------------------------------------------------------

    async def _generate(self, prompt: str) -> str:
        return (await self.generator.generate(prompt) or "").strip()

    async def _english(self, verse_ref: VerseReference, kind: AnalysisKind) -> str:
        key = self.cache_key(verse_ref, kind, Language.ENGLISH)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        if kind == AnalysisKind.CROSS_REFERENCES:
            result = await self._generate(prompts.cross_reference_prompt(verse_ref))
        elif kind == AnalysisKind.HISTORICAL_CONTEXT:
            result = await self._generate(prompts.historical_context_prompt(verse_ref))
        else:
            script = SourceScript.GREEK if self.is_new_testament(verse_ref.book) else SourceScript.HEBREW
            raw = await self._generate(prompts.interlinear_prompt(verse_ref))
            result = self.reshaper.reshape(raw, source_script=script)

        self.cache.put(key, result)
        return result

    async def _telugu_interlinear(self, english: str) -> str:
        localized = self.reshaper.reshape(english, is_secondary_script_source=True)
        try:
            translated = await self._generate(prompts.interlinear_translation_prompt(localized))
        except GenerationError as e:
            logger.warning("Interlinear translation failed; using localized text", error_code=e.error_code)
            return localized
        return translated or localized
