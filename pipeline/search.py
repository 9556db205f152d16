"""
Grantha - Search Routing

Routes one free-text search box:

- a single reference navigates to it
- several ``;``/``,`` separated references are fetched as a result list
- anything else is treated as a keyword and sent to AI reference
  discovery, whose answer is parsed and fetched like a reference list

Telugu book names and digits are accepted everywhere a reference is.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence

from analysis.prompts import keyword_search_prompt
from core.errors import GranthaError
from data.schemas import FullVerse, ParsedReference
from integrations.generation import TextGenerator
from observability.logging import get_logger
from reference.parser import normalize_reference_text, parse_multiple

logger = get_logger("grantha.pipeline.search")

_BRACKETS = re.compile(r"[\[\]]")
_LINE_BREAKS = re.compile(r"\s*\n\s*")
_REPEATED_SPACES = re.compile(r" +")


class VerseFetcher(Protocol):
    async def fetch_verses(self, references: Sequence[ParsedReference]) -> List[FullVerse]:
        ...


class OutcomeKind(str, Enum):
    NAVIGATE = "navigate"
    RESULTS = "results"
    EMPTY = "empty"
    ERROR = "error"


@dataclass
class SearchOutcome:
    """What the caller should do with a search."""
    kind: OutcomeKind
    query: str
    references: List[ParsedReference] = field(default_factory=list)
    verses: List[FullVerse] = field(default_factory=list)
    message: Optional[str] = None

    @property
    def target(self) -> Optional[ParsedReference]:
        """The reference to navigate to, for NAVIGATE outcomes."""
        if self.kind == OutcomeKind.NAVIGATE and self.references:
            return self.references[0]
        return None


def clean_keyword_output(raw: str) -> str:
    """Flatten generated reference lists to one ``;``-separated line."""
    text = _BRACKETS.sub("", raw or "").strip()
    text = _LINE_BREAKS.sub("; ", text)
    return _REPEATED_SPACES.sub(" ", text).strip("; ").strip()


class SearchRouter:
    """
    Resolves search box input into navigation or a result list.

    ``search`` never raises for user input; collaborator failures come
    back as ERROR outcomes carrying the user-facing message.
    """

    def __init__(self, fetcher: VerseFetcher, generator: Optional[TextGenerator] = None):
        self.fetcher = fetcher
        self.generator = generator

    async def search(self, query: str) -> SearchOutcome:
        cleaned = (query or "").strip()
        if not cleaned:
            return SearchOutcome(OutcomeKind.EMPTY, cleaned, message="Enter a reference or keyword.")

        references = parse_multiple(normalize_reference_text(cleaned))
        if len(references) == 1:
            return SearchOutcome(OutcomeKind.NAVIGATE, cleaned, references=references)

        try:
            if references:
                return await self._results(cleaned, references)
            return await self._keyword_search(cleaned)
        except GranthaError as e:
            logger.warning("Search failed", query=cleaned, error_code=e.error_code)
            return SearchOutcome(OutcomeKind.ERROR, cleaned, references=references, message=e.message)

    async def _results(self, query: str, references: List[ParsedReference]) -> SearchOutcome:
        verses = await self.fetcher.fetch_verses(references)
        if not verses:
            return SearchOutcome(
                OutcomeKind.EMPTY, query, references=references,
                message=f'No verses found for "{query}".',
            )
        return SearchOutcome(OutcomeKind.RESULTS, query, references=references, verses=verses)

    async def _keyword_search(self, keyword: str) -> SearchOutcome:
        if self.generator is None:
            return SearchOutcome(OutcomeKind.EMPTY, keyword, message=f'No verses found for "{keyword}".')

        raw = await self.generator.generate(keyword_search_prompt(keyword))
        found = clean_keyword_output(raw)
        if not found:
            return SearchOutcome(OutcomeKind.EMPTY, keyword, message=f'No verses found for "{keyword}".')

        references = parse_multiple(found)
        if not references:
            logger.info("Keyword search returned no parseable references", keyword=keyword)
            return SearchOutcome(
                OutcomeKind.EMPTY, keyword,
                message=f'Could not parse results for "{keyword}".',
            )
        return await self._results(keyword, references)
