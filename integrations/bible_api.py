"""
Grantha - Verse Fetch Adapter

Fetches verse text from bible-api.com. Each request asks for the ``web``
and ``kjv`` translations concurrently and merges them:

- KJV comes from the ``kjv`` response
- ESV and NIV display slots use the ``web`` text, falling back to KJV
- Telugu (BSI) text is attached from a local ``TeluguBibleSource`` when one
  is configured

Only canonical English book names are ever sent to the service.
"""
from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote

import httpx
from opentelemetry import trace

from config import BibleApiConfig
from core.errors import ErrorContext, VerseNetworkError, VerseNotFoundError
from data.books import get_book
from data.schemas import FullVerse, ParsedReference, Verse, VerseText
from observability.logging import get_logger
from reference.canonicalizer import canonicalize

logger = get_logger("grantha.integrations.bible_api")
tracer = trace.get_tracer(__name__)

PRIMARY_TRANSLATION = "kjv"
SECONDARY_TRANSLATION = "web"


def _clean(text: str) -> str:
    return (text or "").replace("\n", " ").strip()


def _error_context(reference: str, translation: str) -> ErrorContext:
    return ErrorContext.from_current_span(
        operation="fetch_translation",
        component="bible_api",
        reference=reference,
        metadata={"translation": translation},
    )


# =============================================================================
# LOCAL TELUGU TEXT
# =============================================================================

class TeluguBibleSource:
    """
    Telugu verse text from a BSI JSON dump.

    Layout: ``{"Book": [{"Chapter": [{"Verse": [{"Verse": "..."}]}]}]}``
    with books in canon order.
    """

    def __init__(self, books: Sequence[Dict[str, Any]]):
        self._books = list(books)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeluguBibleSource":
        return cls(data.get("Book", []))

    @classmethod
    def from_json(cls, path: Path) -> "TeluguBibleSource":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def verse(self, book: str, chapter: int, verse: int) -> Optional[str]:
        """Telugu text of one verse, or None when the dump lacks it."""
        canonical = get_book(book)
        if canonical is None or chapter < 1 or verse < 1:
            return None
        try:
            entry = self._books[canonical.position]["Chapter"][chapter - 1]["Verse"][verse - 1]
        except (IndexError, KeyError, TypeError):
            return None
        text = entry.get("Verse") if isinstance(entry, dict) else None
        return text.strip() if text else None


# =============================================================================
# CLIENT
# =============================================================================

class BibleApiClient:
    """
    Async client for the verse text service.

    Usage:
        async with BibleApiClient() as client:
            verses = await client.fetch_chapter("John", 3)
    """

    def __init__(
        self,
        config: Optional[BibleApiConfig] = None,
        telugu: Optional[TeluguBibleSource] = None,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or BibleApiConfig()
        if telugu is None and self.config.telugu_bible_path:
            telugu = TeluguBibleSource.from_json(self.config.telugu_bible_path)
        self.telugu = telugu
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.config.base_url.rstrip("/"),
            timeout=self.config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "BibleApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    async def _fetch_translation(self, reference: str, translation: str) -> Dict[str, Any]:
        url = f"/{quote(reference)}"
        try:
            response = await self._client.get(url, params={"translation": translation})
        except httpx.HTTPError as e:
            logger.warning("Verse service unreachable", reference=reference, translation=translation)
            raise VerseNetworkError(
                f"Could not reach verse service for {reference} ({translation})",
                reference=reference,
                context=_error_context(reference, translation),
                cause=e,
            ) from e

        if response.status_code == 404:
            raise VerseNotFoundError(
                f"No text for {reference} ({translation})",
                reference=reference,
                status_code=404,
            )
        if response.is_error:
            logger.warning(
                "Verse service error",
                reference=reference,
                translation=translation,
                status_code=response.status_code,
            )
            raise VerseNetworkError(
                f"HTTP error {response.status_code} for {reference} ({translation})",
                reference=reference,
                status_code=response.status_code,
                context=_error_context(reference, translation),
            )
        return response.json()

    async def _fetch_pair(self, reference: str):
        return await asyncio.gather(
            self._fetch_translation(reference, SECONDARY_TRANSLATION),
            self._fetch_translation(reference, PRIMARY_TRANSLATION),
        )

    def _merge(self, book: str, chapter: int, primary: Dict[str, Any], secondary: Dict[str, Any]):
        """Yield ``(verse_number, VerseText)`` in KJV order."""
        secondary_by_verse = {v.get("verse"): v for v in secondary.get("verses") or []}
        for kjv_verse in primary.get("verses") or []:
            number = kjv_verse.get("verse")
            kjv = _clean(kjv_verse.get("text", ""))
            web = _clean((secondary_by_verse.get(number) or {}).get("text", "")) or kjv
            telugu = self.telugu.verse(book, chapter, number) if self.telugu else None
            yield number, VerseText(kjv=kjv, esv=web, niv=web, bsi_telugu=telugu)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def fetch_chapter(self, book: str, chapter: int) -> List[Verse]:
        """Every verse of a chapter; ``book`` may be any recognizable book name."""
        canonical = canonicalize(book)
        reference = f"{canonical} {chapter}"
        with tracer.start_as_current_span("bible_api.fetch_chapter") as span:
            span.set_attribute("grantha.reference", reference)
            secondary, primary = await self._fetch_pair(reference)

            if not primary.get("verses"):
                raise VerseNotFoundError(f"No verses found for {reference}", reference=reference)

            verses = [Verse(verse=n, text=t) for n, t in self._merge(canonical, chapter, primary, secondary)]
            span.set_attribute("grantha.verse_count", len(verses))
            logger.debug("Fetched chapter", reference=reference, verses=len(verses))
            return verses

    async def fetch_reference(self, ref: ParsedReference) -> List[FullVerse]:
        """Verses of one parsed reference; an empty service response yields an empty list."""
        book = canonicalize(ref.book)
        reference = ParsedReference(book, ref.chapter, ref.start_verse, ref.end_verse).label
        secondary, primary = await self._fetch_pair(reference)
        return [
            FullVerse(book=book, chapter=ref.chapter, verse=n, text=t)
            for n, t in self._merge(book, ref.chapter, primary, secondary)
        ]

    async def fetch_verses(self, references: Sequence[ParsedReference]) -> List[FullVerse]:
        """Fetch several references concurrently, flattened in input order."""
        results = await asyncio.gather(*(self.fetch_reference(ref) for ref in references))
        return [verse for verses in results for verse in verses]
