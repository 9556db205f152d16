"""
Grantha - Reference Parser

Turns ``<book> <chapter>:<verse>[-<verse>]`` text into a validated
ParsedReference.

Two entry points:
- ``resolve_reference`` returns a Result whose failure carries a
  ParseFailure reason, so callers can tell bad syntax from an unknown
  book or an out-of-range chapter.
- ``parse_reference`` keeps the plain Optional contract for callers
  that only care about success.

Verse upper bounds are not checked: translations disagree on verse
counts, and the verse service answers out-of-range verses with an
empty result.
"""
from __future__ import annotations

import re
from typing import List, Optional

from core.types import Result
from data.books import get_book
from data.schemas import BookMetadata, ParsedReference, ParseFailure
from observability.logging import get_logger
from reference.canonicalizer import canonicalize, resolve_book
from reference.digits import normalize_digits
from reference.tokenizer import normalize_dashes, normalize_whitespace

logger = get_logger("grantha.reference")

_REFERENCE = re.compile(
    r"^(?P<book>[1-3]?\s*[A-Za-z\u0c00-\u0c7f\u200c\u200d.'\u2019\- ]+?)"
    r"\s+(?P<chapter>[0-9]+)\s*:\s*(?P<start>[0-9]+)"
    r"(?:\s*-\s*(?P<end>[0-9]+))?$"
)
_SEGMENT_SEPARATOR = re.compile(r"\s*[;,]\s*")
_LEADING_BOOK = re.compile(r"^([1-3]?\s*[^\d:]+?)(?=\s+\d+[:\s]|$)")


def _prepare(text: str) -> str:
    return normalize_whitespace(normalize_dashes(normalize_digits(text or "")))


def resolve_reference(text: str) -> Result[ParsedReference]:
    """Parse one reference, reporting why it failed when it does."""
    cleaned = _prepare(text)
    match = _REFERENCE.match(cleaned)
    if not match:
        return Result.failure(
            f"Not a reference: {cleaned!r}", reason=ParseFailure.INVALID_SYNTAX
        )

    book_text = match.group("book").strip()
    book = get_book(canonicalize(book_text))
    if book is None:
        return Result.failure(
            f"Unknown book: {book_text!r}", reason=ParseFailure.UNRESOLVED_BOOK
        )

    chapter = int(match.group("chapter"))
    if not 1 <= chapter <= book.chapter_count:
        return Result.failure(
            f"{book.name} has {book.chapter_count} chapters, got {chapter}",
            reason=ParseFailure.CHAPTER_OUT_OF_RANGE,
        )

    start = int(match.group("start"))
    end = int(match.group("end")) if match.group("end") else None
    if start < 1 or (end is not None and end < start):
        return Result.failure(
            f"Invalid verse range in {cleaned!r}", reason=ParseFailure.INVALID_VERSE_RANGE
        )

    return Result.success(
        ParsedReference(book=book.name, chapter=chapter, start_verse=start, end_verse=end)
    )


def parse_reference(text: str) -> Optional[ParsedReference]:
    """Parse one reference; ``None`` when it does not parse for any reason."""
    return resolve_reference(text).unwrap_or(None)


def resolve_multiple(text: str) -> List[Result[ParsedReference]]:
    """Per-segment results for a ``;``/``,`` separated reference list."""
    if not text:
        return []
    segments = [s for s in _SEGMENT_SEPARATOR.split(text.strip()) if s]
    return [resolve_reference(segment) for segment in segments]


def parse_multiple(text: str) -> List[ParsedReference]:
    """Parse every segment of a ``;``/``,`` list, dropping the ones that fail.

    Order follows the input. Empty input yields an empty list.
    """
    parsed = []
    for result in resolve_multiple(text):
        if result.is_success:
            parsed.append(result.value)
        else:
            logger.debug("Dropped reference segment", reason=result.reason.value, error=result.error)
    return parsed


def find_book_metadata(query: str) -> Optional[BookMetadata]:
    """Book-only lookup; ``was_fuzzy`` marks prefix matches."""
    if not query or not query.strip():
        return None
    resolution = resolve_book(query)
    book = get_book(resolution.name) if resolution.resolved else None
    if book is None:
        return None
    return BookMetadata(
        name=book.name,
        chapter_count=book.chapter_count,
        was_fuzzy=resolution.was_fuzzy,
    )


def normalize_reference_text(query: str) -> str:
    """Replace the leading book portion of ``query`` with its canonical name.

    ``"యోహాను 3:16"`` becomes ``"John 3:16"``; text without a recognizable
    book portion is returned whitespace-normalized.
    """
    cleaned = normalize_whitespace(normalize_digits(query or ""))
    match = _LEADING_BOOK.match(cleaned)
    if not match:
        return cleaned
    book_part = match.group(1).strip()
    if not book_part:
        return cleaned
    return cleaned.replace(book_part, canonicalize(book_part), 1)
