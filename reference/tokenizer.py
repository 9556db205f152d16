"""
Grantha - Reference Tokenizer

Splits raw search text into a book-name candidate, an optional book
numeral (1-3, leading or trailing) and an optional ``chapter:verse``
or ``chapter:verse-verse`` suffix.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from reference.digits import normalize_digits

# Zero-width space and BOM only; ZWJ/ZWNJ shape Telugu conjuncts
_INVISIBLE = re.compile("[\u200b\ufeff]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile("[\u2010-\u2015\u2212]")

_CHAPTER_VERSE_SUFFIX = re.compile(
    r"\s*([0-9]+)\s*:\s*([0-9]+)(?:\s*-\s*([0-9]+))?\s*$"
)
_NUMERAL_PREFIX = re.compile(r"^([1-3])\s*([^\d\s].*)$")
_NUMERAL_SUFFIX = re.compile(r"^(.+?)\s+([1-3])$")


@dataclass(frozen=True)
class ReferenceTokens:
    """Pieces of one reference-like string."""

    text: str                       # normalized, chapter/verse removed
    name: str                       # book text without its numeral
    numeral: Optional[str] = None
    chapter: Optional[int] = None
    start_verse: Optional[int] = None
    end_verse: Optional[int] = None

    @property
    def numbered_name(self) -> str:
        return f"{self.numeral} {self.name}" if self.numeral else self.name


def normalize_whitespace(text: str) -> str:
    """Drop zero-width characters, collapse whitespace runs, trim."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", _INVISIBLE.sub("", text)).strip()


def normalize_dashes(text: str) -> str:
    """Map en/em dashes and minus signs to an ASCII hyphen."""
    return _DASHES.sub("-", text)


def is_ascii(text: str) -> bool:
    return text.isascii()


def strip_chapter_verse(
    text: str,
) -> Tuple[str, Optional[int], Optional[int], Optional[int]]:
    """Remove a trailing ``c:v[-v]`` and return it alongside the remaining text."""
    match = _CHAPTER_VERSE_SUFFIX.search(text)
    if not match:
        return text, None, None, None
    chapter, start, end = match.groups()
    return (
        text[: match.start()].strip(),
        int(chapter),
        int(start),
        int(end) if end else None,
    )


def split_numeral(name: str) -> Tuple[Optional[str], str]:
    """Separate a 1-3 book numeral from the name.

    Handles ``1 Timothy``, ``1Timothy`` and ``Timothy 1``. Telugu digits
    must already be normalized.
    """
    prefix = _NUMERAL_PREFIX.match(name)
    if prefix:
        return prefix.group(1), prefix.group(2).strip()
    suffix = _NUMERAL_SUFFIX.match(name)
    if suffix:
        return suffix.group(2), suffix.group(1).strip()
    return None, name


def tokenize(raw: str) -> ReferenceTokens:
    """Normalize ``raw`` and split it into reference tokens. Never raises."""
    text = normalize_dashes(normalize_digits(normalize_whitespace(raw or "")))
    text, chapter, start, end = strip_chapter_verse(text)
    numeral, name = split_numeral(text)
    return ReferenceTokens(
        text=text,
        name=name,
        numeral=numeral,
        chapter=chapter,
        start_verse=start,
        end_verse=end,
    )
