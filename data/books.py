"""
Grantha - Canonical Book Table

The 66 books in canon order with chapter counts, English abbreviations,
official Telugu titles and Telugu synonyms, plus the read-only lookup
indexes the canonicalizer searches.

Canon order is the positional index into the BSI Telugu verse data and
must never change.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from core.errors import SynonymTableError
from data.schemas import Genre, Testament
from data.telugu import TELUGU_BOOK_NAMES, TELUGU_SYNONYMS


@dataclass(frozen=True)
class CanonicalBook:
    """One canonical book of the 66-book canon."""

    name: str
    chapter_count: int
    abbreviation: str
    secondary_name: str
    synonyms: FrozenSet[str]
    testament: Testament
    genre: Genre
    position: int

    @property
    def is_new_testament(self) -> bool:
        return self.testament == Testament.NEW_TESTAMENT


# =============================================================================
# RAW TABLE - (name, chapters, abbreviation, genre) in canon order
# =============================================================================

_BOOK_ROWS: Tuple[Tuple[str, int, str, Genre], ...] = (
    ("Genesis", 50, "Gen", Genre.OT_LAW),
    ("Exodus", 40, "Exod", Genre.OT_LAW),
    ("Leviticus", 27, "Lev", Genre.OT_LAW),
    ("Numbers", 36, "Num", Genre.OT_LAW),
    ("Deuteronomy", 34, "Deut", Genre.OT_LAW),
    ("Joshua", 24, "Josh", Genre.OT_HISTORY),
    ("Judges", 21, "Judg", Genre.OT_HISTORY),
    ("Ruth", 4, "Ruth", Genre.OT_HISTORY),
    ("1 Samuel", 31, "1 Sam", Genre.OT_HISTORY),
    ("2 Samuel", 24, "2 Sam", Genre.OT_HISTORY),
    ("1 Kings", 22, "1 Kgs", Genre.OT_HISTORY),
    ("2 Kings", 25, "2 Kgs", Genre.OT_HISTORY),
    ("1 Chronicles", 29, "1 Chr", Genre.OT_HISTORY),
    ("2 Chronicles", 36, "2 Chr", Genre.OT_HISTORY),
    ("Ezra", 10, "Ezra", Genre.OT_HISTORY),
    ("Nehemiah", 13, "Neh", Genre.OT_HISTORY),
    ("Esther", 10, "Esth", Genre.OT_HISTORY),
    ("Job", 42, "Job", Genre.OT_POETRY),
    ("Psalms", 150, "Ps", Genre.OT_POETRY),
    ("Proverbs", 31, "Prov", Genre.OT_POETRY),
    ("Ecclesiastes", 12, "Eccl", Genre.OT_POETRY),
    ("Song of Solomon", 8, "Song", Genre.OT_POETRY),
    ("Isaiah", 66, "Isa", Genre.OT_PROPHET),
    ("Jeremiah", 52, "Jer", Genre.OT_PROPHET),
    ("Lamentations", 5, "Lam", Genre.OT_PROPHET),
    ("Ezekiel", 48, "Ezek", Genre.OT_PROPHET),
    ("Daniel", 12, "Dan", Genre.OT_PROPHET),
    ("Hosea", 14, "Hos", Genre.OT_PROPHET),
    ("Joel", 3, "Joel", Genre.OT_PROPHET),
    ("Amos", 9, "Amos", Genre.OT_PROPHET),
    ("Obadiah", 1, "Obad", Genre.OT_PROPHET),
    ("Jonah", 4, "Jonah", Genre.OT_PROPHET),
    ("Micah", 7, "Mic", Genre.OT_PROPHET),
    ("Nahum", 3, "Nah", Genre.OT_PROPHET),
    ("Habakkuk", 3, "Hab", Genre.OT_PROPHET),
    ("Zephaniah", 3, "Zeph", Genre.OT_PROPHET),
    ("Haggai", 2, "Hag", Genre.OT_PROPHET),
    ("Zechariah", 14, "Zech", Genre.OT_PROPHET),
    ("Malachi", 4, "Mal", Genre.OT_PROPHET),
    ("Matthew", 28, "Matt", Genre.NT_GOSPEL),
    ("Mark", 16, "Mark", Genre.NT_GOSPEL),
    ("Luke", 24, "Luke", Genre.NT_GOSPEL),
    ("John", 21, "John", Genre.NT_GOSPEL),
    ("Acts", 28, "Acts", Genre.NT_EPISTLE),
    ("Romans", 16, "Rom", Genre.NT_EPISTLE),
    ("1 Corinthians", 16, "1 Cor", Genre.NT_EPISTLE),
    ("2 Corinthians", 13, "2 Cor", Genre.NT_EPISTLE),
    ("Galatians", 6, "Gal", Genre.NT_EPISTLE),
    ("Ephesians", 6, "Eph", Genre.NT_EPISTLE),
    ("Philippians", 4, "Phil", Genre.NT_EPISTLE),
    ("Colossians", 4, "Col", Genre.NT_EPISTLE),
    ("1 Thessalonians", 5, "1 Thess", Genre.NT_EPISTLE),
    ("2 Thessalonians", 3, "2 Thess", Genre.NT_EPISTLE),
    ("1 Timothy", 6, "1 Tim", Genre.NT_EPISTLE),
    ("2 Timothy", 4, "2 Tim", Genre.NT_EPISTLE),
    ("Titus", 3, "Titus", Genre.NT_EPISTLE),
    ("Philemon", 1, "Phlm", Genre.NT_EPISTLE),
    ("Hebrews", 13, "Heb", Genre.NT_EPISTLE),
    ("James", 5, "Jas", Genre.NT_EPISTLE),
    ("1 Peter", 5, "1 Pet", Genre.NT_EPISTLE),
    ("2 Peter", 3, "2 Pet", Genre.NT_EPISTLE),
    ("1 John", 5, "1 John", Genre.NT_EPISTLE),
    ("2 John", 1, "2 John", Genre.NT_EPISTLE),
    ("3 John", 1, "3 John", Genre.NT_EPISTLE),
    ("Jude", 1, "Jude", Genre.NT_EPISTLE),
    ("Revelation", 22, "Rev", Genre.NT_APOCALYPTIC),
)

OLD_TESTAMENT_SIZE = 39

# English spellings the abbreviation column does not cover
ENGLISH_ALIASES: Dict[str, str] = {
    "psalm": "Psalms",
    "psalms": "Psalms",
    "song": "Song of Solomon",
    "song of songs": "Song of Solomon",
    "songs": "Song of Solomon",
    "1sam": "1 Samuel",
    "2sam": "2 Samuel",
    "1kgs": "1 Kings",
}

_KEY_PUNCTUATION = re.compile(r"[.,;:!\u061f\u200b\u200c\u200d\u00ae\u2122*(){}\[\]\"']")


def canonical_key(text: str) -> str:
    """Lowercase lookup key with punctuation and zero-width characters removed."""
    return _KEY_PUNCTUATION.sub("", text.lower()).strip()


def _build_index(pairs: Iterable[Tuple[str, str]], table: str) -> Dict[str, str]:
    """Build a many-to-one index, rejecting any key that maps to two books."""
    index: Dict[str, str] = {}
    for key, book in pairs:
        if not key:
            continue
        existing = index.get(key)
        if existing is not None and existing != book:
            raise SynonymTableError(
                f"{table} key {key!r} maps to both {existing!r} and {book!r}",
                key=key,
                books=[existing, book],
            )
        index[key] = book
    return index


def _build_canon() -> Tuple[CanonicalBook, ...]:
    names = {row[0] for row in _BOOK_ROWS}
    for synonym, book in TELUGU_SYNONYMS.items():
        if book not in names:
            raise SynonymTableError(
                f"Synonym {synonym!r} maps to unknown book {book!r}", key=synonym, books=[book]
            )
    missing = names - TELUGU_BOOK_NAMES.keys()
    if missing:
        raise SynonymTableError(f"Books without a Telugu title: {sorted(missing)}")

    canon = []
    for position, (name, chapters, abbreviation, genre) in enumerate(_BOOK_ROWS):
        canon.append(CanonicalBook(
            name=name,
            chapter_count=chapters,
            abbreviation=abbreviation,
            secondary_name=TELUGU_BOOK_NAMES[name],
            synonyms=frozenset(k for k, v in TELUGU_SYNONYMS.items() if v == name),
            testament=(
                Testament.OLD_TESTAMENT if position < OLD_TESTAMENT_SIZE
                else Testament.NEW_TESTAMENT
            ),
            genre=genre,
            position=position,
        ))
    return tuple(canon)


# =============================================================================
# TABLE AND INDEXES - built once at import
# =============================================================================

CANON: Tuple[CanonicalBook, ...] = _build_canon()

BOOKS_BY_NAME: Dict[str, CanonicalBook] = {book.name: book for book in CANON}

_BOOKS_BY_LOWER_NAME: Dict[str, CanonicalBook] = {book.name.lower(): book for book in CANON}

# abbreviation (lowercase, with and without spaces) and English aliases
ABBREVIATION_INDEX: Dict[str, str] = _build_index(
    [
        pair
        for book in CANON
        for pair in (
            (book.abbreviation.lower().replace(" ", ""), book.name),
            (book.abbreviation.lower(), book.name),
        )
    ]
    + list(ENGLISH_ALIASES.items()),
    "abbreviation",
)

# synonyms, raw and key-normalized
SYNONYM_INDEX: Dict[str, str] = _build_index(
    [pair for s, b in TELUGU_SYNONYMS.items() for pair in ((s, b), (canonical_key(s), b))],
    "synonym",
)

# official Telugu title -> canonical English
OFFICIAL_NAME_INDEX: Dict[str, str] = _build_index(
    [
        pair
        for book in CANON
        for pair in ((book.secondary_name, book.name), (canonical_key(book.secondary_name), book.name))
    ],
    "official name",
)


# =============================================================================
# LOOKUPS
# =============================================================================

def get_book(name: str) -> Optional[CanonicalBook]:
    """Exact canonical-name lookup."""
    return BOOKS_BY_NAME.get(name)


def find_exact(name: str) -> Optional[CanonicalBook]:
    """Case-insensitive canonical-name lookup."""
    return _BOOKS_BY_LOWER_NAME.get(name.lower())


def find_by_prefix(prefix: str) -> Optional[CanonicalBook]:
    """First book in canon order whose name starts with ``prefix`` (case-insensitive)."""
    lowered = prefix.lower()
    if not lowered:
        return None
    for book in CANON:
        if book.name.lower().startswith(lowered):
            return book
    return None


def lookup_abbreviation(text: str) -> Optional[str]:
    """Abbreviation or English alias -> canonical name."""
    key = canonical_key(text)
    if not key:
        return None
    return ABBREVIATION_INDEX.get(key.replace(" ", "")) or ABBREVIATION_INDEX.get(key)


def lookup_secondary(text: str) -> Optional[str]:
    """Synonym or official Telugu title -> canonical name, raw form first."""
    for key in (text, canonical_key(text)):
        if not key:
            continue
        hit = SYNONYM_INDEX.get(key) or OFFICIAL_NAME_INDEX.get(key)
        if hit:
            return hit
    return None


def book_names() -> List[str]:
    """Canonical names in canon order."""
    return [book.name for book in CANON]


def is_new_testament(name: str) -> bool:
    book = BOOKS_BY_NAME.get(name)
    return book is not None and book.is_new_testament
