"""
Grantha - Data Module

Static canonical data and the schemas shared across the system.

Architecture:
- books.py: the 66-book canonical table and its lookup indexes
- telugu.py: official Telugu titles and the Telugu synonym table
- schemas.py: enums and dataclass schemas
"""

from data.books import (
    CANON,
    BOOKS_BY_NAME,
    CanonicalBook,
    book_names,
    canonical_key,
    get_book,
    is_new_testament,
)
from data.schemas import (
    AnalysisDocument,
    AnalysisKind,
    BookMetadata,
    FullVerse,
    Genre,
    Language,
    ParsedReference,
    ParseFailure,
    SourceScript,
    Testament,
    Verse,
    VerseReference,
    VerseText,
    WordGloss,
)

__all__ = [
    # Canonical table
    "CANON",
    "BOOKS_BY_NAME",
    "CanonicalBook",
    "book_names",
    "canonical_key",
    "get_book",
    "is_new_testament",
    # Enums
    "AnalysisKind",
    "Genre",
    "Language",
    "ParseFailure",
    "SourceScript",
    "Testament",
    # Schemas
    "AnalysisDocument",
    "BookMetadata",
    "FullVerse",
    "ParsedReference",
    "Verse",
    "VerseReference",
    "VerseText",
    "WordGloss",
]
