"""
Grantha - Reference Resolution

Digit normalization, tokenizing, book canonicalization and reference
parsing for English and Telugu input.

Usage:
    from reference import canonicalize, parse_reference, parse_multiple

    canonicalize("౧ తిమోతికి")        # "1 Timothy"
    parse_reference("Gen 1:1")       # ParsedReference(book="Genesis", ...)
"""
from reference.canonicalizer import (
    BookResolution,
    ResolutionStrategy,
    canonicalize,
    resolve_book,
)
from reference.digits import normalize_digits
from reference.parser import (
    find_book_metadata,
    normalize_reference_text,
    parse_multiple,
    parse_reference,
    resolve_multiple,
    resolve_reference,
)
from reference.tokenizer import ReferenceTokens, normalize_whitespace, tokenize

__all__ = [
    "BookResolution",
    "ReferenceTokens",
    "ResolutionStrategy",
    "canonicalize",
    "find_book_metadata",
    "normalize_digits",
    "normalize_reference_text",
    "normalize_whitespace",
    "parse_multiple",
    "parse_reference",
    "resolve_book",
    "resolve_multiple",
    "resolve_reference",
    "tokenize",
]
