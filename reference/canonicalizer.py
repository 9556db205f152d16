"""
Grantha - Book Canonicalizer

Resolves a free-form book name (English, abbreviated, Telugu official
title, Telugu colloquial spelling, with or without a 1-3 numeral in
ASCII or Telugu digits) to its canonical English name.

Resolution is an ordered chain; the first strategy that hits wins:

1. normalize whitespace and digits, strip a trailing ``c:v[-v]``
2. split a leading or trailing book numeral
3. ASCII names: abbreviation, exact name, name prefix
4. numeral/name combinations against the synonym and official-title tables
5. abbreviation against the un-split text
6. prefix match on the bare name
7. give up and hand back the input

When a numeral is present, steps 3 and 4 only look at numbered forms,
so "1 John" can never fall through to "John" before step 6.
"""
from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from data.books import (
    find_by_prefix,
    find_exact,
    get_book,
    lookup_abbreviation,
    lookup_secondary,
)
from observability.logging import get_logger
from reference.tokenizer import ReferenceTokens, is_ascii, normalize_whitespace, tokenize

logger = get_logger("grantha.reference")


class ResolutionStrategy(str, Enum):
    """Which step of the chain produced the canonical name."""
    ABBREVIATION = "abbreviation"
    EXACT = "exact"
    PREFIX = "prefix"
    SECONDARY = "secondary"
    ABBREVIATION_RETRY = "abbreviation_retry"
    BARE_PREFIX = "bare_prefix"
    UNRESOLVED = "unresolved"


FUZZY_STRATEGIES = frozenset({ResolutionStrategy.PREFIX, ResolutionStrategy.BARE_PREFIX})


@dataclass(frozen=True)
class BookResolution:
    """Outcome of resolving one book name."""

    name: str
    strategy: ResolutionStrategy

    @property
    def resolved(self) -> bool:
        return self.strategy != ResolutionStrategy.UNRESOLVED

    @property
    def was_fuzzy(self) -> bool:
        return self.strategy in FUZZY_STRATEGIES


def _secondary_candidates(tokens: ReferenceTokens) -> List[str]:
    if not tokens.numeral:
        return [tokens.name]
    num, name = tokens.numeral, tokens.name
    return [f"{num} {name}", f"{num}{name}", f"{name} {num}", name]


def _resolve_ascii(tokens: ReferenceTokens) -> Optional[BookResolution]:
    numbered = tokens.numbered_name

    abbreviated = lookup_abbreviation(numbered)
    if abbreviated:
        return BookResolution(abbreviated, ResolutionStrategy.ABBREVIATION)

    exact = find_exact(numbered)
    if exact:
        return BookResolution(exact.name, ResolutionStrategy.EXACT)

    prefixed = find_by_prefix(numbered)
    if prefixed:
        return BookResolution(prefixed.name, ResolutionStrategy.PREFIX)

    return None


@functools.lru_cache(maxsize=4096)
def resolve_book(raw: str) -> BookResolution:
    """Resolve ``raw`` to a canonical book name, reporting the strategy used.

    Never raises. Unresolved input comes back whitespace-normalized with
    strategy ``UNRESOLVED``.
    """
    fallback = normalize_whitespace(raw or "")
    tokens = tokenize(fallback)
    if not tokens.name:
        return BookResolution(fallback, ResolutionStrategy.UNRESOLVED)

    if is_ascii(tokens.name):
        hit = _resolve_ascii(tokens)
        if hit:
            return hit

    for candidate in _secondary_candidates(tokens):
        secondary = lookup_secondary(candidate)
        if secondary:
            return BookResolution(secondary, ResolutionStrategy.SECONDARY)

    retried = lookup_abbreviation(tokens.text)
    if retried:
        return BookResolution(retried, ResolutionStrategy.ABBREVIATION_RETRY)

    bare = find_by_prefix(tokens.name)
    if bare:
        return BookResolution(bare.name, ResolutionStrategy.BARE_PREFIX)

    logger.debug("Book name unresolved", raw=fallback)
    return BookResolution(fallback, ResolutionStrategy.UNRESOLVED)


def canonicalize(raw: str) -> str:
    """Canonical English book name for ``raw``, or the normalized input when nothing matches."""
    return resolve_book(raw).name


def is_canonical(name: str) -> bool:
    return get_book(name) is not None
