"""
Grantha - ASCII to Telugu Transliterator

Renders a plain-ASCII transliteration (``logos``, ``en arche``) in
Telugu script for Telugu readers.

This is a best-effort heuristic, not a linguistic transliteration
scheme: it knows nothing about Greek or Hebrew phonology beyond what the
ASCII spelling shows. The rule table is data, and anything implementing
the ``Transliterator`` protocol can replace the default.

Rules, applied per word:
- the word is lowercased and cut into tokens greedily, longest pattern
  first (``chh`` before ``ch`` before ``c``; ``aa``/``ai`` before ``a``)
- a consonant followed by a vowel takes that vowel's sign; a bare ``a``
  leaves the inherent vowel
- a consonant followed by another consonant or the word end gets a virama
- a vowel with no consonant before it is written on the carrier ``అ``
- anything else (hyphen, digit) passes through and ends the syllable
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Protocol, Tuple, runtime_checkable


@runtime_checkable
class Transliterator(Protocol):
    """Anything that turns one ASCII word into Telugu script."""

    def transliterate(self, word: str) -> str:
        ...


@dataclass(frozen=True)
class TransliterationRules:
    """Replaceable substitution table for ``RuleBasedTransliterator``."""

    consonants: Mapping[str, str]
    vowel_signs: Mapping[str, str]
    virama: str = "్"
    carrier: str = "అ"
    dropped: str = "'"


DEFAULT_RULES = TransliterationRules(
    consonants={
        "chh": "ఛ",
        "kh": "ఖ", "gh": "ఘ", "ph": "ఫ", "th": "థ", "dh": "ధ",
        "sh": "ష", "ch": "చ", "ts": "త్స", "ng": "ంగ", "ny": "న్య",
        "b": "బ", "c": "క", "d": "ద", "f": "ఫ", "g": "గ", "h": "హ",
        "j": "జ", "k": "క", "l": "ల", "m": "మ", "n": "న", "p": "ప",
        "q": "క", "r": "ర", "s": "స", "t": "త", "v": "వ", "w": "వ",
        "x": "క్స", "y": "య", "z": "జ",
    },
    vowel_signs={
        "aa": "ా", "ii": "ీ", "uu": "ూ", "ee": "ే", "oo": "ో",
        "ai": "ై", "au": "ౌ",
        "a": "", "i": "ి", "u": "ు", "e": "ె", "o": "ొ",
    },
)

_CONSONANT = "consonant"
_VOWEL = "vowel"
_OTHER = "other"


@dataclass
class RuleBasedTransliterator:
    """Greedy longest-match transliterator driven by a ``TransliterationRules`` table."""

    rules: TransliterationRules = DEFAULT_RULES
    _patterns: List[Tuple[str, str]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        patterns = [(p, _CONSONANT) for p in self.rules.consonants]
        patterns += [(p, _VOWEL) for p in self.rules.vowel_signs]
        # longest first; consonants win ties so "th" is never read as vowel+consonant
        self._patterns = sorted(patterns, key=lambda item: (-len(item[0]), item[1] != _CONSONANT))

    def tokenize(self, word: str) -> List[Tuple[str, str]]:
        """Split a lowercase ASCII word into (kind, pattern) tokens."""
        tokens: List[Tuple[str, str]] = []
        i = 0
        while i < len(word):
            for pattern, kind in self._patterns:
                if word.startswith(pattern, i):
                    tokens.append((kind, pattern))
                    i += len(pattern)
                    break
            else:
                tokens.append((_OTHER, word[i]))
                i += 1
        return tokens

    def transliterate(self, word: str) -> str:
        rules = self.rules
        out: List[str] = []
        open_consonant = False

        for kind, value in self.tokenize(word.lower()):
            if kind == _CONSONANT:
                if open_consonant:
                    out.append(rules.virama)
                out.append(rules.consonants[value])
                open_consonant = True
            elif kind == _VOWEL:
                sign = rules.vowel_signs[value]
                out.append(sign if open_consonant else rules.carrier + sign)
                open_consonant = False
            else:
                if open_consonant:
                    out.append(rules.virama)
                    open_consonant = False
                if value not in rules.dropped:
                    out.append(value)

        if open_consonant:
            out.append(rules.virama)
        return "".join(out)

    def transliterate_text(self, text: str) -> str:
        """Transliterate every whitespace-separated word, keeping line breaks."""
        return "\n".join(
            " ".join(self.transliterate(word) for word in line.split())
            for line in text.split("\n")
        )


_default = RuleBasedTransliterator()


def transliterate(word: str) -> str:
    """Telugu rendering of one ASCII word using the default rules."""
    return _default.transliterate(word)
