"""
Grantha - Analysis Section Parser

Splits generated interlinear text into its four numbered sections with
an explicit two-step parser:

1. tokenize: every line becomes a HEADER, RULE or BODY token. Header
   lines are recognized whatever their markup: ``**1. Greek Text:**``,
   ``1) Hebrew text``, ``## 2. Transliteration``, ``౪. పదాల వారీగా విశ్లేషణ``.
   Text following a header on the same line becomes a BODY token.
2. fold: tokens are folded into a SectionedText; BODY lines before the
   first header form the preamble and RULE lines are dropped.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional

from data.schemas import Language, SourceScript
from reference.digits import normalize_digits


class Section(IntEnum):
    """The four sections of an interlinear analysis, in display order."""
    SOURCE_TEXT = 1
    TRANSLITERATION = 2
    TRANSLATION = 3
    WORD_ANALYSIS = 4


class TokenKind(str, Enum):
    HEADER = "header"
    RULE = "rule"
    BODY = "body"


@dataclass(frozen=True)
class LineToken:
    kind: TokenKind
    text: str = ""
    section: Optional[Section] = None
    script: Optional[SourceScript] = None


_SECTION_TITLES = {
    Section.SOURCE_TEXT: (
        r"(?:greek|hebrew|aramaic|original|source)\s*text"
        r"|(?:గ్రీకు|హీబ్రూ|మూల)\s*వచనం"
    ),
    Section.TRANSLITERATION: (
        r"(?:english\s*)?transliteration"
        r"|(?:తెలుగు\s*)?లిప్యంతరీకరణ"
    ),
    Section.TRANSLATION: (
        r"(?:smooth\s*)?(?:english\s*)?translation"
        r"|(?:సరళమైన\s*)?(?:తెలుగు\s*)?అనువాదం"
    ),
    Section.WORD_ANALYSIS: (
        r"word[\s-]*by[\s-]*word(?:\s*analysis)?"
        r"|పదాల\s*వారీగా\s*విశ్లేషణ"
    ),
}

_HEADER = re.compile(
    r"^\s*(?:#+\s*)?[*_]*\s*(?P<number>[1-4])\s*[.)]?\s*[*_]*\s*"
    r"(?P<title>" + "|".join(f"(?:{t})" for t in _SECTION_TITLES.values()) + r")"
    r"\s*[*_]*\s*[:：]?\s*[*_]*\s*(?P<rest>.*)$",
    re.IGNORECASE,
)
_TITLE_MATCHERS = {
    section: re.compile(rf"^(?:{pattern})$", re.IGNORECASE)
    for section, pattern in _SECTION_TITLES.items()
}
_RULE = re.compile(r"^\s*(?:-{3,}|\*{3,}|_{3,})\s*$")
_HEBREW_TITLE = re.compile(r"hebrew|హీబ్రూ", re.IGNORECASE)
_GREEK_TITLE = re.compile(r"greek|గ్రీకు", re.IGNORECASE)


# =============================================================================
# TOKENIZE
# =============================================================================

def _classify_title(title: str) -> Optional[Section]:
    for section, matcher in _TITLE_MATCHERS.items():
        if matcher.match(title.strip()):
            return section
    return None


def _title_script(title: str) -> Optional[SourceScript]:
    if _HEBREW_TITLE.search(title):
        return SourceScript.HEBREW
    if _GREEK_TITLE.search(title):
        return SourceScript.GREEK
    return None


def tokenize_lines(text: str) -> List[LineToken]:
    """Classify each line of ``text``."""
    tokens: List[LineToken] = []
    for line in text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        if _RULE.match(line):
            tokens.append(LineToken(TokenKind.RULE))
            continue

        # Telugu numerals only matter for the header number
        match = _HEADER.match(normalize_digits(line))
        section = _classify_title(match.group("title")) if match else None
        if match and section is not None:
            title = match.group("title")
            tokens.append(LineToken(TokenKind.HEADER, title, section, _title_script(title)))
            rest = match.group("rest").strip().strip("*_").strip()
            if rest:
                tokens.append(LineToken(TokenKind.BODY, rest))
            continue

        tokens.append(LineToken(TokenKind.BODY, line))
    return tokens


# =============================================================================
# FOLD
# =============================================================================

@dataclass
class SectionedText:
    """Generated text split into preamble and numbered sections."""

    preamble: List[str] = field(default_factory=list)
    sections: Dict[Section, List[str]] = field(default_factory=dict)
    declared_script: Optional[SourceScript] = None

    @property
    def has_sections(self) -> bool:
        return bool(self.sections)

    def body(self, section: Section) -> str:
        """Section body with surrounding blank lines removed."""
        return "\n".join(self.sections.get(section, [])).strip("\n").strip()

    def lines(self, section: Section) -> List[str]:
        return [line.strip() for line in self.sections.get(section, []) if line.strip()]


def fold_tokens(tokens: List[LineToken]) -> SectionedText:
    """Group BODY tokens under the most recent HEADER."""
    result = SectionedText()
    current: Optional[Section] = None
    for token in tokens:
        if token.kind == TokenKind.RULE:
            continue
        if token.kind == TokenKind.HEADER:
            current = token.section
            result.sections.setdefault(current, [])
            if token.section == Section.SOURCE_TEXT and token.script and not result.declared_script:
                result.declared_script = token.script
            continue
        if current is None:
            result.preamble.append(token.text)
        else:
            result.sections[current].append(token.text)
    return result


def split_sections(text: str) -> SectionedText:
    """Tokenize then fold ``text``."""
    return fold_tokens(tokenize_lines(text or ""))


# =============================================================================
# CANONICAL HEADERS
# =============================================================================

_ENGLISH_HEADERS = {
    Section.TRANSLITERATION: "**2. English Transliteration:**",
    Section.TRANSLATION: "**3. Smooth English Translation:**",
    Section.WORD_ANALYSIS: "**4. Word-by-Word Analysis:**",
}
_TELUGU_HEADERS = {
    Section.TRANSLITERATION: "**2. తెలుగు లిప్యంతరీకరణ:**",
    Section.TRANSLATION: "**3. సరళమైన తెలుగు అనువాదం:**",
    Section.WORD_ANALYSIS: "**4. పదాల వారీగా విశ్లేషణ:**",
}
_SOURCE_TITLES = {
    Language.ENGLISH: {SourceScript.GREEK: "Greek Text", SourceScript.HEBREW: "Hebrew Text"},
    Language.TELUGU: {SourceScript.GREEK: "గ్రీకు వచనం", SourceScript.HEBREW: "హీబ్రూ వచనం"},
}


def canonical_header(section: Section, script: SourceScript, language: Language) -> str:
    """The single bold header form emitted for ``section``."""
    if section == Section.SOURCE_TEXT:
        titles = _SOURCE_TITLES[language]
        return f"**1. {titles.get(script, titles[SourceScript.GREEK])}:**"
    headers = _TELUGU_HEADERS if language == Language.TELUGU else _ENGLISH_HEADERS
    return headers[section]


def render_sections(
    bodies: Dict[Section, str],
    script: SourceScript,
    language: Language,
    preamble: str = "",
) -> str:
    """Join section bodies under canonical headers, separated by rules."""
    blocks = []
    for section in Section:
        if section not in bodies:
            continue
        header = canonical_header(section, script, language)
        body = bodies[section].strip()
        blocks.append(f"{header}\n{body}" if body else header)
    rendered = "\n\n---\n\n".join(blocks)
    if preamble.strip():
        rendered = f"{preamble.strip()}\n\n{rendered}" if rendered else preamble.strip()
    return rendered
