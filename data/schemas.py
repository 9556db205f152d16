"""
Grantha - Data Schemas

Normalized schemas shared by the reference engine, the analysis
reshaper and the collaborator adapters.
"""
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Any, Optional
from enum import Enum
import json


# =============================================================================
# ENUMS - Standard values across the system
# =============================================================================

class Testament(str, Enum):
    """Testament designation."""
    OLD_TESTAMENT = "OT"
    NEW_TESTAMENT = "NT"


class Genre(str, Enum):
    """Literary genre used to steer historical-context prompts."""
    OT_LAW = "OT_Law"
    OT_HISTORY = "OT_History"
    OT_POETRY = "OT_Poetry"
    OT_PROPHET = "OT_Prophet"
    NT_GOSPEL = "NT_Gospel"
    NT_EPISTLE = "NT_Epistle"
    NT_APOCALYPTIC = "NT_Apocalyptic"


class Language(str, Enum):
    """Reader-facing output language."""
    ENGLISH = "EN"
    TELUGU = "TE"


class SourceScript(str, Enum):
    """Script of the source text in an interlinear analysis."""
    GREEK = "greek"
    HEBREW = "hebrew"
    TELUGU = "telugu"


class AnalysisKind(str, Enum):
    """Kinds of AI study text available for a verse."""
    CROSS_REFERENCES = "Cross-references"
    HISTORICAL_CONTEXT = "Historical Context"
    INTERLINEAR = "Interlinear"


class ParseFailure(str, Enum):
    """Why a reference string did not parse."""
    INVALID_SYNTAX = "invalid_syntax"
    UNRESOLVED_BOOK = "unresolved_book"
    CHAPTER_OUT_OF_RANGE = "chapter_out_of_range"
    INVALID_VERSE_RANGE = "invalid_verse_range"


# =============================================================================
# BASE SCHEMA - Common serialization
# =============================================================================

class BaseSchema:
    """Serialization helpers for dataclass schemas."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)  # type: ignore[call-overload]

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str, ensure_ascii=False)


# =============================================================================
# REFERENCE SCHEMAS
# =============================================================================

@dataclass(frozen=True)
class ParsedReference(BaseSchema):
    """
    A validated book/chapter/verse coordinate.

    Example:
    {
        "book": "1 Timothy",
        "chapter": 2,
        "start_verse": 1,
        "end_verse": 4
    }
    """
    book: str
    chapter: int
    start_verse: int
    end_verse: Optional[int] = None

    @property
    def label(self) -> str:
        """Display form, e.g. ``1 Timothy 2:1-4``."""
        if self.end_verse is not None:
            return f"{self.book} {self.chapter}:{self.start_verse}-{self.end_verse}"
        return f"{self.book} {self.chapter}:{self.start_verse}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class BookMetadata(BaseSchema):
    """Result of a book-only lookup."""
    name: str
    chapter_count: int
    was_fuzzy: bool = False


@dataclass(frozen=True)
class VerseReference(BaseSchema):
    """A single verse, the unit AI study text is generated for."""
    book: str
    chapter: int
    verse: int

    @property
    def label(self) -> str:
        return f"{self.book} {self.chapter}:{self.verse}"


# =============================================================================
# VERSE TEXT SCHEMAS
# =============================================================================

@dataclass
class VerseText(BaseSchema):
    """Verse text keyed by translation."""
    kjv: str
    esv: str
    niv: str
    bsi_telugu: Optional[str] = None

    def as_translation_map(self) -> Dict[str, str]:
        """Translation code -> text, omitting a missing Telugu text."""
        texts = {"KJV": self.kjv, "ESV": self.esv, "NIV": self.niv}
        if self.bsi_telugu:
            texts["BSI_TELUGU"] = self.bsi_telugu
        return texts


@dataclass
class Verse(BaseSchema):
    """One verse of a fetched chapter."""
    verse: int
    text: VerseText


@dataclass
class FullVerse(BaseSchema):
    """A verse fetched by reference, carrying its own coordinates."""
    book: str
    chapter: int
    verse: int
    text: VerseText

    @property
    def label(self) -> str:
        return f"{self.book} {self.chapter}:{self.verse}"


# =============================================================================
# ANALYSIS SCHEMAS
# =============================================================================

@dataclass
class WordGloss(BaseSchema):
    """One ``word (transliteration) - gloss`` line of a word analysis."""
    source_word: str
    transliteration: str
    gloss: str

    def render(self) -> str:
        return f"{self.source_word} ({self.transliteration}) - {self.gloss}"


@dataclass
class AnalysisDocument(BaseSchema):
    """
    Structured interlinear analysis.

    ``word_lines`` always holds the rendered word-analysis lines;
    ``word_glosses`` holds the parsed triples when the strict strategy
    recovered them.
    """
    source_script: SourceScript = SourceScript.GREEK
    source_text: str = ""
    transliteration: str = ""
    translation: str = ""
    word_glosses: List[WordGloss] = field(default_factory=list)
    word_lines: List[str] = field(default_factory=list)
    preamble: str = ""
    word_strategy: Optional[str] = None
