"""
Grantha - Analysis Text Reshaper

Turns generated interlinear text into a strictly formatted document:

1. sections are located by ``analysis.sections`` and re-emitted under one
   canonical bold header each
2. the transliteration section is reduced to strict ASCII (or rendered in
   Telugu script for Telugu readers)
3. inline ``(transliteration)`` parentheticals after source words are
   sanitized the same way
4. the word-by-word section is re-segmented to one
   ``word (transliteration) - gloss`` triple per line

Word re-segmentation degrades through named strategies:

    StrictTripleStrategy -> ParenthesisSplitStrategy -> ScriptRunSplitStrategy

and finally keeps the raw section body. Reshaping never raises for
malformed generator output.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Optional, Sequence

from analysis.sanitize import is_pure_telugu, is_romanization, sanitize_transliteration
from analysis.sections import Section, SectionedText, render_sections, split_sections
from analysis.transliterator import RuleBasedTransliterator, Transliterator
from data.schemas import AnalysisDocument, Language, SourceScript, WordGloss
from observability.logging import get_logger

logger = get_logger("grantha.analysis")


# =============================================================================
# SCRIPT PATTERNS
# =============================================================================

_SCRIPT_RANGES: Dict[SourceScript, str] = {
    SourceScript.GREEK: "\u0370-\u03ff\u1f00-\u1fff",
    SourceScript.HEBREW: "\u0590-\u05ff\ufb1d-\ufb4f",
    SourceScript.TELUGU: "\u0c00-\u0c7f",
}
_WORD_TAIL = "\u0300-\u036f'\u2019\u02bc"
_HEBREW_CHAR = re.compile("[\u0590-\u05ff\ufb1d-\ufb4f]")
_TRAILING_PUNCTUATION = re.compile(r"[.,;]+$")
_SPACES = re.compile(r"\s+")


@dataclass(frozen=True)
class ScriptPatterns:
    """Compiled regexes keyed to one source script's Unicode ranges."""

    script: SourceScript
    run: re.Pattern
    phrase_open: re.Pattern
    annotated_word: re.Pattern
    triple: re.Pattern


@lru_cache(maxsize=None)
def script_patterns(script: SourceScript) -> ScriptPatterns:
    chars = _SCRIPT_RANGES[script]
    word = f"[{chars}][{chars}{_WORD_TAIL}]*"
    phrase = f"{word}(?:[ \\t]+{word})*"
    triple = (
        f"(?P<word>{phrase})[ \\t]*\\((?P<translit>[^()\\n]+)\\)[ \\t]*[-\u2013\u2014:][ \\t]*"
        f"(?P<gloss>[^\\n]*?)(?=[ \\t]*{phrase}[ \\t]*\\(|[ \\t]*\\n|[ \\t]*$)"
    )
    return ScriptPatterns(
        script=script,
        run=re.compile(f"[{chars}]+"),
        phrase_open=re.compile(f"{phrase}[ \\t]*\\("),
        annotated_word=re.compile(f"(?P<word>{word})[ \\t]*\\((?P<inner>[^()\\n]+)\\)"),
        triple=re.compile(triple),
    )


def clean_gloss(gloss: str) -> str:
    return _TRAILING_PUNCTUATION.sub("", _SPACES.sub(" ", gloss).strip()).strip()


# =============================================================================
# WORD-BY-WORD STRATEGIES
# =============================================================================

@dataclass
class Segmentation:
    """Lines produced by one strategy."""

    strategy: str
    lines: List[str]
    glosses: List[WordGloss] = field(default_factory=list)


class SegmentationStrategy:
    """One tier of word-by-word re-segmentation."""

    name = "base"

    def segment(self, body: str, patterns: ScriptPatterns, render_translit) -> Optional[Segmentation]:
        raise NotImplementedError


class StrictTripleStrategy(SegmentationStrategy):
    """Extract every ``word (translit) - gloss`` triple, wherever it sits."""

    name = "strict_triple"

    def segment(self, body, patterns, render_translit):
        glosses = []
        for match in patterns.triple.finditer(body):
            gloss = clean_gloss(match.group("gloss"))
            if not gloss:
                continue
            glosses.append(WordGloss(
                source_word=_SPACES.sub(" ", match.group("word").strip()),
                transliteration=render_translit(match.group("translit")),
                gloss=gloss,
            ))
        if not glosses:
            return None
        return Segmentation(self.name, [g.render() for g in glosses], glosses)


class ParenthesisSplitStrategy(SegmentationStrategy):
    """Break before every source phrase that opens a parenthesis."""

    name = "parenthesis_split"

    def segment(self, body, patterns, render_translit):
        flat = _SPACES.sub(" ", body).strip()
        starts = [m.start() for m in patterns.phrase_open.finditer(flat)]
        if not starts:
            return None
        bounds = ([0] if starts[0] > 0 else []) + starts + [len(flat)]
        lines = []
        for begin, end in zip(bounds, bounds[1:]):
            chunk = _TRAILING_PUNCTUATION.sub("", flat[begin:end].strip()).strip()
            if chunk:
                lines.append(_sanitize_annotations(chunk, patterns, render_translit))
        return Segmentation(self.name, lines)


class ScriptRunSplitStrategy(SegmentationStrategy):
    """Line break before every run of source-script characters."""

    name = "script_run_split"

    def segment(self, body, patterns, render_translit):
        if not patterns.run.search(body):
            return None
        split = patterns.run.sub(lambda m: "\n" + m.group(0), body)
        lines = [
            _sanitize_annotations(line.strip(), patterns, render_translit)
            for line in split.split("\n")
            if line.strip()
        ]
        return Segmentation(self.name, lines)


DEFAULT_STRATEGIES: Sequence[SegmentationStrategy] = (
    StrictTripleStrategy(),
    ParenthesisSplitStrategy(),
    ScriptRunSplitStrategy(),
)


def _sanitize_annotations(text: str, patterns: ScriptPatterns, render_translit) -> str:
    return patterns.annotated_word.sub(
        lambda m: f"{m.group('word')} ({render_translit(m.group('inner'))})", text
    )


# =============================================================================
# RESHAPER
# =============================================================================

class AnalysisReshaper:
    """
    Parses and re-renders interlinear analyses.

    ``is_secondary_script_source=True`` produces the Telugu-reader form:
    Telugu section headers and transliterations written in Telugu script by
    the configured ``Transliterator``.
    """

    def __init__(
        self,
        transliterator: Optional[Transliterator] = None,
        strategies: Sequence[SegmentationStrategy] = DEFAULT_STRATEGIES,
    ):
        self.transliterator = transliterator or RuleBasedTransliterator()
        self.strategies = tuple(strategies)

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse(
        self,
        raw: str,
        is_secondary_script_source: bool = False,
        source_script: Optional[SourceScript] = None,
    ) -> AnalysisDocument:
        text = (raw or "").replace("\r\n", "\n").strip()
        sectioned = split_sections(text)
        if not sectioned.has_sections:
            return AnalysisDocument(preamble=text)

        script = source_script or self.detect_script(sectioned)
        render_translit = self._translit_renderer(is_secondary_script_source)
        document = AnalysisDocument(
            source_script=script,
            source_text=sectioned.body(Section.SOURCE_TEXT),
            transliteration=self._reshape_transliteration(
                sectioned.body(Section.TRANSLITERATION), is_secondary_script_source
            ),
            translation=sectioned.body(Section.TRANSLATION),
            preamble="\n".join(sectioned.preamble).strip(),
        )

        if Section.WORD_ANALYSIS in sectioned.sections:
            segmentation = self.segment_words(
                sectioned.body(Section.WORD_ANALYSIS), script, render_translit
            )
            document.word_lines = segmentation.lines
            document.word_glosses = segmentation.glosses
            document.word_strategy = segmentation.strategy

        return document

    @staticmethod
    def detect_script(sectioned: SectionedText) -> SourceScript:
        """Header-declared script, else Hebrew if any Hebrew letters appear, else Greek."""
        if sectioned.declared_script:
            return sectioned.declared_script
        sample = sectioned.body(Section.SOURCE_TEXT) + sectioned.body(Section.WORD_ANALYSIS)
        if _HEBREW_CHAR.search(sample):
            return SourceScript.HEBREW
        return SourceScript.GREEK

    def segment_words(self, body: str, script: SourceScript, render_translit=None) -> Segmentation:
        """Run the strategies in order; the raw body is the last resort."""
        render_translit = render_translit or self._translit_renderer(False)
        patterns = script_patterns(script)
        for strategy in self.strategies:
            segmentation = strategy.segment(body, patterns, render_translit)
            if segmentation and segmentation.lines:
                if strategy is not self.strategies[0]:
                    logger.info("Word analysis fell back", strategy=strategy.name, script=script.value)
                return segmentation

        if body.strip():
            logger.warning(
                "Word analysis could not be segmented; keeping raw section",
                script=script.value,
                length=len(body),
            )
        lines = [line.strip() for line in body.split("\n") if line.strip()]
        return Segmentation("raw", lines)

    # -------------------------------------------------------------------------
    # Transliteration handling
    # -------------------------------------------------------------------------

    def _translit_renderer(self, to_telugu: bool):
        def render(inner: str) -> str:
            if not is_romanization(inner):
                return inner.strip()
            ascii_form = sanitize_transliteration(inner)
            if to_telugu:
                # marks such as a lone aleph have no Telugu rendering
                return self._to_telugu(ascii_form) or ascii_form
            return ascii_form

        return render

    def _reshape_transliteration(self, body: str, to_telugu: bool) -> str:
        if not body or is_pure_telugu(body):
            return body
        ascii_form = sanitize_transliteration(body)
        return self._to_telugu(ascii_form) if to_telugu else ascii_form

    def _to_telugu(self, ascii_text: str) -> str:
        converted = getattr(self.transliterator, "transliterate_text", None)
        if converted is not None:
            return converted(ascii_text)
        return "\n".join(
            " ".join(self.transliterator.transliterate(word) for word in line.split())
            for line in ascii_text.split("\n")
        )

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, document: AnalysisDocument, sections: Sequence[Section], language: Language) -> str:
        bodies = {
            Section.SOURCE_TEXT: document.source_text,
            Section.TRANSLITERATION: document.transliteration,
            Section.TRANSLATION: document.translation,
            Section.WORD_ANALYSIS: "\n".join(document.word_lines),
        }
        return render_sections(
            {section: bodies[section] for section in sections},
            document.source_script,
            language,
            preamble=document.preamble,
        )

    def reshape(
        self,
        raw: str,
        is_secondary_script_source: bool = False,
        source_script: Optional[SourceScript] = None,
    ) -> str:
        text = (raw or "").replace("\r\n", "\n").strip()
        sectioned = split_sections(text)
        if not sectioned.has_sections:
            if text:
                logger.info("No analysis sections found; returning text unchanged")
            return text

        document = self.parse(text, is_secondary_script_source, source_script)
        language = Language.TELUGU if is_secondary_script_source else Language.ENGLISH
        return self.render(document, sorted(sectioned.sections), language)


_default_reshaper = AnalysisReshaper()


def reshape(
    raw: str,
    is_secondary_script_source: bool = False,
    source_script: Optional[SourceScript] = None,
) -> str:
    """Reshape generated interlinear text with the default transliterator."""
    return _default_reshaper.reshape(raw, is_secondary_script_source, source_script)


def parse_analysis(raw: str, source_script: Optional[SourceScript] = None) -> AnalysisDocument:
    return _default_reshaper.parse(raw, source_script=source_script)
