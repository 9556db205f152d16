"""
Grantha - Analysis Module

Post-processing of generated study text.

Architecture:
- sections.py: tokenize-then-fold section parser and canonical headers
- reshaper.py: interlinear reshaping with tiered word segmentation
- sanitize.py: strict-ASCII transliteration cleanup
- transliterator.py: pluggable ASCII to Telugu transliteration
- prompts.py: prompt builders for verse study text
"""

from analysis.reshaper import (
    AnalysisReshaper,
    ParenthesisSplitStrategy,
    ScriptRunSplitStrategy,
    Segmentation,
    SegmentationStrategy,
    StrictTripleStrategy,
    parse_analysis,
    reshape,
)
from analysis.sanitize import is_pure_telugu, is_romanization, sanitize_transliteration, strip_combining_marks
from analysis.sections import Section, SectionedText, canonical_header, split_sections
from analysis.transliterator import (
    DEFAULT_RULES,
    RuleBasedTransliterator,
    TransliterationRules,
    Transliterator,
    transliterate,
)

__all__ = [
    # Reshaping
    "AnalysisReshaper",
    "ParenthesisSplitStrategy",
    "ScriptRunSplitStrategy",
    "Segmentation",
    "SegmentationStrategy",
    "StrictTripleStrategy",
    "parse_analysis",
    "reshape",
    # Sections
    "Section",
    "SectionedText",
    "canonical_header",
    "split_sections",
    # Sanitizing
    "is_pure_telugu",
    "is_romanization",
    "sanitize_transliteration",
    "strip_combining_marks",
    # Transliteration
    "DEFAULT_RULES",
    "RuleBasedTransliterator",
    "TransliterationRules",
    "Transliterator",
    "transliterate",
]
