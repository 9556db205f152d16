"""
Grantha - Pipeline Module

User-facing flows built on the reference engine and the adapters:
- search.py: SearchRouter for the free-text search box
- study.py: VerseStudyService for AI study text
"""

from pipeline.search import OutcomeKind, SearchOutcome, SearchRouter, clean_keyword_output
from pipeline.study import VerseStudyService

__all__ = [
    "OutcomeKind",
    "SearchOutcome",
    "SearchRouter",
    "clean_keyword_output",
    "VerseStudyService",
]
