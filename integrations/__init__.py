"""
Grantha - External Integrations

Adapters for the two external collaborators:
- bible_api: verse text from bible-api.com plus local Telugu text
- generation: paced access to a text generation model
"""
from integrations.bible_api import BibleApiClient, TeluguBibleSource
from integrations.generation import (
    GenerationClient,
    LangChainBackend,
    TextGenerator,
    classify_failure,
)

__all__ = [
    "BibleApiClient",
    "TeluguBibleSource",
    "GenerationClient",
    "LangChainBackend",
    "TextGenerator",
    "classify_failure",
]
