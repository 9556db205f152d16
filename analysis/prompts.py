"""
Grantha - Generation Prompts

Prompt builders for verse study text. Every builder returns a complete
prompt string; the generation adapter adds nothing but the system
instruction.
"""
from typing import Dict

from data.books import get_book
from data.schemas import Genre, Language, VerseReference

SYSTEM_INSTRUCTION = (
    "Return RAW plain text. Do NOT add markdown/HTML/LaTeX. Output raw Unicode exactly as-is."
)
CHAT_SYSTEM_INSTRUCTION = "You are an expert Bible scholar. Be precise, deep, and context-rich."

LANGUAGE_INSTRUCTIONS: Dict[Language, str] = {
    Language.ENGLISH: "Answer in English.",
    Language.TELUGU: "సమాధానం తెలుగులో ఇవ్వండి.",
}

GENRE_GUIDANCE: Dict[Genre, str] = {
    Genre.OT_POETRY: "GENRE GUIDANCE: OT poetry.",
    Genre.OT_LAW: "GENRE GUIDANCE: OT law.",
    Genre.OT_HISTORY: "GENRE GUIDANCE: OT history.",
    Genre.OT_PROPHET: "GENRE GUIDANCE: OT prophets.",
    Genre.NT_GOSPEL: "GENRE GUIDANCE: NT gospels.",
    Genre.NT_EPISTLE: "GENRE GUIDANCE: NT epistles.",
    Genre.NT_APOCALYPTIC: "GENRE GUIDANCE: NT apocalyptic.",
}


def book_genre(book: str) -> Genre:
    """Genre of a canonical book; unknown names read as epistles."""
    canonical = get_book(book)
    return canonical.genre if canonical else Genre.NT_EPISTLE


def is_new_testament(book: str) -> bool:
    canonical = get_book(book)
    return canonical is not None and canonical.is_new_testament


# =============================================================================
# CROSS-REFERENCES
# =============================================================================

_CROSS_REFERENCE_PROMPT = """
Provide a scholarly cross-reference analysis for {ref}.

OUTPUT FORMAT (DO NOT CHANGE):

**Summary**
A short 2-3 sentence academic overview explaining the conceptual, theological, or literary networks connected to this verse.

---

**1. Literary Parallels**
A 2-4 sentence scholarly paragraph explaining internal literary parallels.
Then list 3-7 cross-references (ONLY references, no commentary).

---

**2. Thematic Connections**
A short academic paragraph on shared theological or symbolic themes.
Then list 3-7 cross-references.

---

**3. Canonical or Intertextual Links**
A brief paragraph explaining how other biblical authors echo or develop this idea.
Then list 2-6 cross-references.

---

**4. Background or Conceptual Parallels**
A short paragraph describing parallels in law, prophecy, wisdom, or apocalyptic literature.
Then list 2-6 cross-references.

---

STRICT RULES:
- Do NOT quote verses.
- Do NOT add commentary to bullet points.
- Do NOT merge headings.
- Every section must include a paragraph + bullet list.
- Clean, concise, scholarly prose only.
"""

_OUTLINE_TRANSLATION_PROMPT = """
Translate the following scholarly outline into clear, natural, academic Telugu.

RULES:
- PRESERVE ALL FORMATTING EXACTLY.
- DO NOT translate Biblical book names or references.
- Do NOT translate cross-reference items.
- Output must be clean, readable, and well-spaced.

TEXT:
{text}
"""


def cross_reference_prompt(verse_ref: VerseReference) -> str:
    return _CROSS_REFERENCE_PROMPT.format(ref=verse_ref.label)


def outline_translation_prompt(english_text: str) -> str:
    return _OUTLINE_TRANSLATION_PROMPT.format(text=english_text)


# =============================================================================
# HISTORICAL CONTEXT
# =============================================================================

_HISTORICAL_PROMPT = """
Provide a full scholarly historical background for {ref}.

OUTPUT FORMAT (DO NOT CHANGE):

**Summary**
A short 2-3 sentence academic summary explaining the historical significance of this verse.

---

**1. Historical Setting**
A short paragraph (2-4 sentences).

---

**2. Authorship and Composition**
Short paragraph.

---

**3. Date and Provenance**

---

**4. Literary Context and Purpose**

---

**5. Cultural and Religious Background**

---

**6. Audience Situation**

---

**7. Scholarly Notes and Debates**

---

**8. Additional Genre-Specific Notes**

---

STRICT RULES:
- No verse quoting.
- No devotional tone.
- One short paragraph per section.
"""


def historical_context_prompt(verse_ref: VerseReference) -> str:
    """Historical background prompt with guidance for the book's genre."""
    prompt = _HISTORICAL_PROMPT.format(ref=verse_ref.label)
    return prompt + GENRE_GUIDANCE[book_genre(verse_ref.book)]


# =============================================================================
# INTERLINEAR
# =============================================================================

_HEBREW_INTERLINEAR_PROMPT = """
Return an interlinear analysis for {ref}.

STRICT RULES:
- Output RAW Hebrew exactly (do not modify Hebrew).
- No markdown, no HTML.
- Preserve line breaks.
- Section 2 (English Transliteration) MUST use only plain ASCII letters, hyphen and apostrophe if needed.
  * NO diacritics, NO macrons, NO IPA symbols.
- Word-by-word transliteration should follow the same ASCII rule.

FORMAT (must match exactly):

**1. Hebrew Text:**
<raw>

---

**2. English Transliteration:**
<plain ASCII transliteration, only A-Z a-z digits, hyphen, apostrophe>

---

**3. Smooth English Translation:**
<translation>

---

**4. Word-by-Word Analysis:**
<Hebrew> (<ASCII transliteration>) - <English meaning>
<Hebrew> (<ASCII transliteration>) - <English meaning>
<Hebrew> (<ASCII transliteration>) - <English meaning>

Do NOT combine multiple words on the same line.
Do NOT add bullet points or numbering.

Answer in English.
"""

_GREEK_INTERLINEAR_PROMPT = """
Generate a STRICTLY STRUCTURED interlinear analysis for {ref}.

NON-NEGOTIABLE RULES:
- NO markdown except the bold section headers shown below.
- NO commas, NO parentheses except for transliteration, NO brackets.
- EVERY Greek word MUST be followed by EXACT pattern:
  GreekWord (ascii-translit) - EnglishMeaning
- One and only one such triple per line.
- DO NOT join multiple triples on one line.
- DO NOT remove accents from Greek.
- Transliteration MUST be pure ASCII (A-Z a-z hyphens apostrophes).

OUTPUT FORMAT (copy exactly):

**1. Greek Text:**
<raw-greek>

---

**2. English Transliteration:**
<ascii transliteration of whole verse>

---

**3. Smooth English Translation:**
<plain English translation>

---

**4. Word-by-Word Analysis:**
Greek (translit) - meaning
Greek (translit) - meaning
Greek (translit) - meaning
Greek (translit) - meaning

---

Do NOT add any extra sentences or commentary.
Return RAW TEXT ONLY.
"""


def interlinear_prompt(verse_ref: VerseReference) -> str:
    """Greek interlinear for New Testament books, Hebrew otherwise."""
    template = (
        _GREEK_INTERLINEAR_PROMPT if is_new_testament(verse_ref.book) else _HEBREW_INTERLINEAR_PROMPT
    )
    return template.format(ref=verse_ref.label).strip()


_INTERLINEAR_TRANSLATION_PROMPT = (
    "Translate to natural Telugu.\n"
    "Preserve markdown. Do NOT translate Greek/Hebrew or transliteration.\n"
    "----BEGIN----\n{text}\n----END----"
)


def interlinear_translation_prompt(text: str) -> str:
    return _INTERLINEAR_TRANSLATION_PROMPT.format(text=text)


# =============================================================================
# CHAT AND SEARCH
# =============================================================================

def chat_prompt(message: str, language: Language = Language.ENGLISH) -> str:
    return f"{message}\n\n{LANGUAGE_INSTRUCTIONS[language]}"


def keyword_search_prompt(keyword: str) -> str:
    return f'You are a Bible search engine. Keyword: "{keyword}". Return ONLY valid Bible references.'
