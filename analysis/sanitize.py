"""
Grantha - Transliteration Sanitizer

Reduces scholarly romanizations (macrons, dots below, ayin/aleph marks,
accents) to the plain ASCII form the reader displays:
``phobēthōmen`` -> ``phobeethoomen``, ``bərē'šîṯ`` -> ``baree-shit``.

Output only ever contains ``A-Z a-z 0-9 ' -``, spaces, tabs and newlines.
"""
import re
import unicodedata
from typing import List, Tuple

# Applied in order, before combining marks are stripped
_LETTER_MAP: List[Tuple[str, str]] = [
    ("ā", "aa"), ("ē", "ee"), ("ī", "ii"), ("ō", "oo"), ("ū", "uu"),
    ("Ā", "Aa"), ("Ē", "Ee"), ("Ī", "Ii"), ("Ō", "Oo"), ("Ū", "Uu"),
    ("ə", "a"), ("Ə", "A"),
    ("ḥ", "h"), ("Ḥ", "H"),
    ("ṭ", "t"), ("Ṭ", "T"),
    ("ṣ", "s"), ("Ṣ", "S"),
    ("š", "sh"), ("ś", "sh"), ("Š", "Sh"), ("Ś", "Sh"),
    ("ḏ", "d"), ("Ḏ", "D"),
    ("ṯ", "t"), ("Ṯ", "T"),
    ("ḇ", "b"), ("Ḇ", "B"),
    ("ẓ", "z"), ("Ẓ", "Z"),
    ("ʿ", "'"), ("ʾ", "'"), ("ʼ", "'"), ("’", "'"), ("‘", "'"), ("`", "'"),
]

_ROMANIZATION_MARKS = frozenset(source for source, _ in _LETTER_MAP)

_DISALLOWED = re.compile(r"[^A-Za-z0-9'\- \t\n]")
_APOSTROPHES = re.compile(r"'+")
_INNER_APOSTROPHE = re.compile(r"(?<=[A-Za-z0-9])'(?=[A-Za-z0-9])")
_HYPHENS = re.compile(r"-+")
_SPACES = re.compile(r"[ \t]+")
_TELUGU_CHAR = re.compile("[\u0c00-\u0c7f]")


def strip_combining_marks(text: str) -> str:
    """Decompose and drop every combining mark (Unicode category M*)."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))


def sanitize_transliteration(text: str) -> str:
    """Strict-ASCII form of a romanized transliteration.

    Digraph conventions are mapped first (``ā`` -> ``aa``, ``š`` -> ``sh``),
    then combining marks are stripped, everything outside the allowed
    charset is dropped, apostrophes between letters become hyphens and
    repeated apostrophes/hyphens collapse.
    """
    if not text:
        return ""
    s = text
    for source, target in _LETTER_MAP:
        s = s.replace(source, target)
    s = strip_combining_marks(s)
    s = _DISALLOWED.sub("", s)
    s = _APOSTROPHES.sub("'", s)
    s = _INNER_APOSTROPHE.sub("-", s)
    s = _HYPHENS.sub("-", s)
    lines = [_SPACES.sub(" ", line).strip() for line in s.split("\n")]
    return "\n".join(lines).strip()


def is_romanization(text: str) -> bool:
    """True when ``text`` holds at least one letter and every letter is Latin
    once diacritics are folded (``Ō``, ``ē`` and ``ʾ`` count as Latin).

    Greek, Hebrew or Telugu letters anywhere make it false.
    """
    found = False
    for ch in strip_combining_marks(text):
        if ch in _ROMANIZATION_MARKS or (ch.isascii() and ch.isalpha()):
            found = True
        elif ch.isalpha():
            return False
    return found


def is_pure_telugu(text: str) -> bool:
    """True when every letter in ``text`` is Telugu (and there is at least one)."""
    if not _TELUGU_CHAR.search(text):
        return False
    return all(_TELUGU_CHAR.match(ch) for ch in text if ch.isalpha())
