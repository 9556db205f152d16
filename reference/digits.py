"""
Grantha - Digit Normalizer

Telugu digits occupy the contiguous block U+0C66..U+0C6F (౦..౯);
each one maps to its ASCII digit by offset from U+0C66.
"""
import re

TELUGU_ZERO = 0x0C66
_TELUGU_DIGIT = re.compile("[\u0c66-\u0c6f]")


def normalize_digits(text: str) -> str:
    """Replace every Telugu digit with its ASCII equivalent.

    Idempotent, and the identity on text without Telugu digits.
    """
    if not text:
        return text
    return _TELUGU_DIGIT.sub(lambda m: chr(ord("0") + ord(m.group()) - TELUGU_ZERO), text)


def has_secondary_digits(text: str) -> bool:
    return bool(_TELUGU_DIGIT.search(text))
