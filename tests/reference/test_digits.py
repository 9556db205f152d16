"""
Tests for reference/digits.py and reference/tokenizer.py.
"""
import pytest

from reference.digits import has_secondary_digits, normalize_digits
from reference.tokenizer import (
    normalize_dashes,
    normalize_whitespace,
    split_numeral,
    strip_chapter_verse,
    tokenize,
)


class TestDigits:

    def test_all_telugu_digits(self):
        assert normalize_digits("౦౧౨౩౪౫౬౭౮౯") == "0123456789"

    def test_mixed_text(self):
        assert normalize_digits("యోహాను ౩:౧౬") == "యోహాను 3:16"

    def test_idempotent(self):
        once = normalize_digits("౧౨౩")
        assert once == "123"
        assert normalize_digits(once) == once

    def test_identity_without_telugu_digits(self):
        assert normalize_digits("John 3:16") == "John 3:16"
        assert normalize_digits("") == ""

    def test_has_secondary_digits(self):
        assert has_secondary_digits("౧ John")
        assert not has_secondary_digits("1 John")


class TestTokenizer:

    def test_whitespace(self):
        assert normalize_whitespace("  1\u200b  John\t\n") == "1 John"
        assert normalize_whitespace("") == ""

    def test_zero_width_joiners_are_kept(self):
        assert normalize_whitespace("a\u200cb") == "a\u200cb"

    def test_dashes(self):
        assert normalize_dashes("1–4 1—4 1−4") == "1-4 1-4 1-4"

    def test_strip_chapter_verse(self):
        assert strip_chapter_verse("John 3:16-18") == ("John", 3, 16, 18)
        assert strip_chapter_verse("John 3 : 16") == ("John", 3, 16, None)
        assert strip_chapter_verse("John") == ("John", None, None, None)

    @pytest.mark.parametrize("name,expected", [
        ("1 John", ("1", "John")),
        ("1John", ("1", "John")),
        ("John 1", ("1", "John")),
        ("John", (None, "John")),
        ("4 John", (None, "4 John")),
    ])
    def test_split_numeral(self, name, expected):
        assert split_numeral(name) == expected

    def test_tokenize(self):
        tokens = tokenize(" ౨  Tim ౩:౧౬–౧౭ ")
        assert tokens.text == "2 Tim"
        assert tokens.numeral == "2"
        assert tokens.name == "Tim"
        assert tokens.numbered_name == "2 Tim"
        assert (tokens.chapter, tokens.start_verse, tokens.end_verse) == (3, 16, 17)

    def test_tokenize_never_raises_on_empty(self):
        tokens = tokenize("")
        assert tokens.text == ""
        assert tokens.name == ""
        assert tokens.numeral is None
