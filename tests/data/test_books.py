"""
Tests for data/books.py - the canonical table and its indexes.
"""
import pytest

from core.errors import SynonymTableError
from data.books import (
    ABBREVIATION_INDEX,
    CANON,
    OFFICIAL_NAME_INDEX,
    SYNONYM_INDEX,
    _build_index,
    book_names,
    canonical_key,
    find_by_prefix,
    find_exact,
    get_book,
    is_new_testament,
    lookup_abbreviation,
    lookup_secondary,
)
from data.schemas import Genre, Testament
from data.telugu import TELUGU_BOOK_NAMES, TELUGU_SYNONYMS


class TestCanonTable:

    def test_sixty_six_books(self):
        assert len(CANON) == 66
        assert len(set(book_names())) == 66

    def test_positions_follow_canon_order(self):
        assert [book.position for book in CANON] == list(range(66))
        assert CANON[0].name == "Genesis"
        assert CANON[38].name == "Malachi"
        assert CANON[39].name == "Matthew"
        assert CANON[65].name == "Revelation"

    def test_testaments(self):
        old = [b for b in CANON if b.testament == Testament.OLD_TESTAMENT]
        new = [b for b in CANON if b.testament == Testament.NEW_TESTAMENT]
        assert len(old) == 39
        assert len(new) == 27

    @pytest.mark.parametrize("name,chapters", [
        ("Genesis", 50),
        ("Psalms", 150),
        ("Isaiah", 66),
        ("Obadiah", 1),
        ("John", 21),
        ("Jude", 1),
        ("Revelation", 22),
    ])
    def test_chapter_counts(self, name, chapters):
        assert get_book(name).chapter_count == chapters

    def test_total_chapters(self):
        assert sum(b.chapter_count for b in CANON) == 1189

    def test_every_book_has_a_telugu_title(self):
        for book in CANON:
            assert book.secondary_name == TELUGU_BOOK_NAMES[book.name]

    def test_synonyms_are_attached_to_their_book(self):
        john = get_book("John")
        assert "యోహాను" in john.synonyms
        assert "1 యోహాను" not in john.synonyms

    def test_genres(self):
        assert get_book("Psalms").genre == Genre.OT_POETRY
        assert get_book("Mark").genre == Genre.NT_GOSPEL
        assert get_book("Revelation").genre == Genre.NT_APOCALYPTIC


class TestLookups:

    def test_get_book_is_exact(self):
        assert get_book("john") is None
        assert get_book("John").name == "John"

    def test_find_exact_ignores_case(self):
        assert find_exact("SONG OF SOLOMON").name == "Song of Solomon"

    def test_prefix_takes_first_in_canon_order(self):
        assert find_by_prefix("jo").name == "Joshua"
        assert find_by_prefix("phil").name == "Philippians"
        assert find_by_prefix("") is None
        assert find_by_prefix("xyz") is None

    @pytest.mark.parametrize("text,expected", [
        ("Gen", "Genesis"),
        ("gen.", "Genesis"),
        ("1 Cor", "1 Corinthians"),
        ("1cor", "1 Corinthians"),
        ("Song of Songs", "Song of Solomon"),
        ("xyz", None),
        ("", None),
    ])
    def test_lookup_abbreviation(self, text, expected):
        assert lookup_abbreviation(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("యోహాను", "John"),
        ("యోహాను సువార్త", "John"),
        ("కీర్తనల గ్రంథము", "Psalms"),
        ("యోహాను\u200c సువార్త", "John"),
        ("prov.", "Proverbs"),
        ("అఆఇ", None),
    ])
    def test_lookup_secondary(self, text, expected):
        assert lookup_secondary(text) == expected

    def test_is_new_testament(self):
        assert is_new_testament("Matthew")
        assert not is_new_testament("Malachi")
        assert not is_new_testament("Hezekiah")

    def test_canonical_key(self):
        assert canonical_key("Gen.") == "gen"
        assert canonical_key(" Ps; ") == "ps"
        assert canonical_key("యోహాను\u200c\u200d") == "యోహాను"


class TestIndexes:

    def test_indexes_are_many_to_one(self):
        for index in (ABBREVIATION_INDEX, SYNONYM_INDEX, OFFICIAL_NAME_INDEX):
            assert set(index.values()) <= set(book_names())

    def test_every_synonym_is_indexed(self):
        for synonym, book in TELUGU_SYNONYMS.items():
            assert SYNONYM_INDEX[synonym] == book

    def test_conflicting_key_is_rejected(self):
        with pytest.raises(SynonymTableError) as exc_info:
            _build_index([("x", "John"), ("x", "Jude")], "test")
        assert exc_info.value.books == ["John", "Jude"]
        assert exc_info.value.key == "x"

    def test_repeated_identical_pair_is_allowed(self):
        assert _build_index([("x", "John"), ("x", "John")], "test") == {"x": "John"}
