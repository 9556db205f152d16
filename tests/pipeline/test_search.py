"""
Tests for pipeline/search.py - search box routing.
"""
import pytest

from core.errors import RateLimitedError, VerseNetworkError
from data.schemas import ParsedReference
from pipeline.search import OutcomeKind, SearchRouter, clean_keyword_output


class TestNavigation:

    @pytest.mark.asyncio
    async def test_empty_query(self, recording_fetcher):
        outcome = await SearchRouter(recording_fetcher()).search("   ")
        assert outcome.kind == OutcomeKind.EMPTY
        assert outcome.message == "Enter a reference or keyword."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query,target", [
        ("John 3:16", ParsedReference("John", 3, 16)),
        ("యోహాను ౩:౧౬", ParsedReference("John", 3, 16)),
        ("1 Tim 2:1-4", ParsedReference("1 Timothy", 2, 1, 4)),
    ])
    async def test_single_reference_navigates(self, recording_fetcher, query, target):
        fetcher = recording_fetcher()
        outcome = await SearchRouter(fetcher).search(query)
        assert outcome.kind == OutcomeKind.NAVIGATE
        assert outcome.target == target
        assert fetcher.requests == []


class TestReferenceLists:

    @pytest.mark.asyncio
    async def test_several_references_are_fetched(self, recording_fetcher):
        fetcher = recording_fetcher()
        outcome = await SearchRouter(fetcher).search("John 3:16; Romans 8:1")
        assert outcome.kind == OutcomeKind.RESULTS
        assert outcome.target is None
        assert [v.label for v in outcome.verses] == ["John 3:16", "Romans 8:1"]
        assert fetcher.requests == [[ParsedReference("John", 3, 16), ParsedReference("Romans", 8, 1)]]

    @pytest.mark.asyncio
    async def test_nothing_fetched(self, recording_fetcher):
        outcome = await SearchRouter(recording_fetcher(empty=True)).search("John 3:16, Romans 8:1")
        assert outcome.kind == OutcomeKind.EMPTY
        assert outcome.message == 'No verses found for "John 3:16, Romans 8:1".'

    @pytest.mark.asyncio
    async def test_fetch_failure_is_error_outcome(self, recording_fetcher):
        fetcher = recording_fetcher(error=VerseNetworkError("Verse service unavailable"))
        outcome = await SearchRouter(fetcher).search("John 3:16; Romans 8:1")
        assert outcome.kind == OutcomeKind.ERROR
        assert outcome.message == "Verse service unavailable"
        assert len(outcome.references) == 2


class TestKeywordSearch:

    @pytest.mark.asyncio
    async def test_without_generator(self, recording_fetcher):
        outcome = await SearchRouter(recording_fetcher()).search("love")
        assert outcome.kind == OutcomeKind.EMPTY
        assert outcome.message == 'No verses found for "love".'

    @pytest.mark.asyncio
    async def test_generated_references_are_fetched(self, recording_fetcher, scripted_generator):
        generator = scripted_generator(["[John 3:16]\n[1 John 4:8]"])
        outcome = await SearchRouter(recording_fetcher(), generator).search("love")
        assert outcome.kind == OutcomeKind.RESULTS
        assert [v.label for v in outcome.verses] == ["John 3:16", "1 John 4:8"]
        assert generator.prompts == [
            'You are a Bible search engine. Keyword: "love". Return ONLY valid Bible references.'
        ]

    @pytest.mark.asyncio
    async def test_single_generated_reference_is_a_result_list(self, recording_fetcher, scripted_generator):
        outcome = await SearchRouter(recording_fetcher(), scripted_generator(["1 John 4:8"])).search("love")
        assert outcome.kind == OutcomeKind.RESULTS
        assert len(outcome.verses) == 1

    @pytest.mark.asyncio
    async def test_empty_generation(self, recording_fetcher, scripted_generator):
        outcome = await SearchRouter(recording_fetcher(), scripted_generator(["  "])).search("love")
        assert outcome.kind == OutcomeKind.EMPTY
        assert outcome.message == 'No verses found for "love".'

    @pytest.mark.asyncio
    async def test_unparseable_generation(self, recording_fetcher, scripted_generator):
        generator = scripted_generator(["Love is patient, love is kind."])
        outcome = await SearchRouter(recording_fetcher(), generator).search("love")
        assert outcome.kind == OutcomeKind.EMPTY
        assert outcome.message == 'Could not parse results for "love".'

    @pytest.mark.asyncio
    async def test_generation_failure_is_error_outcome(self, recording_fetcher, scripted_generator):
        generator = scripted_generator([RateLimitedError("AI cooling down. Try again in 3s.")])
        outcome = await SearchRouter(recording_fetcher(), generator).search("love")
        assert outcome.kind == OutcomeKind.ERROR
        assert outcome.message == "AI cooling down. Try again in 3s."


class TestCleanKeywordOutput:

    @pytest.mark.parametrize("raw,expected", [
        ("[John 3:16, Romans 5:8]", "John 3:16, Romans 5:8"),
        ("John 3:16\n\n Romans 5:8 \n", "John 3:16; Romans 5:8"),
        ("  ", ""),
        (None, ""),
    ])
    def test_clean(self, raw, expected):
        assert clean_keyword_output(raw) == expected
