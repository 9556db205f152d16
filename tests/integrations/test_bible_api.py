"""
Tests for integrations/bible_api.py.

The verse service is replaced by an ``httpx.MockTransport``; no network
access is needed.
"""
import json
from urllib.parse import unquote

import httpx
import pytest

from config import BibleApiConfig
from core.errors import VerseNetworkError, VerseNotFoundError
from data.schemas import ParsedReference
from integrations.bible_api import BibleApiClient, TeluguBibleSource


SERVICE = {
    ("John 3", "kjv"): [(16, "For God so loved\nthe world"), (17, "For God sent not")],
    ("John 3", "web"): [(16, "For God so loved the world (WEB)")],
    ("John 3:16", "kjv"): [(16, "For God so loved the world")],
    ("John 3:16", "web"): [(16, "For God so loved the world (WEB)")],
    ("Romans 8:1", "kjv"): [(1, "There is therefore now no condemnation")],
    ("Romans 8:1", "web"): [(1, "There is therefore now no condemnation (WEB)")],
    ("Jude 1", "kjv"): [],
    ("Jude 1", "web"): [],
}

TELUGU_DUMP = {
    "Book": [{"Chapter": []} for _ in range(42)]
    + [{"Chapter": [{"Verse": []}, {"Verse": []}, {"Verse": [{"Verse": " దేవుడు లోకమును ప్రేమించెను "}]}]}]
}


def service_handler(request: httpx.Request) -> httpx.Response:
    reference = unquote(request.url.path).lstrip("/")
    translation = request.url.params["translation"]
    if reference.startswith("Missing"):
        return httpx.Response(404, json={"error": "not found"})
    if reference.startswith("Broken"):
        return httpx.Response(500, text="boom")
    verses = SERVICE.get((reference, translation))
    if verses is None:
        return httpx.Response(404, json={"error": "not found"})
    return httpx.Response(200, json={
        "reference": reference,
        "verses": [{"verse": n, "text": text} for n, text in verses],
    })


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def transport(requests_seen):
    def handler(request):
        requests_seen.append(request)
        return service_handler(request)

    return httpx.MockTransport(handler)


@pytest.fixture
def api_config():
    return BibleApiConfig(base_url="https://verses.test/", timeout=5, telugu_bible_path=None)


class TestTeluguBibleSource:

    def test_verse_lookup_uses_canon_position(self):
        source = TeluguBibleSource.from_dict(TELUGU_DUMP)
        assert source.verse("John", 3, 1) == "దేవుడు లోకమును ప్రేమించెను"

    @pytest.mark.parametrize("book,chapter,verse", [
        ("John", 3, 2),
        ("John", 4, 1),
        ("John", 0, 1),
        ("Revelation", 1, 1),
        ("Hezekiah", 1, 1),
    ])
    def test_missing_entries_are_none(self, book, chapter, verse):
        assert TeluguBibleSource.from_dict(TELUGU_DUMP).verse(book, chapter, verse) is None

    def test_from_json(self, tmp_path):
        path = tmp_path / "telugu.json"
        path.write_text(json.dumps(TELUGU_DUMP, ensure_ascii=False), encoding="utf-8")
        assert TeluguBibleSource.from_json(path).verse("John", 3, 1)


class TestFetchChapter:

    @pytest.mark.asyncio
    async def test_merges_translations(self, api_config, transport):
        async with BibleApiClient(api_config, transport=transport) as client:
            verses = await client.fetch_chapter("John", 3)
        assert [v.verse for v in verses] == [16, 17]
        assert verses[0].text.kjv == "For God so loved the world"
        assert verses[0].text.esv == "For God so loved the world (WEB)"
        assert verses[0].text.niv == verses[0].text.esv
        assert verses[0].text.bsi_telugu is None

    @pytest.mark.asyncio
    async def test_missing_secondary_falls_back_to_kjv(self, api_config, transport):
        async with BibleApiClient(api_config, transport=transport) as client:
            verses = await client.fetch_chapter("John", 3)
        assert verses[1].text.esv == "For God sent not"

    @pytest.mark.asyncio
    async def test_book_name_is_canonicalized(self, api_config, transport, requests_seen):
        async with BibleApiClient(api_config, transport=transport) as client:
            await client.fetch_chapter("యోహాను", 3)
        paths = {unquote(r.url.path) for r in requests_seen}
        assert paths == {"/John 3"}
        assert {r.url.params["translation"] for r in requests_seen} == {"kjv", "web"}

    @pytest.mark.asyncio
    async def test_telugu_text_is_attached(self, api_config, transport):
        telugu = TeluguBibleSource.from_dict({
            "Book": [{"Chapter": []} for _ in range(42)]
            + [{"Chapter": [{"Verse": []}, {"Verse": []}, {"Verse": [{"Verse": ""}] * 15 + [{"Verse": "తెలుగు"}]}]}]
        })
        async with BibleApiClient(api_config, telugu=telugu, transport=transport) as client:
            verses = await client.fetch_chapter("John", 3)
        assert verses[0].text.bsi_telugu == "తెలుగు"
        assert verses[0].text.as_translation_map()["BSI_TELUGU"] == "తెలుగు"
        assert verses[1].text.bsi_telugu is None

    @pytest.mark.asyncio
    async def test_empty_chapter_is_not_found(self, api_config, transport):
        async with BibleApiClient(api_config, transport=transport) as client:
            with pytest.raises(VerseNotFoundError):
                await client.fetch_chapter("Jude", 1)

    @pytest.mark.asyncio
    async def test_404_is_not_found(self, api_config, transport):
        async with BibleApiClient(api_config, transport=transport) as client:
            with pytest.raises(VerseNotFoundError) as exc_info:
                await client.fetch_reference(ParsedReference("Missing", 1, 1))
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_server_error_is_network_error(self, api_config, transport):
        async with BibleApiClient(api_config, transport=transport) as client:
            with pytest.raises(VerseNetworkError) as exc_info:
                await client.fetch_reference(ParsedReference("Broken", 1, 1))
        assert exc_info.value.status_code == 500
        assert exc_info.value.recoverable
        assert exc_info.value.context.component == "bible_api"
        assert exc_info.value.context.metadata["translation"] in {"web", "kjv"}

    @pytest.mark.asyncio
    async def test_transport_failure_is_network_error(self, api_config):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with BibleApiClient(api_config, transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(VerseNetworkError) as exc_info:
                await client.fetch_chapter("John", 3)
        assert isinstance(exc_info.value.cause, httpx.ConnectError)


class TestFetchVerses:

    @pytest.mark.asyncio
    async def test_references_in_input_order(self, api_config, transport):
        refs = [ParsedReference("Romans", 8, 1), ParsedReference("John", 3, 16)]
        async with BibleApiClient(api_config, transport=transport) as client:
            verses = await client.fetch_verses(refs)
        assert [v.label for v in verses] == ["Romans 8:1", "John 3:16"]
        assert verses[1].text.esv.endswith("(WEB)")

    @pytest.mark.asyncio
    async def test_no_references(self, api_config, transport):
        async with BibleApiClient(api_config, transport=transport) as client:
            assert await client.fetch_verses([]) == []

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self, transport):
        http = httpx.AsyncClient(base_url="https://verses.test", transport=transport)
        client = BibleApiClient(BibleApiConfig(telugu_bible_path=None), client=http)
        await client.close()
        assert not http.is_closed
        await http.aclose()
