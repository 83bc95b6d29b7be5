"""
Searcher tests: result mapping and result-count bounds.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from conftest import make_item
from dj_youtube_source.core.searcher import Searcher, format_result
from dj_youtube_source.exceptions import SearchError
from dj_youtube_source.models.result import SearchResult


def make_searcher(response, host_log):
    client = MagicMock()
    client.search_videos = AsyncMock(return_value=response)
    return Searcher(client, host_log), client


def test_format_result_maps_snippet_fields():
    result = format_result(make_item("dQw4w9WgXcQ", "Never Gonna Give You Up", "Rick Astley"))

    assert result == SearchResult(
        id="dQw4w9WgXcQ",
        title="Never Gonna Give You Up",
        artist="Rick Astley",
        thumbnail_url="https://i.ytimg.com/vi/dQw4w9WgXcQ/default.jpg",
        image_url="https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
    )
    assert "album" not in result.to_dict()


def test_format_result_unescapes_html_entities():
    result = format_result(make_item("x1", "Don&#39;t Stop Me Now", "Queen &amp; Co"))
    assert result.title == "Don't Stop Me Now"
    assert result.artist == "Queen & Co"


def test_format_result_without_thumbnails():
    result = format_result(make_item("x1", "Title", with_thumbnails=False))
    assert result.thumbnail_url is None
    assert result.image_url is None


def test_format_result_tolerates_null_fields():
    item = {"id": {"videoId": "abc"}, "snippet": {"title": "Song", "thumbnails": {"default": None, "high": None}}}
    result = format_result(item)
    assert result == SearchResult(id="abc", title="Song")

    assert format_result({"id": None, "snippet": None}) is None
    assert format_result({"id": {"videoId": "abc"}, "snippet": None}) == SearchResult(id="abc", title="abc")
    assert format_result({"id": {"videoId": "abc"}, "snippet": {"thumbnails": None}}).image_url is None


def test_format_result_skips_non_video_items():
    assert format_result({"id": {"kind": "youtube#channel", "channelId": "UC1"}, "snippet": {}}) is None


def test_search_result_is_immutable():
    result = SearchResult(id="a", title="b")
    with pytest.raises(AttributeError):
        result.title = "c"


@pytest.mark.asyncio
async def test_search_preserves_remote_order(host_log):
    items = [make_item("b", "Second"), make_item("a", "First"), make_item("c", "Third")]
    searcher, client = make_searcher({"items": items}, host_log)

    results = await searcher.search(10, "query")

    assert [r.id for r in results] == ["b", "a", "c"]
    client.search_videos.assert_awaited_once_with("query", 10)
    host_log.info.assert_called_once_with("Search 'query' returned 3 result(s).")


@pytest.mark.asyncio
async def test_search_returns_at_most_max_results(host_log):
    items = [make_item(f"id{i}", f"Title {i}") for i in range(5)]
    searcher, _ = make_searcher({"items": items}, host_log)

    results = await searcher.search(3, "query")

    assert len(results) == 3
    assert all(r.id and r.title for r in results)


@pytest.mark.asyncio
async def test_search_with_no_matches_returns_empty_list(host_log):
    searcher, _ = make_searcher({"kind": "youtube#searchListResponse", "items": []}, host_log)
    assert await searcher.search(5, "zzzzzzzz") == []


@pytest.mark.asyncio
async def test_search_without_items_key_returns_empty_list(host_log):
    searcher, _ = make_searcher({}, host_log)
    assert await searcher.search(5, "zzzzzzzz") == []


@pytest.mark.asyncio
async def test_search_falls_back_to_id_for_empty_title(host_log):
    searcher, _ = make_searcher({"items": [make_item("abc", "")]}, host_log)
    results = await searcher.search(5, "q")
    assert results[0].title == "abc"


@pytest.mark.asyncio
@pytest.mark.parametrize("max_results", [0, -1, True, 2.5])
async def test_search_rejects_invalid_max_results(host_log, max_results):
    searcher, client = make_searcher({"items": []}, host_log)

    with pytest.raises(ValueError):
        await searcher.search(max_results, "q")

    client.search_videos.assert_not_called()


@pytest.mark.asyncio
async def test_search_propagates_search_error(host_log):
    client = MagicMock()
    client.search_videos = AsyncMock(side_effect=SearchError("quota"))
    searcher = Searcher(client, host_log)

    with pytest.raises(SearchError, match="quota"):
        await searcher.search(5, "q")
