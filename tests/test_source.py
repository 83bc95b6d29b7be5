"""
Plugin contract tests for YoutubeSource.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from conftest import FakeResponse, FakeSession, make_item
from dj_youtube_source import YoutubeSource
from dj_youtube_source.api.client import YoutubeAPIClient
from dj_youtube_source.exceptions import AuthConfigError, SourceNotInitializedError
from dj_youtube_source.media.downloader import Downloader
from dj_youtube_source.models.config import AuthConfig
from dj_youtube_source.models.media import MediaInfo, Rendition


def test_display_name():
    assert YoutubeSource.display_name == "Youtube"


@pytest.mark.asyncio
async def test_search_before_init_raises():
    with pytest.raises(SourceNotInitializedError):
        await YoutubeSource().search(5, "q")


@pytest.mark.asyncio
async def test_fetch_before_init_raises(tmp_path):
    with pytest.raises(SourceNotInitializedError):
        await YoutubeSource().fetch("abc", tmp_path)


@pytest.mark.asyncio
async def test_init_rejects_missing_credentials(host_log):
    with pytest.raises(AuthConfigError):
        await YoutubeSource().init(host_log, {"auth": {"type": "oauth"}})
    host_log.info.assert_not_called()


@pytest.mark.asyncio
async def test_init_builds_client_from_config(host_log):
    source = YoutubeSource()
    await source.init(host_log, {"auth": {"type": "key", "key": "k"}})

    assert source._client.auth == AuthConfig(type="key", key="k")
    assert source._searcher.log is host_log
    assert source._fetcher.log is host_log
    host_log.info.assert_called_once()
    await source.close()


@pytest.mark.asyncio
async def test_search_and_fetch_through_plugin(tmp_path, host_log):
    auth = AuthConfig(type="key", key="k")
    api_session = FakeSession(FakeResponse(json_data={"items": [make_item("abc", "Song")]}))
    resolver = MagicMock()
    resolver.resolve = AsyncMock(
        return_value=MediaInfo(
            video_id="abc",
            title="Song",
            duration=180,
            renditions=[Rendition(itag=172, container="webm", url="https://cdn/172")],
        )
    )
    downloader = Downloader(session=FakeSession(FakeResponse(chunks=[b"audio"])))

    async with YoutubeSource(resolver=resolver, downloader=downloader) as source:
        await source.init(host_log, {"auth": auth.model_dump()}, client=YoutubeAPIClient(auth, session=api_session))
        results = await source.search(1, "song")
        path = await source.fetch(results[0].id, tmp_path)

    assert [r.to_dict()["id"] for r in results] == ["abc"]
    assert path == str(tmp_path / "abc.webm")
