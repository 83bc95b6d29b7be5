"""
Shared fixtures and aiohttp stand-ins for the song source tests.
"""

import asyncio
from unittest.mock import MagicMock

import aiohttp
import pytest

from dj_youtube_source.models.config import AuthConfig


class FakeContent:
    """Mimics `ClientResponse.content` for streamed bodies."""

    def __init__(self, chunks=(), error=None, yield_between_chunks=False):
        self._chunks = list(chunks)
        self._error = error
        self._yield = yield_between_chunks

    async def iter_chunked(self, size):
        for chunk in self._chunks:
            if self._yield:
                await asyncio.sleep(0)
            yield chunk
        if self._error is not None:
            raise self._error


class FakeResponse:
    """An async context manager standing in for `aiohttp.ClientResponse`."""

    def __init__(
        self,
        status=200,
        json_data=None,
        chunks=(),
        stream_error=None,
        enter_error=None,
        yield_between_chunks=False,
    ):
        self.status = status
        self.reason = "OK" if status < 400 else "Error"
        self.headers = {}
        self.history = ()
        self.request_info = MagicMock()
        self.content = FakeContent(chunks, stream_error, yield_between_chunks)
        self._json = json_data
        self._enter_error = enter_error

    def raise_for_status(self):
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                self.request_info, self.history, status=self.status, message=self.reason
            )

    async def json(self, content_type="application/json"):
        if isinstance(self._json, Exception):
            raise self._json
        return self._json

    async def __aenter__(self):
        if self._enter_error is not None:
            raise self._enter_error
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Records GET calls and replays canned responses, one per call when given a list."""

    def __init__(self, response):
        self.responses = list(response) if isinstance(response, (list, tuple)) else None
        self.response = response
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.responses is not None:
            return self.responses[len(self.calls) - 1]
        return self.response

    async def close(self):
        self.closed = True


def make_item(video_id, title, channel="Channel", with_thumbnails=True):
    """Builds one item of a Data API search response."""
    snippet = {"title": title, "channelTitle": channel}
    if with_thumbnails:
        snippet["thumbnails"] = {
            "default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg"},
            "high": {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"},
        }
    return {"kind": "youtube#searchResult", "id": {"kind": "youtube#video", "videoId": video_id}, "snippet": snippet}


@pytest.fixture
def key_auth():
    return AuthConfig(type="key", key="test-api-key")


@pytest.fixture
def oauth_auth():
    return AuthConfig(type="oauth", token="test-token")


@pytest.fixture
def host_log():
    """A mock logging sink like the one the host hands to init()."""
    return MagicMock()
