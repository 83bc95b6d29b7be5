"""
Async client for the YouTube Data API (v3).
"""

import asyncio
import logging
import time
from typing import Any, Dict, Optional

import aiohttp

from dj_youtube_source.exceptions import SearchError
from dj_youtube_source.models.config import AuthConfig

log = logging.getLogger(__name__)


class YoutubeAPIClient:
    """
    Minimal async client for the YouTube Data API.

    The aiohttp session is created lazily on the first call and reused until
    `close()` is awaited.
    """

    BASE_URL = "https://www.googleapis.com/youtube/v3/"
    MAX_PAGE_SIZE = 50

    def __init__(self, auth: AuthConfig, session: Optional[aiohttp.ClientSession] = None):
        """
        Initializes the API client.

        Args:
            auth: The validated authentication descriptor.
            session: An existing session to use instead of creating one.
        """
        self.auth = auth
        self._session = session
        self._owns_session = session is None

    async def _initialize_session(self) -> aiohttp.ClientSession:
        """Ensures an active aiohttp session is available."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={"Accept-Encoding": "gzip, deflate"},
                timeout=aiohttp.ClientTimeout(total=30, connect=10, sock_read=20),
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Gracefully closes the aiohttp session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def api_call(self, endpoint: str, **params: Any) -> Dict[str, Any]:
        """
        Makes an authenticated GET request and returns the decoded JSON body.

        Raises:
            aiohttp.ClientResponseError: On a non-2xx status. The API's own error
                message, when present, is used as the exception message.
        """
        session = await self._initialize_session()
        params = {**params, **self.auth.query_params}

        start_time = time.monotonic()
        async with session.get(
            self.BASE_URL + endpoint, params=params, headers=self.auth.headers
        ) as r:
            duration_ms = (time.monotonic() - start_time) * 1000
            log.debug(f"GET {endpoint} -> {r.status} in {duration_ms:.0f} ms")

            if r.status >= 400:
                message = await self._read_error_message(r)
                raise aiohttp.ClientResponseError(
                    r.request_info,
                    r.history,
                    status=r.status,
                    message=message or r.reason or "",
                    headers=r.headers,
                )
            return await r.json()

    @staticmethod
    async def _read_error_message(response: aiohttp.ClientResponse) -> str:
        """Extracts `error.message` from a Data API error body, if any."""
        try:
            body = await response.json(content_type=None)
        except (aiohttp.ClientError, ValueError):
            return ""
        if isinstance(body, dict):
            return str(body.get("error", {}).get("message", ""))
        return ""

    async def search_videos(self, query: str, max_results: int) -> Dict[str, Any]:
        """
        Searches for videos matching a free-text query.

        Raises:
            SearchError: If the request fails for any reason.
        """
        try:
            return await self.api_call(
                "search",
                part="snippet",
                type="video",
                q=query,
                maxResults=min(max_results, self.MAX_PAGE_SIZE),
            )
        except aiohttp.ClientResponseError as e:
            raise SearchError(f"YouTube search failed ({e.status}): {e.message}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise SearchError(f"YouTube search failed: {str(e) or type(e).__name__}") from e
