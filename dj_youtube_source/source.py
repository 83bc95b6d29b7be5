"""
The song-source plugin object exposed to the host DJ application.

Configuration:
    auth:
        type: "key" or "oauth"
        key: API key (when type is "key")
        token: OAuth access token (when type is "oauth")
"""

import logging
import os
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from dj_youtube_source.api.client import YoutubeAPIClient
from dj_youtube_source.core.fetcher import Fetcher
from dj_youtube_source.core.searcher import Searcher
from dj_youtube_source.exceptions import AuthConfigError, SourceNotInitializedError
from dj_youtube_source.media.downloader import Downloader
from dj_youtube_source.media.stream_info import StreamInfoResolver
from dj_youtube_source.models.config import SourceConfig
from dj_youtube_source.models.result import SearchResult


def parse_config(config: Union[SourceConfig, Mapping[str, Any]]) -> SourceConfig:
    """
    Validates the configuration handed over by the host.

    Raises:
        AuthConfigError: If the auth descriptor is missing or malformed.
    """
    if isinstance(config, SourceConfig):
        return config
    if not config or not config.get("auth"):
        raise AuthConfigError("No 'auth' section found in the song source configuration.")
    try:
        return SourceConfig.model_validate(dict(config))
    except ValidationError as e:
        raise AuthConfigError(f"Invalid auth configuration:\n{e}") from e


class YoutubeSource:
    """Searches and fetches audio from YouTube."""

    display_name = "Youtube"

    def __init__(
        self,
        resolver: Optional[StreamInfoResolver] = None,
        downloader: Optional[Downloader] = None,
    ):
        self._resolver = resolver or StreamInfoResolver()
        self._downloader = downloader or Downloader()
        self._client: Optional[YoutubeAPIClient] = None
        self._searcher: Optional[Searcher] = None
        self._fetcher: Optional[Fetcher] = None

    async def init(
        self,
        log: logging.Logger,
        config: Union[SourceConfig, Mapping[str, Any]],
        client: Optional[YoutubeAPIClient] = None,
    ) -> None:
        """
        Initializes the song source.

        Args:
            log: The host's logger; it is handed to the searcher and fetcher.
            config: A SourceConfig or the equivalent plain mapping.
            client: An API client to use instead of building one from `config`.

        Raises:
            AuthConfigError: If the configuration is malformed.
        """
        source_config = parse_config(config)
        if self._client is not None and self._client is not client:
            await self._client.close()
        self._client = client or YoutubeAPIClient(source_config.auth)
        self._searcher = Searcher(self._client, log)
        self._fetcher = Fetcher(self._resolver, self._downloader, log)
        log.info(f"{self.display_name} song source ready ({source_config.auth.type} auth).")

    def _require(self, component: Optional[Any]) -> Any:
        if component is None:
            raise SourceNotInitializedError(
                f"{self.display_name} song source used before init()."
            )
        return component

    async def search(self, max_results: int, query: str) -> List[SearchResult]:
        """Returns up to `max_results` songs matching `query`."""
        searcher: Searcher = self._require(self._searcher)
        return await searcher.search(max_results, query)

    async def fetch(self, track_id: str, download_location: Union[str, os.PathLike]) -> str:
        """Downloads the song `track_id` and returns its full path."""
        fetcher: Fetcher = self._require(self._fetcher)
        return await fetcher.fetch(track_id, download_location)

    async def close(self) -> None:
        """Releases the HTTP sessions held by the source."""
        if self._client is not None:
            await self._client.close()
        await self._downloader.close()

    async def __aenter__(self) -> "YoutubeSource":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
