"""
Maps YouTube Data API search results to the host's search result format.
"""

import html
import logging
from typing import Any, Dict, List, Optional

from dj_youtube_source.api.client import YoutubeAPIClient
from dj_youtube_source.models.result import SearchResult


def _unescape(value: Optional[str]) -> Optional[str]:
    return html.unescape(value) if value else value


def format_result(item: Dict[str, Any]) -> Optional[SearchResult]:
    """
    Formats one item of a Data API search response as a SearchResult.

    Returns None for items that do not reference a video.
    """
    video_id = (item.get("id") or {}).get("videoId")
    if not video_id:
        return None
    snippet = item.get("snippet") or {}
    thumbnails = snippet.get("thumbnails") or {}
    return SearchResult(
        id=video_id,
        title=_unescape(snippet.get("title")) or video_id,
        artist=_unescape(snippet.get("channelTitle")) or None,
        thumbnail_url=(thumbnails.get("default") or {}).get("url"),
        image_url=(thumbnails.get("high") or {}).get("url"),
    )


class Searcher:
    """Runs catalog searches on behalf of the host."""

    def __init__(self, client: YoutubeAPIClient, log: logging.Logger):
        self.client = client
        self.log = log

    async def search(self, max_results: int, query: str) -> List[SearchResult]:
        """
        Gets song results for a search string.

        The matching itself happens on YouTube's side against video titles and
        channel metadata; the remote ranking is kept as-is.

        Args:
            max_results: Maximum number of results to return.
            query: Free-text search string.

        Returns:
            Up to `max_results` results; an empty list when nothing matched.

        Raises:
            ValueError: If `max_results` is not a positive integer.
            SearchError: If the remote search fails.
        """
        if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 1:
            raise ValueError(f"max_results must be a positive integer, got {max_results!r}")

        data = await self.client.search_videos(query, max_results)

        results = []
        for item in data.get("items") or []:
            result = format_result(item)
            if result is not None:
                results.append(result)
        results = results[:max_results]
        self.log.info(f"Search '{query}' returned {len(results)} result(s).")
        return results
