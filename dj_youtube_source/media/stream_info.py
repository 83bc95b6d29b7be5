"""
Resolves a video URL to its duration and list of available renditions using yt-dlp.
"""

import asyncio
import logging
import re
from typing import Any, Dict, Optional

import yt_dlp
from yt_dlp.utils import YoutubeDLError

from dj_youtube_source.exceptions import StreamInfoError
from dj_youtube_source.models.media import MediaInfo, Rendition

log = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"^\d+")


def parse_itag(format_id: Any) -> Optional[int]:
    """
    Returns the numeric itag at the start of a yt-dlp format id.

    Format ids look like "140", "251-drc" or "hls-234"; only the first two
    carry an itag.
    """
    match = _LEADING_DIGITS.match(str(format_id or ""))
    return int(match.group()) if match else None


def rendition_from_format(fmt: Dict[str, Any]) -> Rendition:
    """Builds a Rendition from one entry of yt-dlp's `formats` list."""
    return Rendition(
        itag=parse_itag(fmt.get("format_id")),
        container=str(fmt.get("ext") or ""),
        url=fmt.get("url") or "",
        bitrate=fmt.get("abr") or fmt.get("tbr"),
        headers=dict(fmt.get("http_headers") or {}),
    )


class StreamInfoResolver:
    """Looks up stream metadata without downloading anything."""

    YDL_OPTIONS: Dict[str, Any] = {
        "quiet": True,
        "no_warnings": True,
        "skip_download": True,
        "noplaylist": True,
    }

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options = {**self.YDL_OPTIONS, "logger": log, **(options or {})}

    def _extract(self, url: str) -> Dict[str, Any]:
        with yt_dlp.YoutubeDL(self.options) as ydl:
            return ydl.extract_info(url, download=False)

    async def resolve(self, url: str) -> MediaInfo:
        """
        Resolves a watch URL to a MediaInfo.

        The extraction is blocking, so it runs in a worker thread.

        Raises:
            StreamInfoError: If yt-dlp cannot extract the video.
        """
        log.debug(f"Resolving stream info for {url}")
        try:
            info = await asyncio.to_thread(self._extract, url)
        except YoutubeDLError as e:
            raise StreamInfoError(f"Could not resolve {url}: {e}") from e

        if not info:
            raise StreamInfoError(f"No stream info returned for {url}")

        renditions = [
            rendition_from_format(fmt)
            for fmt in info.get("formats") or []
            if fmt.get("url")
        ]
        return MediaInfo(
            video_id=str(info.get("id", "")),
            title=info.get("title", ""),
            duration=info.get("duration"),
            renditions=renditions,
        )
