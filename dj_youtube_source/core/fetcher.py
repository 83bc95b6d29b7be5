"""
Resolves a video id to an audio-only rendition and downloads it to disk.
"""

import logging
import os
from pathlib import Path
from urllib.parse import quote

from dj_youtube_source.exceptions import (
    DownloadError,
    DurationLimitError,
    NoAudioRenditionError,
)
from dj_youtube_source.media.downloader import Downloader
from dj_youtube_source.media.renditions import select_audio_rendition
from dj_youtube_source.media.stream_info import StreamInfoResolver
from dj_youtube_source.utils.formatting import format_duration

log = logging.getLogger(__name__)

WATCH_URL = "https://www.youtube.com/watch?v="
MAX_DURATION_SECONDS = 10 * 60
FILE_EXTENSION = ".webm"


def encode_id(track_id: str) -> str:
    """Percent-encodes an id for use in a URL and a filename."""
    return quote(str(track_id), safe="")


class Fetcher:
    """Downloads the audio of a single video per call."""

    def __init__(
        self,
        resolver: StreamInfoResolver,
        downloader: Downloader,
        log: logging.Logger,
    ):
        self.resolver = resolver
        self.downloader = downloader
        self.log = log

    async def fetch(self, track_id: str, download_location: str | os.PathLike) -> str:
        """
        Fetches the song with the given id into `download_location`.

        Args:
            track_id: The id returned in search results.
            download_location: Directory to store the song file in.

        Returns:
            The full path of the downloaded file, `<download_location>/<id>.webm`.

        Raises:
            StreamInfoError: If the video cannot be resolved.
            DurationLimitError: If the video is longer than ten minutes or its
                duration is unknown.
            NoAudioRenditionError: If no audio-only webm rendition exists.
            DownloadError: If streaming the file fails.
        """
        encoded_id = encode_id(track_id)
        url = WATCH_URL + encoded_id
        download_path = str(Path(download_location) / f"{encoded_id}{FILE_EXTENSION}")

        info = await self.resolver.resolve(url)
        log.debug(
            f"Resolved {info.video_id or encoded_id}: '{info.title}', "
            f"{format_duration(info.duration)}, {len(info.renditions)} renditions"
        )

        if info.duration is None:
            raise DurationLimitError(f"Could not determine the length of {url}.")
        if info.duration > MAX_DURATION_SECONDS:
            raise DurationLimitError(
                f"Requested video '{info.title or encoded_id}' exceeded 10 minutes "
                f"({format_duration(info.duration)}).",
                duration=info.duration,
            )

        rendition = select_audio_rendition(info.renditions)
        if rendition is None:
            raise NoAudioRenditionError(f"No audio-only webm rendition found for {url}.")

        try:
            await self.downloader.download_file(
                rendition.url, download_path, headers=rendition.headers
            )
        except Exception as e:
            self.log.error(f"Failed to download {url}: {str(e) or type(e).__name__}")
            raise DownloadError(f"Failed to download {url}: {e}", url=url) from e

        self.log.info(f"Downloaded: {url}")
        return download_path
