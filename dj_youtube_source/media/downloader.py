"""
Handles the low-level streaming of a rendition over HTTP to a local file.
"""

import asyncio
import logging
import os
from typing import Dict, Optional

import aiofiles.tempfile
import aiohttp

from dj_youtube_source.utils.formatting import format_size

log = logging.getLogger(__name__)


class Downloader:
    """A low-level file downloader writing through a temporary `.part` file."""

    CHUNK_SIZE = 131072  # 128 KB

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Gets or lazily creates the session used for media downloads."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                ttl_dns_cache=600,  # 10 minutes
                keepalive_timeout=30,
                enable_cleanup_closed=True,
            )
            # No total timeout: a slow stream may run as long as it keeps sending.
            timeout = aiohttp.ClientTimeout(total=None, sock_connect=15, sock_read=90)
            self._session = aiohttp.ClientSession(connector=connector, timeout=timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Closes the session if this downloader created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            log.debug("Downloader session closed.")

    async def download_file(
        self,
        url: str,
        destination_path: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> int:
        """
        Streams `url` to `destination_path`, replacing any existing file.

        Bytes go to a uniquely named `.part` file beside the destination, so
        concurrent downloads of the same song never share a handle. It is moved
        into place once the stream ends and removed if anything fails.

        Returns:
            The number of bytes written.
        """
        directory, filename = os.path.split(os.path.abspath(destination_path))
        temp_path = None
        session = await self._get_session()
        bytes_downloaded = 0
        try:
            async with session.get(url, headers=headers, allow_redirects=True) as response:
                response.raise_for_status()
                async with aiofiles.tempfile.NamedTemporaryFile(
                    "wb", dir=directory, prefix=f"{filename}.", suffix=".part", delete=False
                ) as f:
                    temp_path = f.name
                    async for chunk in response.content.iter_chunked(self.CHUNK_SIZE):
                        await f.write(chunk)
                        bytes_downloaded += len(chunk)
            await asyncio.to_thread(os.replace, temp_path, destination_path)
        except BaseException:
            if temp_path and os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError as e:
                    log.debug(f"Could not remove partial file '{temp_path}': {e}")
            raise

        log.debug(
            f"Wrote {format_size(bytes_downloaded)} to "
            f"'{os.path.basename(destination_path)}'"
        )
        return bytes_downloaded
