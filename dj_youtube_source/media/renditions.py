"""
Selection of the audio-only rendition to download.
"""

import logging
from typing import Iterable, Optional

from dj_youtube_source.models.media import Rendition

log = logging.getLogger(__name__)

AUDIO_CONTAINER = "webm"

# Known audio-only itags on YouTube.
# http://en.wikipedia.org/wiki/YouTube#Quality_and_codecs
AUDIO_ITAG_MIN = 139
AUDIO_ITAG_MAX = 172


def is_audio_rendition(rendition: Rendition) -> bool:
    """True for a webm rendition whose itag is in the audio-only range."""
    return (
        rendition.container == AUDIO_CONTAINER
        and rendition.itag is not None
        and AUDIO_ITAG_MIN <= rendition.itag <= AUDIO_ITAG_MAX
    )


def select_audio_rendition(renditions: Iterable[Rendition]) -> Optional[Rendition]:
    """
    Picks the lowest-quality audio-only rendition.

    Renditions without a known bitrate rank after those with one; ties keep
    the input order. Returns None when nothing qualifies.
    """
    candidates = [r for r in renditions if is_audio_rendition(r)]
    if not candidates:
        return None
    chosen = min(
        candidates, key=lambda r: (r.bitrate is None, r.bitrate or 0.0)
    )
    log.debug(f"Selected itag {chosen.itag} ({chosen.bitrate} kbps)")
    return chosen
