"""
Stream metadata for a single video, as resolved by the stream-info service.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rendition:
    """One encoded variant of a video (container format + itag)."""

    itag: int | None
    container: str
    url: str
    bitrate: float | None = None
    headers: dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class MediaInfo:
    """Duration and available renditions of a video."""

    video_id: str
    title: str
    duration: float | None
    renditions: list[Rendition] = field(default_factory=list)
