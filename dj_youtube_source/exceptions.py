"""
Defines custom exceptions for the song source to allow for more specific error handling.
"""


class SongSourceError(Exception):
    """Base exception for all song-source errors."""


class ConfigurationError(SongSourceError):
    """Raised for issues related to configuration loading or validation."""


class AuthConfigError(ConfigurationError):
    """Raised when the authentication descriptor is malformed or incomplete."""


class SourceNotInitializedError(SongSourceError):
    """Raised when search or fetch is called before init."""


class SearchError(SongSourceError):
    """Raised when the catalog search request fails."""


class StreamInfoError(SongSourceError):
    """Raised when a video cannot be resolved to stream metadata."""


class DurationLimitError(SongSourceError):
    """
    Raised when the requested video is longer than the allowed download duration.
    """

    def __init__(self, message: str, duration: float | None = None):
        super().__init__(message)
        self.duration = duration


class NoAudioRenditionError(SongSourceError):
    """Raised when no audio-only rendition is available for a video."""


class DownloadError(SongSourceError):
    """Raised when streaming a rendition to disk fails."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url
