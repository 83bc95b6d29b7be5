"""
Data Models Layer.

This package contains the models that define the core data structures
used throughout the song source, such as configuration and search results.
"""

from .config import AuthConfig, SourceConfig
from .media import MediaInfo, Rendition
from .result import SearchResult

__all__ = ["AuthConfig", "MediaInfo", "Rendition", "SearchResult", "SourceConfig"]
