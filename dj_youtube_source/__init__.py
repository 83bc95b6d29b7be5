"""
A YouTube song source for DJ applications.

Searches the YouTube catalog and fetches audio-only renditions to disk.
"""

__version__ = "0.3.0"

from .source import YoutubeSource

__all__ = ["YoutubeSource", "__version__"]
