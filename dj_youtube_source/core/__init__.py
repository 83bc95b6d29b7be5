"""
Core song-source operations.

The `Searcher` answers catalog queries and the `Fetcher` downloads the audio
of a single video; `YoutubeSource` wires both to the host's plugin contract.
"""

from .fetcher import Fetcher
from .searcher import Searcher

__all__ = ["Fetcher", "Searcher"]
