"""
YouTube Data API Layer.

This package handles all communication with the official YouTube Data API.
"""

from .client import YoutubeAPIClient

__all__ = ["YoutubeAPIClient"]
