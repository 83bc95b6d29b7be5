"""
Media Layer.

This package is responsible for resolving stream metadata, choosing the
audio rendition, and downloading it to disk.
"""

from .downloader import Downloader
from .renditions import select_audio_rendition
from .stream_info import StreamInfoResolver

__all__ = ["Downloader", "StreamInfoResolver", "select_audio_rendition"]
