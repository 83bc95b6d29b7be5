"""
The normalized search result handed back to the host application.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SearchResult:
    """A single song in the host's search result format."""

    id: str
    title: str
    artist: str | None = None
    album: str | None = None
    thumbnail_url: str | None = None
    image_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Returns the plain-dict form, omitting unset optional fields."""
        return {k: v for k, v in asdict(self).items() if v is not None}
