"""
Data models passed between the search client and the feed controller.

Plain dataclasses. The wire format lives in ``client.schemas``; these are
what the rest of the package sees.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Item:
    """A single video returned by a search."""

    # Video id, e.g. "dQw4w9WgXcQ"
    id: str

    title: str

    # Empty when the API returned no usable thumbnail
    thumbnail_url: str = ""

    channel_title: str = ""

    # ISO 8601 timestamp as sent by the API
    published_at: str = ""

    description: str = ""


@dataclass
class SearchPage:
    """One page of search results plus the cursor for the page after it."""

    items: list[Item] = field(default_factory=list)

    # None when the API says there is nothing after this page
    next_cursor: Optional[str] = None
