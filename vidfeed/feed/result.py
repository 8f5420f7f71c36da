"""
View-state published by the feed controller.

``FeedResult`` is what an observer renders; ``NavigationState`` is what it
needs to draw pagination controls. Both are immutable snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from vidfeed.client.models import Item
from vidfeed.feed.categories import Category
from vidfeed.feed.pager import page_window


class PresentationState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    RESULTS = "results"
    EMPTY = "empty"


@dataclass(frozen=True)
class FeedResult:
    """Items on screen plus the loading flag and error banner."""

    items: tuple[Item, ...] = ()
    loading: bool = False
    error: Optional[str] = None

    @property
    def state(self) -> PresentationState:
        """The single state a presentation layer should show."""
        if self.loading:
            return PresentationState.LOADING
        if self.error is not None:
            return PresentationState.ERROR
        if self.items:
            return PresentationState.RESULTS
        return PresentationState.EMPTY


@dataclass(frozen=True)
class NavigationState:
    """Current category and page, and how far the user can page."""

    category: Category
    current_page: int
    known_pages: int

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.known_pages

    def visible_pages(self, radius: int = 1) -> list[Optional[int]]:
        return page_window(self.current_page, self.known_pages, radius)
