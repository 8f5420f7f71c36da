"""Cursor-paginated feed: token store, controller and browse CLI."""

from vidfeed.feed.categories import Category, CategoryTable
from vidfeed.feed.controller import FeedController
from vidfeed.feed.errors import CursorPending, FeedError, OutOfRange, PageUnreachable
from vidfeed.feed.pager import page_window
from vidfeed.feed.result import FeedResult, NavigationState, PresentationState
from vidfeed.feed.token_store import TokenStore

__all__ = [
    "Category",
    "CategoryTable",
    "FeedController",
    "CursorPending",
    "FeedError",
    "OutOfRange",
    "PageUnreachable",
    "page_window",
    "FeedResult",
    "NavigationState",
    "PresentationState",
    "TokenStore",
]
