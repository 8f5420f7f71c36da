"""Navigation errors raised by the feed controller and its token store."""

from __future__ import annotations


class FeedError(Exception):
    """Base class for local feed conditions (never network failures)."""


class PageUnreachable(FeedError):
    """Navigation asked for a page past the first undiscovered one."""

    def __init__(self, page: int, known_pages: int) -> None:
        super().__init__(
            f"Page {page} is unreachable: only pages 1..{known_pages + 1} can be requested"
        )
        self.page = page
        self.known_pages = known_pages


class OutOfRange(FeedError, LookupError):
    """A token store index outside the reachable range."""


class CursorPending(FeedError, LookupError):
    """The page directly after the last known one has no cursor yet."""
