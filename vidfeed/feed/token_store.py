"""Page-number to cursor mapping for forward-only pagination."""

from __future__ import annotations

from typing import Optional

from vidfeed.feed.errors import CursorPending, OutOfRange


class TokenStore:
    """
    Cursors needed to fetch each known page, 1-indexed.

    Page 1 needs no cursor and is always known. Page k+1 becomes known
    when page k's fetch succeeds and returns a next cursor. Entries are
    never overwritten; only ``reset()`` shrinks the store.
    """

    def __init__(self) -> None:
        self._tokens: list[Optional[str]] = [None]

    def token_for(self, page: int) -> Optional[str]:
        """
        Return the cursor needed to fetch *page* (None for page 1).

        Raises CursorPending for the page just past the last known one
        and OutOfRange for anything further or below 1.
        """
        if page < 1 or page > len(self._tokens) + 1:
            raise OutOfRange(f"Page {page} outside 1..{len(self._tokens) + 1}")
        if page == len(self._tokens) + 1:
            raise CursorPending(f"No cursor discovered yet for page {page}")
        return self._tokens[page - 1]

    def record_next(self, after_page: int, cursor: str) -> bool:
        """Store *cursor* as the way into page ``after_page + 1`` unless already known."""
        if after_page < 1 or after_page > len(self._tokens):
            raise OutOfRange(f"Cannot record a cursor after unknown page {after_page}")
        if after_page < len(self._tokens):
            return False
        self._tokens.append(cursor)
        return True

    @property
    def length(self) -> int:
        """Number of pages that can be fetched right now."""
        return len(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def reset(self) -> None:
        self._tokens = [None]

    def __repr__(self) -> str:
        return f"TokenStore({self._tokens!r})"
