"""Which page numbers a pagination bar shows."""

from __future__ import annotations

from typing import Optional


def page_window(current_page: int, known_pages: int, radius: int = 1) -> list[Optional[int]]:
    """
    Return the page buttons to render, with None marking an ellipsis.

    Page 1, the last page and every page within *radius* of the current
    one are shown. The page just outside that radius on either side is
    collapsed into an ellipsis; everything further away is omitted.

    >>> page_window(5, 9)
    [1, None, 4, 5, 6, None, 9]
    """
    last = max(known_pages, current_page)
    window: list[Optional[int]] = []
    for page in range(1, last + 1):
        if page == 1 or page == last or abs(page - current_page) <= radius:
            window.append(page)
        elif abs(page - current_page) == radius + 1:
            window.append(None)
    return window
