"""
Shared test fixtures for the vidfeed test suite.

``FakeSearchApi`` stands in for the upstream API. Each call blocks until
the test answers it (by call index), which lets tests decide the order
in which overlapping requests resolve. Answers may be given before the
call arrives. A ``responder`` answers every call immediately instead.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Callable, Optional, Union

import pytest

from vidfeed.client.models import Item, SearchPage
from vidfeed.config.settings import FeedSettings
from vidfeed.feed.categories import CategoryTable

Answer = Union[SearchPage, Exception]


class FakeSearchApi:
    def __init__(
        self,
        responder: Optional[Callable[[str, Optional[str]], SearchPage]] = None,
        timeout: float = 5.0,
    ) -> None:
        self.calls: list[tuple[str, Optional[str]]] = []
        self._responder = responder
        self._timeout = timeout
        self._lock = threading.Lock()
        self._gates: dict[int, threading.Event] = {}
        self._answers: dict[int, Answer] = {}

    def _gate(self, index: int) -> threading.Event:
        with self._lock:
            return self._gates.setdefault(index, threading.Event())

    def answer(self, index: int, result: Answer) -> None:
        """Resolve call number *index* with a page or an exception to raise."""
        self._answers[index] = result
        self._gate(index).set()

    def search(self, query: str, cursor: Optional[str] = None) -> SearchPage:
        with self._lock:
            index = len(self.calls)
            self.calls.append((query, cursor))
        if self._responder is not None:
            return self._responder(query, cursor)
        if not self._gate(index).wait(self._timeout):
            raise TimeoutError(f"Call {index} ({query!r}, {cursor!r}) was never answered")
        result = self._answers[index]
        if isinstance(result, Exception):
            raise result
        return result

    async def wait_for_calls(self, count: int) -> None:
        """Yield to the event loop until at least *count* calls have arrived."""
        for _ in range(500):
            if len(self.calls) >= count:
                return
            await asyncio.sleep(0.01)
        raise AssertionError(f"Expected {count} calls, got {len(self.calls)}")


def make_item(item_id: str, title: Optional[str] = None) -> Item:
    return Item(
        id=item_id,
        title=title or f"Video {item_id}",
        thumbnail_url=f"https://i.ytimg.com/vi/{item_id}/mqdefault.jpg",
    )


def numbered_pages(last_page: int = 5) -> Callable[[str, Optional[str]], SearchPage]:
    """
    Responder for a feed with *last_page* pages per query.

    Cursors are "t<N>" for page N; page 1 takes no cursor.
    """

    def respond(query: str, cursor: Optional[str]) -> SearchPage:
        page = 1 if cursor is None else int(cursor[1:])
        next_cursor = f"t{page + 1}" if page < last_page else None
        return SearchPage(items=[make_item(f"{query}-{page}")], next_cursor=next_cursor)

    return respond


@pytest.fixture
def feed_settings() -> FeedSettings:
    return FeedSettings()


@pytest.fixture
def categories(feed_settings: FeedSettings) -> CategoryTable:
    return CategoryTable.from_settings(feed_settings)


@pytest.fixture
def gated_api() -> FakeSearchApi:
    return FakeSearchApi()


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def paged_api_factory() -> Callable[[int], FakeSearchApi]:
    """Build an API answering immediately with a fixed number of pages per category."""

    def factory(last_page: int = 5) -> FakeSearchApi:
        return FakeSearchApi(responder=numbered_pages(last_page))

    return factory


@pytest.fixture
def paged_api(paged_api_factory) -> FakeSearchApi:
    return paged_api_factory(5)
