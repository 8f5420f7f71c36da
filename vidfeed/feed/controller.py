"""
Cursor-paginated feed controller.

Turns navigation intent (switch category, go to page N) into fetches
against a ``SearchAPI``, records discovered cursors in a ``TokenStore``
and publishes a ``FeedResult`` to a single observer.

Runs on an asyncio event loop. The blocking search call executes in the
loop's executor; every state change happens on the loop thread, so
nothing here needs a lock. In-flight requests are never cancelled.
Instead each response is checked against the navigation state at the
time it resolves and dropped if the user has moved on.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from vidfeed.client.http_client import NetworkError, SearchAPI
from vidfeed.client.models import SearchPage
from vidfeed.config.settings import FeedSettings, get_settings
from vidfeed.feed.categories import Category, CategoryTable
from vidfeed.feed.errors import CursorPending, PageUnreachable
from vidfeed.feed.result import FeedResult, NavigationState
from vidfeed.feed.token_store import TokenStore

logger = logging.getLogger(__name__)

Observer = Callable[[FeedResult], None]


@dataclass(frozen=True)
class _FetchRequest:
    """Identity of one fetch: which category session and page it was for."""

    session: int
    category: Category
    page: int


class FeedController:
    """Single authority over navigation state, fetches and the published result."""

    def __init__(
        self,
        api: SearchAPI,
        categories: Optional[CategoryTable] = None,
        settings: Optional[FeedSettings] = None,
    ) -> None:
        self._settings = settings or get_settings().feed
        self._api = api
        self._categories = categories or CategoryTable.from_settings(self._settings)
        self._category = self._categories.default
        self._current_page = 1
        self._tokens = TokenStore()
        # Bumped on every category change; a response from an older session is stale.
        self._session = 0
        self._result = FeedResult()
        self._observer: Optional[Observer] = None
        self._tasks: set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def start(self) -> asyncio.Task:
        """Fetch the first page of the current category."""
        return self._trigger_fetch(asyncio.get_running_loop())

    def set_category(self, category: Union[str, Category]) -> Optional[asyncio.Task]:
        """
        Switch to *category* and fetch its first page.

        The category, page number and token store change together before
        anything else can run. Returns None if the category is unchanged.
        Must be called from a running event loop.
        """
        label = category.label if isinstance(category, Category) else category
        target = self._categories.get(label)
        if target == self._category:
            return None
        loop = asyncio.get_running_loop()

        logger.info("Category %s -> %s", self._category.label, target.label)
        self._category = target
        self._tokens.reset()
        self._current_page = 1
        self._session += 1
        return self._trigger_fetch(loop)

    def go_to_page(self, page: int) -> asyncio.Task:
        """
        Navigate to *page* and fetch it.

        Any known page may be revisited, and the page right after the last
        known one may be requested. Anything else raises PageUnreachable
        without touching state or the network.
        """
        if page < 1 or page > self._tokens.length + 1:
            raise PageUnreachable(page, self._tokens.length)
        loop = asyncio.get_running_loop()
        # May leave current_page one past known_pages; see _fetch's CursorPending branch.
        self._current_page = page
        return self._trigger_fetch(loop)

    def retry(self) -> asyncio.Task:
        """Fetch the current page again, e.g. after a network error."""
        return self._trigger_fetch(asyncio.get_running_loop())

    # ------------------------------------------------------------------
    # Observer interface
    # ------------------------------------------------------------------

    def current_result(self) -> FeedResult:
        return self._result

    @property
    def navigation(self) -> NavigationState:
        return NavigationState(
            category=self._category,
            current_page=self._current_page,
            known_pages=self._tokens.length,
        )

    @property
    def categories(self) -> CategoryTable:
        return self._categories

    def subscribe(self, observer: Observer) -> None:
        """Register *observer*, replacing any previous one."""
        self._observer = observer

    def unsubscribe(self) -> None:
        self._observer = None

    async def wait_idle(self) -> None:
        """Wait until every fetch issued so far has resolved."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def _trigger_fetch(self, loop: asyncio.AbstractEventLoop) -> asyncio.Task:
        request = _FetchRequest(self._session, self._category, self._current_page)
        # Previous items stay visible while loading.
        self._publish(FeedResult(items=self._result.items, loading=True, error=None))

        task = loop.create_task(self._fetch(request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _is_current(self, request: _FetchRequest) -> bool:
        return (
            request.session == self._session
            and request.category == self._category
            and request.page == self._current_page
        )

    async def _fetch(self, request: _FetchRequest) -> None:
        if not self._is_current(request):
            logger.debug("Skipping superseded fetch for %s page %d",
                         request.category.label, request.page)
            return

        try:
            cursor = self._tokens.token_for(request.page)
        except CursorPending:
            # Nothing upstream leads to this page yet, so it has no items.
            self._publish(FeedResult())
            return

        loop = asyncio.get_running_loop()
        try:
            page: SearchPage = await loop.run_in_executor(
                None, self._api.search, request.category.query, cursor
            )
        except NetworkError as exc:
            if self._on_failure(request, exc.message):
                logger.error("Error fetching %s page %d: %s",
                             request.category.label, request.page, exc)
            return
        except Exception as exc:
            error_msg = f"{type(exc).__name__}: {exc}"
            if self._on_failure(request, error_msg):
                logger.exception("Search failed for %s page %d: %s",
                                 request.category.label, request.page, error_msg)
            return

        if not self._is_current(request):
            logger.debug("Discarding stale response for %s page %d",
                         request.category.label, request.page)
            return

        if page.next_cursor:
            self._tokens.record_next(request.page, page.next_cursor)
        self._publish(FeedResult(items=tuple(page.items), loading=False, error=None))

    def _on_failure(self, request: _FetchRequest, message: str) -> bool:
        """Publish *message* as the error if *request* is still current."""
        if not self._is_current(request):
            logger.debug("Discarding stale failure for %s page %d: %s",
                         request.category.label, request.page, message)
            return False

        items = () if self._settings.clear_items_on_error else self._result.items
        self._publish(FeedResult(items=items, loading=False, error=message))
        return True

    def _publish(self, result: FeedResult) -> None:
        self._result = result
        if self._observer is not None:
            self._observer(result)
