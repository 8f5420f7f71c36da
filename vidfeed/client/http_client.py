"""HTTP client for the upstream video search API."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests
from pydantic import ValidationError

from vidfeed.client.models import SearchPage
from vidfeed.client.schemas import SearchListResponse
from vidfeed.config.settings import ApiSettings, get_settings

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """Transport failure, non-2xx status or unusable response body."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SearchAPI(Protocol):
    """Anything the feed controller can fetch pages from."""

    def search(self, query: str, cursor: Optional[str] = None) -> SearchPage:
        ...


class SearchApiClient:
    """
    Single-attempt client for the ``search`` endpoint.

    Every failure is reported as one ``NetworkError``; retrying is the
    caller's decision.
    """

    def __init__(
        self,
        settings: Optional[ApiSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._settings = settings or get_settings().api
        self._session = session or requests.Session()
        self._session.headers.update({
            "User-Agent": self._settings.user_agent,
            "Accept": "application/json",
        })

    def search(self, query: str, cursor: Optional[str] = None) -> SearchPage:
        """Fetch the page of results for *query* identified by *cursor*."""
        url = f"{self._settings.base_url.rstrip('/')}/search"
        params = {
            "part": self._settings.part,
            "maxResults": str(self._settings.max_results),
            "q": query,
            "type": self._settings.result_type,
            "key": self._settings.api_key,
        }
        if cursor:
            params["pageToken"] = cursor

        logger.debug("Searching q=%r cursor=%r", query, cursor)

        try:
            response = self._session.get(
                url, params=params, timeout=self._settings.request_timeout
            )
        except requests.RequestException as exc:
            raise NetworkError(f"Request failed: {exc}") from exc

        if not response.ok:
            raise NetworkError("Failed to fetch videos", status_code=response.status_code)

        try:
            body = SearchListResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise NetworkError(
                "Malformed search response", status_code=response.status_code
            ) from exc

        return body.to_page(self._settings.thumbnail_preference)
