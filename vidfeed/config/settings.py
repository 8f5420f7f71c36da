"""
Central configuration for vidfeed.

All tunables live here. Module code takes its settings object as an
optional constructor argument and falls back to ``get_settings()``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

API_KEY_ENV_VAR = "VIDFEED_API_KEY"


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: two levels up from config/settings.py
    return Path(__file__).resolve().parent.parent.parent


def _default_categories() -> dict[str, str]:
    # "All" has no query of its own; it browses what is trending.
    return {
        "All": "trending",
        "Music": "Music",
        "Gaming": "Gaming",
        "News": "News",
        "Live": "Live",
        "Sports": "Sports",
        "Learning": "Learning",
    }


@dataclass(frozen=True)
class ApiSettings:
    """Settings for the upstream video search API."""

    base_url: str = "https://www.googleapis.com/youtube/v3"

    # Empty means "not configured"; requests are still sent and the API rejects them.
    api_key: str = ""

    # Results per page requested from the API
    max_results: int = 24

    part: str = "snippet"
    result_type: str = "video"

    # Request timeout (seconds)
    request_timeout: int = 30

    user_agent: str = "vidfeed/0.1"

    # First thumbnail size present in a result wins
    thumbnail_preference: tuple[str, ...] = ("medium", "high", "default")


@dataclass(frozen=True)
class FeedSettings:
    """Settings for the feed controller and its pager."""

    # Category label -> search query, in display order
    categories: dict[str, str] = field(default_factory=_default_categories)

    default_category: str = "All"

    # Keep the previous page on screen under an error banner unless set
    clear_items_on_error: bool = False

    # Page numbers shown on either side of the current page
    window_radius: int = 1


@dataclass
class Settings:
    """
    Top-level settings container.

    Usage:
        settings = get_settings()
        print(settings.api.max_results)
        print(settings.feed.default_category)
    """

    project_root: Path = field(default_factory=_project_root)
    api: ApiSettings = field(default_factory=ApiSettings)
    feed: FeedSettings = field(default_factory=FeedSettings)

    @property
    def data_dir(self) -> Path:
        """Root directory for runtime data."""
        return self.project_root / "data"

    @property
    def logs_dir(self) -> Path:
        """Root directory for log files."""
        return self.data_dir / "logs"

    def ensure_dirs(self) -> None:
        """Create all required data directories if they don't exist."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    The API key is read from the ``VIDFEED_API_KEY`` environment variable.
    """
    return Settings(api=ApiSettings(api_key=os.environ.get(API_KEY_ENV_VAR, "")))
