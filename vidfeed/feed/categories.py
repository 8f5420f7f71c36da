"""Category filters and their search queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional

from vidfeed.config.settings import FeedSettings, get_settings


@dataclass(frozen=True)
class Category:
    """A filter button: what the user sees and what gets searched."""

    label: str
    query: str


class CategoryTable:
    """
    Fixed, ordered table of categories.

    Labels are matched case-insensitively. The default category is the
    one a fresh controller starts on.
    """

    def __init__(self, mapping: Mapping[str, str], default: Optional[str] = None) -> None:
        if not mapping:
            raise ValueError("Category table must not be empty")
        self._categories = [Category(label, query) for label, query in mapping.items()]
        self._by_key = {c.label.lower(): c for c in self._categories}
        self._default = self.get(default) if default else self._categories[0]

    @classmethod
    def from_settings(cls, settings: Optional[FeedSettings] = None) -> "CategoryTable":
        settings = settings or get_settings().feed
        return cls(settings.categories, default=settings.default_category)

    def get(self, label: str) -> Category:
        """Look up a category by label. Raises KeyError if unknown."""
        try:
            return self._by_key[label.strip().lower()]
        except KeyError:
            raise KeyError(f"Unknown category: {label!r}") from None

    @property
    def default(self) -> Category:
        return self._default

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self._categories]

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and label.strip().lower() in self._by_key
