"""Tests for the category table."""

from __future__ import annotations

import pytest

from vidfeed.config.settings import FeedSettings
from vidfeed.feed.categories import Category, CategoryTable


class TestCategoryTable:
    def test_default_is_all_with_trending_query(self, categories: CategoryTable):
        assert categories.default == Category("All", "trending")

    def test_labels_keep_display_order(self, categories: CategoryTable):
        assert categories.labels == ["All", "Music", "Gaming", "News", "Live", "Sports", "Learning"]

    def test_other_labels_search_for_themselves(self, categories: CategoryTable):
        assert categories.get("Music").query == "Music"

    def test_lookup_is_case_insensitive(self, categories: CategoryTable):
        assert categories.get("  gaming ") == Category("Gaming", "Gaming")
        assert "NEWS" in categories

    def test_unknown_label_raises_key_error(self, categories: CategoryTable):
        with pytest.raises(KeyError):
            categories.get("Cooking")
        assert "Cooking" not in categories

    def test_custom_table_from_settings(self):
        settings = FeedSettings(categories={"Home": "popular", "Jazz": "jazz"}, default_category="Jazz")
        table = CategoryTable.from_settings(settings)
        assert table.default == Category("Jazz", "jazz")
        assert len(table) == 2

    def test_empty_table_rejected(self):
        with pytest.raises(ValueError):
            CategoryTable({})
