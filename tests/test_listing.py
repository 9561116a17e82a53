"""Tests for the category filter."""

from dataclasses import dataclass

import pytest

from apps.content.listing import CategoryFilter
from apps.content.records import ALL_CATEGORIES, ProjectCategory


@dataclass
class Item:
    title: str
    category: str


ITEMS = [
    Item("Launch campaign", "social-media-marketing"),
    Item("Local rankings", "seo"),
    Item("Store rebuild", "web-design-and-development"),
    Item("Audit", "seo"),
]


class TestCategoryFilter:
    """Tests for CategoryFilter."""

    def test_defaults_to_all(self) -> None:
        listing = CategoryFilter(ITEMS)
        assert listing.active == ALL_CATEGORIES
        assert listing.displayed == ITEMS

    @pytest.mark.parametrize("category", [c.value for c in ProjectCategory])
    def test_displayed_is_exact_subset(self, category: str) -> None:
        listing = CategoryFilter(ITEMS)
        displayed = listing.select(category)
        assert displayed == [item for item in ITEMS if item.category == category]

    def test_all_restores_full_set(self) -> None:
        listing = CategoryFilter(ITEMS)
        listing.select("seo")
        assert listing.select(ALL_CATEGORIES) == ITEMS

    def test_blank_selection_means_all(self) -> None:
        listing = CategoryFilter(ITEMS)
        listing.select("")
        assert listing.active == ALL_CATEGORIES
        assert listing.displayed == ITEMS

    def test_empty_result_is_distinguishable(self) -> None:
        listing = CategoryFilter(ITEMS)
        listing.select("ppc")
        assert listing.is_empty
        assert listing.displayed == []

    def test_no_partial_matches(self) -> None:
        listing = CategoryFilter(ITEMS)
        assert listing.select("se") == []

    def test_selection_keeps_source_records(self) -> None:
        listing = CategoryFilter(ITEMS)
        listing.select("seo")
        assert listing.records == ITEMS

    def test_category_choices_mark_active(self) -> None:
        listing = CategoryFilter(ITEMS)
        listing.select("seo")
        choices = listing.category_choices()
        assert choices[0] == {"id": "all", "name": "All Projects", "is_active": False}
        assert [c["id"] for c in choices if c["is_active"]] == ["seo"]
        assert len(choices) == len(ProjectCategory) + 1
