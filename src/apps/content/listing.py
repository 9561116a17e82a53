"""Category filtering over an already-fetched record set."""

from collections.abc import Callable, Iterable
from operator import attrgetter

from .records import ALL_CATEGORIES, ProjectCategory


class CategoryFilter:
    """Holds the full record set and derives the displayed subset for a category.

    Selecting a category never re-queries the store; it filters the records
    held since construction by exact match on their category.
    """

    def __init__(self, records: Iterable, *, key: Callable = attrgetter("category")) -> None:
        self.records = list(records)
        self.key = key
        self.active = ALL_CATEGORIES
        self.displayed = list(self.records)

    def select(self, category: str) -> list:
        """Make *category* active and return the records now displayed."""
        self.active = category or ALL_CATEGORIES
        if self.active == ALL_CATEGORIES:
            self.displayed = list(self.records)
        else:
            self.displayed = [record for record in self.records if self.key(record) == self.active]
        return self.displayed

    @property
    def is_empty(self) -> bool:
        return not self.displayed

    def category_choices(self) -> list[dict]:
        choices = [{"id": ALL_CATEGORIES, "name": "All Projects", "is_active": self.active == ALL_CATEGORIES}]
        for category in ProjectCategory:
            choices.append({"id": category.value, "name": category.label, "is_active": self.active == category})
        return choices
