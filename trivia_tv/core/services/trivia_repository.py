"""Service holding the static, read-only trivia collection."""

from __future__ import annotations

from trivia_tv.constants.ui_constants import ANY_TIME_LABEL
from trivia_tv.core.models import TriviaItem


class TriviaRepository:
    """Owns the bundled trivia items. Items are only ever read, never mutated."""

    def __init__(self, items: list[TriviaItem] | None = None) -> None:
        self._items: tuple[TriviaItem, ...] = tuple(items or ())

    def load_items(self, items: list[TriviaItem]) -> None:
        """Replace the collection with a freshly loaded one."""
        self._items = tuple(items)

    def get_items(self) -> list[TriviaItem]:
        """Return a copy of all items in bundled order."""
        return list(self._items)

    def has_items(self) -> bool:
        return bool(self._items)

    def get_item_count(self) -> int:
        return len(self._items)

    def get_countries(self) -> list[str]:
        """Distinct countries in first-seen order."""
        return _distinct(item.country for item in self._items)

    def get_periods(self) -> list[str]:
        """Distinct periods sorted, followed by the "Any Time" sentinel label."""
        periods = sorted(set(item.period for item in self._items))
        return periods + [ANY_TIME_LABEL]


def _distinct(values) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        seen.setdefault(value, None)
    return list(seen)
