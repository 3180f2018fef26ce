"""Service for selecting and randomizing trivia items for a round."""

from __future__ import annotations

import logging
import random
from typing import Sequence, TypeVar

from trivia_tv.constants.ui_constants import ANY_PERIOD_PARAM, ANY_TIME_LABEL
from trivia_tv.core.models import TriviaItem
from trivia_tv.core.services.trivia_repository import TriviaRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ANY_PERIODS = {ANY_PERIOD_PARAM, ANY_TIME_LABEL.lower()}


class MissingCountryError(ValueError):
    """Raised when a retrieval request names no country."""

    def __init__(self) -> None:
        super().__init__("Country parameter is required")


def fisher_yates_shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items``.

    Walks from the last index down to 1, swapping each element with one
    chosen uniformly from the positions at or before it. The input is left
    untouched.
    """
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def parse_countries(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def is_any_period(period: str | None) -> bool:
    if period is None:
        return True
    normalized = period.strip().lower()
    return not normalized or normalized in _ANY_PERIODS


def filter_items(
    items: Sequence[TriviaItem],
    countries: Sequence[str],
    period: str | None = None,
) -> list[TriviaItem]:
    wanted = {country.lower() for country in countries}
    matched = [item for item in items if item.country.lower() in wanted]
    if not is_any_period(period):
        matched = [item for item in matched if item.period == period]
    return matched


class TriviaRetrievalService:
    """Filters the repository by country/period and shuffles the result."""

    def __init__(self, repository: TriviaRepository, rng: random.Random | None = None) -> None:
        self._repository = repository
        self._rng = rng or random.Random()

    def set_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def fetch(
        self,
        country: str | None = None,
        period: str | None = None,
        countries: str | None = None,
        limit: int | None = None,
    ) -> list[TriviaItem]:
        """Return matching items in random order, optionally capped to ``limit``.

        ``country`` is a single name; ``countries`` is a comma-separated list.
        Both are matched case-insensitively and may be combined. An empty
        result is a valid empty list.
        """
        names = parse_countries(countries)
        if country and country.strip():
            names.insert(0, country.strip())
        if not names:
            raise MissingCountryError()

        matched = filter_items(self._repository.get_items(), names, period)
        shuffled = fisher_yates_shuffle(matched, self._rng)
        if limit is not None:
            shuffled = shuffled[: max(0, limit)]
        logger.debug(
            "Retrieved %d trivia items for countries=%s period=%s", len(shuffled), names, period
        )
        return shuffled
