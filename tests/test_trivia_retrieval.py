import random
from collections import Counter

import pytest

from trivia_tv.core.services.trivia_repository import TriviaRepository
from trivia_tv.core.services.trivia_retrieval import (
    MissingCountryError,
    TriviaRetrievalService,
    filter_items,
    fisher_yates_shuffle,
    is_any_period,
    parse_countries,
)


@pytest.fixture
def service(sample_items):
    return TriviaRetrievalService(TriviaRepository(sample_items), rng=random.Random(7))


class TestFisherYatesShuffle:
    def test_result_is_permutation(self):
        items = list(range(20))
        shuffled = fisher_yates_shuffle(items, random.Random(1))
        assert sorted(shuffled) == items

    def test_input_is_not_modified(self):
        items = [1, 2, 3, 4, 5]
        fisher_yates_shuffle(items, random.Random(3))
        assert items == [1, 2, 3, 4, 5]

    def test_same_seed_gives_same_order(self):
        items = list("abcdefgh")
        assert fisher_yates_shuffle(items, random.Random(42)) == fisher_yates_shuffle(items, random.Random(42))

    def test_empty_and_single(self):
        assert fisher_yates_shuffle([]) == []
        assert fisher_yates_shuffle(["only"]) == ["only"]

    def test_every_ordering_of_three_appears_roughly_evenly(self):
        rng = random.Random(2024)
        counts = Counter(tuple(fisher_yates_shuffle("abc", rng)) for _ in range(6000))
        assert len(counts) == 6
        for count in counts.values():
            assert 800 < count < 1200


def test_parse_countries_splits_and_strips():
    assert parse_countries(" USA , Nigeria,,") == ["USA", "Nigeria"]
    assert parse_countries(None) == []
    assert parse_countries("") == []


@pytest.mark.parametrize("period", [None, "", "any", "ANY", "Any Time", "  any time "])
def test_any_period_sentinels(period):
    assert is_any_period(period)


def test_concrete_period_is_not_any():
    assert not is_any_period("1960-1979")


def test_filter_items_is_case_insensitive_on_country(sample_items):
    matched = filter_items(sample_items, ["usa"], "1960-1979")
    assert [item.answer for item in matched] == ["Apollo 11", "Richard Nixon"]


class TestTriviaRetrievalService:
    def test_filters_by_country_and_period(self, service):
        items = service.fetch(country="USA", period="1960-1979")
        assert sorted(item.answer for item in items) == ["Apollo 11", "Richard Nixon"]

    def test_any_period_returns_all_for_country(self, service):
        items = service.fetch(country="Nigeria", period="any")
        assert len(items) == 3
        assert all(item.country == "Nigeria" for item in items)

    def test_country_is_case_insensitive(self, service):
        assert len(service.fetch(country="nigeria")) == 3

    def test_countries_list_combines_with_country(self, service):
        items = service.fetch(country="USA", countries="Nigeria", period="1980-1999")
        assert sorted(item.answer for item in items) == ["Abuja", "Atlanta"]

    def test_countries_list_alone(self, service):
        assert len(service.fetch(countries="USA,Nigeria")) == 6

    def test_unknown_selection_returns_empty_list(self, service):
        assert service.fetch(country="Atlantis") == []
        assert service.fetch(country="USA", period="2000-2019") == []

    @pytest.mark.parametrize("country", [None, "", "   "])
    def test_missing_country_raises(self, service, country):
        with pytest.raises(MissingCountryError, match="Country parameter is required"):
            service.fetch(country=country)

    def test_limit_caps_result(self, service):
        assert len(service.fetch(country="USA", limit=2)) == 2
        assert len(service.fetch(country="USA", limit=50)) == 3
        assert service.fetch(country="USA", limit=0) == []

    def test_seed_makes_order_reproducible(self, service):
        service.set_seed(99)
        first = service.fetch(countries="USA,Nigeria")
        service.set_seed(99)
        second = service.fetch(countries="USA,Nigeria")
        assert first == second

    def test_repository_is_left_in_bundled_order(self, sample_items):
        repository = TriviaRepository(sample_items)
        service = TriviaRetrievalService(repository, rng=random.Random(5))
        for _ in range(5):
            service.fetch(countries="USA,Nigeria")
        assert repository.get_items() == sample_items
