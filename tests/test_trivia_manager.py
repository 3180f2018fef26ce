import logging

from trivia_tv.core.services.trivia_repository import TriviaRepository
from trivia_tv.core.trivia_manager import TriviaManager


class TestTriviaRepository:
    def test_countries_in_first_seen_order(self, sample_items):
        assert TriviaRepository(sample_items).get_countries() == ["USA", "Nigeria"]

    def test_periods_sorted_with_any_time_last(self, sample_items):
        assert TriviaRepository(sample_items).get_periods() == [
            "1960-1979",
            "1980-1999",
            "2000-2019",
            "Any Time",
        ]

    def test_empty_repository(self):
        repository = TriviaRepository()
        assert not repository.has_items()
        assert repository.get_item_count() == 0
        assert repository.get_periods() == ["Any Time"]

    def test_get_items_returns_a_copy(self, sample_items):
        repository = TriviaRepository(sample_items)
        repository.get_items().clear()
        assert repository.get_item_count() == len(sample_items)


class TestTriviaManager:
    def test_fetch_delegates_to_retrieval(self, sample_items):
        manager = TriviaManager(sample_items)
        manager.set_shuffle_seed(1)
        items = manager.fetch_trivia(country="USA", period="any", limit=2)
        assert len(items) == 2
        assert all(item.country == "USA" for item in items)

    def test_load_items_replaces_collection(self, sample_items):
        manager = TriviaManager()
        assert manager.get_item_count() == 0
        manager.load_items(sample_items)
        assert manager.get_item_count() == 6
        assert manager.get_countries() == ["USA", "Nigeria"]

    def test_from_default_file_loads_bundled_data(self):
        manager = TriviaManager.from_default_file()
        assert manager.get_item_count() == 40

    def test_from_unreadable_file_starts_empty(self, tmp_path, caplog):
        path = tmp_path / "broken.json"
        path.write_text("not json", encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            manager = TriviaManager.from_default_file(path)
        assert manager.get_item_count() == 0
        assert manager.fetch_trivia(country="USA") == []
        assert "Could not load trivia data" in caplog.text
