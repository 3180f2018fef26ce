"""Business logic for trivia data shared between the UI and the API server."""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock

from trivia_tv.core.models import TriviaItem
from trivia_tv.core.services.trivia_repository import TriviaRepository
from trivia_tv.core.services.trivia_retrieval import TriviaRetrievalService
from trivia_tv.core.trivia_importer import (
    DEFAULT_DATA_PATH,
    TriviaDataError,
    load_trivia_from_file,
)

logger = logging.getLogger(__name__)


class TriviaManager:
    """Facade for trivia services: Repository and Retrieval.

    The Qt thread and the uvicorn thread both call into this object, so every
    operation runs under a single lock.
    """

    def __init__(self, items: list[TriviaItem] | None = None) -> None:
        self._lock = Lock()
        self._repository = TriviaRepository(items)
        self._retrieval = TriviaRetrievalService(self._repository)

    @classmethod
    def from_default_file(cls, data_path: Path = DEFAULT_DATA_PATH) -> "TriviaManager":
        """Build a manager from the bundled file, starting empty if it is unusable."""
        manager = cls()
        try:
            imported = load_trivia_from_file(data_path)
        except TriviaDataError:
            logger.exception("Could not load trivia data; every selection will come back empty")
            return manager
        manager.load_items(imported.items)
        logger.info("Loaded %d trivia items from %s", len(imported.items), imported.source_path)
        return manager

    # --- Repository Delegation ---

    def load_items(self, items: list[TriviaItem]) -> None:
        with self._lock:
            self._repository.load_items(items)

    def get_item_count(self) -> int:
        with self._lock:
            return self._repository.get_item_count()

    def get_countries(self) -> list[str]:
        with self._lock:
            return self._repository.get_countries()

    def get_periods(self) -> list[str]:
        with self._lock:
            return self._repository.get_periods()

    # --- Retrieval Delegation ---

    def fetch_trivia(
        self,
        country: str | None = None,
        period: str | None = None,
        countries: str | None = None,
        limit: int | None = None,
    ) -> list[TriviaItem]:
        with self._lock:
            return self._retrieval.fetch(
                country=country,
                period=period,
                countries=countries,
                limit=limit,
            )

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._retrieval.set_seed(seed)
