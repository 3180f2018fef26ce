"""Utilities for loading the bundled trivia collection.

File format: a JSON array of objects, one per trivia item:

    [
      {
        "country": "USA",
        "period": "1960-1979",
        "question": "Which mission first landed people on the Moon?",
        "answer": "Apollo 11",
        "funFact": "Optional extra sentence read after the answer."
      }
    ]

``country``, ``period``, ``question`` and ``answer`` are required non-empty
strings. ``funFact`` is optional; an empty string is treated as missing.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path

from trivia_tv.core.models import TriviaItem

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "trivia.json"

_REQUIRED_FIELDS = ("country", "period", "question", "answer")


class TriviaDataError(Exception):
    """Raised when the trivia collection cannot be parsed."""


@dataclass(slots=True)
class ImportedTrivia:
    """Container for the loaded collection and where it came from."""

    source_path: Path
    items: list[TriviaItem]


def load_trivia_from_file(file_path: Path = DEFAULT_DATA_PATH) -> ImportedTrivia:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TriviaDataError(f"Unable to read trivia file {file_path}: {exc}") from exc
    items = parse_trivia_text(text)
    return ImportedTrivia(source_path=file_path, items=items)


def parse_trivia_text(text: str) -> list[TriviaItem]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TriviaDataError(f"Trivia file is not valid JSON: {exc.msg} (line {exc.lineno}).") from exc
    if not isinstance(raw, list):
        raise TriviaDataError("Trivia file must contain a JSON array of items.")
    return [_parse_entry(entry, position) for position, entry in enumerate(raw, start=1)]


def _parse_entry(entry: object, position: int) -> TriviaItem:
    if not isinstance(entry, dict):
        raise TriviaDataError(f"Item {position} must be an object.")

    values: dict[str, str] = {}
    for field_name in _REQUIRED_FIELDS:
        value = entry.get(field_name)
        if not isinstance(value, str) or not value.strip():
            raise TriviaDataError(f"Item {position} is missing required field '{field_name}'.")
        values[field_name] = value.strip()

    fun_fact = entry.get("funFact")
    if fun_fact is not None and not isinstance(fun_fact, str):
        raise TriviaDataError(f"Item {position} has a non-text 'funFact'.")

    return TriviaItem(
        country=values["country"],
        period=values["period"],
        question=values["question"],
        answer=values["answer"],
        fun_fact=(fun_fact or "").strip() or None,
    )
