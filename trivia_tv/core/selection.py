"""Encoding and decoding of the selection -> playback navigation query."""

from __future__ import annotations

from urllib.parse import parse_qs, urlencode

from trivia_tv.constants.ui_constants import (
    ANY_PERIOD_PARAM,
    ANY_TIME_LABEL,
    DEFAULT_QUESTION_COUNT,
)
from trivia_tv.core.models import SessionSelection


class SelectionError(ValueError):
    """Raised when a navigation query cannot start a round."""


def period_to_param(period: str) -> str:
    """Map the "Any Time" label to the ``any`` query value."""
    return ANY_PERIOD_PARAM if period == ANY_TIME_LABEL else period


def build_playback_query(selection: SessionSelection) -> str:
    return urlencode(
        {
            "country": selection.country,
            "period": period_to_param(selection.period),
            "count": selection.question_count,
        }
    )


def parse_playback_query(query: str) -> SessionSelection:
    """Decode a playback query string.

    ``country`` is required. ``period`` falls back to ``any`` and ``count``
    falls back to the default when absent, unparseable or below one.
    """
    params = parse_qs(query.lstrip("?"))
    country = _first(params, "country")
    if not country:
        raise SelectionError("Country parameter is required")
    period = _first(params, "period") or ANY_PERIOD_PARAM
    return SessionSelection(
        country=country,
        period=period,
        question_count=_parse_count(_first(params, "count")),
    )


def _first(params: dict[str, list[str]], key: str) -> str:
    values = params.get(key) or [""]
    return values[0].strip()


def _parse_count(raw: str) -> int:
    """Read the whole value as an integer; trailing junk such as ``12abc`` counts as unparseable."""
    try:
        count = int(raw)
    except ValueError:
        return DEFAULT_QUESTION_COUNT
    return count if count >= 1 else DEFAULT_QUESTION_COUNT
