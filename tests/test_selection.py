import pytest

from trivia_tv.constants.ui_constants import ANY_TIME_LABEL, DEFAULT_QUESTION_COUNT
from trivia_tv.core.models import SessionSelection
from trivia_tv.core.selection import (
    SelectionError,
    build_playback_query,
    parse_playback_query,
    period_to_param,
)


def test_any_time_label_becomes_any_param():
    assert period_to_param(ANY_TIME_LABEL) == "any"
    assert period_to_param("1980-1999") == "1980-1999"


def test_build_query_encodes_all_fields():
    query = build_playback_query(SessionSelection("Nigeria", ANY_TIME_LABEL, 7))
    assert query == "country=Nigeria&period=any&count=7"


def test_query_survives_a_round_trip_with_spaces():
    selection = SessionSelection("United Kingdom", "1960-1979", 12)
    assert parse_playback_query(build_playback_query(selection)) == selection


def test_parse_accepts_leading_question_mark():
    selection = parse_playback_query("?country=USA&period=1980-1999&count=5")
    assert selection == SessionSelection("USA", "1980-1999", 5)


def test_missing_period_defaults_to_any():
    assert parse_playback_query("country=USA&count=5").period == "any"


@pytest.mark.parametrize("raw_count", ["", "abc", "0", "-3", "2.5", "12abc"])
def test_bad_count_falls_back_to_default(raw_count):
    selection = parse_playback_query(f"country=USA&count={raw_count}")
    assert selection.question_count == DEFAULT_QUESTION_COUNT


def test_absent_count_falls_back_to_default():
    assert parse_playback_query("country=USA").question_count == DEFAULT_QUESTION_COUNT


@pytest.mark.parametrize("query", ["", "period=any&count=5", "country=&count=5", "country=%20"])
def test_missing_country_raises(query):
    with pytest.raises(SelectionError):
        parse_playback_query(query)
