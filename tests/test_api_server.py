import pytest
from fastapi.testclient import TestClient

from trivia_tv.core.trivia_manager import TriviaManager
from trivia_tv.server.api_server import INTERNAL_ERROR_MESSAGE, create_api_app


class ExplodingManager(TriviaManager):
    def fetch_trivia(self, *args, **kwargs):
        raise RuntimeError("disk on fire")


@pytest.fixture
def client(sample_items):
    manager = TriviaManager(sample_items)
    manager.set_shuffle_seed(3)
    return TestClient(create_api_app(manager))


def test_returns_matching_items(client):
    response = client.get("/api/trivia", params={"country": "USA", "period": "1960-1979"})
    assert response.status_code == 200
    answers = sorted(item["answer"] for item in response.json()["items"])
    assert answers == ["Apollo 11", "Richard Nixon"]


def test_fun_fact_serialized_only_when_present(client):
    response = client.get("/api/trivia", params={"country": "USA", "period": "1960-1979"})
    by_answer = {item["answer"]: item for item in response.json()["items"]}
    assert by_answer["Apollo 11"]["funFact"] == "It launched in July 1969."
    assert "funFact" not in by_answer["Richard Nixon"]
    assert "fun_fact" not in by_answer["Apollo 11"]


def test_any_period_and_case_insensitive_country(client):
    response = client.get("/api/trivia", params={"country": "nigeria", "period": "any"})
    assert response.status_code == 200
    assert len(response.json()["items"]) == 3


def test_period_is_optional(client):
    response = client.get("/api/trivia", params={"country": "USA"})
    assert len(response.json()["items"]) == 3


def test_countries_list(client):
    response = client.get("/api/trivia", params={"countries": "USA,Nigeria"})
    assert response.status_code == 200
    assert len(response.json()["items"]) == 6


def test_count_limits_items(client):
    response = client.get("/api/trivia", params={"country": "USA", "count": 2})
    assert len(response.json()["items"]) == 2


def test_count_below_one_is_rejected(client):
    response = client.get("/api/trivia", params={"country": "USA", "count": 0})
    assert response.status_code == 422


def test_no_match_returns_empty_list(client):
    response = client.get("/api/trivia", params={"country": "Atlantis"})
    assert response.status_code == 200
    assert response.json() == {"items": []}


@pytest.mark.parametrize("params", [{}, {"country": ""}, {"period": "any"}])
def test_missing_country_is_bad_request(client, params):
    response = client.get("/api/trivia", params=params)
    assert response.status_code == 400
    assert response.json() == {"error": "Country parameter is required"}


def test_unexpected_failure_is_server_error(caplog):
    client = TestClient(create_api_app(ExplodingManager()))
    response = client.get("/api/trivia", params={"country": "USA"})
    assert response.status_code == 500
    assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}
    assert "Trivia retrieval failed" in caplog.text


def test_catalog_lists_countries_and_periods(client):
    response = client.get("/api/catalog")
    assert response.status_code == 200
    assert response.json() == {
        "countries": ["USA", "Nigeria"],
        "periods": ["1960-1979", "1980-1999", "2000-2019", "Any Time"],
    }
