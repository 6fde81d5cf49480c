"""Tests for the Flask JSON API."""

from __future__ import annotations

import random

import pytest
from flask.testing import FlaskClient
from sqlalchemy.exc import OperationalError

import repositories.store as store_module
from domain.config import AppConfig
from repositories.store import SqlAlchemyVotingStore
from web import create_app


@pytest.fixture
def client(seeded_store: SqlAlchemyVotingStore) -> FlaskClient:
    app = create_app(seeded_store, AppConfig(recent_votes_limit=2), rng=random.Random(5))
    app.testing = True
    return app.test_client()


def test_list_parks_returns_ranked_parks(client: FlaskClient) -> None:
    response = client.get("/api/parks")

    assert response.status_code == 200
    parks = response.get_json()
    assert len(parks) == 3
    assert set(parks[0]) == {"id", "name", "image_url", "elo_rating", "total_votes", "wins", "losses"}
    assert all(park["elo_rating"] == 1200 for park in parks)


@pytest.mark.parametrize("path", ["/api/parks/pair", "/api/parks/random-pair", "/api/parks/random"])
def test_pair_returns_two_distinct_parks(client: FlaskClient, path: str) -> None:
    response = client.get(path)

    assert response.status_code == 200
    pair = response.get_json()
    assert len(pair) == 2
    assert pair[0]["id"] != pair[1]["id"]


def test_pair_with_one_park_is_client_error(store: SqlAlchemyVotingStore) -> None:
    store.seed_catalog({"Acadia": "/a.jpg"})
    client = create_app(store).test_client()

    response = client.get("/api/parks/pair")

    assert response.status_code == 400
    assert response.get_json() == {"error": "Not enough parks available"}


def test_get_park_by_id(client: FlaskClient, park_ids: dict[str, int]) -> None:
    response = client.get(f"/api/parks/{park_ids['Zion']}")
    assert response.status_code == 200
    assert response.get_json()["name"] == "Zion"

    missing = client.get("/api/parks/9999")
    assert missing.status_code == 404
    assert missing.get_json() == {"error": "Park not found"}


def test_vote_updates_rankings_and_recent_votes(
    client: FlaskClient,
    park_ids: dict[str, int],
) -> None:
    response = client.post(
        "/api/vote",
        json={"winnerId": park_ids["Yosemite"], "loserId": park_ids["Acadia"]},
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["result"]["newWinnerRating"] == 1216
    assert body["result"]["newLoserRating"] == 1184

    rankings = client.get("/api/rankings").get_json()
    assert rankings[0]["name"] == "Yosemite"
    assert rankings[0]["rank"] == 1
    assert rankings[-1]["name"] == "Acadia"
    assert [entry["rank"] for entry in rankings] == [1, 2, 3]

    recent = client.get("/api/recent-votes").get_json()
    assert len(recent) == 1
    assert recent[0]["winner_name"] == "Yosemite"
    assert recent[0]["loser_name"] == "Acadia"
    assert recent[0]["winner_image"] == "/images/parks/yosemite.jpg"


def test_votes_alias_accepts_numeric_strings(client: FlaskClient, park_ids: dict[str, int]) -> None:
    response = client.post(
        "/api/votes",
        json={"winnerId": str(park_ids["Zion"]), "loserId": str(park_ids["Acadia"])},
    )
    assert response.status_code == 200


def test_recent_votes_limit_from_query_and_config(
    client: FlaskClient,
    park_ids: dict[str, int],
) -> None:
    for _ in range(3):
        client.post("/api/vote", json={"winnerId": park_ids["Zion"], "loserId": park_ids["Acadia"]})

    assert len(client.get("/api/recent-votes").get_json()) == 2
    assert len(client.get("/api/recent-votes?limit=1").get_json()) == 1
    assert len(client.get("/api/recent-votes?limit=3").get_json()) == 3


def test_rankings_limit_query(client: FlaskClient) -> None:
    assert len(client.get("/api/rankings?limit=2").get_json()) == 2


@pytest.mark.parametrize("query", ["limit=abc", "limit=0", "limit=-3"])
def test_invalid_limit_is_client_error(client: FlaskClient, query: str) -> None:
    response = client.get(f"/api/recent-votes?{query}")
    assert response.status_code == 400
    assert "limit" in response.get_json()["error"]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"winnerId": 1},
        {"loserId": 1},
        {"winnerId": 1, "loserId": 1},
        {"winnerId": "abc", "loserId": 2},
        {"winnerId": True, "loserId": 2},
        {"winnerId": "\u00b2", "loserId": 1},
        {"winnerId": "9" * 5000, "loserId": 1},
        [1, 2],
    ],
)
def test_bad_vote_payload_is_client_error(
    client: FlaskClient,
    seeded_store: SqlAlchemyVotingStore,
    payload: object,
) -> None:
    before = seeded_store.list_items()

    response = client.post("/api/vote", json=payload)

    assert response.status_code == 400
    assert "error" in response.get_json()
    assert seeded_store.list_items() == before


def test_vote_for_unknown_park_is_client_error(
    client: FlaskClient,
    park_ids: dict[str, int],
) -> None:
    response = client.post("/api/vote", json={"winnerId": 9999, "loserId": park_ids["Zion"]})

    assert response.status_code == 400
    assert "9999" in response.get_json()["error"]


@pytest.mark.parametrize("out_of_range_id", [2**70, "9" * 30, -(2**70)])
def test_vote_with_out_of_range_id_is_client_error(
    client: FlaskClient,
    seeded_store: SqlAlchemyVotingStore,
    park_ids: dict[str, int],
    out_of_range_id: object,
) -> None:
    before = seeded_store.list_items()

    response = client.post("/api/vote", json={"winnerId": out_of_range_id, "loserId": park_ids["Zion"]})

    assert response.status_code == 400
    assert "Unknown park" in response.get_json()["error"]
    assert seeded_store.list_items() == before


def test_get_park_with_out_of_range_id_is_not_found(client: FlaskClient) -> None:
    response = client.get(f"/api/parks/{2**70}")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Park not found"}


def test_store_failure_is_server_error(
    client: FlaskClient,
    seeded_store: SqlAlchemyVotingStore,
    park_ids: dict[str, int],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def failing_insert(session, *, winner_id, loser_id):
        raise OperationalError("INSERT INTO votes", {}, Exception("database is locked"))

    monkeypatch.setattr(store_module, "insert_vote", failing_insert)
    before = seeded_store.list_items()

    response = client.post("/api/vote", json={"winnerId": park_ids["Zion"], "loserId": park_ids["Acadia"]})

    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal server error"}
    assert seeded_store.list_items() == before


def test_unknown_api_route_is_json_404(client: FlaskClient) -> None:
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.get_json() == {"error": "API endpoint not found"}


def test_api_responses_carry_cors_headers(client: FlaskClient) -> None:
    response = client.get("/api/parks")
    assert response.headers["Access-Control-Allow-Origin"] == "*"

    preflight = client.options("/api/vote")
    assert preflight.status_code == 200
    assert "POST" in preflight.headers["Access-Control-Allow-Methods"]
