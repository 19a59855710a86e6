from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from porutham.api import create_app
from porutham.config import MatchingCfg, Settings


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app(Settings()))


@pytest.fixture()
def strict_client() -> TestClient:
    settings = Settings(matching=MatchingCfg(unknown_star_policy="strict", normalize_names=True))
    return TestClient(create_app(settings))


def test_health(client: TestClient) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "nakshatras": 27, "poruthams": 10}


def test_list_stars(client: TestClient) -> None:
    response = client.get("/v1/porutham/stars")
    assert response.status_code == 200
    payload = response.json()
    assert len(payload) == 27
    assert payload[0]["name"] == "Aswini"
    assert payload[-1] == {
        "id": 27,
        "name": "Revathi",
        "rashi": "Meena",
        "gana": "Deva",
        "yoni": "Elephant",
        "rajju": "Pada",
        "vedhai": ["Magha"],
        "lord": "Mercury",
    }


def test_get_star(client: TestClient) -> None:
    response = client.get("/v1/porutham/stars/Purva Phalguni")
    assert response.status_code == 200
    assert response.json()["id"] == 11


def test_get_unknown_star_returns_envelope(client: TestClient) -> None:
    response = client.get("/v1/porutham/stars/Pluto")
    assert response.status_code == 404
    payload = response.json()
    assert payload["code"] == "UNKNOWN_STAR"
    assert payload["details"] == {"name": "Pluto"}


def test_match_report(client: TestClient) -> None:
    response = client.post(
        "/v1/porutham/match",
        json={"groom_star": "Aswini", "bride_star": "Bharani"},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["totalScore"] == 6.0
    assert payload["totalPossible"] == 10.0
    assert payload["verdict"] == "Good Match (Mathiyamam)"
    assert payload["count"] == 27
    assert payload["groomStar"]["name"] == "Aswini"
    assert payload["brideStar"]["name"] == "Bharani"
    assert [item["name"] for item in payload["results"]][-2:] == ["Rajju", "Vedhai"]
    assert payload["results"][0]["maxScore"] == 1.0
    assert payload["fallbacks"] == []


def test_match_falls_back_by_default(client: TestClient) -> None:
    response = client.post(
        "/v1/porutham/match",
        json={"groom_star": "NotAStar", "bride_star": "Rohini"},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["groomStar"]["name"] == "Aswini"
    assert payload["fallbacks"] == ["groom"]


def test_match_strict_request_rejects_unknown(client: TestClient) -> None:
    response = client.post(
        "/v1/porutham/match",
        json={"groom_star": "NotAStar", "bride_star": "Rohini", "strict": True},
    )
    assert response.status_code == 422
    payload = response.json()
    assert payload["code"] == "UNKNOWN_STAR"
    assert payload["details"]["name"] == "NotAStar"


def test_configured_strict_policy(strict_client: TestClient) -> None:
    rejected = strict_client.post(
        "/v1/porutham/match",
        json={"groom_star": "NotAStar", "bride_star": "Rohini"},
    )
    assert rejected.status_code == 422

    normalized = strict_client.post(
        "/v1/porutham/match",
        json={"groom_star": " aswini", "bride_star": "BHARANI"},
    )
    assert normalized.status_code == 200
    assert normalized.json()["totalScore"] == 6.0

    overridden = strict_client.post(
        "/v1/porutham/match",
        json={"groom_star": "NotAStar", "bride_star": "Rohini", "strict": False},
    )
    assert overridden.status_code == 200


def test_match_validation_error(client: TestClient) -> None:
    response = client.post("/v1/porutham/match", json={"groom_star": "Aswini"})
    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"
