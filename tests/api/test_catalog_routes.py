from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from pokedex.core.config import Settings
from pokedex.main import create_app


@pytest.fixture
def api(starter_client) -> TestClient:
    cfg = Settings(log_json=False, default_page_limit=2, max_page_limit=10)
    return TestClient(create_app(settings=cfg, client=starter_client))


class TestListPokemon:
    def test_default_page(self, api):
        resp = api.get("/pokemon")

        assert resp.status_code == 200
        data = resp.json()
        assert [p["name"] for p in data["items"]] == ["bulbasaur", "charmander"]
        assert data["total_count"] == 6
        assert data["total_pages"] == 3
        assert data["has_next_page"] is True
        assert data["has_prev_page"] is False

    def test_explicit_page(self, api):
        data = api.get("/pokemon", params={"page": 2, "limit": 4}).json()

        assert [p["name"] for p in data["items"]] == ["squirtle", "pikachu"]
        assert data["current_page"] == 2

    def test_limit_over_max(self, api):
        resp = api.get("/pokemon", params={"limit": 11})

        assert resp.status_code == 400
        assert resp.json()["error"] == "invalid_pagination"

    def test_page_zero_rejected(self, api):
        assert api.get("/pokemon", params={"page": 0}).status_code == 422

    def test_upstream_failure_is_502(self, api, starter_client):
        starter_client.fail_listing = True

        resp = api.get("/pokemon")

        assert resp.status_code == 502
        body = resp.json()
        assert body["error"] == "upstream_failure"
        assert body["operation"] == "listing"


class TestGetPokemon:
    def test_found(self, api):
        resp = api.get("/pokemon/pikachu")

        assert resp.status_code == 200
        data = resp.json()
        assert data["display_name"] == "Pikachu"
        assert data["groups"] == ["electric"]
        assert data["primary_measure"] == pytest.approx(0.4)
        assert {"name": "Sp. Atk", "value": 50} in data["attributes"]

    def test_not_found(self, api):
        assert api.get("/pokemon/nonexistent-xyz").status_code == 404


class TestSearch:
    def test_blank(self, api, starter_client):
        data = api.get("/search", params={"q": "  "}).json()

        assert data == {"kind": "scan", "query": "", "items": [], "total_count": 0}
        assert starter_client.calls == []

    def test_exact(self, api):
        data = api.get("/search", params={"q": "pikachu"}).json()

        assert data["kind"] == "exact"
        assert data["total_count"] == 1

    def test_dot_query_is_scanned(self, api):
        resp = api.get("/search", params={"q": "."})

        assert resp.status_code == 200
        assert resp.json()["kind"] == "scan"
        assert resp.json()["total_count"] == 0

    def test_scan(self, api):
        data = api.get("/search", params={"q": "char"}).json()

        assert data["kind"] == "scan"
        assert data["total_count"] == 3
        assert len(data["items"]) == 3


class TestTypes:
    def test_list_types_hides_sentinels(self, api):
        data = api.get("/types").json()

        assert data == [
            {"key": "fire", "display_name": "Fire"},
            {"key": "water", "display_name": "Water"},
        ]

    def test_type_page(self, api):
        data = api.get("/types/fire", params={"page": 2}).json()

        assert [p["name"] for p in data["items"]] == ["charizard"]
        assert data["total_count"] == 3

    def test_unknown_type(self, api):
        assert api.get("/types/unknown-group").status_code == 404
