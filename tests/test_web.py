"""Tests for the web routes."""

import inspect

import pytest
from fastapi.testclient import TestClient

from candidate_portal.config import AppConfig
from candidate_portal.storage.dataset import load
from candidate_portal.view import ViewSynchronizer
from candidate_portal.web.app import create_app
from candidate_portal.web.routes import router


@pytest.fixture
def client(raw_dataset):
    view = ViewSynchronizer(store=load(raw_dataset))
    with TestClient(create_app(AppConfig(), view=view)) as c:
        yield c


def ids(payload: dict) -> list[int]:
    return [r["id"] for r in payload["records"]]


class TestStartup:
    def test_loads_dataset_from_config(self, dataset_file):
        config = AppConfig()
        config.dataset.source = dataset_file
        with TestClient(create_app(config)) as c:
            payload = c.get("/api/candidates").json()
        assert payload["count"] == 3

    def test_failed_load_starts_empty(self, tmp_path):
        config = AppConfig()
        config.dataset.source = str(tmp_path / "missing.json")
        with TestClient(create_app(config)) as c:
            payload = c.get("/api/candidates").json()
            assert payload["count"] == 0
            assert c.get("/api/skills/suggest", params={"q": "go"}).json()["suggestions"] == []
            assert c.get("/export.csv").status_code == 204


class TestApi:
    def test_initial_view_is_full_dataset(self, client):
        payload = client.get("/api/candidates").json()
        assert ids(payload) == [1, 2, 3]
        assert payload["selection"] == []
        assert payload["params"]["ug_degree"] == "all"

    def test_filters(self, client):
        payload = client.post("/api/filters", json={"min_ug_cgpa": "8", "min_exp": "3"}).json()
        assert ids(payload) == [3]

    def test_infinite_filter_degrades_to_zero(self, client):
        response = client.post(
            "/api/filters",
            content='{"min_exp": 1e999, "min_ug_cgpa": 1e999}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 200
        payload = response.json()
        assert payload["params"]["min_exp"] == 0
        assert payload["params"]["min_ug_cgpa"] == 0.0
        assert ids(payload) == [1, 2, 3]

    def test_unknown_filter_rejected(self, client):
        assert client.post("/api/filters", json={"salary": 1}).status_code == 422

    def test_skill_add_remove(self, client):
        payload = client.post("/api/skills/add", json={"skill": "Go"}).json()
        assert ids(payload) == [1, 3]
        assert payload["selection"] == ["Go"]

        payload = client.post("/api/skills/remove", json={"skill": "Go"}).json()
        assert ids(payload) == [1, 2, 3]
        assert payload["selection"] == []

    def test_suggest(self, client):
        client.post("/api/skills/add", json={"skill": "SQL"})
        data = client.get("/api/skills/suggest", params={"q": "s"}).json()
        assert data["suggestions"] == ["Kubernetes", "JavaScript"]
        assert client.get("/api/skills/suggest").json()["suggestions"] == []

    def test_reset(self, client):
        client.post("/api/skills/add", json={"skill": "React"})
        client.post("/api/filters", json={"require_pg": True})
        payload = client.post("/api/reset").json()
        assert ids(payload) == [1, 2, 3]
        assert payload["selection"] == []
        assert payload["params"]["require_pg"] is False

    def test_candidate_json(self, client):
        assert client.get("/api/candidates/2").json()["name"] == "Ben Okafor"
        assert client.get("/api/candidates/99").status_code == 404


class TestPages:
    def test_index_lists_cards(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Asha Rao" in response.text
        assert '<strong id="count">3</strong>' in response.text

    def test_index_reflects_filters(self, client):
        client.post("/api/skills/add", json={"skill": "React"})
        response = client.get("/")
        assert "Ben Okafor" in response.text
        assert "Asha Rao" not in response.text

    def test_detail_page(self, client):
        response = client.get("/candidates/3")
        assert response.status_code == 200
        assert "Ph.D. Machine Learning" in response.text

    def test_detail_not_found(self, client):
        response = client.get("/candidates/99")
        assert response.status_code == 404
        assert "Candidate not found" in response.text

    def test_export_ignores_filters(self, client):
        client.post("/api/skills/add", json={"skill": "React"})
        response = client.get("/export.csv")
        assert response.status_code == 200
        assert "all_candidates_database.csv" in response.headers["content-disposition"]
        lines = response.text.strip().splitlines()
        assert len(lines) == 4
        assert lines[0].startswith("ID,Name,Bio")


class TestHandlersShareOneLoop:
    def test_all_handlers_are_coroutines(self):
        # Sync handlers would run in the threadpool and interleave on the shared view.
        for route in router.routes:
            assert inspect.iscoroutinefunction(route.endpoint), route.path

    def test_interleaved_mutations_report_their_own_state(self, client):
        first = client.post("/api/skills/add", json={"skill": "Go"}).json()
        second = client.post("/api/reset").json()
        third = client.post("/api/filters", json={"min_exp": 2}).json()
        assert first["selection"] == ["Go"] and ids(first) == [1, 3]
        assert second["selection"] == [] and ids(second) == [1, 2, 3]
        assert third["params"]["min_exp"] == 2 and ids(third) == [1, 3]
