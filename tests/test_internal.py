"""Tests for internal job endpoints (/internal/run_pivot_scan, /run_cross_sell, /run_fit_scoring)."""

from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient

from tests.test_constants import TEST_INTERNAL_JOB_TOKEN

HEADERS = {"X-Internal-Token": TEST_INTERNAL_JOB_TOKEN}


class TestTokenGuard:
    def test_missing_token_returns_422(self, client_with_db: TestClient):
        """POST without the token header returns 422."""
        assert client_with_db.post("/internal/run_pivot_scan").status_code == 422

    def test_wrong_token_returns_403(self, client_with_db: TestClient):
        response = client_with_db.post(
            "/internal/run_cross_sell", headers={"X-Internal-Token": "wrong-token"}
        )
        assert response.status_code == 403

    def test_empty_configured_token_rejects_everything(self, client_with_db: TestClient, monkeypatch):
        from leadintel.config import get_settings

        monkeypatch.setenv("INTERNAL_JOB_TOKEN", "")
        get_settings.cache_clear()
        response = client_with_db.post("/internal/run_fit_scoring", headers={"X-Internal-Token": ""})
        assert response.status_code == 403


class TestRunPivotScan:
    def test_runs_scan(self, client_with_db: TestClient, make_project, make_company, add_calls):
        add_calls(make_company(project=make_project()), "不在", 50)

        response = client_with_db.post("/internal/run_pivot_scan", headers=HEADERS)

        assert response.status_code == 200
        assert response.json() == {"status": "completed", "projects_scanned": 1, "alerts_created": 1}

    @patch("leadintel.services.pivot.pivot_alert_service.run_pivot_scan")
    def test_failure_reported(self, mock_scan, client_with_db: TestClient):
        mock_scan.side_effect = RuntimeError("db gone")
        response = client_with_db.post("/internal/run_pivot_scan", headers=HEADERS)
        assert response.status_code == 200
        assert response.json() == {"status": "failed", "error": "db gone"}


class TestRunCrossSell:
    def test_runs_generation(self, client_with_db: TestClient, make_project):
        make_project()
        response = client_with_db.post("/internal/run_cross_sell", headers=HEADERS)
        assert response.json() == {
            "status": "completed",
            "projects_scanned": 1,
            "recommendations_created": 0,
        }


class TestRunFitScoring:
    def test_scopes_to_client(self, client_with_db: TestClient, make_client, make_company):
        client = make_client()
        make_company(client=client, industry="IT")
        make_company()

        response = client_with_db.post(
            "/internal/run_fit_scoring", headers=HEADERS, params={"client_id": client.id}
        )

        data = response.json()
        assert data["status"] == "completed"
        assert data["companies_scored"] == 1
        assert data["rank_counts"]["A"] == 1
