"""API tests for /api/clients, /api/products and /api/companies."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _create_client(api: TestClient, name: str = "Acme") -> int:
    response = api.post("/api/clients", json={"name": name})
    assert response.status_code == 201
    return response.json()["id"]


class TestCompaniesApi:
    def test_create_scores_company(self, client_with_db: TestClient) -> None:
        client_id = _create_client(client_with_db)
        response = client_with_db.post(
            "/api/companies",
            json={
                "client_id": client_id,
                "name": "Example KK",
                "industry": "IT",
                "employees": 80,
                "location": "東京都中央区",
                "enrichment": {"capital": 20000000, "website": "https://example.jp"},
            },
        )

        assert response.status_code == 201
        data = response.json()
        # 50 + 10 + 15 + 5 + 5 + 3
        assert data["score"] == 88
        assert data["rank"] == "S"
        assert len(data["score_reasons"]) == 5

    def test_create_unknown_client_404(self, client_with_db: TestClient) -> None:
        response = client_with_db.post("/api/companies", json={"client_id": 99, "name": "X"})
        assert response.status_code == 404

    def test_create_invalid_payload_422(self, client_with_db: TestClient) -> None:
        response = client_with_db.post("/api/companies", json={"client_id": 1, "name": ""})
        assert response.status_code == 422

    def test_get_and_rescore(self, client_with_db: TestClient, db, make_company) -> None:
        company = make_company(industry="IT")
        assert client_with_db.get(f"/api/companies/{company.id}").json()["score"] is None

        response = client_with_db.post(f"/api/companies/{company.id}/score")
        assert response.status_code == 200
        assert response.json()["rank"] == "A"

    def test_get_missing_404(self, client_with_db: TestClient) -> None:
        assert client_with_db.get("/api/companies/9999").status_code == 404
        assert client_with_db.post("/api/companies/9999/score").status_code == 404


class TestIntentApi:
    def test_analyze_and_read(self, client_with_db: TestClient, make_company) -> None:
        company = make_company()
        response = client_with_db.post(
            f"/api/companies/{company.id}/intent",
            json={
                "hiring": {"is_hiring": True, "job_count": 11, "positions": ["営業"]},
                "news": {"recent_news": [{"title": "8億円の資金調達を実施", "date": "2026-09-30"}]},
            },
        )

        assert response.status_code == 200
        data = response.json()
        # 30 + 25 + 20 + 15
        assert data["intent_score"] == 90
        assert data["intent_level"] == "hot"
        assert data["buying_stage"] == "consideration"
        assert [s["type"] for s in data["signals"]] == ["hiring", "funding"]

        fetched = client_with_db.get(f"/api/companies/{company.id}/intent").json()
        assert fetched["intent_score"] == 90

    def test_missing_profile_404(self, client_with_db: TestClient, make_company) -> None:
        company = make_company()
        assert client_with_db.get(f"/api/companies/{company.id}/intent").status_code == 404
        assert client_with_db.post("/api/companies/4040/intent", json={}).status_code == 404


class TestSearchApi:
    def test_search_and_hot(self, client_with_db: TestClient, make_client, make_company, make_intent) -> None:
        client = make_client()
        hot = make_company(client=client, name="Hot", industry="IT")
        warm = make_company(client=client, name="Warm")
        make_intent(hot, 80, "hot", "decision")
        make_intent(warm, 50, "warm", "awareness")

        response = client_with_db.post(
            "/api/companies/search", json={"client_id": client.id, "limit": 1}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [r["company"]["name"] for r in data["results"]] == ["Hot"]
        assert data["results"][0]["priority_rank"] == "S"
        assert data["summary"]["by_intent_level"] == {"hot": 1, "warm": 1, "cold": 0}

        hot_leads = client_with_db.get("/api/companies/hot", params={"client_id": client.id}).json()
        assert [r["company"]["name"] for r in hot_leads] == ["Hot"]

    def test_unknown_product_404(self, client_with_db: TestClient) -> None:
        response = client_with_db.post("/api/companies/search", json={"product_id": 12})
        assert response.status_code == 404

    def test_invalid_sort_422(self, client_with_db: TestClient) -> None:
        response = client_with_db.post("/api/companies/search", json={"sort_by": "name"})
        assert response.status_code == 422


class TestProductsApi:
    def test_product_matches(self, client_with_db: TestClient, make_client, make_company) -> None:
        client = make_client()
        make_company(client=client, industry="金融", employees=300, location="大阪府")
        response = client_with_db.post(
            "/api/products",
            json={
                "client_id": client.id,
                "name": "Dialer",
                "target_industries": ["金融"],
                "target_locations": ["大阪"],
                "benefits": ["Faster dialing"],
            },
        )
        assert response.status_code == 201
        product_id = response.json()["id"]

        assert client_with_db.get(f"/api/products/{product_id}").json()["name"] == "Dialer"
        matches = client_with_db.get(f"/api/products/{product_id}/matches").json()
        assert matches["summary"]["total"] == 1
        assert matches["matches"][0]["score"] == 95
        assert matches["matches"][0]["level"] == "excellent"
        assert matches["matches"][0]["talking_points"] == ["Faster dialing"]

    def test_missing_product_404(self, client_with_db: TestClient) -> None:
        assert client_with_db.get("/api/products/3/matches").status_code == 404
        assert client_with_db.get("/api/products/3").status_code == 404
