"""Tests for fit score persistence on Company."""

from __future__ import annotations

from leadintel.services.fit.fit_writer import rescore_companies, score_and_store_company


class TestScoreAndStoreCompany:
    def test_missing_company(self, db) -> None:
        assert score_and_store_company(db, 12345) is None

    def test_stores_rank_score_reasons(self, db, make_company) -> None:
        company = make_company(industry="IT", employees=600, location="東京都渋谷区")
        stored = score_and_store_company(db, company.id)

        assert stored.score == 95
        assert stored.rank == "S"
        assert len(stored.score_reasons) == 3
        assert stored.scored_at is not None

    def test_rescore_reflects_changed_attributes(self, db, make_company) -> None:
        company = make_company(employees=10)
        assert score_and_store_company(db, company.id).rank == "B"

        company.employees = 120
        company.industry = "金融"
        db.commit()
        assert score_and_store_company(db, company.id).score == 80


class TestRescoreCompanies:
    def test_counts_by_rank(self, db, make_client, make_company) -> None:
        client = make_client()
        make_company(client=client, industry="IT", employees=600, location="東京都")
        make_company(client=client, employees=60)
        make_company(client=client)
        make_company(industry="IT")  # another client

        result = rescore_companies(db, client_id=client.id)

        assert result["status"] == "completed"
        assert result["companies_scored"] == 3
        assert result["rank_counts"] == {"S": 1, "A": 0, "B": 2, "C": 0}

    def test_all_clients(self, db, make_company) -> None:
        make_company()
        make_company()
        assert rescore_companies(db)["companies_scored"] == 2
