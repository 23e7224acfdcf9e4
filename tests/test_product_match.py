"""Tests for product match scoring."""

from __future__ import annotations

import pytest

from leadintel.services.product_match import (
    compute_product_match,
    match_companies_for_product,
    match_level,
)

PROFILE = {
    "target_industries": ["IT", "金融"],
    "target_employee_min": 50,
    "target_employee_max": 500,
    "target_locations": ["東京", "大阪"],
    "benefits": ["Shorter sales cycles", "Better lists", "Automated follow-up", "Reporting"],
}


class TestMatchLevel:
    @pytest.mark.parametrize(
        ("score", "level"),
        [(95, "excellent"), (80, "excellent"), (79, "good"), (65, "good"), (64, "fair"), (50, "fair"), (49, "low")],
    )
    def test_thresholds(self, score: int, level: str) -> None:
        assert match_level(score) == level


class TestComputeProductMatch:
    def test_full_match(self) -> None:
        result = compute_product_match(**PROFILE, industry="IT", employees=120, location="東京都港区")
        assert result.score == 95
        assert result.level == "excellent"
        assert [r["category"] for r in result.reasons] == ["industry", "company_size", "location"]
        assert result.recommended_approach.startswith("Proactive")
        assert result.talking_points == PROFILE["benefits"][:3]
        assert len(result.potential_objections) == 2

    def test_no_match_is_base(self) -> None:
        result = compute_product_match(**PROFILE, industry="農業", employees=5000, location="北海道")
        assert result.score == 50
        assert result.level == "fair"
        assert result.reasons == []
        assert result.recommended_approach.startswith("Cautious")

    def test_employee_bounds_inclusive(self) -> None:
        low = compute_product_match(**PROFILE, industry=None, employees=50, location=None)
        high = compute_product_match(**PROFILE, industry=None, employees=500, location=None)
        assert low.score == high.score == 65

    def test_missing_employee_range_uses_defaults(self) -> None:
        result = compute_product_match(
            target_industries=None,
            target_employee_min=None,
            target_employee_max=None,
            target_locations=None,
            benefits=None,
            industry="IT",
            employees=9000,
            location="東京",
        )
        assert result.score == 65
        assert result.talking_points == []

    def test_unknown_employees_earns_nothing(self) -> None:
        result = compute_product_match(**PROFILE, industry=None, employees=None, location=None)
        assert result.score == 50


class TestMatchCompaniesForProduct:
    def test_missing_product(self, db) -> None:
        assert match_companies_for_product(db, 77) is None

    def test_scores_client_companies_best_first(self, db, make_client, make_product, make_company) -> None:
        client = make_client()
        product = make_product(client=client, **PROFILE)
        weak = make_company(client=client, industry="農業")
        strong = make_company(client=client, industry="IT", employees=100, location="大阪市")
        tie_a = make_company(client=client, industry="金融")
        tie_b = make_company(client=client, industry="IT")
        make_company(industry="IT", employees=100, location="東京")  # other client

        result = match_companies_for_product(db, product.id)

        ids = [company.id for company, _ in result["matches"]]
        assert ids == [strong.id, tie_a.id, tie_b.id, weak.id]
        summary = result["summary"]
        assert summary["total"] == 4
        assert summary["by_level"] == {"excellent": 1, "good": 2, "fair": 1, "low": 0}
        assert summary["top_industries"][0] == {"industry": "IT", "count": 2}
        # (95 + 70 + 70 + 50) / 4 = 71.25
        assert summary["avg_score"] == 71

    def test_min_score_filter(self, db, make_client, make_product, make_company) -> None:
        client = make_client()
        product = make_product(client=client, **PROFILE)
        make_company(client=client, industry="農業")
        make_company(client=client, industry="IT")

        result = match_companies_for_product(db, product.id, min_score=70)
        assert result["summary"]["total"] == 1
