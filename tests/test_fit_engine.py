"""Tests for the fit scoring engine and rank step function."""

from __future__ import annotations

import pytest

from leadintel.services.fit.fit_constants import fit_rank
from leadintel.services.fit.fit_engine import compute_fit_score, parse_amount


class TestFitRank:
    """Score → rank thresholds."""

    @pytest.mark.parametrize(
        ("score", "rank"),
        [(100, "S"), (80, "S"), (79, "A"), (65, "A"), (64, "B"), (50, "B"), (49, "C"), (0, "C")],
    )
    def test_thresholds(self, score: int, rank: str) -> None:
        assert fit_rank(score) == rank


class TestComputeFitScore:
    """Base score, bands, reasons order and clamping."""

    def test_no_attributes_is_base_score(self) -> None:
        result = compute_fit_score()
        assert result.score == 50
        assert result.rank == "B"
        assert result.reasons == []

    @pytest.mark.parametrize(
        ("employees", "expected"),
        [(1000, 75), (500, 75), (499, 65), (100, 65), (99, 60), (50, 60), (49, 50), (0, 50)],
    )
    def test_employee_bands_are_exclusive(self, employees: int, expected: int) -> None:
        assert compute_fit_score(employees=employees).score == expected

    def test_high_potential_industry_adds_15(self) -> None:
        assert compute_fit_score(industry="IT").score == 65
        assert compute_fit_score(industry="農業").score == 50

    def test_primary_city_beats_secondary(self) -> None:
        assert compute_fit_score(location="東京都千代田区").score == 55
        assert compute_fit_score(location="大阪府大阪市").score == 53
        assert compute_fit_score(location="北海道札幌市").score == 50

    def test_reasons_follow_evaluation_order(self) -> None:
        result = compute_fit_score(
            industry="金融",
            employees=120,
            location="福岡県福岡市",
            enrichment={"grade": "B", "email": "info@example.jp"},
        )
        assert result.score == 50 + 15 + 15 + 3 + 7 + 2
        assert len(result.reasons) == 5
        assert "Mid-size" in result.reasons[0]
        assert result.reasons[1].startswith("金融")
        assert "major city" in result.reasons[2]
        assert result.reasons[3] == "Corporate grade B"
        assert result.reasons[4] == "Contact email known"

    def test_enrichment_bands(self) -> None:
        result = compute_fit_score(
            enrichment={
                "revenue": "12,000,000,000円",
                "capital": 50_000_000,
                "listing_status": "東証プライム",
                "grade": "C",
                "website": "https://example.jp",
            }
        )
        # 50 + revenue 15 + capital 5 + listed 15 + grade 3 + website 3
        assert result.score == 91
        assert result.rank == "S"

    def test_unlisted_earns_no_listing_bonus(self) -> None:
        assert compute_fit_score(enrichment={"listing_status": "未上場"}).score == 50

    def test_unknown_grade_ignored(self) -> None:
        assert compute_fit_score(enrichment={"grade": "Z"}).score == 50

    def test_clamped_to_100(self) -> None:
        result = compute_fit_score(
            industry="IT",
            employees=800,
            location="東京都港区",
            enrichment={
                "revenue": 20_000_000_000,
                "capital": 500_000_000,
                "listing_status": "東証プライム",
                "grade": "A",
                "website": "https://example.jp",
                "email": "a@example.jp",
            },
        )
        assert result.score == 100
        assert result.rank == "S"

    def test_score_in_range_and_monotonic(self) -> None:
        """Adding any single positive attribute never lowers the score."""
        base = {"industry": "農業", "employees": 10, "location": "北海道", "enrichment": {}}
        base_score = compute_fit_score(**base).score
        variants = [
            {**base, "industry": "IT"},
            {**base, "employees": 150},
            {**base, "location": "東京都"},
            {**base, "enrichment": {"revenue": 2_000_000_000}},
            {**base, "enrichment": {"capital": 200_000_000}},
            {**base, "enrichment": {"listing_status": "東証スタンダード"}},
            {**base, "enrichment": {"grade": "A"}},
        ]
        for variant in variants:
            score = compute_fit_score(**variant).score
            assert 50 <= score <= 100
            assert score >= base_score

    def test_idempotent(self) -> None:
        kwargs = {
            "industry": "製造",
            "employees": 300,
            "location": "愛知県名古屋市",
            "enrichment": {"revenue": "3億円相当 300,000,000", "grade": "A"},
        }
        assert compute_fit_score(**kwargs) == compute_fit_score(**kwargs)


class TestParseAmount:
    def test_int_passthrough(self) -> None:
        assert parse_amount(1_000) == 1_000

    def test_string_reduced_to_digits(self) -> None:
        assert parse_amount("1,200,000,000円") == 1_200_000_000

    def test_empty_or_non_numeric_is_none(self) -> None:
        assert parse_amount("") is None
        assert parse_amount("不明") is None
        assert parse_amount(None) is None
