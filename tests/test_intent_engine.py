"""Tests for the intent analysis engine."""

from __future__ import annotations

import pytest

from leadintel.services.intent.intent_engine import (
    NO_INTENT_SUMMARY,
    analyze_intent,
    classify_news,
    detect_funding_amount,
    hiring_urgency,
    intent_level,
    most_recent_news,
)


def _news(title: str, date: str | None = None, **extra) -> dict:
    return {"title": title, "date": date, "source": "PR TIMES", **extra}


class TestHelpers:
    @pytest.mark.parametrize(
        ("job_count", "urgency"),
        [(0, None), (1, "low"), (4, "low"), (5, "medium"), (9, "medium"), (10, "high"), (40, "high")],
    )
    def test_hiring_urgency(self, job_count: int, urgency: str | None) -> None:
        assert hiring_urgency(job_count) == urgency

    @pytest.mark.parametrize(("score", "level"), [(100, "hot"), (70, "hot"), (69, "warm"), (45, "warm"), (44, "cold")])
    def test_intent_level(self, score: int, level: str) -> None:
        assert intent_level(score) == level

    def test_classify_news_keywords_in_order(self) -> None:
        assert classify_news(_news("シリーズAで資金調達を実施")) == "funding"
        assert classify_news(_news("大阪に新拠点をオープン")) == "expansion"
        assert classify_news(_news("新サービスをリリース")) == "product"
        assert classify_news(_news("A社と業務提携")) == "partnership"
        assert classify_news(_news("代表取締役の交代について")) == "other"

    def test_classify_news_case_insensitive(self) -> None:
        assert classify_news(_news("Example Corp RAISES $5M")) == "funding"

    def test_explicit_type_wins(self) -> None:
        assert classify_news(_news("資金調達のお知らせ", type="partnership")) == "partnership"

    def test_invalid_explicit_type_falls_back_to_keywords(self) -> None:
        assert classify_news(_news("資金調達のお知らせ", type="rumor")) == "funding"

    def test_most_recent_news_sorts_and_limits(self) -> None:
        items = [
            _news("a", "2026-01-01"),
            _news("b", "2026-03-01"),
            _news("c", None),
            _news("d", "2026-02-01"),
            _news("e", "2026-04-01"),
        ]
        assert [n["title"] for n in most_recent_news(items)] == ["e", "b", "d"]

    def test_detect_funding_amount(self) -> None:
        assert detect_funding_amount("シリーズBで12億円の資金調達") == "12億円"
        assert detect_funding_amount("5000 万円を調達") == "5000万円"
        assert detect_funding_amount("資金調達を実施") is None


class TestAnalyzeIntent:
    def test_empty_snapshot(self) -> None:
        result = analyze_intent({})
        assert result.score == 30
        assert result.level == "cold"
        assert result.buying_stage == "unknown"
        assert result.signals == []
        assert result.summary == NO_INTENT_SUMMARY
        assert result.is_hiring is False
        assert result.hiring_urgency is None

    def test_none_snapshot_same_as_empty(self) -> None:
        assert analyze_intent(None) == analyze_intent({})

    def test_high_urgency_hiring_is_consideration(self) -> None:
        result = analyze_intent(
            {"hiring": {"is_hiring": True, "job_count": 12, "positions": ["営業", "エンジニア"]}}
        )
        assert result.score == 55
        assert result.level == "warm"
        assert result.buying_stage == "consideration"
        assert result.hiring_urgency == "high"
        assert result.job_count == 12
        assert result.signals[0]["type"] == "hiring"
        assert result.signals[0]["strength"] == "high"
        assert "Hiring (12 openings)" in result.summary

    def test_is_hiring_without_count_is_low_urgency(self) -> None:
        result = analyze_intent({"hiring": {"is_hiring": True}})
        assert result.hiring_urgency == "low"
        assert result.score == 38

    def test_funding_news_with_amount(self) -> None:
        result = analyze_intent(
            {"news": {"recent_news": [_news("シリーズBで12億円の資金調達", "2026-09-01")]}}
        )
        # base 30 + funding 20 + amount 15
        assert result.score == 65
        assert result.has_recent_funding is True
        assert result.funding_amount == "12億円"
        assert result.buying_stage == "consideration"
        assert result.signals[0]["type"] == "funding"
        assert "Raised funding (12億円)" in result.summary

    def test_funding_info_alone(self) -> None:
        result = analyze_intent({"news": {"funding_info": {"amount": "5億円", "round": "Series A"}}})
        assert result.score == 45
        assert result.has_recent_funding is True
        assert result.buying_stage == "consideration"
        assert result.signals == []

    def test_only_three_newest_items_count(self) -> None:
        items = [_news(f"お知らせ{i}", f"2026-0{i}-01") for i in range(1, 5)]
        result = analyze_intent({"news": {"recent_news": items}})
        assert result.score == 30 + 3 * 10
        assert [s["title"] for s in result.signals] == ["お知らせ4", "お知らせ3", "お知らせ2"]
        assert "4 recent news items" in result.summary

    def test_two_signals_without_funding_is_awareness(self) -> None:
        result = analyze_intent(
            {
                "hiring": {"job_count": 2},
                "news": {"recent_news": [_news("新サービスをリリース", "2026-08-01")]},
            }
        )
        assert result.score == 30 + 8 + 12
        assert result.buying_stage == "awareness"

    def test_score_clamped_and_hot(self) -> None:
        result = analyze_intent(
            {
                "hiring": {"job_count": 10},
                "news": {
                    "recent_news": [
                        _news("10億円の資金調達", "2026-09-03"),
                        _news("追加出資を受け入れ", "2026-09-02"),
                        _news("投資ラウンド完了", "2026-09-01"),
                    ]
                },
            }
        )
        assert result.score == 100
        assert result.level == "hot"

    def test_social_activity_carried_not_scored(self) -> None:
        social = {"twitter_followers": 1200}
        result = analyze_intent({"social": social})
        assert result.social_activity == social
        assert result.score == 30

    def test_deterministic(self) -> None:
        snapshot = {
            "hiring": {"job_count": 6, "last_posted": "2026-09-01"},
            "news": {"recent_news": [_news("業務提携を発表", "2026-09-10")]},
        }
        assert analyze_intent(snapshot) == analyze_intent(snapshot)
