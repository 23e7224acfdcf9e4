"""Scoring rules loader.

Reads rules.yaml (or the file named by SCORING_RULES_PATH), validates it once
and caches the result. Accessors return immutable views for the pure scorers.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from leadintel.config import get_settings

_RULES_PATH = Path(__file__).parent / "rules.yaml"


def _rules_path() -> Path:
    configured = get_settings().scoring_rules_path
    return Path(configured) if configured else _RULES_PATH


@lru_cache(maxsize=1)
def load_scoring_rules() -> dict[str, Any]:
    """Load and return the validated scoring rules YAML content.

    Raises:
        FileNotFoundError: If the rules file is missing.
        ScoringRulesValidationError: If the rules are structurally invalid.
    """
    from leadintel.scoring_rules.validator import validate_scoring_rules

    path = _rules_path()
    try:
        with path.open(encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Scoring rules YAML is malformed: {exc}") from exc
    validate_scoring_rules(data)
    return data


@lru_cache(maxsize=1)
def get_high_potential_industries() -> frozenset[str]:
    """Industries that earn the fit scorer's industry bonus."""
    return frozenset(load_scoring_rules()["fit"]["high_potential_industries"])


@lru_cache(maxsize=1)
def get_major_cities() -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Return (primary, secondary) major city substrings."""
    cities = load_scoring_rules()["fit"]["major_cities"]
    return tuple(cities["primary"]), tuple(cities.get("secondary") or ())


@lru_cache(maxsize=1)
def get_news_keywords() -> tuple[tuple[str, tuple[str, ...]], ...]:
    """Return ordered (category, keywords) pairs for news classification."""
    keywords = load_scoring_rules()["intent"]["news_keywords"]
    return tuple((category, tuple(words)) for category, words in keywords.items())


@lru_cache(maxsize=1)
def get_funding_amount_pattern() -> re.Pattern[str]:
    """Compiled pattern matching a yen funding amount in a news title."""
    return re.compile(load_scoring_rules()["intent"]["funding_amount_pattern"])


def clear_scoring_rules_cache() -> None:
    """Drop every cached rules accessor (used after SCORING_RULES_PATH changes)."""
    load_scoring_rules.cache_clear()
    get_high_potential_industries.cache_clear()
    get_major_cities.cache_clear()
    get_news_keywords.cache_clear()
    get_funding_amount_pattern.cache_clear()
