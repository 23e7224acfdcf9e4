"""Scoring rules schema validation.

Validates that rules.yaml has the required structure:
- fit.high_potential_industries: non-empty list of unique strings
- fit.major_cities.primary / secondary: lists of non-empty strings
- intent.news_keywords: dict of category -> non-empty list of strings
  (categories limited to funding, expansion, product, partnership)
- intent.funding_amount_pattern: compilable regular expression
"""

from __future__ import annotations

import re
from typing import Any

NEWS_CATEGORIES: tuple[str, ...] = ("funding", "expansion", "product", "partnership")


class ScoringRulesValidationError(ValueError):
    """Raised when scoring rules validation fails.

    Subclasses ValueError so callers can catch it via ``except ValueError``
    alongside ``FileNotFoundError`` without needing to import this class.
    """


def _require_string_list(value: Any, path: str, *, allow_empty: bool = False) -> list[str]:
    if not isinstance(value, list):
        raise ScoringRulesValidationError(f"scoring rules '{path}' must be a list")
    if not value and not allow_empty:
        raise ScoringRulesValidationError(f"scoring rules '{path}' must not be empty")
    seen: set[str] = set()
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ScoringRulesValidationError(
                f"scoring rules '{path}' entries must be non-empty strings, got {item!r}"
            )
        if item in seen:
            raise ScoringRulesValidationError(f"scoring rules '{path}' contains duplicate: '{item}'")
        seen.add(item)
    return value


def validate_scoring_rules(rules: dict[str, Any]) -> None:
    """Validate scoring rules structure.

    Args:
        rules: Loaded rules.yaml content.

    Raises:
        ScoringRulesValidationError: When structure is invalid.
    """
    if not isinstance(rules, dict):
        raise ScoringRulesValidationError("scoring rules must be a dict")

    fit = rules.get("fit")
    if not isinstance(fit, dict):
        raise ScoringRulesValidationError("scoring rules must have a 'fit' section")
    _require_string_list(fit.get("high_potential_industries"), "fit.high_potential_industries")

    cities = fit.get("major_cities")
    if not isinstance(cities, dict):
        raise ScoringRulesValidationError("scoring rules 'fit.major_cities' must be a dict")
    _require_string_list(cities.get("primary"), "fit.major_cities.primary")
    _require_string_list(
        cities.get("secondary", []), "fit.major_cities.secondary", allow_empty=True
    )

    intent = rules.get("intent")
    if not isinstance(intent, dict):
        raise ScoringRulesValidationError("scoring rules must have an 'intent' section")

    keywords = intent.get("news_keywords")
    if not isinstance(keywords, dict):
        raise ScoringRulesValidationError("scoring rules 'intent.news_keywords' must be a dict")
    for category, words in keywords.items():
        if category not in NEWS_CATEGORIES:
            raise ScoringRulesValidationError(
                f"scoring rules 'intent.news_keywords' has unknown category '{category}'"
            )
        _require_string_list(words, f"intent.news_keywords.{category}")

    pattern = intent.get("funding_amount_pattern")
    if not isinstance(pattern, str) or not pattern:
        raise ScoringRulesValidationError(
            "scoring rules 'intent.funding_amount_pattern' must be a non-empty string"
        )
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ScoringRulesValidationError(
            f"scoring rules 'intent.funding_amount_pattern' is not a valid regex: {exc}"
        ) from exc
