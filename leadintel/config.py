"""
Application configuration. Loads from environment variables.
Secrets and sensitive config must never be hardcoded.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache
from typing import Optional


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "LeadIntel"
    debug: bool = False

    # Database (postgresql+psycopg for psycopg3; sqlite:/// accepted for local runs)
    database_url: str = "postgresql+psycopg://localhost:5432/leadintel_dev"
    db_connect_timeout: int = 10  # seconds

    # Security
    internal_job_token: str = ""  # Required for /internal/* endpoints

    # Scoring rules YAML; None = bundled leadintel/scoring_rules/rules.yaml
    scoring_rules_path: Optional[str] = None

    # Pivot alerts: skip a rule while an active alert of the same type exists
    pivot_alert_dedup: bool = True

    # Engagement: default floor for list_above_threshold
    engagement_high_score_threshold: int = 60

    # Cross-sell: rejected companies considered per source project
    cross_sell_max_rejected: int = 50

    # Cross-sell: skip a triple while a non-dismissed recommendation for it exists
    cross_sell_dedup: bool = True

    # Search: default page size for the combined ranker
    search_default_limit: int = 100

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"

        default_user = os.getenv("PGUSER") or os.getenv("USER") or "postgres"
        default_url = (
            f"postgresql+psycopg://{default_user}:"
            f"{os.getenv('PGPASSWORD', '')}@"
            f"{os.getenv('PGHOST', 'localhost')}:"
            f"{os.getenv('PGPORT', '5432')}/"
            f"{os.getenv('PGDATABASE', 'leadintel_dev')}"
        )
        raw_url = os.getenv("DATABASE_URL", default_url)
        # Ensure psycopg3 driver if URL uses generic postgresql://
        if raw_url.startswith("postgresql://") and not raw_url.startswith("postgresql+psycopg"):
            raw_url = raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
        self.database_url = raw_url
        self.db_connect_timeout = int(os.getenv("DB_CONNECT_TIMEOUT", str(self.db_connect_timeout)))

        self.internal_job_token = os.getenv("INTERNAL_JOB_TOKEN", "")

        self.scoring_rules_path = os.getenv("SCORING_RULES_PATH") or None

        self.pivot_alert_dedup = os.getenv("PIVOT_ALERT_DEDUP", "true").lower() == "true"
        self.engagement_high_score_threshold = int(
            os.getenv(
                "ENGAGEMENT_HIGH_SCORE_THRESHOLD",
                str(self.engagement_high_score_threshold),
            )
        )
        self.cross_sell_max_rejected = int(
            os.getenv("CROSS_SELL_MAX_REJECTED", str(self.cross_sell_max_rejected))
        )
        self.cross_sell_dedup = os.getenv("CROSS_SELL_DEDUP", "true").lower() == "true"
        self.search_default_limit = int(
            os.getenv("SEARCH_DEFAULT_LIMIT", str(self.search_default_limit))
        )
