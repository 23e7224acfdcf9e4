"""lead intelligence schema

Revision ID: 3c1f0a9d2b71
Revises:
Create Date: 2026-10-18

Clients, products, projects, companies (with fit score), intent profiles,
call logs, engagement scores and their event history, pivot alerts and
cross-sell recommendations.
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b71"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _created_at(name: str = "created_at") -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("target_industries", sa.JSON(), nullable=True),
        sa.Column("target_employee_min", sa.Integer(), server_default=sa.text("0"), nullable=True),
        sa.Column(
            "target_employee_max", sa.Integer(), server_default=sa.text("10000"), nullable=True
        ),
        sa.Column("target_revenue", sa.JSON(), nullable=True),
        sa.Column("target_locations", sa.JSON(), nullable=True),
        sa.Column("keywords", sa.JSON(), nullable=True),
        sa.Column("benefits", sa.JSON(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_products_client_id", "products", ["client_id"])

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("product_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(32), server_default=sa.text("'active'"), nullable=False),
        sa.Column(
            "min_appointment_rate", sa.Float(), server_default=sa.text("50"), nullable=True
        ),
        _created_at(),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_client_id", "projects", ["client_id"])

    op.create_table(
        "companies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("industry", sa.String(255), nullable=True),
        sa.Column("employees", sa.Integer(), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(64), nullable=True),
        sa.Column("website", sa.String(2048), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("enrichment", sa.JSON(), nullable=True),
        sa.Column("rank", sa.String(1), nullable=True),
        sa.Column("score", sa.Integer(), nullable=True),
        sa.Column("score_reasons", sa.JSON(), nullable=True),
        sa.Column("scored_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_companies_client_id", "companies", ["client_id"])
    op.create_index("ix_companies_project_id", "companies", ["project_id"])

    op.create_table(
        "intent_profiles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("intent_score", sa.Integer(), nullable=False),
        sa.Column("intent_level", sa.String(16), nullable=False),
        sa.Column("buying_stage", sa.String(32), nullable=False),
        sa.Column("signals", sa.JSON(), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("is_hiring", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("job_count", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("hiring_urgency", sa.String(16), nullable=True),
        sa.Column("has_recent_funding", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("social_activity", sa.JSON(), nullable=True),
        sa.Column("snapshot", sa.JSON(), nullable=True),
        _created_at("analyzed_at"),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("company_id"),
    )

    op.create_table(
        "call_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=True),
        sa.Column("result", sa.String(64), nullable=False),
        sa.Column("duration", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at("called_at"),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_call_logs_company_id", "call_logs", ["company_id"])

    op.create_table(
        "engagement_scores",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("call_score", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("document_score", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("web_activity_score", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("social_score", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("total_score", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("score_trend", sa.String(16), server_default=sa.text("'stable'"), nullable=False),
        sa.Column("alert_level", sa.String(16), server_default=sa.text("'none'"), nullable=False),
        sa.Column("last_activity_at", sa.DateTime(timezone=True), nullable=True),
        _created_at("calculated_at"),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "company_id", "project_id", name="uq_engagement_scores_company_project"
        ),
    )
    op.create_index(
        "ix_engagement_scores_project_total", "engagement_scores", ["project_id", "total_score"]
    )

    op.create_table(
        "engagement_events",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("event_type", sa.String(64), nullable=False),
        sa.Column("channel", sa.String(32), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("total_after", sa.Integer(), nullable=False),
        _created_at("occurred_at"),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_engagement_events_company_project", "engagement_events", ["company_id", "project_id"]
    )

    op.create_table(
        "pivot_alerts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("alert_type", sa.String(32), nullable=False),
        sa.Column("severity", sa.String(16), server_default=sa.text("'warning'"), nullable=False),
        sa.Column("current_metrics", sa.JSON(), nullable=True),
        sa.Column("threshold_metrics", sa.JSON(), nullable=True),
        sa.Column("rejection_analysis", sa.JSON(), nullable=True),
        sa.Column("pivot_suggestions", sa.JSON(), nullable=True),
        sa.Column("recommended_action", sa.Text(), nullable=True),
        sa.Column("status", sa.String(16), server_default=sa.text("'active'"), nullable=False),
        sa.Column("acknowledged_by", sa.String(255), nullable=True),
        sa.Column("acknowledged_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_pivot_alerts_project_status", "pivot_alerts", ["project_id", "status"])

    op.create_table(
        "cross_sell_recommendations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("source_project_id", sa.Integer(), nullable=False),
        sa.Column("target_project_id", sa.Integer(), nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("match_score", sa.Integer(), nullable=False),
        sa.Column("match_reasons", sa.JSON(), nullable=True),
        sa.Column("original_rejection_category", sa.String(64), nullable=True),
        sa.Column("original_rejection_detail", sa.Text(), nullable=True),
        sa.Column("status", sa.String(16), server_default=sa.text("'suggested'"), nullable=False),
        _created_at("suggested_at"),
        sa.Column("actioned_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["source_project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["target_project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_cross_sell_target_status",
        "cross_sell_recommendations",
        ["target_project_id", "status"],
    )


def downgrade() -> None:
    op.drop_table("cross_sell_recommendations", if_exists=True)
    op.drop_table("pivot_alerts", if_exists=True)
    op.drop_table("engagement_events", if_exists=True)
    op.drop_table("engagement_scores", if_exists=True)
    op.drop_table("call_logs", if_exists=True)
    op.drop_table("intent_profiles", if_exists=True)
    op.drop_table("companies", if_exists=True)
    op.drop_table("projects", if_exists=True)
    op.drop_table("products", if_exists=True)
    op.drop_table("clients", if_exists=True)
