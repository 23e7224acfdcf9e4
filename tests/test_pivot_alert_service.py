"""Tests for pivot alert detection and status management."""

from __future__ import annotations

import pytest

from leadintel.models import PivotAlert
from leadintel.services.pivot.pivot_alert_service import (
    InvalidStatusTransitionError,
    detect_pivot_alerts,
    list_active_pivot_alerts,
    run_pivot_scan,
    update_pivot_alert_status,
)
from tests.test_constants import TEST_OPERATOR_ID


@pytest.fixture
def project(make_project):
    return make_project(min_appointment_rate=50.0)


@pytest.fixture
def low_rate_calls(project, make_company, add_calls):
    """60 calls, 20 appointments: 33.3% against a 50% floor."""
    company = make_company(project=project)
    add_calls(company, "アポ獲得", 20)
    add_calls(company, "断り", 40)
    return company


class TestDetectPivotAlerts:
    def test_missing_project(self, db) -> None:
        assert detect_pivot_alerts(db, 999) is None

    def test_low_rate_creates_one_critical_alert(self, db, project, low_rate_calls) -> None:
        created = detect_pivot_alerts(db, project.id)

        assert len(created) == 1
        alert = created[0]
        assert alert.alert_type == "low_rate"
        assert alert.severity == "critical"
        assert alert.status == "active"
        assert alert.current_metrics["appointment_rate"] == 33.3

    def test_no_alert_above_floor(self, db, project, make_company, add_calls) -> None:
        company = make_company(project=project)
        add_calls(company, "アポ獲得", 35)
        add_calls(company, "断り", 25)
        assert detect_pivot_alerts(db, project.id) == []

    def test_calls_counted_across_project_companies(self, db, project, make_company, add_calls) -> None:
        first = make_company(project=project)
        second = make_company(project=project)
        add_calls(first, "不在", 30)
        add_calls(second, "不在", 25)
        assert [a.alert_type for a in detect_pivot_alerts(db, project.id)] == ["low_rate"]

    def test_dedup_skips_while_active(self, db, project, low_rate_calls) -> None:
        detect_pivot_alerts(db, project.id)
        assert detect_pivot_alerts(db, project.id) == []
        assert db.query(PivotAlert).count() == 1

    def test_dedup_skips_while_acknowledged(self, db, project, low_rate_calls) -> None:
        first = detect_pivot_alerts(db, project.id)[0]
        update_pivot_alert_status(db, first.id, "acknowledged", TEST_OPERATOR_ID)
        assert detect_pivot_alerts(db, project.id) == []
        assert db.query(PivotAlert).count() == 1

    def test_dedup_allows_after_dismissal(self, db, project, low_rate_calls) -> None:
        first = detect_pivot_alerts(db, project.id)[0]
        update_pivot_alert_status(db, first.id, "dismissed")
        assert len(detect_pivot_alerts(db, project.id)) == 1

    def test_dedup_allows_after_resolution(self, db, project, low_rate_calls) -> None:
        first = detect_pivot_alerts(db, project.id)[0]
        update_pivot_alert_status(db, first.id, "resolved")
        assert len(detect_pivot_alerts(db, project.id)) == 1

    def test_dedup_disabled(self, db, project, low_rate_calls) -> None:
        detect_pivot_alerts(db, project.id, dedupe=False)
        detect_pivot_alerts(db, project.id, dedupe=False)
        assert db.query(PivotAlert).count() == 2

    def test_dedup_setting(self, db, project, low_rate_calls, monkeypatch) -> None:
        from leadintel.config import get_settings

        monkeypatch.setenv("PIVOT_ALERT_DEDUP", "false")
        get_settings.cache_clear()
        detect_pivot_alerts(db, project.id)
        detect_pivot_alerts(db, project.id)
        assert len(list_active_pivot_alerts(db, project.id)) == 2


class TestRunPivotScan:
    def test_scans_active_projects_only(self, db, make_project, make_company, add_calls) -> None:
        active = make_project()
        paused = make_project(status="paused")
        for project in (active, paused):
            add_calls(make_company(project=project), "不在", 50)

        result = run_pivot_scan(db)

        assert result == {"status": "completed", "projects_scanned": 1, "alerts_created": 1}
        assert list_active_pivot_alerts(db, paused.id) == []


class TestUpdatePivotAlertStatus:
    def test_acknowledge_records_operator(self, db, project, low_rate_calls) -> None:
        alert = detect_pivot_alerts(db, project.id)[0]
        updated = update_pivot_alert_status(db, alert.id, "acknowledged", TEST_OPERATOR_ID)

        assert updated.status == "acknowledged"
        assert updated.acknowledged_by == TEST_OPERATOR_ID
        assert updated.acknowledged_at is not None
        assert list_active_pivot_alerts(db, project.id) == []

    def test_acknowledged_can_resolve(self, db, project, low_rate_calls) -> None:
        alert = detect_pivot_alerts(db, project.id)[0]
        update_pivot_alert_status(db, alert.id, "acknowledged", TEST_OPERATOR_ID)
        assert update_pivot_alert_status(db, alert.id, "resolved").status == "resolved"

    def test_terminal_status_cannot_change(self, db, project, low_rate_calls) -> None:
        alert = detect_pivot_alerts(db, project.id)[0]
        update_pivot_alert_status(db, alert.id, "dismissed")
        with pytest.raises(InvalidStatusTransitionError):
            update_pivot_alert_status(db, alert.id, "active")

    def test_unknown_status_rejected(self, db, project, low_rate_calls) -> None:
        alert = detect_pivot_alerts(db, project.id)[0]
        with pytest.raises(InvalidStatusTransitionError):
            update_pivot_alert_status(db, alert.id, "snoozed")

    def test_missing_alert(self, db) -> None:
        assert update_pivot_alert_status(db, 31337, "resolved") is None
