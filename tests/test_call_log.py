"""Tests for call outcome recording."""

from __future__ import annotations

import pytest

from leadintel.models import CallLog
from leadintel.services.call_log import record_call
from leadintel.services.engagement.engagement_accumulator import EngagementReferenceError


class TestRecordCall:
    def test_missing_company(self, db) -> None:
        assert record_call(db, 808, "接続") is None

    def test_appointment_feeds_engagement(self, db, make_project, make_company) -> None:
        company = make_company(project=make_project())
        call, engagement = record_call(db, company.id, "アポ獲得", duration=180, notes="来週訪問")

        assert call.project_id == company.project_id
        assert call.duration == 180
        assert engagement.call_score == 30
        assert engagement.total_score == 30

    def test_connected_results(self, db, make_project, make_company) -> None:
        company = make_company(project=make_project())
        record_call(db, company.id, "接続")
        _, engagement = record_call(db, company.id, "資料送付")
        assert engagement.call_score == 20

    def test_rejection_stored_without_engagement(self, db, make_project, make_company) -> None:
        company = make_company(project=make_project())
        call, engagement = record_call(db, company.id, "断り")
        assert call.result == "断り"
        assert engagement is None

    def test_no_project_still_logs_call(self, db, make_company) -> None:
        company = make_company()
        with pytest.raises(EngagementReferenceError):
            record_call(db, company.id, "アポ獲得")
        assert db.query(CallLog).filter(CallLog.company_id == company.id).count() == 1
