"""Unit tests for profile and result models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from profilesweep.models.profile import RawProfile, ProfileRecord
from profilesweep.models.result import DeletionPlan, DeletionOutcome, DeletionReport


def make_record(sid: str = "S-1-5-21-1-2-3-1001", **overrides) -> ProfileRecord:
    fields = dict(
        sid=sid,
        domain="CONTOSO",
        username="alice",
        health_status=3,
        roaming_configured=False,
        status=0,
        loaded=False,
        size=1024,
    )
    fields.update(overrides)
    return ProfileRecord(**fields)


class TestRawProfile:
    """Test validation of CIM profile instances."""

    def test_from_cim_names(self):
        raw = RawProfile.model_validate({
            "SID": "S-1-5-21-1-2-3-1001",
            "HealthStatus": 3,
            "RoamingConfigured": True,
            "Status": 8,
            "Special": False,
            "LocalPath": "C:\\Users\\alice",
            "Loaded": True,
        })
        assert raw.sid == "S-1-5-21-1-2-3-1001"
        assert raw.health_status == 3
        assert raw.roaming_configured is True
        assert raw.status == 8
        assert raw.local_path == "C:\\Users\\alice"
        assert raw.loaded is True

    def test_from_field_names(self):
        raw = RawProfile(sid="S-1-5-21-1-2-3-1001", loaded=False)
        assert raw.special is False
        assert raw.local_path is None

    def test_null_properties_use_defaults(self):
        raw = RawProfile.model_validate({
            "SID": "S-1-5-21-1-2-3-1001",
            "HealthStatus": None,
            "RoamingConfigured": None,
            "Status": None,
            "Special": None,
            "LocalPath": None,
            "Loaded": None,
        })
        assert raw.health_status == 0
        assert raw.roaming_configured is False
        assert raw.status == 0
        assert raw.special is False
        assert raw.loaded is False

    def test_health_status_out_of_range(self):
        with pytest.raises(ValidationError):
            RawProfile.model_validate({"SID": "S-1-5-21-1", "HealthStatus": 300})

    def test_sid_required(self):
        with pytest.raises(ValidationError):
            RawProfile.model_validate({"Loaded": False})


class TestProfileRecord:
    """Test the enriched profile record."""

    def test_loaded_with_size_rejected(self):
        with pytest.raises(ValidationError):
            make_record(loaded=True, size=10)

    def test_loaded_without_size(self):
        record = make_record(loaded=True, size=None)
        assert record.size is None

    def test_unloaded_without_size(self):
        record = make_record(size=None)
        assert record.size is None

    def test_frozen(self):
        record = make_record()
        with pytest.raises(ValidationError):
            record.username = "mallory"

    def test_unresolved_identity_display(self):
        record = make_record(domain=None, username=None)
        assert record.display_domain == ""
        assert record.display_username == ""
        assert record.sort_key == ""

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            make_record(size=-1)


class TestDeletionModels:
    """Test plan and report helpers."""

    def test_plan_sids(self):
        plan = DeletionPlan(candidates=[make_record("S-1-5-21-1"), make_record("S-1-5-21-2")])
        assert plan.sids == {"S-1-5-21-1", "S-1-5-21-2"}
        assert plan.is_empty is False

    def test_empty_plan(self):
        assert DeletionPlan().is_empty is True

    def test_report_counts(self):
        report = DeletionReport(
            outcomes=[
                DeletionOutcome(sid="a", success=True),
                DeletionOutcome(sid="b", success=False, error_message="boom"),
                DeletionOutcome(sid="c", success=True),
            ],
            started_at=datetime.now(),
            duration_ms=1.0,
        )
        assert report.deleted_count == 2
        assert report.failed_count == 1
