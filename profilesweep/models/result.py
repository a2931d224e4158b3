"""Deletion plan and result models."""

from datetime import datetime

from pydantic import BaseModel

from profilesweep.models.profile import ProfileRecord


class DeletionPlan(BaseModel):
    """Profiles selected for deletion after applying the keep-set."""

    keep: set[int] = set()
    candidates: list[ProfileRecord] = []
    protected: list[ProfileRecord] = []

    @property
    def sids(self) -> set[str]:
        return {record.sid for record in self.candidates}

    @property
    def is_empty(self) -> bool:
        return not self.candidates


class DeletionOutcome(BaseModel):
    """Result of deleting a single profile."""

    sid: str
    success: bool
    error_message: str | None = None


class DeletionReport(BaseModel):
    """Wrapper for a complete deletion run."""

    outcomes: list[DeletionOutcome] = []
    skipped_loaded: list[str] = []
    started_at: datetime
    duration_ms: float

    @property
    def deleted_count(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.success)
