"""Pydantic models for profilesweep."""

from profilesweep.models.profile import RawProfile, ProfileRecord
from profilesweep.models.result import DeletionPlan, DeletionOutcome, DeletionReport

__all__ = [
    "RawProfile",
    "ProfileRecord",
    "DeletionPlan",
    "DeletionOutcome",
    "DeletionReport",
]
