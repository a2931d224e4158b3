"""profilesweep - inventory and remove local Windows user profiles."""

from profilesweep.models.profile import RawProfile, ProfileRecord
from profilesweep.models.result import DeletionPlan, DeletionOutcome, DeletionReport
from profilesweep.config import SweeperConfig
from profilesweep.core.orchestrator import ProfileSweeper
from profilesweep.core.exporter import to_json, to_dict

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "ProfileSweeper",
    "SweeperConfig",
    # Models
    "RawProfile",
    "ProfileRecord",
    "DeletionPlan",
    "DeletionOutcome",
    "DeletionReport",
    # Export utilities
    "to_json",
    "to_dict",
    "__version__",
]
