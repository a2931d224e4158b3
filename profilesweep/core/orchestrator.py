"""Pipeline orchestrator - coordinates enumeration, selection, deletion."""

from datetime import datetime
from typing import Sequence

from profilesweep.config import SweeperConfig
from profilesweep.logging import get_logger, configure_logging
from profilesweep.core.enumerator import enumerate_profiles
from profilesweep.core.aggregator import aggregate_profiles
from profilesweep.core.selection import parse_keep_list, plan_deletion, is_confirmed
from profilesweep.core.deleter import delete_profile
from profilesweep.models.profile import ProfileRecord
from profilesweep.models.result import DeletionPlan, DeletionOutcome, DeletionReport
from profilesweep.exceptions import ConfigError, DeletionError, ProfileLoadedError


class ProfileSweeper:
    """
    High-level interface for inventorying and deleting user profiles.

    Example:
        with ProfileSweeper() as sweeper:
            records = sweeper.inventory()
            plan = sweeper.plan(records, "0,2")
            if sweeper.confirm(input()):
                report = sweeper.execute(plan)
    """

    def __init__(self, config: SweeperConfig | None = None):
        """
        Initialize sweeper with optional configuration.

        Args:
            config: SweeperConfig instance, uses defaults if None

        Raises:
            ConfigError: If the configuration would weaken a safety check
        """
        self.config = config or SweeperConfig()
        if not self.config.confirm_token.strip():
            raise ConfigError("confirm_token must not be empty")
        if not self.config.user_sid_prefix.startswith("S-1-"):
            raise ConfigError(f"Invalid user_sid_prefix: {self.config.user_sid_prefix!r}")
        self._log = get_logger("sweeper")

    def __enter__(self) -> "ProfileSweeper":
        configure_logging(self.config)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        pass

    def inventory(self) -> list[ProfileRecord]:
        """
        Enumerate and enrich all eligible profiles.

        Returns:
            ProfileRecords sorted by username

        Raises:
            EnumerationError: If the profile source cannot be queried
        """
        self._log.info("enumeration_start")
        start = datetime.now()

        raws = enumerate_profiles(self.config)
        records = aggregate_profiles(raws, sid_prefix=self.config.user_sid_prefix)

        self._log.info(
            "enumeration_complete",
            source_count=len(raws),
            profile_count=len(records),
            duration_ms=(datetime.now() - start).total_seconds() * 1000,
        )
        return records

    def plan(self, records: Sequence[ProfileRecord], keep: set[int] | str) -> DeletionPlan:
        """
        Compute deletion candidates for a keep-set.

        Args:
            records: Inventory as returned by inventory()
            keep: Indices to keep, or the raw comma-separated keep list
        """
        if isinstance(keep, str):
            keep = parse_keep_list(keep)
        plan = plan_deletion(records, keep)
        self._log.info(
            "deletion_planned",
            kept=sorted(plan.keep),
            candidates=len(plan.candidates),
            protected=len(plan.protected),
        )
        return plan

    def confirm(self, answer: str | None) -> bool:
        return is_confirmed(answer, self.config.confirm_token)

    def execute(self, plan: DeletionPlan) -> DeletionReport:
        """
        Delete every candidate in the plan, one at a time.

        A failed deletion is recorded and the remaining candidates are
        still attempted. Nothing is retried.

        Returns:
            DeletionReport with one outcome per attempted profile
        """
        start = datetime.now()
        outcomes: list[DeletionOutcome] = []
        skipped = [record.sid for record in plan.protected]

        self._log.info("deletion_start", candidates=len(plan.candidates))

        for record in plan.candidates:
            try:
                delete_profile(record)
            except ProfileLoadedError as e:
                self._log.warning("profile_delete_refused", sid=record.sid, error=str(e))
                skipped.append(record.sid)
                continue
            except DeletionError as e:
                self._log.error("profile_delete_failed", sid=record.sid, error=str(e))
                outcomes.append(
                    DeletionOutcome(sid=record.sid, success=False, error_message=str(e))
                )
                continue
            except Exception as e:
                self._log.exception("profile_delete_failed", sid=record.sid, error=str(e))
                outcomes.append(
                    DeletionOutcome(sid=record.sid, success=False, error_message=f"Unexpected error: {e}")
                )
                continue

            self._log.info("profile_deleted", sid=record.sid)
            outcomes.append(DeletionOutcome(sid=record.sid, success=True))

        report = DeletionReport(
            outcomes=outcomes,
            skipped_loaded=skipped,
            started_at=start,
            duration_ms=(datetime.now() - start).total_seconds() * 1000,
        )
        self._log.info(
            "deletion_complete",
            deleted=report.deleted_count,
            failed=report.failed_count,
            skipped=len(report.skipped_loaded),
        )
        return report
