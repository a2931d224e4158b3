"""Merge raw profile records with account identity and disk footprint."""

from typing import Callable, Iterable

from profilesweep.core.resolver import resolve_identity
from profilesweep.core.scanner import scan_footprint
from profilesweep.logging import get_logger
from profilesweep.models.profile import ProfileRecord, RawProfile

# Domain and local user accounts; well-known and service SIDs use other prefixes
USER_SID_PREFIX = "S-1-5-21-"

Resolver = Callable[[str], tuple[str | None, str | None]]
Scanner = Callable[[str | None], int | None]

log = get_logger("aggregator")


def is_eligible(raw: RawProfile, sid_prefix: str = USER_SID_PREFIX) -> bool:
    """Whether a profile belongs to a regular user account."""
    return not raw.special and raw.sid.startswith(sid_prefix)


def build_record(
    raw: RawProfile,
    resolve: Resolver | None = None,
    scan: Scanner | None = None,
) -> ProfileRecord:
    """
    Enrich a raw profile with identity and, if it is not loaded, its size.

    Args:
        raw: Record from the profile source
        resolve: SID resolver, defaults to resolve_identity
        scan: Directory sizer, defaults to scan_footprint

    Returns:
        Immutable ProfileRecord
    """
    resolve = resolve or resolve_identity
    scan = scan or scan_footprint

    domain, username = resolve(raw.sid)
    size = None if raw.loaded else scan(raw.local_path)

    return ProfileRecord(
        sid=raw.sid,
        domain=domain,
        username=username,
        health_status=raw.health_status,
        roaming_configured=raw.roaming_configured,
        status=raw.status,
        loaded=raw.loaded,
        size=size,
    )


def sort_records(records: Iterable[ProfileRecord]) -> list[ProfileRecord]:
    """Stable sort by username; unresolved accounts come first."""
    return sorted(records, key=lambda record: record.sort_key)


def aggregate_profiles(
    raws: Iterable[RawProfile],
    sid_prefix: str = USER_SID_PREFIX,
    resolve: Resolver | None = None,
    scan: Scanner | None = None,
) -> list[ProfileRecord]:
    """
    Build the ordered profile inventory.

    Special profiles and non-user SIDs are dropped; every remaining raw
    record yields exactly one ProfileRecord.
    """
    records = []
    for raw in raws:
        if not is_eligible(raw, sid_prefix):
            log.debug("profile_excluded", sid=raw.sid, special=raw.special)
            continue
        records.append(build_record(raw, resolve, scan))

    return sort_records(records)
