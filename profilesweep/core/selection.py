"""Keep-list parsing and deletion candidate selection."""

from typing import Sequence

from profilesweep.models.profile import ProfileRecord
from profilesweep.models.result import DeletionPlan


def parse_keep_list(text: str | None) -> set[int]:
    """
    Parse a comma-separated list of inventory indices.

    Tokens that are not non-negative integers are ignored.

    Examples:
        "0,5,7" -> {0, 5, 7}
        "0, abc, 2" -> {0, 2}
        "+1" -> {1}
        "" -> set()
    """
    keep = set()
    if not text:
        return keep

    for token in text.split(","):
        digits = token.strip().removeprefix("+")
        if digits.isascii() and digits.isdigit():
            keep.add(int(digits))

    return keep


def plan_deletion(records: Sequence[ProfileRecord], keep: set[int]) -> DeletionPlan:
    """
    Select every profile the operator did not keep.

    Loaded profiles are never candidates; those not kept are listed in
    ``protected`` so they can be reported.

    Args:
        records: Inventory in presentation order
        keep: Indices into ``records`` to keep

    Returns:
        DeletionPlan with candidates in inventory order
    """
    candidates = []
    protected = []
    seen = set()

    for index, record in enumerate(records):
        if index in keep:
            continue
        if record.loaded:
            protected.append(record)
            continue
        if record.sid in seen:
            continue
        seen.add(record.sid)
        candidates.append(record)

    return DeletionPlan(keep=set(keep), candidates=candidates, protected=protected)


def is_confirmed(answer: str | None, token: str = "y") -> bool:
    """Only the affirmative token, in any case, confirms."""
    if answer is None:
        return False
    return answer.strip().lower() == token.lower()
