"""Export utilities for profile inventories."""

from typing import Sequence

from pydantic import TypeAdapter

from profilesweep.models.profile import ProfileRecord

_records_adapter = TypeAdapter(list[ProfileRecord])


def to_json(records: Sequence[ProfileRecord], indent: int = 2) -> str:
    """
    Convert an inventory to a JSON string.

    Args:
        records: ProfileRecords to serialize
        indent: JSON indentation level

    Returns:
        JSON array string
    """
    return _records_adapter.dump_json(list(records), indent=indent).decode("utf-8")


def to_dict(records: Sequence[ProfileRecord]) -> list[dict]:
    """Convert an inventory to a list of plain dictionaries."""
    return _records_adapter.dump_python(list(records), mode="json")
