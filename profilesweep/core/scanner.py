"""Disk footprint calculation for profile directories."""

import os

from profilesweep.logging import get_logger

log = get_logger("scanner")


def directory_size(path: str | os.PathLike) -> int:
    """
    Sum the size of every regular file below a directory.

    Symlinks and junctions are not followed. Entries that cannot be read
    (permissions, broken links, files removed mid-scan) count as 0.

    Args:
        path: Root directory

    Returns:
        Total size in bytes
    """
    total = 0
    pending = [os.fspath(path)]

    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    try:
                        if entry.is_symlink() or entry.is_junction():
                            continue
                        if entry.is_dir(follow_symlinks=False):
                            pending.append(entry.path)
                        elif entry.is_file(follow_symlinks=False):
                            total += entry.stat(follow_symlinks=False).st_size
                    except OSError:
                        continue
        except OSError:
            continue

    return total


def scan_footprint(path: str | None) -> int | None:
    """
    Best-effort size of a profile directory.

    Returns:
        Size in bytes, or None if the path is missing or not a directory
    """
    if not path:
        return None
    if not os.path.isdir(path):
        log.debug("footprint_scan_failed", path=path, reason="not a directory")
        return None
    return directory_size(path)
