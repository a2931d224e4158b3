"""Profile deletion through DeleteProfileW."""

import ctypes

from profilesweep.core import win32
from profilesweep.exceptions import DeletionError, ProfileLoadedError, Win32Error
from profilesweep.models.profile import ProfileRecord


def delete_profile(record: ProfileRecord) -> None:
    """
    Delete a profile's registry entry and root directory.

    Windows refuses to delete a profile that is in use; the loaded flag is
    checked here as well so an active profile is never handed to the API.

    Args:
        record: Profile to delete

    Raises:
        ProfileLoadedError: If the profile is loaded
        DeletionError: If DeleteProfileW fails
    """
    if record.loaded:
        raise ProfileLoadedError(
            f"{record.sid} can't be deleted, because profile is loaded"
        )

    try:
        userenv = win32.load_library("userenv")
        win32.check(userenv.DeleteProfileW(record.sid, None, None), "DeleteProfileW")
    except (Win32Error, OSError, ctypes.ArgumentError) as e:
        raise DeletionError(f"Failed to delete profile {record.sid}: {e}") from e
