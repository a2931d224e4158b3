"""Custom exception hierarchy for profilesweep."""


class ProfileSweepError(Exception):
    """Base exception for all profilesweep errors."""


class EnumerationError(ProfileSweepError):
    """Profile source could not be queried."""


class ResolveError(ProfileSweepError):
    """SID could not be resolved to an account."""


class Win32Error(ProfileSweepError):
    """A Windows API call reported failure."""

    def __init__(self, function: str, code: int | None = None):
        if code is None:
            message = f"{function} is not available on this platform"
        else:
            message = f"{function} failed with error {code}"
        super().__init__(message)
        self.function = function
        self.code = code


class DeletionError(ProfileSweepError):
    """Profile could not be deleted."""


class ProfileLoadedError(DeletionError):
    """Profile is in use and must not be deleted."""


class ConfigError(ProfileSweepError):
    """Invalid configuration."""
