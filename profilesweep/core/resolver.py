"""Resolve security identifiers to account names via LookupAccountSidW."""

import ctypes

from profilesweep.core import win32
from profilesweep.exceptions import ResolveError, Win32Error
from profilesweep.logging import get_logger

# Buffer size in wide characters for account and domain names
MAX_NAME_LENGTH = 256

log = get_logger("resolver")


def lookup_account_sid(sid: str) -> tuple[str, str]:
    """
    Look up the account a SID string belongs to.

    Args:
        sid: SID in string form, e.g. "S-1-5-21-...-1001"

    Returns:
        (domain, username) tuple

    Raises:
        ResolveError: If the SID is malformed, unknown, or the lookup
            facility is unavailable
    """
    if not sid or "\x00" in sid:
        raise ResolveError(f"Malformed SID: {sid!r}")

    try:
        advapi32 = win32.load_library("advapi32")
        with win32.LocalMemory() as psid:
            win32.check(
                advapi32.ConvertStringSidToSidW(sid, ctypes.byref(psid.pointer)),
                "ConvertStringSidToSidW",
            )

            name = ctypes.create_unicode_buffer(MAX_NAME_LENGTH)
            name_size = ctypes.c_ulong(MAX_NAME_LENGTH)
            domain = ctypes.create_unicode_buffer(MAX_NAME_LENGTH)
            domain_size = ctypes.c_ulong(MAX_NAME_LENGTH)
            sid_name_use = ctypes.c_int()

            win32.check(
                advapi32.LookupAccountSidW(
                    None,
                    psid.pointer,
                    name,
                    ctypes.byref(name_size),
                    domain,
                    ctypes.byref(domain_size),
                    ctypes.byref(sid_name_use),
                ),
                "LookupAccountSidW",
            )
    except Win32Error as e:
        raise ResolveError(f"Cannot resolve {sid}: {e}") from e

    return domain.value, name.value


def resolve_identity(sid: str) -> tuple[str | None, str | None]:
    """
    Best-effort SID lookup.

    Returns:
        (domain, username), or (None, None) if the lookup failed
    """
    try:
        return lookup_account_sid(sid)
    except ResolveError as e:
        log.debug("identity_unresolved", sid=sid, error=str(e))
        return None, None
