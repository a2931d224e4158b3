"""ctypes helpers for the Windows APIs used by profilesweep."""

import ctypes

from profilesweep.exceptions import Win32Error


def load_library(name: str):
    """
    Load a system DLL with last-error capture enabled.

    Raises:
        Win32Error: If the DLL cannot be loaded (e.g. not running on Windows)
    """
    try:
        return ctypes.WinDLL(name, use_last_error=True)
    except (AttributeError, OSError) as e:
        raise Win32Error(f"LoadLibrary({name})") from e


def last_error() -> int:
    return ctypes.get_last_error()


def check(result, function: str) -> None:
    """Raise Win32Error if a BOOL-returning API call failed."""
    if not result:
        raise Win32Error(function, last_error())


class LocalMemory:
    """
    Owns a pointer the system allocated with LocalAlloc.

    The pointer is released with LocalFree when the block exits, whether
    or not the calls made with it succeeded.

    Example:
        with LocalMemory() as psid:
            advapi32.ConvertStringSidToSidW(sid, ctypes.byref(psid.pointer))
    """

    def __init__(self):
        self.pointer = ctypes.c_void_p()

    def __enter__(self) -> "LocalMemory":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.free()

    def free(self) -> None:
        if self.pointer.value:
            load_library("kernel32").LocalFree(self.pointer)
            self.pointer = ctypes.c_void_p()
