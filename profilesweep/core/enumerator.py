"""Profile enumeration through the Win32_UserProfile CIM class."""

import json
import subprocess

from pydantic import TypeAdapter, ValidationError

from profilesweep.config import SweeperConfig
from profilesweep.exceptions import EnumerationError
from profilesweep.models.profile import RawProfile

PROFILE_PROPERTIES = [
    "SID",
    "HealthStatus",
    "RoamingConfigured",
    "Status",
    "Special",
    "LocalPath",
    "Loaded",
]

CIM_QUERY = (
    "[Console]::OutputEncoding = [System.Text.Encoding]::UTF8; "
    "Get-CimInstance -ClassName Win32_UserProfile | "
    f"Select-Object {','.join(PROFILE_PROPERTIES)} | "
    "ConvertTo-Json -Compress"
)

_profiles_adapter = TypeAdapter(list[RawProfile])


def build_command(config: SweeperConfig) -> list[str]:
    """Build the PowerShell invocation for the profile query."""
    return [
        config.powershell_path,
        "-NoProfile",
        "-NonInteractive",
        "-Command",
        CIM_QUERY,
    ]


def parse_profiles(text: str) -> list[RawProfile]:
    """
    Parse ConvertTo-Json output into RawProfile records.

    ConvertTo-Json writes nothing for an empty pipeline and a bare object
    (not an array) for a single result. A leading byte order mark is dropped.

    Raises:
        EnumerationError: If the output is not valid profile JSON
    """
    text = text.lstrip("\ufeff").strip()
    if not text:
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise EnumerationError(f"Profile query returned invalid JSON: {e}") from e

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise EnumerationError(f"Unexpected profile query output: {type(data).__name__}")

    try:
        return _profiles_adapter.validate_python(data)
    except ValidationError as e:
        raise EnumerationError(f"Invalid profile record: {e}") from e


def enumerate_profiles(config: SweeperConfig | None = None) -> list[RawProfile]:
    """
    Query all user profiles on the local machine.

    Args:
        config: SweeperConfig instance, uses defaults if None

    Returns:
        Every Win32_UserProfile instance, unfiltered

    Raises:
        EnumerationError: If the query cannot be run or its output parsed
    """
    config = config or SweeperConfig()

    try:
        completed = subprocess.run(
            build_command(config),
            capture_output=True,
            text=True,
            encoding="utf-8-sig",
            errors="replace",
            timeout=config.enumeration_timeout_seconds,
        )
    except FileNotFoundError as e:
        raise EnumerationError(f"PowerShell not found: {config.powershell_path}") from e
    except subprocess.TimeoutExpired as e:
        raise EnumerationError(
            f"Profile query timed out after {config.enumeration_timeout_seconds}s"
        ) from e
    except OSError as e:
        raise EnumerationError(f"Cannot run profile query: {e}") from e

    if completed.returncode != 0:
        detail = completed.stderr.strip() or f"exit code {completed.returncode}"
        raise EnumerationError(f"Profile query failed: {detail}")

    return parse_profiles(completed.stdout)
