"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic_settings import BaseSettings


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class SweeperConfig(BaseSettings):
    """Configuration for profilesweep."""

    # Inclusion filter
    user_sid_prefix: str = "S-1-5-21-"

    # Enumeration
    powershell_path: str = "powershell.exe"
    enumeration_timeout_seconds: int = 60

    # Confirmation
    confirm_token: str = "y"

    # Logging
    log_level: str = "WARNING"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "PROFILESWEEP_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
