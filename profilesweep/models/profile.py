"""Profile data models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RawProfile(BaseModel):
    """One Win32_UserProfile instance as reported by the profile source."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sid: str = Field(alias="SID")
    health_status: int = Field(0, alias="HealthStatus", ge=0, le=255)
    roaming_configured: bool = Field(False, alias="RoamingConfigured")
    status: int = Field(0, alias="Status", ge=0)
    special: bool = Field(False, alias="Special")
    local_path: str | None = Field(None, alias="LocalPath")
    loaded: bool = Field(False, alias="Loaded")

    @field_validator("health_status", "status", "roaming_configured", "special", "loaded", mode="before")
    @classmethod
    def _null_as_default(cls, value, info):
        # CIM reports unset properties as null
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class ProfileRecord(BaseModel):
    """A user profile enriched with account identity and disk footprint."""

    model_config = ConfigDict(frozen=True)

    sid: str
    domain: str | None = None
    username: str | None = None
    health_status: int = Field(ge=0, le=255)
    roaming_configured: bool
    status: int = Field(ge=0)
    loaded: bool
    size: int | None = Field(None, ge=0)

    @model_validator(mode="after")
    def _loaded_has_no_size(self) -> "ProfileRecord":
        if self.loaded and self.size is not None:
            raise ValueError("loaded profiles are never scanned, size must be None")
        return self

    @property
    def display_domain(self) -> str:
        return self.domain or ""

    @property
    def display_username(self) -> str:
        return self.username or ""

    @property
    def sort_key(self) -> str:
        """Username with unresolved accounts treated as the empty string."""
        return self.username or ""
