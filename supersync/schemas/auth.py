"""Authentication schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from supersync.schemas.common import CamelModel, DisplayName, NormalizedEmail


class UserRegister(CamelModel):
    """User registration request."""

    email: NormalizedEmail
    password: str = Field(..., min_length=6, max_length=128)
    name: DisplayName
    company: str | None = Field(None, max_length=255)


class UserLogin(CamelModel):
    """User login request."""

    email: NormalizedEmail
    password: str = Field(..., min_length=1, max_length=128)


class ProfileUpdate(CamelModel):
    """Partial profile update. Absent fields are left alone."""

    name: DisplayName | None = None
    company: str | None = Field(None, max_length=255)

    @field_validator("company")
    @classmethod
    def strip_company(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None


class UserResponse(CamelModel):
    """Public user profile. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    company: str
    email_provider: str
    is_email_synced: bool
    last_email_sync: datetime | None
    last_login: datetime | None
    created_at: datetime


class AuthResponse(CamelModel):
    """Authentication response with token and user info."""

    message: str
    token: str
    user: UserResponse


class ProfileResponse(CamelModel):
    """Current user's profile."""

    user: UserResponse


class ProfileUpdateResponse(CamelModel):
    """Profile after an update."""

    message: str
    user: UserResponse
