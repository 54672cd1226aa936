"""Contact and sales-lead schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from supersync.models.enums import LeadSource
from supersync.schemas.common import CamelModel, DisplayName, NormalizedEmail, Pagination


def _clean_tags(tags: list[str] | None) -> list[str] | None:
    if tags is None:
        return None
    return [tag.strip() for tag in tags if tag.strip()]


class ContactCreate(CamelModel):
    """Create a new contact."""

    name: DisplayName
    email: NormalizedEmail
    company: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    notes: str | None = Field(None, max_length=5000)
    tags: list[str] = Field(default_factory=list)
    is_lead: bool = False
    lead_source: LeadSource = LeadSource.EMAIL

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, value: list[str]) -> list[str]:
        return _clean_tags(value)


class ContactUpdate(CamelModel):
    """Update a contact. Only fields present in the body change."""

    name: DisplayName | None = None
    email: NormalizedEmail | None = None
    company: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    notes: str | None = Field(None, max_length=5000)
    tags: list[str] | None = None
    is_lead: bool | None = None
    lead_source: LeadSource | None = None

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, value: list[str] | None) -> list[str] | None:
        return _clean_tags(value)


class ContactResponse(CamelModel):
    """Contact response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int | None
    name: str
    email: str
    company: str
    phone: str
    notes: str
    tags: list[str]
    is_lead: bool
    lead_source: str
    last_contacted_at: datetime | None
    created_at: datetime
    updated_at: datetime


class ContactListResponse(CamelModel):
    """A page of contacts."""

    contacts: list[ContactResponse]
    pagination: Pagination


class ContactMutationResponse(CamelModel):
    """Contact after create or update."""

    message: str
    contact: ContactResponse


class SalesLeadCreate(CamelModel):
    """Public contact-sales form submission."""

    name: str = Field(..., max_length=255)
    email: NormalizedEmail
    company: str = Field(..., max_length=255)
    phone: str | None = Field(None, max_length=50)
    message: str | None = Field(None, max_length=5000)
    team_size: str | int | None = None

    @field_validator("name", "company")
    @classmethod
    def require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name, email, and company are required")
        return value


class SalesLeadResponse(CamelModel):
    """Acknowledgement for a sales lead."""

    message: str
    lead_id: int
