"""Shared schema building blocks."""

from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    StringConstraints,
)
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes with camelCase keys and accepts either casing on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Pagination(CamelModel):
    """Paging metadata for list endpoints."""

    total: int
    limit: int
    offset: int
    has_more: bool

    @classmethod
    def build(cls, total: int, limit: int, offset: int) -> "Pagination":
        """Compute has_more from the page window."""
        return cls(total=total, limit=limit, offset=offset, has_more=total > offset + limit)


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str


def normalize_email(value: object) -> object:
    """Trim and lowercase an email before format validation."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


def validate_name(value: str) -> str:
    """Trim a display name and require at least two characters."""
    value = value.strip()
    if len(value) < 2:
        raise ValueError("Name must be at least 2 characters long")
    return value


NormalizedEmail = Annotated[EmailStr, BeforeValidator(normalize_email)]
DisplayName = Annotated[str, StringConstraints(max_length=255), AfterValidator(validate_name)]
