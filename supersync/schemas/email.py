"""Inbox email schemas."""

from datetime import datetime

from pydantic import ConfigDict

from supersync.models.enums import EmailProvider
from supersync.schemas.common import CamelModel, Pagination


class EmailAddress(CamelModel):
    """Name and address of a sender or recipient."""

    name: str | None = None
    email: str


class EmailResponse(CamelModel):
    """Email response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    message_id: str
    subject: str
    sender: EmailAddress
    recipients: list[EmailAddress]
    body: str
    html_body: str | None
    is_read: bool
    is_important: bool
    labels: list[str]
    thread_id: str | None
    received_at: datetime


class EmailListResponse(CamelModel):
    """A page of emails."""

    emails: list[EmailResponse]
    pagination: Pagination


class EmailSyncRequest(CamelModel):
    """Start a (demo) inbox sync."""

    provider: EmailProvider | None = None


class EmailPreview(CamelModel):
    """Short form of a synced message."""

    id: str
    subject: str
    sender: EmailAddress
    body: str
    is_read: bool
    is_important: bool
    received_at: datetime


class EmailSyncResponse(CamelModel):
    """Result of an inbox sync."""

    message: str
    synced: int
    emails: list[EmailPreview]


class EmailImportantUpdate(CamelModel):
    """Set or clear the important flag."""

    important: bool


class EmailFlagState(CamelModel):
    """Important flag of one email."""

    id: int
    is_important: bool


class EmailImportantResponse(CamelModel):
    """Acknowledgement with the new flag state."""

    message: str
    email: EmailFlagState
