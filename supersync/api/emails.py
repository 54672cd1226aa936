"""Inbox API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query

from supersync.api.dependencies import get_current_user, get_email_service
from supersync.models.user import User
from supersync.schemas.common import MessageResponse, Pagination
from supersync.schemas.email import (
    EmailFlagState,
    EmailImportantResponse,
    EmailImportantUpdate,
    EmailListResponse,
    EmailPreview,
    EmailResponse,
    EmailSyncRequest,
    EmailSyncResponse,
)
from supersync.services.emails import EmailService

router = APIRouter(prefix="/api", tags=["emails"])


@router.post("/email/sync", response_model=EmailSyncResponse)
def sync_emails(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[EmailService, Depends(get_email_service)],
    sync_data: Annotated[EmailSyncRequest | None, Body()] = None,
):
    """Populate the inbox with demo messages."""
    provider = sync_data.provider.value if sync_data and sync_data.provider else None
    messages = service.sync(current_user, provider)
    return EmailSyncResponse(
        message="Email sync completed successfully",
        synced=len(messages),
        emails=[
            EmailPreview(
                id=message.message_id,
                subject=message.subject,
                sender=message.sender,
                body=message.preview,
                is_read=message.is_read,
                is_important=message.is_important,
                received_at=message.received_at,
            )
            for message in messages
        ],
    )


@router.get("/emails", response_model=EmailListResponse)
def get_emails(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[EmailService, Depends(get_email_service)],
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    unread: bool = Query(default=False, description="Only unread emails"),
    important: bool = Query(default=False, description="Only important emails"),
):
    """List the current user's emails, newest first."""
    emails, total = service.list_emails(current_user.id, unread, important, limit, offset)
    return EmailListResponse(
        emails=[EmailResponse.model_validate(email) for email in emails],
        pagination=Pagination.build(total, limit, offset),
    )


@router.put("/emails/{email_id}/read", response_model=MessageResponse)
def mark_email_read(
    email_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[EmailService, Depends(get_email_service)],
):
    """Mark an email as read."""
    service.mark_read(email_id, current_user.id)
    return MessageResponse(message="Email marked as read")


@router.put("/emails/{email_id}/important", response_model=EmailImportantResponse)
def mark_email_important(
    email_id: int,
    flag_data: EmailImportantUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[EmailService, Depends(get_email_service)],
):
    """Set or clear the important flag."""
    email = service.mark_important(email_id, current_user.id, flag_data.important)
    label = "important" if email.is_important else "not important"
    return EmailImportantResponse(
        message=f"Email marked as {label}",
        email=EmailFlagState(id=email.id, is_important=email.is_important),
    )
