"""Contact API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from supersync.api.dependencies import get_contact_service, get_current_user
from supersync.models.user import User
from supersync.schemas.common import MessageResponse, Pagination
from supersync.schemas.contact import (
    ContactCreate,
    ContactListResponse,
    ContactMutationResponse,
    ContactResponse,
    ContactUpdate,
)
from supersync.services.contacts import ContactService

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.get("", response_model=ContactListResponse)
def get_contacts(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ContactService, Depends(get_contact_service)],
    search: str | None = Query(default=None, max_length=255),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
):
    """List the current user's contacts."""
    contacts, total = service.list_contacts(current_user.id, search, limit, offset)
    return ContactListResponse(
        contacts=[ContactResponse.model_validate(contact) for contact in contacts],
        pagination=Pagination.build(total, limit, offset),
    )


@router.post("", response_model=ContactMutationResponse, status_code=status.HTTP_201_CREATED)
def create_contact(
    contact_data: ContactCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ContactService, Depends(get_contact_service)],
):
    """Create a contact."""
    contact = service.create_contact(current_user.id, **contact_data.model_dump())
    return ContactMutationResponse(
        message="Contact created successfully",
        contact=ContactResponse.model_validate(contact),
    )


@router.put("/{contact_id}", response_model=ContactMutationResponse)
def update_contact(
    contact_id: int,
    contact_data: ContactUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ContactService, Depends(get_contact_service)],
):
    """Update a contact."""
    contact = service.update_contact(
        contact_id, current_user.id, contact_data.model_dump(exclude_unset=True)
    )
    return ContactMutationResponse(
        message="Contact updated successfully",
        contact=ContactResponse.model_validate(contact),
    )


@router.delete("/{contact_id}", response_model=MessageResponse)
def delete_contact(
    contact_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ContactService, Depends(get_contact_service)],
):
    """Delete a contact."""
    service.delete_contact(contact_id, current_user.id)
    return MessageResponse(message="Contact deleted successfully")
