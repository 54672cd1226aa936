"""Public contact-sales endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from supersync.api.dependencies import get_contact_service
from supersync.schemas.contact import SalesLeadCreate, SalesLeadResponse
from supersync.services.contacts import ContactService

router = APIRouter(prefix="/api", tags=["sales"])


@router.post(
    "/contact-sales", response_model=SalesLeadResponse, status_code=status.HTTP_201_CREATED
)
def contact_sales(
    lead_data: SalesLeadCreate,
    service: Annotated[ContactService, Depends(get_contact_service)],
):
    """Record a sales lead from the marketing site. No login required."""
    lead = service.create_sales_lead(**lead_data.model_dump())
    return SalesLeadResponse(
        message="Thank you for your interest! Our team will contact you soon.",
        lead_id=lead.id,
    )
