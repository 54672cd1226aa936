"""Dashboard API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from supersync.api.dependencies import get_current_user, get_dashboard_service
from supersync.models.user import User
from supersync.schemas.dashboard import DashboardStats
from supersync.services.dashboard import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[DashboardService, Depends(get_dashboard_service)],
):
    """Contact and inbox counters for the current user."""
    return DashboardStats(**await service.get_stats(current_user.id))
