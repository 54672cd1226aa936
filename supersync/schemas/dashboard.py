"""Dashboard and health schemas."""

from datetime import datetime

from supersync.schemas.common import CamelModel


class DashboardStats(CamelModel):
    """Per-user counters shown on the dashboard."""

    contacts: int
    emails: int
    unread_emails: int
    important_emails: int
    today_emails: int


class HealthResponse(CamelModel):
    """Service health."""

    status: str
    timestamp: datetime
    database: str
    uptime: float
    environment: str
