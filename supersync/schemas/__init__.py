"""Pydantic schemas for API requests and responses."""

from supersync.schemas.auth import (
    AuthResponse,
    ProfileResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from supersync.schemas.common import MessageResponse, Pagination
from supersync.schemas.contact import (
    ContactCreate,
    ContactListResponse,
    ContactMutationResponse,
    ContactResponse,
    ContactUpdate,
    SalesLeadCreate,
    SalesLeadResponse,
)
from supersync.schemas.dashboard import DashboardStats, HealthResponse
from supersync.schemas.email import (
    EmailImportantResponse,
    EmailImportantUpdate,
    EmailListResponse,
    EmailPreview,
    EmailResponse,
    EmailSyncRequest,
    EmailSyncResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "ProfileUpdate",
    "UserResponse",
    "AuthResponse",
    "ProfileResponse",
    "ProfileUpdateResponse",
    "MessageResponse",
    "Pagination",
    "ContactCreate",
    "ContactUpdate",
    "ContactResponse",
    "ContactListResponse",
    "ContactMutationResponse",
    "SalesLeadCreate",
    "SalesLeadResponse",
    "EmailResponse",
    "EmailListResponse",
    "EmailSyncRequest",
    "EmailPreview",
    "EmailSyncResponse",
    "EmailImportantUpdate",
    "EmailImportantResponse",
    "DashboardStats",
    "HealthResponse",
]
