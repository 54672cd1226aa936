"""FastAPI dependencies for authentication and services."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from supersync.database import get_db
from supersync.exceptions import AuthenticationError, InvalidTokenError
from supersync.models.user import User
from supersync.services.auth import decode_access_token, get_user_by_id
from supersync.services.contacts import ContactService
from supersync.services.dashboard import DashboardService
from supersync.services.emails import EmailService

logger = logging.getLogger(__name__)

# Missing or non-Bearer headers are handled below so they map to our own errors
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from the bearer token.

    No token is a 401. A token that fails verification is a 403. The user row is
    re-read on every request so deleted accounts lose access immediately.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        logger.warning("Rejected bearer token that failed verification")
        raise InvalidTokenError()

    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        logger.warning("Rejected bearer token without a usable subject")
        raise InvalidTokenError() from None

    user = get_user_by_id(db, user_id)
    if user is None:
        raise AuthenticationError("User not found")

    return user


def get_contact_service(
    db: Annotated[Session, Depends(get_db)],
) -> ContactService:
    """Get contact service with dependencies."""
    return ContactService(db)


def get_email_service(
    db: Annotated[Session, Depends(get_db)],
) -> EmailService:
    """Get email service with dependencies."""
    return EmailService(db)


def get_dashboard_service(
    db: Annotated[Session, Depends(get_db)],
) -> DashboardService:
    """Get dashboard service with dependencies."""
    return DashboardService(db)
