"""SQLAlchemy models."""

from supersync.models.contact import Contact
from supersync.models.email import Email
from supersync.models.user import User

__all__ = [
    "User",
    "Contact",
    "Email",
]
