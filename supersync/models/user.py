"""User model."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from supersync.database import Base
from supersync.models.enums import EmailProvider
from supersync.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)  # always lowercase
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False, default="")
    email_provider = Column(String(20), nullable=False, default=EmailProvider.GMAIL.value)
    is_email_synced = Column(Boolean, nullable=False, default=False)
    last_email_sync = Column(DateTime(timezone=True), nullable=True)
    last_login = Column(DateTime(timezone=True), nullable=True)
