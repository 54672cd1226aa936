"""Email (inbox message) model."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from supersync.database import Base
from supersync.models.mixins import TimestampMixin, utcnow


class Email(Base, TimestampMixin):
    """A message in a user's synced inbox."""

    __tablename__ = "emails"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    message_id = Column(String(255), unique=True, nullable=False, index=True)
    subject = Column(String(500), nullable=False)
    body = Column(String, nullable=False)
    html_body = Column(String, nullable=True)
    # {"name": "...", "email": "..."}
    sender = Column(JSON, nullable=False)
    # [{"name": "...", "email": "..."}, ...]
    recipients = Column(JSON, nullable=False, default=list)
    is_read = Column(Boolean, nullable=False, default=False, index=True)
    is_important = Column(Boolean, nullable=False, default=False, index=True)
    labels = Column(JSON, nullable=False, default=list)
    thread_id = Column(String(255), nullable=True)
    received_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    # Relationships
    owner = relationship("User", backref="emails")
