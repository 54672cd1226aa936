"""Contact model."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from supersync.database import Base
from supersync.models.enums import LeadSource
from supersync.models.mixins import TimestampMixin


class Contact(Base, TimestampMixin):
    """Address-book entry. Sales leads from the public form have no owner."""

    __tablename__ = "contacts"
    __table_args__ = (UniqueConstraint("owner_id", "email", name="uq_contacts_owner_email"),)

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False, default="")
    phone = Column(String(50), nullable=False, default="")
    notes = Column(String, nullable=False, default="")
    tags = Column(JSON, nullable=False, default=list)
    is_lead = Column(Boolean, nullable=False, default=False)
    lead_source = Column(String(20), nullable=False, default=LeadSource.EMAIL.value)
    last_contacted_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    owner = relationship("User", backref="contacts")
