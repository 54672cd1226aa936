"""Contact service: owner-scoped address book and public sales leads."""

import logging
from typing import Any

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from supersync.exceptions import DuplicateError, NotFoundError
from supersync.models.contact import Contact
from supersync.models.enums import LeadSource

logger = logging.getLogger(__name__)

DUPLICATE_CONTACT = "Contact with this email already exists"
SALES_LEAD_TAGS = ["sales-lead", "website"]


class ContactService:
    """Address-book operations, always filtered by owner."""

    def __init__(self, db: Session):
        self.db = db

    def list_contacts(
        self,
        owner_id: int,
        search: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Contact], int]:
        """Return one page of contacts, newest first, and the total match count.

        ``search`` matches name, email or company, case-insensitively.
        """
        query = self.db.query(Contact).filter(Contact.owner_id == owner_id)
        if search:
            query = query.filter(
                or_(
                    Contact.name.icontains(search, autoescape=True),
                    Contact.email.icontains(search, autoescape=True),
                    Contact.company.icontains(search, autoescape=True),
                )
            )

        total = query.count()
        contacts = (
            query.order_by(Contact.created_at.desc(), Contact.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return contacts, total

    def get_contact(self, contact_id: int, owner_id: int) -> Contact:
        """Get a contact the user owns."""
        contact = (
            self.db.query(Contact)
            .filter(Contact.id == contact_id, Contact.owner_id == owner_id)
            .first()
        )
        if not contact:
            raise NotFoundError("Contact not found")
        return contact

    def _email_taken(self, owner_id: int, email: str, exclude_id: int | None = None) -> bool:
        query = self.db.query(Contact.id).filter(
            Contact.owner_id == owner_id, Contact.email == email
        )
        if exclude_id is not None:
            query = query.filter(Contact.id != exclude_id)
        return query.first() is not None

    def _commit(self) -> None:
        # The (owner_id, email) constraint catches creates that race past the pre-check
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Contact email collided on commit")
            raise DuplicateError(DUPLICATE_CONTACT) from None

    def create_contact(
        self,
        owner_id: int,
        name: str,
        email: str,
        company: str | None = None,
        phone: str | None = None,
        notes: str | None = None,
        tags: list[str] | None = None,
        is_lead: bool = False,
        lead_source: LeadSource | str = LeadSource.EMAIL,
    ) -> Contact:
        """Create a contact. Raises DuplicateError if the owner already has the email."""
        email = email.strip().lower()
        if self._email_taken(owner_id, email):
            raise DuplicateError(DUPLICATE_CONTACT)

        contact = Contact(
            owner_id=owner_id,
            name=name.strip(),
            email=email,
            company=company or "",
            phone=phone or "",
            notes=notes or "",
            tags=tags or [],
            is_lead=is_lead,
            lead_source=LeadSource(lead_source).value,
        )
        self.db.add(contact)
        self._commit()
        self.db.refresh(contact)
        return contact

    def update_contact(self, contact_id: int, owner_id: int, changes: dict[str, Any]) -> Contact:
        """Apply a partial update. Keys set to None are ignored."""
        contact = self.get_contact(contact_id, owner_id)

        changes = {key: value for key, value in changes.items() if value is not None}
        if "name" in changes:
            changes["name"] = changes["name"].strip()
        if "email" in changes:
            changes["email"] = changes["email"].strip().lower()
            if self._email_taken(owner_id, changes["email"], exclude_id=contact.id):
                raise DuplicateError(DUPLICATE_CONTACT)
        if "lead_source" in changes:
            changes["lead_source"] = LeadSource(changes["lead_source"]).value

        for key, value in changes.items():
            setattr(contact, key, value)
        self._commit()
        self.db.refresh(contact)
        return contact

    def delete_contact(self, contact_id: int, owner_id: int) -> None:
        """Hard-delete a contact the user owns."""
        contact = self.get_contact(contact_id, owner_id)
        self.db.delete(contact)
        self.db.commit()

    def create_sales_lead(
        self,
        name: str,
        email: str,
        company: str,
        phone: str | None = None,
        message: str | None = None,
        team_size: str | int | None = None,
    ) -> Contact:
        """Record a submission from the public contact-sales form.

        Leads have no owner, so the per-owner email check does not apply.
        """
        lead = Contact(
            owner_id=None,
            name=name.strip(),
            email=email.strip().lower(),
            company=company.strip(),
            phone=phone or "",
            notes=(
                f"Sales lead: {message or 'No message provided'}. "
                f"Team size: {team_size or 'Not specified'}"
            ),
            is_lead=True,
            lead_source=LeadSource.WEBSITE.value,
            tags=list(SALES_LEAD_TAGS),
        )
        self.db.add(lead)
        self.db.commit()
        self.db.refresh(lead)
        logger.info(f"Recorded sales lead {lead.id} from {lead.email}")
        return lead
