"""Inbox service: demo sync, listing and flag updates."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from supersync.exceptions import DuplicateError, NotFoundError
from supersync.models.email import Email
from supersync.models.enums import EmailProvider
from supersync.models.user import User
from supersync.services.email_sync import DEMO_MESSAGE_PREFIX, DemoMessage, generate_demo_inbox

logger = logging.getLogger(__name__)


class EmailService:
    """Owner-scoped operations on a user's inbox."""

    def __init__(self, db: Session):
        self.db = db

    def sync(self, user: User, provider: str | None = None) -> list[DemoMessage]:
        """Replace the user's demo messages with a fresh batch.

        Earlier demo messages are purged first so repeated syncs never pile up
        duplicates. Marks the user as synced.
        """
        provider = provider or EmailProvider.GMAIL.value
        messages = generate_demo_inbox(user.id, user.name, user.email, provider)

        removed = (
            self.db.query(Email)
            .filter(
                Email.owner_id == user.id,
                Email.message_id.startswith(DEMO_MESSAGE_PREFIX, autoescape=True),
            )
            .delete(synchronize_session="fetch")
        )

        self.db.add_all(
            Email(
                owner_id=user.id,
                message_id=message.message_id,
                subject=message.subject,
                sender=message.sender,
                recipients=message.recipients,
                body=message.body,
                is_read=message.is_read,
                is_important=message.is_important,
                labels=message.labels,
                received_at=message.received_at,
            )
            for message in messages
        )

        user.is_email_synced = True
        user.last_email_sync = datetime.now(UTC)
        user.email_provider = provider
        try:
            self.db.commit()
        except IntegrityError:
            # Another sync inserted the same message ids first
            self.db.rollback()
            logger.warning(f"Demo sync for user {user.id} collided on message ids")
            raise DuplicateError("Email sync collided with another sync, please retry") from None

        logger.info(
            f"Synced {len(messages)} demo emails for user {user.id} "
            f"(provider={provider}, replaced={removed})"
        )
        return messages

    def list_emails(
        self,
        user_id: int,
        unread_only: bool = False,
        important_only: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Email], int]:
        """Return one page of the user's emails, newest first, and the total."""
        query = self.db.query(Email).filter(Email.owner_id == user_id)
        if unread_only:
            query = query.filter(Email.is_read.is_(False))
        if important_only:
            query = query.filter(Email.is_important.is_(True))

        total = query.count()
        emails = (
            query.order_by(Email.received_at.desc(), Email.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return emails, total

    def get_email(self, email_id: int, user_id: int) -> Email:
        """Get an email the user owns."""
        email = (
            self.db.query(Email).filter(Email.id == email_id, Email.owner_id == user_id).first()
        )
        if not email:
            raise NotFoundError("Email not found")
        return email

    def mark_read(self, email_id: int, user_id: int) -> Email:
        """Mark an email read. Safe to repeat."""
        email = self.get_email(email_id, user_id)
        email.is_read = True
        self.db.commit()
        self.db.refresh(email)
        return email

    def mark_important(self, email_id: int, user_id: int, important: bool) -> Email:
        """Set or clear the important flag."""
        email = self.get_email(email_id, user_id)
        email.is_important = important
        self.db.commit()
        self.db.refresh(email)
        return email
