"""Dashboard statistics."""

import asyncio
from datetime import UTC, datetime, time, timedelta

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from supersync.models.contact import Contact
from supersync.models.email import Email


def local_day_bounds(now: datetime | None = None) -> tuple[datetime, datetime]:
    """Midnight-to-midnight window of the server's local day, in UTC."""
    today = (now or datetime.now()).astimezone().date()
    # Each midnight gets its own UTC offset, so DST-change days are 23 or 25 hours
    start = datetime.combine(today, time.min).astimezone()
    end = datetime.combine(today + timedelta(days=1), time.min).astimezone()
    return start.astimezone(UTC), end.astimezone(UTC)


class DashboardService:
    """Read-only counters for the dashboard."""

    def __init__(self, db: Session):
        self.db = db

    def _count(self, statement) -> int:
        # Each count gets its own session so they can run side by side
        with Session(bind=self.db.get_bind()) as session:
            return session.execute(statement).scalar_one()

    async def get_stats(self, user_id: int) -> dict[str, int]:
        """Count contacts and emails for a user. The queries run concurrently."""
        day_start, day_end = local_day_bounds()
        emails = select(func.count(Email.id)).where(Email.owner_id == user_id)

        statements = {
            "contacts": select(func.count(Contact.id)).where(Contact.owner_id == user_id),
            "emails": emails,
            "unread_emails": emails.where(Email.is_read.is_(False)),
            "important_emails": emails.where(Email.is_important.is_(True)),
            "today_emails": emails.where(
                Email.received_at >= day_start, Email.received_at < day_end
            ),
        }
        counts = await asyncio.gather(
            *(run_in_threadpool(self._count, statement) for statement in statements.values())
        )
        return dict(zip(statements, counts, strict=True))
