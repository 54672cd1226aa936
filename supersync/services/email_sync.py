"""Demo inbox generator.

Stands in for a real mail-provider integration: it builds a fixed batch of
canned messages addressed to the user.
"""

import time
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

DEMO_MESSAGE_PREFIX = "demo-"
PREVIEW_LENGTH = 150


@dataclass
class DemoMessage:
    """A message produced by the demo generator, not yet persisted."""

    message_id: str
    subject: str
    sender: dict
    recipients: list[dict]
    body: str
    received_at: datetime
    is_read: bool = False
    is_important: bool = False
    labels: list[str] = field(default_factory=list)

    @property
    def preview(self) -> str:
        """Body cut down for list views."""
        return self.body[:PREVIEW_LENGTH] + "..."


def generate_demo_inbox(
    user_id: int,
    user_name: str | None,
    user_email: str,
    provider: str | None = None,
    now: datetime | None = None,
) -> list[DemoMessage]:
    """Build the canned welcome, sync-progress and website-lead messages."""
    now = now or datetime.now(UTC)
    stamp = int(time.time() * 1000)
    greeting_name = user_name or "there"
    provider_name = provider or "your email provider"
    recipients = [{"name": user_name or "User", "email": user_email}]

    def message_id(n: int) -> str:
        return f"{DEMO_MESSAGE_PREFIX}{user_id}-{stamp}-{n}"

    return [
        DemoMessage(
            message_id=message_id(1),
            subject="Welcome to SuperSync - Your Email Integration is Ready!",
            sender={"name": "SuperSync Team", "email": "hello@supersync.com"},
            recipients=recipients,
            body=(
                f"Hi {greeting_name}!\n\n"
                "Welcome to SuperSync! We're excited to have you on board. Your email "
                "integration has been successfully set up and you can now start managing "
                "your contacts and emails in one place.\n\n"
                "Here's what you can do:\n"
                "- Sync contacts from your email\n"
                "- Manage leads and prospects\n"
                "- Track email conversations\n"
                "- Organize your network\n\n"
                "If you have any questions, just reply to this email.\n\n"
                "Best regards,\nThe SuperSync Team"
            ),
            is_important=True,
            labels=["welcome", "setup"],
            received_at=now,
        ),
        DemoMessage(
            message_id=message_id(2),
            subject="Your contacts are being synced",
            sender={"name": "SuperSync Support", "email": "support@supersync.com"},
            recipients=recipients,
            body=(
                f"Hi {greeting_name},\n\n"
                f"Your contact sync is in progress. We're importing your contacts from "
                f"{provider_name} and organizing them for you.\n\n"
                "This process usually takes a few minutes. You'll receive a notification "
                "once it's complete.\n\n"
                "In the meantime, you can start exploring the dashboard and adding new "
                "contacts manually.\n\n"
                "Thanks for choosing SuperSync!\n\nBest,\nSupport Team"
            ),
            labels=["sync", "notification"],
            received_at=now - timedelta(minutes=30),
        ),
        DemoMessage(
            message_id=message_id(3),
            subject="New lead from your website contact form",
            sender={"name": "Website Lead", "email": "leads@supersync.com"},
            recipients=recipients,
            body=(
                "A new lead has submitted your contact form:\n\n"
                "Name: John Smith\n"
                "Company: TechCorp Inc.\n"
                "Email: john.smith@techcorp.com\n"
                'Message: "Interested in learning more about your email management '
                'solution for our team of 50+ people."\n\n'
                "This lead has been automatically added to your contacts. You can follow "
                "up directly from your dashboard.\n\n"
                "Don't let this opportunity slip away!"
            ),
            is_important=True,
            labels=["lead", "website", "urgent"],
            received_at=now - timedelta(hours=1),
        ),
    ]
