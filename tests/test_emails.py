"""Inbox sync and email endpoint tests."""

from datetime import UTC, datetime, timedelta
from unittest.mock import patch

from supersync.models.email import Email
from supersync.models.user import User
from supersync.services.email_sync import PREVIEW_LENGTH, DemoMessage, generate_demo_inbox


def sync(client, headers, **body):
    return client.post("/api/email/sync", headers=headers, json=body or None)


def test_generate_demo_inbox():
    """The stub builds three messages addressed to the user."""
    now = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
    messages = generate_demo_inbox(7, "Ann", "a@x.com", "outlook", now=now)

    assert len(messages) == 3
    assert all(m.message_id.startswith("demo-7-") for m in messages)
    assert len({m.message_id for m in messages}) == 3
    assert all(m.recipients == [{"name": "Ann", "email": "a@x.com"}] for m in messages)
    assert [m.received_at for m in messages] == [
        now,
        now - timedelta(minutes=30),
        now - timedelta(hours=1),
    ]
    assert "outlook" in messages[1].body
    assert messages[0].preview == messages[0].body[:PREVIEW_LENGTH] + "..."


def test_sync_creates_unread_emails(client, auth_headers):
    """Sync reports the batch and the inbox then holds it unread."""
    response = sync(client, auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["synced"] == 3
    assert len(data["emails"]) == 3
    assert all(e["id"].startswith("demo-") for e in data["emails"])
    assert all(e["body"].endswith("...") for e in data["emails"])

    inbox = client.get("/api/emails", headers=auth_headers).json()
    assert inbox["pagination"]["total"] == 3
    assert all(e["isRead"] is False for e in inbox["emails"])
    received = [e["receivedAt"] for e in inbox["emails"]]
    assert received == sorted(received, reverse=True)


def test_sync_marks_user(client, db, auth_headers):
    """The user is flagged as synced with the chosen provider."""
    assert sync(client, auth_headers, provider="yahoo").status_code == 200

    user = db.query(User).filter(User.id == auth_headers.user_id).one()
    assert user.is_email_synced is True
    assert user.last_email_sync is not None
    assert user.email_provider == "yahoo"


def test_sync_defaults_to_gmail(client, auth_headers):
    """No provider means gmail."""
    sync(client, auth_headers)
    profile = client.get("/api/auth/profile", headers=auth_headers).json()["user"]
    assert profile["emailProvider"] == "gmail"
    assert profile["isEmailSynced"] is True


def test_sync_rejects_unknown_provider(client, auth_headers):
    """Providers are limited to the supported set."""
    assert sync(client, auth_headers, provider="aol").status_code == 400


def test_repeated_sync_replaces_demo_emails(client, db, auth_headers):
    """Syncing again does not duplicate the demo batch."""
    sync(client, auth_headers)
    sync(client, auth_headers)

    assert db.query(Email).filter(Email.owner_id == auth_headers.user_id).count() == 3


def test_sync_keeps_other_users_inbox(client, db, auth_headers, other_auth_headers):
    """One user's sync never purges another user's messages."""
    sync(client, other_auth_headers)
    sync(client, auth_headers)
    sync(client, auth_headers)

    assert db.query(Email).filter(Email.owner_id == other_auth_headers.user_id).count() == 3


def test_sync_requires_token(client):
    """Sync is a protected route."""
    assert client.post("/api/email/sync").status_code == 401


def test_list_email_filters(client, auth_headers):
    """unread and important narrow the list."""
    sync(client, auth_headers)

    important = client.get(
        "/api/emails", headers=auth_headers, params={"important": "true"}
    ).json()
    assert important["pagination"]["total"] == 2
    assert all(e["isImportant"] for e in important["emails"])

    email_id = important["emails"][0]["id"]
    client.put(f"/api/emails/{email_id}/read", headers=auth_headers)

    unread = client.get("/api/emails", headers=auth_headers, params={"unread": "true"}).json()
    assert unread["pagination"]["total"] == 2
    assert email_id not in [e["id"] for e in unread["emails"]]


def test_list_emails_pagination(client, auth_headers):
    """Email pages follow the same hasMore rule as contacts."""
    sync(client, auth_headers)

    page = client.get(
        "/api/emails", headers=auth_headers, params={"limit": 2, "offset": 0}
    ).json()
    assert len(page["emails"]) == 2
    assert page["pagination"] == {"total": 3, "limit": 2, "offset": 0, "hasMore": True}


def test_mark_read_is_idempotent(client, db, auth_headers):
    """Marking read twice succeeds both times."""
    sync(client, auth_headers)
    email_id = client.get("/api/emails", headers=auth_headers).json()["emails"][0]["id"]

    for _ in range(2):
        response = client.put(f"/api/emails/{email_id}/read", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Email marked as read"}
        assert db.query(Email).filter(Email.id == email_id).one().is_read is True


def test_mark_important(client, auth_headers):
    """The important flag can be cleared and set again."""
    sync(client, auth_headers)
    email_id = client.get("/api/emails", headers=auth_headers).json()["emails"][0]["id"]

    response = client.put(
        f"/api/emails/{email_id}/important", headers=auth_headers, json={"important": False}
    )
    assert response.status_code == 200
    assert response.json() == {
        "message": "Email marked as not important",
        "email": {"id": email_id, "isImportant": False},
    }

    response = client.put(
        f"/api/emails/{email_id}/important", headers=auth_headers, json={"important": True}
    )
    assert response.json()["email"]["isImportant"] is True


def test_cannot_touch_another_users_email(client, auth_headers, other_auth_headers):
    """Emails are owner-scoped for reads and writes."""
    sync(client, auth_headers)
    email_id = client.get("/api/emails", headers=auth_headers).json()["emails"][0]["id"]

    assert client.get("/api/emails", headers=other_auth_headers).json()["emails"] == []

    response = client.put(f"/api/emails/{email_id}/read", headers=other_auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Email not found"}

    response = client.put(
        f"/api/emails/{email_id}/important", headers=other_auth_headers, json={"important": True}
    )
    assert response.status_code == 404


def test_sync_message_id_collision_is_duplicate(client, db, auth_headers, other_auth_headers):
    """A sync that collides on message ids fails cleanly and keeps the old inbox."""
    sync(client, auth_headers)
    db.add(
        Email(
            owner_id=other_auth_headers.user_id,
            message_id="demo-collision-1",
            subject="Taken",
            body="Body",
            sender={"name": "Sam", "email": "sam@x.com"},
            recipients=[],
        )
    )
    db.commit()

    colliding = [
        DemoMessage(
            message_id="demo-collision-1",
            subject="Hello",
            sender={"name": "Sam", "email": "sam@x.com"},
            recipients=[],
            body="Body",
            received_at=datetime.now(UTC),
        )
    ]
    with patch("supersync.services.emails.generate_demo_inbox", return_value=colliding):
        response = sync(client, auth_headers)

    assert response.status_code == 400
    assert "error" in response.json()
    assert db.query(Email).filter(Email.owner_id == auth_headers.user_id).count() == 3
