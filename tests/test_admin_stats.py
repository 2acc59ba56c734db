"""
Aggregate stats endpoints.
"""

from authorsite import create_app


def _subscribe(client, email, name="Reader"):
    return client.post("/api/newsletter/subscribe", json={"name": name, "email": email})


def _contact(client, subject="Hello"):
    return client.post("/api/contact", json={
        "name": "Reader", "email": "reader@example.com",
        "subject": subject, "message": "Hi there",
    })


# ---------------------------------------------------------------------------
# Subscribers
# ---------------------------------------------------------------------------

def test_subscriber_stats_empty(client):
    response = client.get("/api/admin/subscribers")
    assert response.status_code == 200
    assert response.get_json() == {
        "success": True,
        "stats": {
            "total_subscribers": 0,
            "active_subscribers": 0,
            "recent_subscribers": 0,
        },
    }


def test_subscriber_stats_counts(client, run_sql):
    for email in ("a@example.com", "b@example.com", "c@example.com"):
        assert _subscribe(client, email).status_code == 200

    run_sql("UPDATE newsletter_subscribers SET is_active = 0 WHERE email = 'b@example.com'")
    run_sql(
        "UPDATE newsletter_subscribers SET subscribed_at = datetime('now', '-31 days') "
        "WHERE email = 'c@example.com'"
    )

    stats = client.get("/api/admin/subscribers").get_json()["stats"]
    assert stats == {
        "total_subscribers": 3,
        "active_subscribers": 2,
        "recent_subscribers": 2,
    }


def test_resubscribe_refreshes_recent_window(client, run_sql):
    _subscribe(client, "a@example.com")
    run_sql("UPDATE newsletter_subscribers SET subscribed_at = datetime('now', '-60 days'), is_active = 0")

    stats = client.get("/api/admin/subscribers").get_json()["stats"]
    assert stats["recent_subscribers"] == 0
    assert stats["active_subscribers"] == 0

    _subscribe(client, "a@example.com", name="Reader Again")

    stats = client.get("/api/admin/subscribers").get_json()["stats"]
    assert stats == {
        "total_subscribers": 1,
        "active_subscribers": 1,
        "recent_subscribers": 1,
    }


def test_subscriber_window_is_configurable(db_path, run_sql):
    app = create_app({"TESTING": True, "DATABASE_PATH": db_path, "NEWSLETTER_RECENT_DAYS": 1})
    client = app.test_client()
    _subscribe(client, "a@example.com")

    run_sql("UPDATE newsletter_subscribers SET subscribed_at = datetime('now', '-2 days')")

    assert client.get("/api/admin/subscribers").get_json()["stats"]["recent_subscribers"] == 0


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------

def test_contact_stats_empty(client):
    response = client.get("/api/admin/contacts")
    assert response.status_code == 200
    assert response.get_json() == {
        "success": True,
        "stats": {
            "total_messages": 0,
            "unread_messages": 0,
            "recent_messages": 0,
        },
    }


def test_contact_stats_counts(client, run_sql):
    for subject in ("one", "two", "three", "four"):
        assert _contact(client, subject).status_code == 200

    run_sql("UPDATE contact_submissions SET status = 'read' WHERE subject = 'two'")
    run_sql("UPDATE contact_submissions SET submitted_at = datetime('now', '-8 days') WHERE subject IN ('three', 'four')")

    stats = client.get("/api/admin/contacts").get_json()["stats"]
    assert stats == {
        "total_messages": 4,
        "unread_messages": 3,
        "recent_messages": 2,
    }


def test_stats_are_not_gated(client):
    """No credential is checked yet; anonymous callers get the counts."""
    assert client.get("/api/admin/subscribers").status_code == 200
    assert client.get("/api/admin/contacts", headers={"X-Is-Login": "0"}).status_code == 200
