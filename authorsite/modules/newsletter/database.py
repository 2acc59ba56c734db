"""
Newsletter Subscriber Storage
=============================

One row per email address. Re-subscribing refreshes the existing row in
place; the identity recorded on first subscription is never overwritten.
"""

import json
import logging

from authorsite.core import Config, Database

logger = logging.getLogger(__name__)

TABLE = Config.SUBSCRIBERS_TABLE


def init_newsletter_db():
    """Initialize the newsletter_subscribers table in the database"""
    Database.ensure_dir(Database.get_path())

    with Database.connect() as conn:
        conn.execute(f'''
            CREATE TABLE IF NOT EXISTS {TABLE} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                identity TEXT NOT NULL DEFAULT '{Config.ANONYMOUS_IDENTITY}',
                name TEXT NOT NULL,
                email TEXT UNIQUE NOT NULL,
                subscription_preferences TEXT NOT NULL DEFAULT '[]',
                source TEXT NOT NULL DEFAULT '{Config.DEFAULT_SOURCE}',
                is_active BOOLEAN NOT NULL DEFAULT 1,
                subscribed_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            )
        ''')
        conn.execute(f'''
            CREATE INDEX IF NOT EXISTS idx_newsletter_active
            ON {TABLE}(is_active, subscribed_at)
        ''')

    logger.info("Newsletter subscribers table created/verified successfully")


def upsert_subscriber(identity, name, email, preferences, source):
    """
    Insert a subscriber, or refresh the row that already holds this email.

    The existence check and the upsert run in one BEGIN IMMEDIATE
    transaction, so concurrent first-time subscriptions for the same email
    serialize: one inserts, the rest update.

    Returns True when a new row was created, False when an existing one was
    updated.
    """
    preferences_json = json.dumps(list(preferences))

    with Database.connect(immediate=True) as conn:
        existing = conn.execute(
            f'SELECT id FROM {TABLE} WHERE email = ?', (email,)
        ).fetchone()

        conn.execute(f'''
            INSERT INTO {TABLE} (identity, name, email, subscription_preferences, source)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(email) DO UPDATE SET
                name = excluded.name,
                subscription_preferences = excluded.subscription_preferences,
                source = excluded.source,
                is_active = 1,
                subscribed_at = CURRENT_TIMESTAMP
        ''', (identity, name, email, preferences_json, source))

    return existing is None


def get_subscriber_by_email(email):
    """Return the subscriber row as a dict with decoded preferences, or None"""
    row = Database.fetch_one(f'SELECT * FROM {TABLE} WHERE email = ?', (email,))
    if row is None:
        return None

    row['subscription_preferences'] = json.loads(row['subscription_preferences'] or '[]')
    row['is_active'] = bool(row['is_active'])
    return row


def get_subscriber_stats(recent_days=30):
    """Total, active and recently subscribed counts"""
    return Database.fetch_one(f'''
        SELECT
            COUNT(*) AS total_subscribers,
            COUNT(CASE WHEN is_active = 1 THEN 1 END) AS active_subscribers,
            COUNT(CASE WHEN subscribed_at >= datetime('now', ?) THEN 1 END) AS recent_subscribers
        FROM {TABLE}
    ''', (f'-{int(recent_days)} days',))
