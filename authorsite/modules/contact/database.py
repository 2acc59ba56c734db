import logging

from authorsite.core import Config, Database

logger = logging.getLogger(__name__)

TABLE = Config.CONTACTS_TABLE


def init_contact_db():
    """Initialize the contact_submissions table in the database"""
    Database.ensure_dir(Database.get_path())

    with Database.connect() as conn:
        conn.execute(f'''
            CREATE TABLE IF NOT EXISTS {TABLE} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                identity TEXT NOT NULL DEFAULT '{Config.ANONYMOUS_IDENTITY}',
                name TEXT NOT NULL,
                email TEXT NOT NULL,
                subject TEXT NOT NULL,
                message TEXT NOT NULL,
                status TEXT NOT NULL DEFAULT 'new',
                submitted_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            )
        ''')
        conn.execute(f'''
            CREATE INDEX IF NOT EXISTS idx_contact_status
            ON {TABLE}(status, submitted_at)
        ''')

    logger.info("Contact submissions table created/verified successfully")


def save_contact_submission(identity, name, email, subject, message):
    """Insert a contact submission, returns the new row id"""
    with Database.connect() as conn:
        cursor = conn.execute(f'''
            INSERT INTO {TABLE} (identity, name, email, subject, message)
            VALUES (?, ?, ?, ?, ?)
        ''', (identity, name, email, subject, message))
        return cursor.lastrowid


def get_contact_stats(recent_days=7):
    """Total, unread ('new') and recently submitted counts"""
    return Database.fetch_one(f'''
        SELECT
            COUNT(*) AS total_messages,
            COUNT(CASE WHEN status = 'new' THEN 1 END) AS unread_messages,
            COUNT(CASE WHEN submitted_at >= datetime('now', ?) THEN 1 END) AS recent_messages
        FROM {TABLE}
    ''', (f'-{int(recent_days)} days',))
