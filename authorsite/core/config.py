import os
from dotenv import load_dotenv

load_dotenv(override=True)

class Config:
    """
    Base configuration for the authorsite backend.
    Values come from the environment (or a .env file) with local defaults.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')
    DEBUG = os.getenv('FLASK_DEBUG', '0') == '1'

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))

    # Single SQLite file holding subscribers, contacts and app logs
    DATABASE_PATH = os.getenv('DATABASE_PATH', os.path.join(DB_DIR, 'authorsite.db'))

    # Seconds SQLite waits on a locked database before raising
    DB_TIMEOUT = float(os.getenv('DB_TIMEOUT', '5'))

    # Table names
    SUBSCRIBERS_TABLE = "newsletter_subscribers"
    CONTACTS_TABLE = "contact_submissions"
    LOGS_TABLE = "app_logs"

    # Cross-origin settings
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    CORS_METHODS = ['GET', 'POST', 'OPTIONS']
    CORS_HEADERS = ['Content-Type']

    # Caller identity headers (untrusted, set by the hosting edge)
    IDENTITY_HEADER = os.getenv('IDENTITY_HEADER', 'X-Encrypted-Yw-ID')
    LOGIN_HEADER = os.getenv('LOGIN_HEADER', 'X-Is-Login')
    ANONYMOUS_IDENTITY = 'anonymous'

    # Newsletter / contact defaults
    DEFAULT_SOURCE = 'website'
    NEWSLETTER_RECENT_DAYS = int(os.getenv('NEWSLETTER_RECENT_DAYS', '30'))
    CONTACT_RECENT_DAYS = int(os.getenv('CONTACT_RECENT_DAYS', '7'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Port for local server
    PORT = int(os.getenv('PORT', '5000'))

    @classmethod
    def as_dict(cls):
        """Upper-case settings, ready for app.config.update()"""
        return {key: getattr(cls, key) for key in dir(cls) if key.isupper()}
