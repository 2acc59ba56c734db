"""
Centralized logging service for the authorsite backend.
Stores structured log entries in the app_logs table next to the site data,
and falls back to the standard logger when the database is unavailable.
"""

import json
import logging
import traceback
from datetime import datetime, timedelta, timezone

from flask import request, has_request_context, g

from .database import Database
from .config import Config

_console = logging.getLogger(__name__)


def _utc_now():
    # Same text layout as SQLite's CURRENT_TIMESTAMP so the columns compare
    return datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')


class LoggingService:
    """Centralized logging service for application-wide logging"""

    @staticmethod
    def init_logs_table():
        """Ensure the app_logs table exists"""
        Database.ensure_dir(Database.get_path())
        with Database.connect() as conn:
            conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {Config.LOGS_TABLE} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    timestamp TEXT NOT NULL,
                    level TEXT NOT NULL,
                    source TEXT NOT NULL,
                    message TEXT NOT NULL,
                    details TEXT,
                    ip_address TEXT,
                    user_agent TEXT,
                    request_path TEXT,
                    identity TEXT
                )
            """)
            conn.execute(f"""
                CREATE INDEX IF NOT EXISTS idx_logs_timestamp
                ON {Config.LOGS_TABLE}(timestamp DESC)
            """)
            conn.execute(f"""
                CREATE INDEX IF NOT EXISTS idx_logs_level
                ON {Config.LOGS_TABLE}(level)
            """)

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None, None, None

        ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
        if ip_address and ',' in ip_address:
            ip_address = ip_address.split(',')[0].strip()

        user_agent = request.headers.get('User-Agent', '')
        identity = getattr(g, 'identity', None)
        principal = identity.principal_id if identity is not None else None

        return ip_address, user_agent, request.path, principal

    @staticmethod
    def log(level, source, message, details=None, identity=None):
        """
        Log a message to the database

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (newsletter, contact, router, etc.)
            message (str): Main log message
            details (str/dict): Additional details (will be JSON-encoded if dict)
            identity (str): Optional caller identity, defaults to the request's
        """
        level = level.upper()
        _console.log(logging.getLevelName(level), "[%s] %s", source, message)

        try:
            ip_address, user_agent, request_path, principal = LoggingService._get_request_context()

            if isinstance(details, dict):
                details = json.dumps(details, indent=2, default=str)

            with Database.connect() as conn:
                conn.execute(f"""
                    INSERT INTO {Config.LOGS_TABLE}
                    (timestamp, level, source, message, details, ip_address, user_agent, request_path, identity)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """, (
                    _utc_now(), level, source, message, details,
                    ip_address, user_agent, request_path, identity or principal
                ))

        except Exception as e:
            # A failed log write must never take the request down with it
            _console.warning("Logging service error: %s", e)
            if details:
                _console.warning("Details: %s", details)

    @staticmethod
    def info(source, message, details=None, identity=None):
        LoggingService.log('INFO', source, message, details, identity)

    @staticmethod
    def error(source, message, details=None, identity=None):
        LoggingService.log('ERROR', source, message, details, identity)

    @staticmethod
    def log_api_call(source, endpoint, method='GET', status_code=200, details=None):
        """Log API calls"""
        message = f"API {method} {endpoint} - Status: {status_code}"
        level = 'INFO' if 200 <= status_code < 400 else 'WARNING' if status_code < 500 else 'ERROR'
        LoggingService.log(level, source, message, details)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc()
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

    @staticmethod
    def recent(limit=50, source=None):
        """Most recent log entries, newest first"""
        query = f"SELECT * FROM {Config.LOGS_TABLE}"
        params = []
        if source:
            query += " WHERE source = ?"
            params.append(source)
        query += " ORDER BY id DESC LIMIT ?"
        params.append(limit)

        with Database.connect() as conn:
            return [dict(row) for row in conn.execute(query, params).fetchall()]

    @staticmethod
    def cleanup_old_logs(days_to_keep=30):
        """Clean up old log entries, returns the number deleted"""
        cutoff = (datetime.now(timezone.utc) - timedelta(days=days_to_keep)).strftime('%Y-%m-%d %H:%M:%S')

        with Database.connect() as conn:
            cursor = conn.execute(f"""
                DELETE FROM {Config.LOGS_TABLE}
                WHERE timestamp < ?
            """, (cutoff,))
            deleted_count = cursor.rowcount

        LoggingService.info('system', f"Cleaned up {deleted_count} old log entries")
        return deleted_count


def db_log(level, source, message, details=None):
    """Shortcut used by the route modules"""
    LoggingService.log(level, source, message, details)
