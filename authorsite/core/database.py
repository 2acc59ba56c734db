import os
import sqlite3
from contextlib import contextmanager

from flask import current_app

from .config import Config
from .errors import StoreFailure


class Database:
    """Thin SQLite access layer: one connection and one transaction per call."""

    @staticmethod
    def _setting(key):
        """Look up a setting on the Flask app first, then on Config"""
        try:
            val = current_app.config.get(key)
            if val is not None:
                return val
        except RuntimeError:
            pass
        return getattr(Config, key)

    @staticmethod
    def get_path():
        """Get the database path from app config or environment"""
        return Database._setting('DATABASE_PATH')

    @staticmethod
    def ensure_dir(path):
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    @staticmethod
    @contextmanager
    def connect(path=None, immediate=False):
        """
        Yield a connection inside a transaction, commit on success, roll back
        on error and always close.

        With immediate=True the transaction takes the database write lock up
        front (BEGIN IMMEDIATE), so a read-then-write sequence sees no
        interleaved writers. Any sqlite3.Error surfaces as StoreFailure.
        """
        path = path or Database.get_path()
        try:
            conn = sqlite3.connect(
                path,
                timeout=float(Database._setting('DB_TIMEOUT')),
                isolation_level=None,
            )
        except sqlite3.Error as e:
            raise StoreFailure(str(e)) from e

        conn.row_factory = sqlite3.Row
        try:
            conn.execute('BEGIN IMMEDIATE' if immediate else 'BEGIN')
            yield conn
            conn.execute('COMMIT')
        except sqlite3.Error as e:
            if conn.in_transaction:
                conn.execute('ROLLBACK')
            raise StoreFailure(str(e)) from e
        except Exception:
            if conn.in_transaction:
                conn.execute('ROLLBACK')
            raise
        finally:
            conn.close()

    @staticmethod
    def fetch_one(query, params=()):
        """Run a read query and return the first row as a dict (or None)"""
        with Database.connect() as conn:
            row = conn.execute(query, params).fetchone()
            return dict(row) if row else None
