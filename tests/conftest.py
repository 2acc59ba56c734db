"""
Shared fixtures: a fresh SQLite file per test and a Flask test client.
"""

import os
import shutil
import sqlite3
import tempfile

import pytest

from authorsite import create_app


@pytest.fixture
def tmp_db_dir():
    """Create a temporary directory for test databases, cleaned up after."""
    d = tempfile.mkdtemp(prefix="authorsite-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def db_path(tmp_db_dir):
    return os.path.join(tmp_db_dir, "authorsite.db")


@pytest.fixture
def app(db_path):
    """Fully initialised app with all tables created."""
    return create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "DATABASE_PATH": db_path,
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def run_sql(db_path):
    """Run raw SQL against the test database, returning fetched rows as dicts."""
    def _run(query, params=()):
        conn = sqlite3.connect(db_path)
        conn.row_factory = sqlite3.Row
        try:
            rows = [dict(row) for row in conn.execute(query, params).fetchall()]
            conn.commit()
            return rows
        finally:
            conn.close()
    return _run
