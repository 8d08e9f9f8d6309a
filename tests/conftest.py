"""Shared fixtures and markers for EPID tests."""

import psycopg
import pytest

from epid.core.dictionary import default_dictionary


def pytest_configure(config):
    config.addinivalue_line("markers", "db: requires PostgreSQL connection")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against the bundled word list and default settings."""
    for name in ("EPID_WORDS_FILE", "EPID_LOG_LEVEL", "EPID_DB_PORT"):
        monkeypatch.delenv(name, raising=False)
    default_dictionary.cache_clear()
    yield
    default_dictionary.cache_clear()


@pytest.fixture
def db_conn():
    """Connection to the configured database; skips when it is unreachable."""
    from epid.db.postgres import connect, init_schema

    try:
        conn = connect()
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL unavailable: {e}")
    init_schema(conn)
    yield conn
    conn.rollback()
    conn.close()
