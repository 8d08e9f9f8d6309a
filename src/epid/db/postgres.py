"""PostgreSQL word store.

Optional alternative to the bundled word file. The words table holds one row
per dictionary entry:

    position  0-based digit value
    word      the word itself (unique)

Rows are read back in C collation order so the list arrives sorted the same
way WordDictionary checks it.
"""

import logging

import psycopg

from epid.config import Settings
from epid.core.dictionary import WordDictionary

logger = logging.getLogger(__name__)

DB_CONFIG = Settings.from_env().db_config()


def connect(config: dict | None = None):
    """Get a connection to the word database."""
    return psycopg.connect(**(config or DB_CONFIG))


def init_schema(conn):
    """Create the words table if it doesn't exist."""
    with conn.cursor() as cur:
        cur.execute("""
            CREATE TABLE IF NOT EXISTS words (
                position    INTEGER PRIMARY KEY,
                word        TEXT NOT NULL UNIQUE
            );
        """)
    conn.commit()


def store_words(conn, dictionary: WordDictionary):
    """Replace the stored word list with `dictionary`."""
    try:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM words")
            cur.executemany(
                "INSERT INTO words (position, word) VALUES (%s, %s)",
                list(enumerate(dictionary)),
            )
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    logger.info("Stored %d words", len(dictionary))


def fetch_words(conn) -> list[str]:
    """All stored words, C-collation sorted."""
    with conn.cursor() as cur:
        cur.execute('SELECT word FROM words ORDER BY word COLLATE "C"')
        return [row[0] for row in cur.fetchall()]


def load_dictionary(conn=None) -> WordDictionary:
    """Build a WordDictionary from the words table."""
    if conn is not None:
        return WordDictionary(fetch_words(conn))
    conn = connect()
    try:
        dictionary = WordDictionary(fetch_words(conn))
    finally:
        conn.close()
    logger.debug("Loaded %d words from %s", len(dictionary), DB_CONFIG["dbname"])
    return dictionary
