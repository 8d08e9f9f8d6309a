"""Runtime settings, read from the environment.

Environment:
    EPID_WORDS_FILE     Word list path (default: bundled words.txt)
    EPID_LOG_LEVEL      Log level for the CLI (default: WARNING)
    EPID_DB_HOST        PostgreSQL host (default: localhost)
    EPID_DB_PORT        PostgreSQL port (default: 5432)
    EPID_DB_NAME        Database name (default: epid)
    EPID_DB_USER        Database user (default: epid)
    EPID_DB_PASSWORD    Database password (default: epid_dev)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class Settings:
    words_file: str | None = None
    log_level: str = "WARNING"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "epid"
    db_user: str = "epid"
    db_password: str = "epid_dev"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        port = env.get("EPID_DB_PORT", "5432")
        try:
            db_port = int(port)
        except ValueError:
            raise ValueError(f"EPID_DB_PORT must be an integer, got {port!r}") from None
        log_level = env.get("EPID_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"EPID_LOG_LEVEL is not a log level: {log_level!r}")
        return cls(
            words_file=env.get("EPID_WORDS_FILE") or None,
            log_level=log_level,
            db_host=env.get("EPID_DB_HOST", "localhost"),
            db_port=db_port,
            db_name=env.get("EPID_DB_NAME", "epid"),
            db_user=env.get("EPID_DB_USER", "epid"),
            db_password=env.get("EPID_DB_PASSWORD", "epid_dev"),
        )

    def db_config(self) -> dict:
        """Connection keywords for psycopg.connect."""
        return {
            "dbname": self.db_name,
            "user": self.db_user,
            "password": self.db_password,
            "host": self.db_host,
            "port": self.db_port,
        }
