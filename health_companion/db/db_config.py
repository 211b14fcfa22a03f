# health_companion/db/db_config.py

import sqlite3
from pathlib import Path

from health_companion.core.config import ASSESSMENT_DB_PATH
from health_companion.core.logger import logger


def get_sqlite_connection(db_path: Path = ASSESSMENT_DB_PATH) -> sqlite3.Connection:
    """
    Open the assessment checkpoint database (created on first use).
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)

    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    conn.execute("PRAGMA busy_timeout=5000;")

    logger.info("assessment store: %s", db_path)
    return conn
