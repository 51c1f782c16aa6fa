"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: language preference per Telegram user
CREATE TABLE IF NOT EXISTS users (
    telegram_id     BIGINT PRIMARY KEY,
    language        VARCHAR(10) NOT NULL,
    updated_at      TIMESTAMPTZ DEFAULT NOW()
);

-- File operation mode: a row exists only while an upload or a delete
-- selection is in progress (0 = awaiting upload, 1 = awaiting delete)
CREATE TABLE IF NOT EXISTS user_file_modes (
    user_id         BIGINT PRIMARY KEY,
    status          SMALLINT NOT NULL CHECK (status IN (0, 1)),
    updated_at      TIMESTAMPTZ DEFAULT NOW()
);

-- File registry: the Telegram file_id doubles as the public retrieval token
CREATE TABLE IF NOT EXISTS files (
    file_id         TEXT PRIMARY KEY,
    owner_id        BIGINT NOT NULL,
    name            TEXT,
    created_at      TIMESTAMPTZ DEFAULT NOW()
);

CREATE INDEX IF NOT EXISTS idx_files_owner ON files(owner_id, created_at);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
