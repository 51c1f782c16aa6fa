"""
repositories/file_mode_repo.py
-------------------------------
Data access layer for the per-user file operation mode.
All SQL queries related to the `user_file_modes` table live here.
"""

from db.connection import get_connection, release_connection
from models.file_mode import FileOpMode
from utils.logger import get_logger

logger = get_logger(__name__)


class FileModeRepository:
    """Repository for the user_file_modes table."""

    def get(self, user_id: int) -> FileOpMode:
        """Return the user's current mode, FileOpMode.NONE when no row exists."""
        sql = "SELECT status FROM user_file_modes WHERE user_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                row = cur.fetchone()
                return FileOpMode(row[0]) if row else FileOpMode.NONE
        finally:
            release_connection(conn)

    def set(self, user_id: int, mode: FileOpMode) -> None:
        """
        Put the user into `mode`, overwriting whatever mode they were in.

        Setting FileOpMode.NONE is the same as clear().
        """
        if mode is FileOpMode.NONE:
            self.clear(user_id)
            return

        sql = """
            INSERT INTO user_file_modes (user_id, status)
            VALUES (%s, %s)
            ON CONFLICT (user_id)
            DO UPDATE SET status = EXCLUDED.status, updated_at = NOW();
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id, int(mode)))
            conn.commit()
            logger.info(f"User {user_id} mode -> {mode.name}")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to set mode for user {user_id}: {e}")
            raise
        finally:
            release_connection(conn)

    def clear(self, user_id: int) -> None:
        sql = "DELETE FROM user_file_modes WHERE user_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
            conn.commit()
            logger.info(f"User {user_id} mode -> NONE")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to clear mode for user {user_id}: {e}")
            raise
        finally:
            release_connection(conn)
