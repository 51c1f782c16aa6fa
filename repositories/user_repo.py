"""
repositories/user_repo.py
--------------------------
Data access layer for user language preferences.
"""

from config import DEFAULT_LANGUAGE
from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for the users table."""

    def get_language(self, telegram_id: int) -> str:
        """
        Fetch the user's language code.

        Returns:
            The stored code, or DEFAULT_LANGUAGE for users who never chose one.
        """
        sql = "SELECT language FROM users WHERE telegram_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (telegram_id,))
                row = cur.fetchone()
                return row[0] if row else DEFAULT_LANGUAGE
        finally:
            release_connection(conn)

    def set_language(self, telegram_id: int, language: str) -> None:
        """
        Store the user's language code, creating the user row if needed.

        Args:
            telegram_id: The Telegram user ID.
            language: A supported language code, e.g. 'es'.
        """
        sql = """
            INSERT INTO users (telegram_id, language)
            VALUES (%s, %s)
            ON CONFLICT (telegram_id)
            DO UPDATE SET language = EXCLUDED.language, updated_at = NOW();
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (telegram_id, language))
            conn.commit()
            logger.info(f"User {telegram_id} language set to '{language}'")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to set language for user {telegram_id}: {e}")
            raise
        finally:
            release_connection(conn)
