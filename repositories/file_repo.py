"""
repositories/file_repo.py
--------------------------
Data access layer for shared files.
All SQL queries related to the `files` table live here.
"""

from db.connection import get_connection, release_connection
from models.file_record import FileRecord
from utils.logger import get_logger

logger = get_logger(__name__)


class FileRepository:
    """Repository for CRUD operations on the files table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, record: FileRecord) -> bool:
        """
        Register a file.

        A token that is already registered keeps its original owner and name;
        sending the same Telegram file twice is not an error.

        Returns:
            True if the token now belongs to `record.owner_id` (new row, or
            already theirs), False if another user registered it first.
        """
        insert_sql = """
            INSERT INTO files (file_id, owner_id, name)
            VALUES (%s, %s, %s)
            ON CONFLICT (file_id) DO NOTHING;
        """
        owner_sql = "SELECT owner_id FROM files WHERE file_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(insert_sql, (record.token, record.owner_id, record.name))
                inserted = cur.rowcount > 0
                if inserted:
                    owner_id = record.owner_id
                else:
                    cur.execute(owner_sql, (record.token,))
                    row = cur.fetchone()
                    owner_id = row[0] if row else None
            conn.commit()
            if inserted:
                logger.info(f"Registered file '{record.name}' for user {record.owner_id}")
            else:
                logger.info(f"File {record.token} already registered to user {owner_id}")
            return owner_id == record.owner_id
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to register file {record.token}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def exists(self, token: str) -> bool:
        sql = "SELECT 1 FROM files WHERE file_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (token,))
                return cur.fetchone() is not None
        finally:
            release_connection(conn)

    def get_by_owner(self, owner_id: int) -> list[FileRecord]:
        """
        Get all files uploaded by a user, oldest first.

        Args:
            owner_id: Telegram user ID.

        Returns:
            List of FileRecord objects.
        """
        sql = """
            SELECT file_id, owner_id, name, created_at FROM files
            WHERE owner_id = %s
            ORDER BY created_at ASC, file_id ASC;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (owner_id,))
                return [self._row_to_record(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, token: str, owner_id: int) -> bool:
        """Delete a file by token, scoped to its owner."""
        sql = "DELETE FROM files WHERE file_id = %s AND owner_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (token, owner_id))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted file {token} of user {owner_id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete file {token}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_record(row: tuple) -> FileRecord:
        """Convert a database row tuple to a FileRecord domain object."""
        return FileRecord(
            token=row[0],
            owner_id=row[1],
            name=row[2] or "",
            created_at=row[3],
        )
