"""
repositories/store.py
---------------------
The storage interface the dispatcher depends on, and its PostgreSQL
implementation composed from the individual repositories.
"""

from typing import Protocol

from models.file_mode import FileOpMode
from models.file_record import FileRecord
from repositories.file_mode_repo import FileModeRepository
from repositories.file_repo import FileRepository
from repositories.user_repo import UserRepository


class Store(Protocol):
    def get_user_language(self, user_id: int) -> str: ...

    def set_user_language(self, user_id: int, language: str) -> None: ...

    def get_user_mode(self, user_id: int) -> FileOpMode: ...

    def set_user_mode(self, user_id: int, mode: FileOpMode) -> None: ...

    def clear_user_mode(self, user_id: int) -> None: ...

    def register_file(self, token: str, owner_id: int, name: str) -> bool: ...

    def file_exists(self, token: str) -> bool: ...

    def delete_file(self, token: str, user_id: int) -> bool: ...

    def list_files_by_user(self, user_id: int) -> dict[str, str]: ...


class DatabaseStore:
    """Store backed by the PostgreSQL repositories."""

    def __init__(
        self,
        users: UserRepository | None = None,
        modes: FileModeRepository | None = None,
        files: FileRepository | None = None,
    ):
        self.users = users or UserRepository()
        self.modes = modes or FileModeRepository()
        self.files = files or FileRepository()

    def get_user_language(self, user_id: int) -> str:
        return self.users.get_language(user_id)

    def set_user_language(self, user_id: int, language: str) -> None:
        self.users.set_language(user_id, language)

    def get_user_mode(self, user_id: int) -> FileOpMode:
        return self.modes.get(user_id)

    def set_user_mode(self, user_id: int, mode: FileOpMode) -> None:
        self.modes.set(user_id, mode)

    def clear_user_mode(self, user_id: int) -> None:
        self.modes.clear(user_id)

    def register_file(self, token: str, owner_id: int, name: str) -> bool:
        """False when the token is already registered to another user."""
        return self.files.add(FileRecord(token=token, owner_id=owner_id, name=name))

    def file_exists(self, token: str) -> bool:
        return self.files.exists(token)

    def delete_file(self, token: str, user_id: int) -> bool:
        """True iff `token` existed and belonged to `user_id`."""
        return self.files.delete(token, user_id)

    def list_files_by_user(self, user_id: int) -> dict[str, str]:
        """Map of token -> file name, in upload order."""
        return {r.token: r.name for r in self.files.get_by_owner(user_id)}
