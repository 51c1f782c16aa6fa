"""
services/language_selection.py
------------------------------
Tracks users who were just shown the language picker.

Membership lives only in memory for the lifetime of the process:
after a restart the user's reply to the picker is handled as a
normal command.
"""

import threading


class PendingLanguageSelection:
    """Thread-safe set of user IDs awaiting a language reply."""

    def __init__(self):
        self._lock = threading.Lock()
        self._users: set[int] = set()

    def add(self, user_id: int) -> None:
        with self._lock:
            self._users.add(user_id)

    def discard(self, user_id: int) -> None:
        with self._lock:
            self._users.discard(user_id)

    def __contains__(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._users

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
