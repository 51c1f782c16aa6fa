"""
models/file_record.py
---------------------
Domain model for a shared file.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class FileRecord:
    """
    A document registered by a user.

    Attributes:
        token: Telegram file_id, reused as the public retrieval token.
        owner_id: Telegram user ID of the uploader.
        name: Original file name, shown in /list and the delete keyboard.
        created_at: Timestamp when the record was created.
    """
    token: str
    owner_id: int
    name: str
    created_at: Optional[datetime] = None
