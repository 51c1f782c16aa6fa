"""
models/file_mode.py
-------------------
The per-user file operation mode.
"""

from enum import IntEnum


class FileOpMode(IntEnum):
    """
    Which file workflow a user is in the middle of.

    NONE is never stored: it is the absence of a row in `user_file_modes`.
    The other values are the integers persisted in the `status` column.
    """
    NONE = -1
    AWAITING_UPLOAD = 0
    AWAITING_DELETE_SELECTION = 1
