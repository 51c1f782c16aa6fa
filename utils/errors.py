"""
utils/errors.py
---------------
Infrastructure failures raised by the storage and delivery collaborators.

User mistakes (unknown language, unknown file token, a keyboard row without
its separator) are never raised: the dispatcher turns them into a localized
reply. Only the exceptions below leave the dispatcher, and they are handled
by the transport layer's error handler.
"""


class StoreUnavailable(Exception):
    """The database could not be reached or refused a connection."""


class SenderUnavailable(Exception):
    """The Telegram Bot API call delivering a reply failed."""

    def __init__(self, chat_id: int, message: str):
        super().__init__(f"Failed to deliver to chat {chat_id}: {message}")
        self.chat_id = chat_id
