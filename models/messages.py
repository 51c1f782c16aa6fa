"""
models/messages.py
------------------
Transport-independent inbound and outbound messages.

The Telegram adapter converts `telegram.Update` into an IncomingMessage,
and the sender turns an OutboundMessage back into a Bot API call, so the
dispatcher never touches python-telegram-bot objects.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


# ── Inbound ───────────────────────────────────────────────

@dataclass(frozen=True)
class TextMessage:
    from_user_id: int
    chat_id: int
    message_id: int
    text: str
    is_group_chat: bool = False


@dataclass(frozen=True)
class DocumentMessage:
    from_user_id: int
    chat_id: int
    message_id: int
    file_token: str
    file_name: str
    is_group_chat: bool = False


IncomingMessage = Union[TextMessage, DocumentMessage]


# ── Keyboard directives ───────────────────────────────────

@dataclass(frozen=True)
class ShowKeyboard:
    """Reply keyboard with one button per row."""
    rows: list[list[str]] = field(default_factory=list)
    selective: bool = False


@dataclass(frozen=True)
class HideKeyboard:
    selective: bool = True


KeyboardDirective = Union[ShowKeyboard, HideKeyboard]


# ── Outbound ──────────────────────────────────────────────

@dataclass(frozen=True)
class TextReply:
    chat_id: int
    text: str
    reply_to_message_id: Optional[int] = None
    keyboard: Optional[KeyboardDirective] = None


@dataclass(frozen=True)
class DocumentReply:
    chat_id: int
    token: str
    reply_to_message_id: Optional[int] = None
    keyboard: Optional[KeyboardDirective] = None


OutboundMessage = Union[TextReply, DocumentReply]
