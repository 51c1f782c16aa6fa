"""
handlers/files_handler.py
--------------------------
Handles every text and document message sent to the bot.
Converts the Telegram update and delegates to FileDispatcher.
"""

from typing import Optional

from telegram import Chat, Update
from telegram.ext import ContextTypes

from models.messages import DocumentMessage, IncomingMessage, TextMessage
from utils.logger import get_logger

logger = get_logger(__name__)

DISPATCHER_KEY = "dispatcher"

_GROUP_CHAT_TYPES = (Chat.GROUP, Chat.SUPERGROUP)


def to_incoming_message(update: Update) -> Optional[IncomingMessage]:
    """
    Build an IncomingMessage from a Telegram update.

    Returns:
        TextMessage or DocumentMessage, or None for anything else
        (edited messages, photos, service messages, channel posts).
    """
    message = update.message
    if message is None or message.from_user is None:
        return None

    common = {
        "from_user_id": message.from_user.id,
        "chat_id": message.chat_id,
        "message_id": message.message_id,
        "is_group_chat": message.chat.type in _GROUP_CHAT_TYPES,
    }
    if message.text is not None:
        return TextMessage(text=message.text, **common)
    if message.document is not None:
        return DocumentMessage(
            file_token=message.document.file_id,
            file_name=message.document.file_name or "",
            **common,
        )
    return None


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Entry point registered for text and document messages."""
    incoming = to_incoming_message(update)
    if incoming is None:
        logger.debug(f"Skipping update {update.update_id}: no text or document")
        return

    dispatcher = context.bot_data[DISPATCHER_KEY]
    await dispatcher.on_update(incoming)
