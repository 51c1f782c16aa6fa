"""
services/telegram_sender.py
---------------------------
Delivers dispatcher replies through the Telegram Bot API.
"""

from typing import Optional

from telegram import Bot, ReplyKeyboardMarkup, ReplyKeyboardRemove, ReplyParameters
from telegram.error import TelegramError

from models.messages import (
    DocumentReply,
    HideKeyboard,
    KeyboardDirective,
    OutboundMessage,
    ShowKeyboard,
    TextReply,
)
from utils.errors import SenderUnavailable
from utils.logger import get_logger

logger = get_logger(__name__)


def build_reply_markup(keyboard: Optional[KeyboardDirective]):
    """Convert a keyboard directive into python-telegram-bot markup."""
    if keyboard is None:
        return None
    if isinstance(keyboard, HideKeyboard):
        return ReplyKeyboardRemove(selective=keyboard.selective)
    if isinstance(keyboard, ShowKeyboard):
        return ReplyKeyboardMarkup(
            keyboard.rows,
            resize_keyboard=True,
            one_time_keyboard=True,
            selective=keyboard.selective,
        )
    raise TypeError(f"Unknown keyboard directive: {keyboard!r}")


class TelegramSender:
    """Sends text and documents, wrapping Bot API errors in SenderUnavailable."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send(self, outbound: OutboundMessage) -> None:
        if isinstance(outbound, DocumentReply):
            await self.send_document(outbound.chat_id, outbound.token)
        elif isinstance(outbound, TextReply):
            await self.send_text(
                outbound.chat_id,
                outbound.text,
                reply_to_message_id=outbound.reply_to_message_id,
                keyboard=outbound.keyboard,
            )
        else:
            raise TypeError(f"Unknown outbound message: {outbound!r}")

    async def send_text(
        self,
        chat_id: int,
        text: str,
        reply_to_message_id: Optional[int] = None,
        keyboard: Optional[KeyboardDirective] = None,
    ) -> None:
        reply_parameters = None
        if reply_to_message_id is not None:
            reply_parameters = ReplyParameters(message_id=reply_to_message_id)
        try:
            await self.bot.send_message(
                chat_id=chat_id,
                text=text,
                reply_parameters=reply_parameters,
                reply_markup=build_reply_markup(keyboard),
            )
        except TelegramError as e:
            logger.error(f"Failed to send message to chat {chat_id}: {e}")
            raise SenderUnavailable(chat_id, str(e)) from e

    async def send_document(self, chat_id: int, token: str) -> None:
        """Re-send a file Telegram already stores, identified by its file_id."""
        try:
            await self.bot.send_document(chat_id=chat_id, document=token)
        except TelegramError as e:
            logger.error(f"Failed to send document to chat {chat_id}: {e}")
            raise SenderUnavailable(chat_id, str(e)) from e
