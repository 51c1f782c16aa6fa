"""Tests for delivering replies through the Bot API."""

from unittest.mock import AsyncMock

import pytest
from telegram import ReplyKeyboardMarkup, ReplyKeyboardRemove
from telegram.error import NetworkError

from models.messages import DocumentReply, HideKeyboard, ShowKeyboard, TextReply
from services.telegram_sender import TelegramSender, build_reply_markup
from utils.errors import SenderUnavailable


@pytest.fixture
def bot():
    return AsyncMock()


class TestBuildReplyMarkup:
    def test_no_keyboard(self) -> None:
        assert build_reply_markup(None) is None

    def test_show_keyboard(self) -> None:
        markup = build_reply_markup(ShowKeyboard(rows=[["en --> English"], ["es --> Español"]], selective=True))

        assert isinstance(markup, ReplyKeyboardMarkup)
        assert [[button.text for button in row] for row in markup.keyboard] == [
            ["en --> English"],
            ["es --> Español"],
        ]
        assert markup.resize_keyboard is True
        assert markup.one_time_keyboard is True
        assert markup.selective is True

    def test_hide_keyboard(self) -> None:
        markup = build_reply_markup(HideKeyboard(selective=True))

        assert isinstance(markup, ReplyKeyboardRemove)
        assert markup.remove_keyboard is True
        assert markup.selective is True


class TestTelegramSender:
    @pytest.mark.asyncio
    async def test_sends_text(self, bot) -> None:
        await TelegramSender(bot).send(TextReply(chat_id=5, text="hi"))

        kwargs = bot.send_message.await_args.kwargs
        assert kwargs["chat_id"] == 5
        assert kwargs["text"] == "hi"
        assert kwargs["reply_parameters"] is None
        assert kwargs["reply_markup"] is None

    @pytest.mark.asyncio
    async def test_sends_reply_to_message(self, bot) -> None:
        await TelegramSender(bot).send(
            TextReply(chat_id=5, text="ok", reply_to_message_id=9, keyboard=HideKeyboard())
        )

        kwargs = bot.send_message.await_args.kwargs
        assert kwargs["reply_parameters"].message_id == 9
        assert isinstance(kwargs["reply_markup"], ReplyKeyboardRemove)

    @pytest.mark.asyncio
    async def test_sends_document_by_token(self, bot) -> None:
        await TelegramSender(bot).send(DocumentReply(chat_id=5, token="BQAC-1"))

        bot.send_document.assert_awaited_once_with(chat_id=5, document="BQAC-1")

    @pytest.mark.asyncio
    async def test_api_error_becomes_sender_unavailable(self, bot) -> None:
        bot.send_message.side_effect = NetworkError("timed out")

        with pytest.raises(SenderUnavailable) as exc_info:
            await TelegramSender(bot).send_text(5, "hi")

        assert exc_info.value.chat_id == 5

    @pytest.mark.asyncio
    async def test_document_error_becomes_sender_unavailable(self, bot) -> None:
        bot.send_document.side_effect = NetworkError("timed out")

        with pytest.raises(SenderUnavailable):
            await TelegramSender(bot).send_document(5, "BQAC-1")
