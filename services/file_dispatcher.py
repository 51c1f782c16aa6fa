"""
services/file_dispatcher.py
---------------------------
Decides what the bot does with each incoming message.

Responsibilities:
    - Register documents sent while the user is uploading.
    - Apply the user's answer to the language picker.
    - Route commands (/start, /setlanguage, /upload, /cancel, /delete, /list).
    - Keep each user's mode consistent when their updates arrive concurrently.
"""

import asyncio
from typing import Optional, Protocol

from config import DB_POOL_MAX, FILE_LINK_PREFIX
from models.file_mode import FileOpMode
from models.messages import (
    DocumentMessage,
    DocumentReply,
    HideKeyboard,
    IncomingMessage,
    OutboundMessage,
    ShowKeyboard,
    TextMessage,
    TextReply,
)
from repositories.store import DatabaseStore, Store
from services.language_selection import PendingLanguageSelection
from services.localization_service import LocalizationService
from utils.choice_parser import format_choice, parse_choice
from utils.commands import (
    CANCEL_COMMAND,
    DELETE_COMMAND,
    HELP_COMMANDS,
    LIST_COMMAND,
    SET_LANGUAGE_COMMAND,
    START_COMMAND,
    UPLOAD_COMMAND,
)
from utils.logger import get_logger
from utils.user_locks import AsyncUserLocks, UserLocks

logger = get_logger(__name__)


class Sender(Protocol):
    async def send(self, outbound: OutboundMessage) -> None: ...


class FileDispatcher:
    """
    Maps one incoming message to at most one reply plus store writes.

    All collaborators are injectable; by default the dispatcher talks to
    PostgreSQL and the built-in string tables. A reply is produced for
    every accepted message except documents sent outside upload mode and
    non-/start commands in group chats, which are ignored.
    """

    def __init__(
        self,
        sender: Optional[Sender] = None,
        store: Optional[Store] = None,
        localizer: Optional[LocalizationService] = None,
        pending: Optional[PendingLanguageSelection] = None,
        link_prefix: str = FILE_LINK_PREFIX,
        max_workers: int = DB_POOL_MAX,
    ):
        self.sender = sender
        self.store = store if store is not None else DatabaseStore()
        self.localizer = localizer if localizer is not None else LocalizationService()
        self.pending = pending if pending is not None else PendingLanguageSelection()
        self.link_prefix = link_prefix
        self._locks = UserLocks()
        self._async_locks = AsyncUserLocks()
        # One worker thread per pooled connection; the pool does not wait.
        self._workers = asyncio.Semaphore(max_workers)

    # ── ENTRY POINTS ──────────────────────────────────────

    async def on_update(self, message: IncomingMessage) -> Optional[OutboundMessage]:
        """
        Handle a message and deliver the reply, if any.

        A user's updates queue on the event loop, not in worker threads,
        and at most `max_workers` updates touch the store at once.
        Store and sender failures propagate to the caller. A reply that
        fails to send does not undo the store writes already made.
        """
        async with self._async_locks.hold(message.from_user_id):
            async with self._workers:
                reply = await asyncio.to_thread(self.handle, message)
        if reply is not None and self.sender is not None:
            await self.sender.send(reply)
        return reply

    def handle(self, message: IncomingMessage) -> Optional[OutboundMessage]:
        """Run the decision procedure for one message under the user's lock."""
        with self._locks.hold(message.from_user_id):
            if isinstance(message, DocumentMessage):
                return self._handle_document(message)
            if message.from_user_id in self.pending:
                return self._handle_language_choice(message)
            return self._handle_command(message)

    # ── DOCUMENTS ─────────────────────────────────────────

    def _handle_document(self, message: DocumentMessage) -> Optional[TextReply]:
        user_id = message.from_user_id
        if self.store.get_user_mode(user_id) != FileOpMode.AWAITING_UPLOAD:
            logger.debug(f"Ignoring document from user {user_id}: not uploading")
            return None

        language = self.store.get_user_language(user_id)
        owned = self.store.register_file(message.file_token, user_id, message.file_name)
        if owned:
            logger.info(f"User {user_id} uploaded '{message.file_name}'")
        else:
            logger.info(f"User {user_id} re-sent file {message.file_token} owned by another user")
        text = (
            self._t("file_uploaded" if owned else "file_already_shared", language)
            + self.link_prefix
            + message.file_token
        )
        return TextReply(chat_id=message.chat_id, text=text)

    # ── LANGUAGE PICKER ───────────────────────────────────

    def _handle_language_choice(self, message: TextMessage) -> TextReply:
        user_id = message.from_user_id
        code = parse_choice(message.text).key

        if self.localizer.is_supported(code):
            self.store.set_user_language(user_id, code)
            text = self._t("language_modified", code)
        else:
            logger.info(f"User {user_id} picked unsupported language '{code}'")
            text = self._t("error_language", self.store.get_user_language(user_id))

        self.pending.discard(user_id)
        return TextReply(
            chat_id=message.chat_id,
            text=text,
            reply_to_message_id=message.message_id,
            keyboard=HideKeyboard(selective=True),
        )

    def _show_language_picker(self, message: TextMessage, language: str) -> TextReply:
        rows = [
            [format_choice(code, label)]
            for code, label in self.localizer.supported_languages.items()
        ]
        self.pending.add(message.from_user_id)
        return TextReply(
            chat_id=message.chat_id,
            text=self._t("choose_language", language),
            keyboard=ShowKeyboard(rows=rows, selective=True),
        )

    # ── COMMANDS ──────────────────────────────────────────

    def _handle_command(self, message: TextMessage) -> Optional[TextReply | DocumentReply]:
        user_id = message.from_user_id
        language = self.store.get_user_language(user_id)

        if message.text.startswith(SET_LANGUAGE_COMMAND):
            return self._show_language_picker(message, language)

        parts = message.text.split(maxsplit=1)
        command = parts[0] if parts else ""
        argument = parts[1].strip() if len(parts) > 1 else ""
        logger.info(f"User {user_id} sent {command or '<empty>'}")

        if command.startswith(START_COMMAND):
            if argument:
                return self._send_file(message, argument, language)
            return self._help(message, language)

        if message.is_group_chat:
            return None

        if command.startswith(UPLOAD_COMMAND):
            self.store.set_user_mode(user_id, FileOpMode.AWAITING_UPLOAD)
            return self._reply(message, "send_file_to_upload", language)

        if command.startswith(CANCEL_COMMAND):
            self.store.clear_user_mode(user_id)
            return self._reply(message, "process_finished", language)

        if command.startswith(DELETE_COMMAND):
            return self._delete(message, argument, language)

        if command.startswith(LIST_COMMAND):
            return self._list(message, language)

        return self._help(message, language)

    def _send_file(self, message: TextMessage, token: str, language: str):
        if self.store.file_exists(token):
            return DocumentReply(chat_id=message.chat_id, token=token)
        return self._reply(message, "wrong_file_id", language)

    def _delete(self, message: TextMessage, argument: str, language: str) -> TextReply:
        user_id = message.from_user_id
        mode = self.store.get_user_mode(user_id)

        if mode == FileOpMode.AWAITING_DELETE_SELECTION and argument:
            token = parse_choice(argument).key
            removed = self.store.delete_file(token, user_id)
            self.store.clear_user_mode(user_id)
            return self._reply(message, "file_deleted" if removed else "wrong_file_id", language)

        self.store.set_user_mode(user_id, FileOpMode.AWAITING_DELETE_SELECTION)
        files = self.store.list_files_by_user(user_id)
        keyboard = None
        if files:
            keyboard = ShowKeyboard(rows=[
                [format_choice(f"{DELETE_COMMAND} {token}", name)]
                for token, name in files.items()
            ])
        return TextReply(
            chat_id=message.chat_id,
            text=self._t("delete_uploaded_file", language),
            keyboard=keyboard,
        )

    def _list(self, message: TextMessage, language: str) -> TextReply:
        files = self.store.list_files_by_user(message.from_user_id)
        if not files:
            return self._reply(message, "no_files", language)

        lines = [
            f"{self.link_prefix}{format_choice(token, name)}"
            for token, name in files.items()
        ]
        text = f"{self._t('list_of_files', language)}:\n\n" + "\n".join(lines)
        return TextReply(chat_id=message.chat_id, text=text)

    def _help(self, message: TextMessage, language: str) -> TextReply:
        text = self._t("help", language, *HELP_COMMANDS)
        return TextReply(chat_id=message.chat_id, text=text)

    # ── HELPERS ───────────────────────────────────────────

    def _t(self, key: str, language: str, *args) -> str:
        return self.localizer.get_string(key, language, *args)

    def _reply(self, message: TextMessage, key: str, language: str) -> TextReply:
        return TextReply(chat_id=message.chat_id, text=self._t(key, language))
