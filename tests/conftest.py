"""Shared fixtures: an in-memory store and a dispatcher wired to it."""

import itertools

import pytest

from models.file_mode import FileOpMode
from models.messages import DocumentMessage, TextMessage
from services.file_dispatcher import FileDispatcher
from services.language_selection import PendingLanguageSelection
from services.localization_service import LocalizationService

LINK_PREFIX = "https://t.me/testfilesbot?start="
USER_ID = 1001
OTHER_USER_ID = 2002

_message_ids = itertools.count(1)


class FakeStore:
    """In-memory Store with the same semantics as DatabaseStore."""

    def __init__(self, default_language: str = "en"):
        self.default_language = default_language
        self.languages: dict[int, str] = {}
        self.modes: dict[int, FileOpMode] = {}
        self.files: dict[str, tuple[int, str]] = {}
        self.writes: list[tuple] = []

    def get_user_language(self, user_id):
        return self.languages.get(user_id, self.default_language)

    def set_user_language(self, user_id, language):
        self.writes.append(("set_user_language", user_id, language))
        self.languages[user_id] = language

    def get_user_mode(self, user_id):
        return self.modes.get(user_id, FileOpMode.NONE)

    def set_user_mode(self, user_id, mode):
        self.writes.append(("set_user_mode", user_id, mode))
        if mode == FileOpMode.NONE:
            self.modes.pop(user_id, None)
        else:
            self.modes[user_id] = mode

    def clear_user_mode(self, user_id):
        self.writes.append(("clear_user_mode", user_id))
        self.modes.pop(user_id, None)

    def register_file(self, token, owner_id, name):
        self.writes.append(("register_file", token, owner_id, name))
        return self.files.setdefault(token, (owner_id, name))[0] == owner_id

    def file_exists(self, token):
        return token in self.files

    def delete_file(self, token, user_id):
        self.writes.append(("delete_file", token, user_id))
        record = self.files.get(token)
        if record is None or record[0] != user_id:
            return False
        del self.files[token]
        return True

    def list_files_by_user(self, user_id):
        return {token: name for token, (owner, name) in self.files.items() if owner == user_id}


def make_text(text, user_id=USER_ID, chat_id=None, group=False):
    return TextMessage(
        from_user_id=user_id,
        chat_id=chat_id if chat_id is not None else user_id,
        message_id=next(_message_ids),
        text=text,
        is_group_chat=group,
    )


def make_document(token, name, user_id=USER_ID, chat_id=None, group=False):
    return DocumentMessage(
        from_user_id=user_id,
        chat_id=chat_id if chat_id is not None else user_id,
        message_id=next(_message_ids),
        file_token=token,
        file_name=name,
        is_group_chat=group,
    )


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def localizer():
    return LocalizationService(default_language="en")


@pytest.fixture
def pending():
    return PendingLanguageSelection()


@pytest.fixture
def dispatcher(store, localizer, pending):
    return FileDispatcher(
        store=store,
        localizer=localizer,
        pending=pending,
        link_prefix=LINK_PREFIX,
    )
