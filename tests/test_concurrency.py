"""Tests for per-user locking, the pending-language set and concurrent dispatch."""

import asyncio
import threading
import time

import pytest

from conftest import OTHER_USER_ID, USER_ID, FakeStore, make_text
from models.file_mode import FileOpMode
from models.messages import TextReply
from services.file_dispatcher import FileDispatcher
from services.language_selection import PendingLanguageSelection
from utils.errors import StoreUnavailable
from utils.user_locks import UserLocks


class TestPendingLanguageSelection:
    def test_add_contains_discard(self) -> None:
        pending = PendingLanguageSelection()

        pending.add(1)
        assert 1 in pending
        assert 2 not in pending

        pending.discard(1)
        assert 1 not in pending

    def test_discard_missing_user_is_noop(self) -> None:
        pending = PendingLanguageSelection()

        pending.discard(42)

        assert len(pending) == 0

    def test_concurrent_adds(self) -> None:
        pending = PendingLanguageSelection()
        threads = [threading.Thread(target=pending.add, args=(i,)) for i in range(50)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(pending) == 50


class TestUserLocks:
    def test_same_user_is_serialized(self) -> None:
        locks = UserLocks()
        active = []
        overlaps = []

        def work() -> None:
            with locks.hold(7):
                active.append(1)
                if len(active) > 1:
                    overlaps.append(True)
                time.sleep(0.01)
                active.pop()

        threads = [threading.Thread(target=work) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert overlaps == []

    def test_different_users_do_not_block(self) -> None:
        locks = UserLocks()
        entered = threading.Event()
        release = threading.Event()

        def hold_first_user() -> None:
            with locks.hold(1):
                entered.set()
                release.wait(timeout=2)

        holder = threading.Thread(target=hold_first_user)
        holder.start()
        entered.wait(timeout=2)

        acquired = threading.Event()

        def take_second_user() -> None:
            with locks.hold(2):
                acquired.set()

        other = threading.Thread(target=take_second_user)
        other.start()
        other.join(timeout=2)
        release.set()
        holder.join()

        assert acquired.is_set()


class PoolLimitedStore(FakeStore):
    """Store whose reads need one of `size` connections and fail when none is free."""

    def __init__(self, size: int):
        super().__init__()
        self._slots = threading.BoundedSemaphore(size)

    def _use_connection(self) -> None:
        if not self._slots.acquire(blocking=False):
            raise StoreUnavailable("connection pool exhausted")
        try:
            time.sleep(0.05)
        finally:
            self._slots.release()

    def get_user_language(self, user_id):
        self._use_connection()
        return super().get_user_language(user_id)

    def list_files_by_user(self, user_id):
        self._use_connection()
        return super().list_files_by_user(user_id)


class BlockingUserStore(FakeStore):
    """Store whose language lookup for one user waits until released."""

    def __init__(self, blocked_user: int):
        super().__init__()
        self.blocked_user = blocked_user
        self.release = threading.Event()

    def get_user_language(self, user_id):
        if user_id == self.blocked_user:
            self.release.wait(timeout=5)
        return super().get_user_language(user_id)


class RecordingStore(FakeStore):
    """Records store calls; the first mode read waits until released."""

    def __init__(self):
        super().__init__()
        self.calls: list[str] = []
        self.entered = threading.Event()
        self.release = threading.Event()

    def get_user_language(self, user_id):
        self.calls.append("get_user_language")
        return super().get_user_language(user_id)

    def get_user_mode(self, user_id):
        self.calls.append("get_user_mode")
        if not self.entered.is_set():
            self.entered.set()
            self.release.wait(timeout=5)
        return super().get_user_mode(user_id)

    def set_user_mode(self, user_id, mode):
        self.calls.append("set_user_mode")
        super().set_user_mode(user_id, mode)

    def clear_user_mode(self, user_id):
        self.calls.append("clear_user_mode")
        super().clear_user_mode(user_id)

    def delete_file(self, token, user_id):
        self.calls.append("delete_file")
        return super().delete_file(token, user_id)


class TestDispatcherConcurrency:
    @pytest.mark.asyncio
    async def test_more_users_than_connections(self, localizer) -> None:
        store = PoolLimitedStore(size=2)
        dispatcher = FileDispatcher(store=store, localizer=localizer, max_workers=2)

        replies = await asyncio.gather(
            *(dispatcher.on_update(make_text("/list", user_id=u)) for u in range(1, 6)),
            return_exceptions=True,
        )

        assert replies == [
            TextReply(chat_id=u, text=localizer.get_string("no_files", "en"))
            for u in range(1, 6)
        ]

    @pytest.mark.asyncio
    async def test_busy_user_does_not_starve_others(self, localizer) -> None:
        store = BlockingUserStore(blocked_user=USER_ID)
        dispatcher = FileDispatcher(store=store, localizer=localizer, max_workers=2)

        busy = [
            asyncio.create_task(dispatcher.on_update(make_text("/list")))
            for _ in range(3)
        ]
        try:
            reply = await asyncio.wait_for(
                dispatcher.on_update(make_text("/list", user_id=OTHER_USER_ID)),
                timeout=2,
            )
        finally:
            store.release.set()
            await asyncio.gather(*busy)

        assert reply.chat_id == OTHER_USER_ID

    def test_same_user_updates_do_not_interleave(self, localizer) -> None:
        store = RecordingStore()
        store.modes[USER_ID] = FileOpMode.AWAITING_DELETE_SELECTION
        store.files["BQAC-1"] = (USER_ID, "a.pdf")
        dispatcher = FileDispatcher(store=store, localizer=localizer)

        delete = threading.Thread(target=dispatcher.handle, args=(make_text("/delete BQAC-1"),))
        delete.start()
        assert store.entered.wait(timeout=2)

        upload = threading.Thread(target=dispatcher.handle, args=(make_text("/upload"),))
        upload.start()
        time.sleep(0.1)
        calls_while_blocked = list(store.calls)

        store.release.set()
        delete.join(timeout=5)
        upload.join(timeout=5)

        assert calls_while_blocked == ["get_user_language", "get_user_mode"]
        assert store.calls == [
            "get_user_language",
            "get_user_mode",
            "delete_file",
            "clear_user_mode",
            "get_user_language",
            "set_user_mode",
        ]
        assert store.files == {}
        assert store.get_user_mode(USER_ID) == FileOpMode.AWAITING_UPLOAD
