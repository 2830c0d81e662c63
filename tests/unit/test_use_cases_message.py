"""
Unit tests for message use cases (Append, List, Get).
"""
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from healense.application.use_cases.message.append_message import AppendMessageUseCase
from healense.application.use_cases.message.get_message import GetMessageUseCase
from healense.application.use_cases.message.list_messages import ListMessagesUseCase
from healense.core.exceptions import NotFoundError
from healense.domain.constants import MessageRoles
from healense.domain.models.room import Room
from healense.utils.datetime_utils import utc_now


@pytest_asyncio.fixture
async def room(room_repo):
    now = utc_now()
    room = Room(room_id="room-1", name="Room", owner="alice", created_at=now, updated_at=now)
    await room_repo.save(room)
    return room


class TestAppendMessageUseCase:
    """Tests for AppendMessageUseCase"""

    @pytest.mark.asyncio
    async def test_append_touches_room(self, message_repo, room_repo, room):
        use_case = AppendMessageUseCase(message_repo, room_repo)

        message = await use_case.execute(room.room_id, MessageRoles.USER, "hello")

        assert message_repo.messages[message.id].text == "hello"
        stored_room = await room_repo.find_by_id(room.room_id)
        assert stored_room.updated_at >= room.updated_at
        assert stored_room.updated_at == message.created_at

    @pytest.mark.asyncio
    async def test_uses_given_message_id(self, message_repo, room_repo, room):
        use_case = AppendMessageUseCase(message_repo, room_repo)
        message = await use_case.execute(
            room.room_id, MessageRoles.ASSISTANT, "hi", message_id="0123456789abcdef0123456789ab"
        )
        assert message.id == "0123456789abcdef0123456789ab"

    @pytest.mark.asyncio
    async def test_updated_at_never_moves_backwards(self, message_repo, room_repo):
        future = utc_now() + timedelta(hours=1)
        await room_repo.save(
            Room(room_id="room-f", name="Room", owner="alice", created_at=future, updated_at=future)
        )

        await AppendMessageUseCase(message_repo, room_repo).execute("room-f", MessageRoles.USER, "x")

        assert (await room_repo.find_by_id("room-f")).updated_at == future

    @pytest.mark.asyncio
    async def test_message_written_before_room(self):
        message_repo = AsyncMock()
        room_repo = AsyncMock()
        room_repo.find_by_id.return_value = None

        message = await AppendMessageUseCase(message_repo, room_repo).execute(
            "gone", MessageRoles.USER, "orphan"
        )

        message_repo.save.assert_awaited_once()
        room_repo.save.assert_not_called()
        assert message.room_id == "gone"

    @pytest.mark.asyncio
    async def test_invalid_role_rejected(self, message_repo, room_repo, room):
        with pytest.raises(ValueError):
            await AppendMessageUseCase(message_repo, room_repo).execute(room.room_id, "robot", "x")


class TestListMessagesUseCase:
    """Tests for ListMessagesUseCase"""

    async def _append(self, message_repo, room_repo, room_id, count):
        use_case = AppendMessageUseCase(message_repo, room_repo)
        return [
            (await use_case.execute(room_id, MessageRoles.USER, f"m{i}")).id
            for i in range(count)
        ]

    @pytest.mark.asyncio
    async def test_page_is_sorted_even_if_store_is_not(self, message_repo, room_repo, room):
        ids = await self._append(message_repo, room_repo, room.room_id, 20)

        messages, cursor = await ListMessagesUseCase(message_repo).execute(room.room_id)

        assert [m.id for m in messages] == ids
        assert cursor is None

    @pytest.mark.asyncio
    async def test_cursor_pagination_visits_every_message_once(self, message_repo, room_repo, room):
        ids = await self._append(message_repo, room_repo, room.room_id, 7)
        use_case = ListMessagesUseCase(message_repo, page_size=3)

        first, cursor = await use_case.execute(room.room_id)
        assert [m.id for m in first] == ids[:3]
        assert cursor == ids[2]

        second, cursor = await use_case.execute(room.room_id, cursor)
        assert [m.id for m in second] == ids[3:6]

        third, cursor = await use_case.execute(room.room_id, cursor)
        assert [m.id for m in third] == ids[6:]
        assert cursor is None

    @pytest.mark.asyncio
    async def test_execute_all_follows_cursors(self, message_repo, room_repo, room):
        ids = await self._append(message_repo, room_repo, room.room_id, 10)
        await self._append(message_repo, room_repo, "other-room", 4)

        history = await ListMessagesUseCase(message_repo, page_size=4).execute_all(room.room_id)

        assert [m.id for m in history] == ids

    @pytest.mark.asyncio
    async def test_empty_room(self, message_repo):
        messages, cursor = await ListMessagesUseCase(message_repo).execute("empty")
        assert messages == []
        assert cursor is None


class TestGetMessageUseCase:
    """Tests for GetMessageUseCase"""

    @pytest.mark.asyncio
    async def test_get_existing(self, message_repo, room_repo, room):
        stored = await AppendMessageUseCase(message_repo, room_repo).execute(
            room.room_id, MessageRoles.USER, "hello", image_key="img-1"
        )
        message = await GetMessageUseCase(message_repo).execute(stored.id)
        assert message.image_key == "img-1"

    @pytest.mark.asyncio
    async def test_missing_raises(self, message_repo):
        with pytest.raises(NotFoundError):
            await GetMessageUseCase(message_repo).execute("missing")
