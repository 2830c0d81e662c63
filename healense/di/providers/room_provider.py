from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.room_repository import RoomRepository
from ...domain.repositories.message_repository import MessageRepository
from ...application.use_cases.room.create_room import CreateRoomUseCase
from ...application.use_cases.room.get_room import GetRoomUseCase
from ...application.use_cases.room.list_rooms import ListRoomsUseCase
from ...application.use_cases.message.append_message import AppendMessageUseCase
from ...application.use_cases.message.list_messages import ListMessagesUseCase
from ...application.use_cases.message.get_message import GetMessageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RoomProvider:
    """Room and message use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()

        container.register_factory(
            CreateRoomUseCase,
            lambda: CreateRoomUseCase(room_repository=container.get(RoomRepository))
        )

        container.register_factory(
            GetRoomUseCase,
            lambda: GetRoomUseCase(room_repository=container.get(RoomRepository))
        )

        container.register_factory(
            ListRoomsUseCase,
            lambda: ListRoomsUseCase(room_repository=container.get(RoomRepository))
        )

        container.register_factory(
            AppendMessageUseCase,
            lambda: AppendMessageUseCase(
                message_repository=container.get(MessageRepository),
                room_repository=container.get(RoomRepository),
            )
        )

        container.register_factory(
            ListMessagesUseCase,
            lambda: ListMessagesUseCase(
                message_repository=container.get(MessageRepository),
                page_size=settings.message_page_size,
            )
        )

        container.register_factory(
            GetMessageUseCase,
            lambda: GetMessageUseCase(message_repository=container.get(MessageRepository))
        )
