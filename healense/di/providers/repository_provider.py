from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.session_repository import SessionRepository
from ...domain.repositories.room_repository import RoomRepository
from ...domain.repositories.message_repository import MessageRepository
from ...domain.repositories.image_repository import ImageRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_session_repository import MongoSessionRepository
from ...infrastructure.db.mongo_room_repository import MongoRoomRepository
from ...infrastructure.db.mongo_message_repository import MongoMessageRepository
from ...infrastructure.db.mongo_image_repository import MongoImageRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )

        container.register_singleton(
            SessionRepository,
            MongoSessionRepository(session_collection=container.get("session_collection"))
        )

        container.register_singleton(
            RoomRepository,
            MongoRoomRepository(room_collection=container.get("room_collection"))
        )

        container.register_singleton(
            MessageRepository,
            MongoMessageRepository(message_collection=container.get("message_collection"))
        )

        container.register_singleton(
            ImageRepository,
            MongoImageRepository(image_collection=container.get("image_collection"))
        )
