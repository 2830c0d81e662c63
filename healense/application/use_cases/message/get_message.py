# Local application imports
from ....domain.repositories.message_repository import MessageRepository
from ....domain.models.message import Message
from ....core.exceptions import NotFoundError


class GetMessageUseCase:
    """Use case for getting a single message by ID"""

    def __init__(self, message_repository: MessageRepository) -> None:
        self.message_repository = message_repository

    async def execute(self, message_id: str) -> Message:
        message = await self.message_repository.find_by_id(message_id)
        if message is None:
            raise NotFoundError(f"Message {message_id} not found", user_message="Message not found")
        return message
