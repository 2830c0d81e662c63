from .append_message import AppendMessageUseCase
from .list_messages import ListMessagesUseCase
from .get_message import GetMessageUseCase

__all__ = [
    "AppendMessageUseCase",
    "ListMessagesUseCase",
    "GetMessageUseCase",
]
