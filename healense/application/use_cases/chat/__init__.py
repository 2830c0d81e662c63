from .send_chat_message import SendChatMessageUseCase

__all__ = ["SendChatMessageUseCase"]
