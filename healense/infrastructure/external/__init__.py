"""External service clients for communicating with external systems"""

from .chat_model_client import ChatModelClient, GroqChatClient

__all__ = [
    "ChatModelClient",
    "GroqChatClient",
]
