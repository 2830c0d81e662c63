import logging
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...application.services.prompt_assembler import PromptAssembler
from ...application.use_cases.chat.send_chat_message import SendChatMessageUseCase
from ...application.use_cases.image.load_image import LoadImageUseCase
from ...application.use_cases.message.append_message import AppendMessageUseCase
from ...application.use_cases.message.list_messages import ListMessagesUseCase
from ...infrastructure.external.chat_model_client import ChatModelClient, GroqChatClient
from ...infrastructure.http_client_factory import get_shared_http_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class ChatProvider:
    """Chat provider - registers the model client, prompt assembler and chat use case"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register chat services.
        Depends on the room/message and image use cases being registered.
        """
        settings = get_settings()

        # Register the model client as singleton if not already registered
        try:
            container.get(ChatModelClient)
        except ValueError:
            container.register_singleton(
                ChatModelClient,
                GroqChatClient(http_client=get_shared_http_client())
            )
            logger.info(f"Registered Groq chat client (model={settings.llm_model})")

        container.register_factory(
            PromptAssembler,
            lambda: PromptAssembler(
                list_messages=container.get(ListMessagesUseCase),
                load_image=container.get(LoadImageUseCase),
                system_prompt=settings.system_prompt,
            )
        )

        container.register_factory(
            SendChatMessageUseCase,
            lambda: SendChatMessageUseCase(
                prompt_assembler=container.get(PromptAssembler),
                chat_model_client=container.get(ChatModelClient),
                append_message=container.get(AppendMessageUseCase),
                queue_size=settings.stream_queue_size,
                idle_timeout=settings.llm_idle_timeout_seconds,
            )
        )
