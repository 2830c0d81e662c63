# Standard library imports
import asyncio
import logging
from typing import AsyncIterator

# Local application imports
from ....core.exceptions import UpstreamError, ValidationError
from ....infrastructure.external.chat_model_client import ChatModelClient
from ....utils.ids import new_sortable_id
from ...dto.message_dto import ChatMessageRequest
from ...services.prompt_assembler import PromptAssembler
from ...services.streaming_relay import ChatTurn, StreamingRelay
from ..message.append_message import AppendMessageUseCase

logger = logging.getLogger(__name__)


async def _with_first(first: str, rest: AsyncIterator[str]) -> AsyncIterator[str]:
    try:
        yield first
        async for delta in rest:
            yield delta
    finally:
        await rest.aclose()


class SendChatMessageUseCase:
    """
    Use case for one chat turn in a room.

    Everything that can fail with a client error (validation, missing image)
    happens here, before the HTTP response starts. So does the wait for the
    model's first delta: a rejected or unreachable model is an UpstreamError
    instead of an empty event stream. The returned relay is driven by the
    response body and persists the turn afterwards.
    """

    def __init__(
        self,
        prompt_assembler: PromptAssembler,
        chat_model_client: ChatModelClient,
        append_message: AppendMessageUseCase,
        queue_size: int = 64,
        idle_timeout: float = 60.0,
    ) -> None:
        self.prompt_assembler = prompt_assembler
        self.chat_model_client = chat_model_client
        self.append_message = append_message
        self.queue_size = queue_size
        self.idle_timeout = idle_timeout

    async def execute(self, request: ChatMessageRequest) -> StreamingRelay:
        """
        Prepare the streaming reply to a user message

        Args:
            request: Room, text and optional image key of the new turn;
                the caller has already checked that the room belongs to
                the session user

        Returns:
            StreamingRelay in IDLE state

        Raises:
            ValidationError: If the turn has neither text nor image
            NotFoundError: If the image key does not resolve
            UpstreamError: If the model fails or stays silent before its
                first delta
        """
        if not request.content.strip() and not request.image_key:
            raise ValidationError("Message content is required")

        user_message_id = new_sortable_id()
        prompt = await self.prompt_assembler.assemble(
            request.room_id, request.content, request.image_key
        )

        turn = ChatTurn(
            room_id=request.room_id,
            text=request.content,
            image_key=request.image_key,
            user_message_id=user_message_id,
            response_id=new_sortable_id(),
        )
        logger.info(f"Starting reply {turn.response_id} in room {turn.room_id}")
        upstream = await self._start_upstream(self.chat_model_client.stream_chat(prompt))

        return StreamingRelay(
            upstream=upstream,
            turn=turn,
            append_message=self.append_message,
            queue_size=self.queue_size,
            idle_timeout=self.idle_timeout,
        )

    async def _start_upstream(self, upstream: AsyncIterator[str]) -> AsyncIterator[str]:
        """Wait for the first delta and hand back an iterator that still yields it"""
        try:
            first = await asyncio.wait_for(upstream.__anext__(), timeout=self.idle_timeout)
        except StopAsyncIteration:
            return upstream
        except asyncio.TimeoutError:
            await upstream.aclose()
            raise UpstreamError("Model did not start answering in time")
        return _with_first(first, upstream)
