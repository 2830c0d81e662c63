"""
Relay from the model's token stream to a server-sent-events response.

States: IDLE -> STREAMING -> COMPLETE or FAILED.

A producer task pulls deltas from the upstream iterator into a bounded
asyncio.Queue; when the queue is full the producer waits, which is the only
flow control between the model and the client. The consumer side is the
async generator handed to the HTTP response. The finished turn is written by
persist(), which runs after the response has been sent.
"""
# Standard library imports
import asyncio
import contextlib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterator, List, Optional

# Local application imports
from ..use_cases.message.append_message import AppendMessageUseCase
from ...domain.constants import MessageRoles
from .sanitizer import MarkdownStripper

logger = logging.getLogger(__name__)


class RelayState(str, Enum):
    IDLE = "idle"
    STREAMING = "streaming"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass(frozen=True)
class ChatTurn:
    """The user side of a turn plus the ids minted for it"""
    room_id: str
    text: str
    image_key: Optional[str]
    user_message_id: str
    response_id: str


class _EndOfStream:
    pass


class _UpstreamFailure:
    def __init__(self, error: BaseException) -> None:
        self.error = error


_END = _EndOfStream()


def format_event_frame(response_id: str) -> str:
    return f"event: {response_id}\n"


def format_data_frame(chunk: str) -> str:
    return f"data: {chunk}\n\n"


class StreamingRelay:
    """Streams one assistant reply to the client and persists the finished turn"""

    def __init__(
        self,
        upstream: AsyncIterator[str],
        turn: ChatTurn,
        append_message: AppendMessageUseCase,
        queue_size: int = 64,
        idle_timeout: Optional[float] = 60.0,
    ) -> None:
        self.upstream = upstream
        self.turn = turn
        self.append_message = append_message
        self.queue_size = queue_size
        self.idle_timeout = idle_timeout
        self.state = RelayState.IDLE
        self.persisted = False
        self._parts: List[str] = []
        self._stripper = MarkdownStripper()

    @property
    def full_text(self) -> str:
        return "".join(self._parts)

    async def stream(self) -> AsyncIterator[str]:
        """
        Yield the SSE frames of the reply.

        The event frame goes out before the first upstream pull so the client
        can start rendering immediately. Closing this generator early (client
        disconnect) cancels the producer and releases the upstream.
        """
        if self.state is not RelayState.IDLE:
            raise RuntimeError(f"Relay for {self.turn.response_id} already started")

        self.state = RelayState.STREAMING
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.queue_size)
        producer = asyncio.create_task(self._produce(queue))

        try:
            yield format_event_frame(self.turn.response_id)

            while True:
                try:
                    item = await asyncio.wait_for(queue.get(), timeout=self.idle_timeout)
                except asyncio.TimeoutError:
                    self.state = RelayState.FAILED
                    logger.warning(
                        f"Upstream idle for {self.idle_timeout}s, ending stream {self.turn.response_id}"
                    )
                    return

                if item is _END:
                    tail = self._stripper.flush()
                    if tail:
                        self._parts.append(tail)
                        yield format_data_frame(tail)
                    self.state = RelayState.COMPLETE
                    return

                if isinstance(item, _UpstreamFailure):
                    self.state = RelayState.FAILED
                    logger.error(
                        f"Upstream failed during stream {self.turn.response_id}: {item.error}",
                        exc_info=item.error,
                    )
                    return

                chunk = self._stripper.feed(item)
                if not chunk:
                    continue
                self._parts.append(chunk)
                yield format_data_frame(chunk)
        finally:
            if self.state is RelayState.STREAMING:
                self.state = RelayState.FAILED
                logger.info(f"Client left stream {self.turn.response_id} before completion")
            if not producer.done():
                producer.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await producer

    async def _produce(self, queue: asyncio.Queue) -> None:
        try:
            async for delta in self.upstream:
                await queue.put(delta)
            await queue.put(_END)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            await queue.put(_UpstreamFailure(e))
        finally:
            await self._release_upstream()

    async def _release_upstream(self) -> None:
        aclose = getattr(self.upstream, "aclose", None)
        if aclose is None:
            return
        try:
            await aclose()
        except Exception as e:
            logger.debug(f"Error closing upstream for {self.turn.response_id}: {e}")

    async def persist(self) -> None:
        """
        Store the user turn and the assistant reply.

        Only a COMPLETE relay is persisted. Failures are logged and never
        raised: the client already has the reply.
        """
        if self.state is not RelayState.COMPLETE:
            logger.info(f"Turn {self.turn.response_id} not persisted (state={self.state.value})")
            return
        if self.persisted:
            return

        try:
            await self.append_message.execute(
                room_id=self.turn.room_id,
                role=MessageRoles.USER,
                text=self.turn.text,
                image_key=self.turn.image_key,
                message_id=self.turn.user_message_id,
            )
            await self.append_message.execute(
                room_id=self.turn.room_id,
                role=MessageRoles.ASSISTANT,
                text=self.full_text,
                message_id=self.turn.response_id,
            )
            self.persisted = True
        except Exception as e:
            logger.error(f"Failed to persist turn {self.turn.response_id}: {e}", exc_info=True)
