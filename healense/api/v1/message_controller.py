# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

# Local application imports
from ...application.dto.message_dto import ChatMessageRequest, MessageListResponse, MessageResponse
from ...application.use_cases.chat.send_chat_message import SendChatMessageUseCase
from ...application.use_cases.message.get_message import GetMessageUseCase
from ...application.use_cases.message.list_messages import ListMessagesUseCase
from ...di.container import get_container
from ...domain.models.session import Session
from .dependencies import get_current_session, require_owned_room, require_param


router = APIRouter(tags=["messages"])


@router.get("/message", response_model=MessageResponse, response_model_by_alias=True)
async def get_message(
    message_id: Optional[str] = Query(default=None, alias="messageId"),
    session: Session = Depends(get_current_session),
) -> MessageResponse:
    """
    Get one message of a room the session user owns

    Returns:
        MessageResponse with role, text and optional image key
    """
    container = get_container()
    get_message_use_case = container.get(GetMessageUseCase)

    message = await get_message_use_case.execute(require_param(message_id, "messageId"))
    await require_owned_room(message.room_id, session)

    return MessageResponse(
        id=message.id,
        room_id=message.room_id,
        role=message.role,
        text=message.text,
        image_key=message.image_key,
    )


@router.get("/messages", response_model=MessageListResponse, response_model_by_alias=True)
async def list_messages(
    room_id: Optional[str] = Query(default=None, alias="roomId"),
    cursor: Optional[str] = Query(default=None),
    session: Session = Depends(get_current_session),
) -> MessageListResponse:
    """
    List one page of message ids of a room in creation order

    Pass the returned cursor back to get the next page; it is null on the
    last page.
    """
    room = await require_owned_room(require_param(room_id, "roomId"), session)

    container = get_container()
    list_messages_use_case = container.get(ListMessagesUseCase)

    messages, next_cursor = await list_messages_use_case.execute(room.room_id, cursor or None)
    return MessageListResponse(
        message_ids=[message.id for message in messages],
        cursor=next_cursor,
    )


@router.post("/message")
async def send_message(
    request: ChatMessageRequest,
    session: Session = Depends(get_current_session),
) -> StreamingResponse:
    """
    Send a chat turn and stream the assistant reply as server-sent events

    The first frame is `event: <responseId>`; every following frame is
    `data: <text chunk>`. The user turn and the reply are stored once the
    stream has finished.
    """
    await require_owned_room(request.room_id, session)

    container = get_container()
    send_chat_message_use_case = container.get(SendChatMessageUseCase)
    relay = await send_chat_message_use_case.execute(request)

    return StreamingResponse(
        relay.stream(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no",
        },
        background=BackgroundTask(relay.persist),
    )
