# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, Query, status

# Local application imports
from ...application.dto.room_dto import RoomCreateRequest, RoomResponse
from ...application.use_cases.room.create_room import CreateRoomUseCase
from ...application.use_cases.room.list_rooms import ListRoomsUseCase
from ...di.container import get_container
from ...domain.models.session import Session
from .dependencies import get_current_session, require_owned_room, require_param


router = APIRouter(tags=["rooms"])


@router.post(
    "/room",
    response_model=RoomResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_room(
    request: RoomCreateRequest,
    session: Session = Depends(get_current_session),
) -> RoomResponse:
    """
    Create a room owned by the session user

    Args:
        request: Room name
        session: Current session (from dependency)

    Returns:
        RoomResponse with the new room
    """
    container = get_container()
    create_room_use_case = container.get(CreateRoomUseCase)
    return await create_room_use_case.execute(owner=session.username, name=request.name)


@router.get("/room", response_model=RoomResponse, response_model_by_alias=True)
async def get_room(
    room_id: Optional[str] = Query(default=None, alias="roomId"),
    session: Session = Depends(get_current_session),
) -> RoomResponse:
    return await require_owned_room(require_param(room_id, "roomId"), session)


@router.get("/rooms", response_model=List[RoomResponse], response_model_by_alias=True)
async def list_rooms(session: Session = Depends(get_current_session)) -> List[RoomResponse]:
    """List the session user's rooms, most recently active first"""
    container = get_container()
    list_rooms_use_case = container.get(ListRoomsUseCase)
    return await list_rooms_use_case.execute(owner=session.username)
