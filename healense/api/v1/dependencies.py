# Standard library imports
from typing import Optional

# External package imports
from fastapi import Cookie

# Local application imports
from ...application.dto.room_dto import RoomResponse
from ...application.use_cases.auth.get_current_session import GetCurrentSessionUseCase
from ...application.use_cases.room.get_room import GetRoomUseCase
from ...core.exceptions import NotFoundError, ValidationError
from ...di.container import get_container
from ...domain.models.session import Session


SESSION_COOKIE = "sessionId"


async def get_current_session(
    session_id: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
) -> Session:
    """
    FastAPI dependency resolving the session behind the sessionId cookie

    Raises:
        UnauthorizedError: If the cookie is missing or the session expired
    """
    container = get_container()
    get_current_session_use_case = container.get(GetCurrentSessionUseCase)
    return await get_current_session_use_case.execute(session_id)


def require_param(value: Optional[str], name: str) -> str:
    """Reject a missing or blank query parameter with a 400."""
    if value is None or not value.strip():
        raise ValidationError(f"Missing {name}")
    return value


async def require_owned_room(room_id: str, session: Session) -> RoomResponse:
    """
    Load a room the session user owns

    A room owned by someone else is reported exactly like a missing one.

    Raises:
        NotFoundError: If the room is absent or not owned by the session user
    """
    container = get_container()
    get_room_use_case = container.get(GetRoomUseCase)

    room = await get_room_use_case.execute(room_id)
    if room.owner != session.username:
        raise NotFoundError(
            f"Room {room_id} is not owned by {session.username}", user_message="Room not found"
        )
    return room
