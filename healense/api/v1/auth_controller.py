# External package imports
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

# Local application imports
from ...application.dto.auth_dto import CredentialsRequest, SessionResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.refresh_session import RefreshSessionUseCase
from ...application.use_cases.auth.logout_user import LogoutUserUseCase
from ...core.config import get_settings
from ...di.container import get_container
from ...domain.models.session import Session
from .dependencies import SESSION_COOKIE, get_current_session


router = APIRouter(tags=["authentication"])


def _set_session_cookie(response: Response, session: SessionResponse) -> None:
    settings = get_settings()
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session.session_id,
        max_age=session.ttl,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )


@router.post("/register", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: CredentialsRequest) -> str:
    """
    Register a new user

    Args:
        request: Username and password

    Returns:
        Plain text confirmation
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    await register_use_case.execute(request)
    return "User registered"


@router.post("/session", response_model=SessionResponse, response_model_by_alias=True)
async def login_user(request: CredentialsRequest, response: Response) -> SessionResponse:
    """
    Authenticate user and open a session

    The session token is returned in the body and set as the sessionId cookie.
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    session = await login_use_case.execute(request)
    _set_session_cookie(response, session)
    return session


@router.put("/session", response_model=SessionResponse, response_model_by_alias=True)
async def refresh_session(
    response: Response,
    session: Session = Depends(get_current_session),
) -> SessionResponse:
    """Heartbeat: rotate the session token and restart its TTL"""
    container = get_container()
    refresh_use_case = container.get(RefreshSessionUseCase)

    refreshed = await refresh_use_case.execute(session.session_id)
    _set_session_cookie(response, refreshed)
    return refreshed


@router.delete("/session", response_class=PlainTextResponse)
async def logout_user(session: Session = Depends(get_current_session)) -> PlainTextResponse:
    container = get_container()
    logout_use_case = container.get(LogoutUserUseCase)

    await logout_use_case.execute(session.session_id)

    response = PlainTextResponse("Logged out")
    response.delete_cookie(
        key=SESSION_COOKIE,
        path="/",
        httponly=True,
        secure=get_settings().cookie_secure,
        samesite="strict",
    )
    return response
