# Standard library imports
from datetime import timedelta

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.session_repository import SessionRepository
from ....domain.models.session import Session
from ....core.exceptions import NotFoundError, UnauthorizedError
from ....core.security import verify_password, generate_session_token
from ....utils.datetime_utils import utc_now
from ...dto.auth_dto import CredentialsRequest, SessionResponse


def build_session(username: str, ttl_seconds: int) -> Session:
    """Mint a fresh session token for `username` expiring after `ttl_seconds`."""
    return Session(
        session_id=generate_session_token(),
        username=username,
        expires_at=utc_now() + timedelta(seconds=ttl_seconds),
    )


class LoginUserUseCase:
    """Use case for authenticating a user and opening a session"""

    def __init__(
        self,
        user_repository: UserRepository,
        session_repository: SessionRepository,
        session_ttl_seconds: int,
    ) -> None:
        self.user_repository = user_repository
        self.session_repository = session_repository
        self.session_ttl_seconds = session_ttl_seconds

    async def execute(self, request: CredentialsRequest) -> SessionResponse:
        """
        Authenticate user and persist a new session

        Args:
            request: Login request with username and password

        Returns:
            SessionResponse with the session token and its TTL

        Raises:
            NotFoundError: If the user does not exist
            UnauthorizedError: If the password does not match
        """
        user = await self.user_repository.find_by_username(request.username)
        if user is None:
            raise NotFoundError(f"User {request.username} not found", user_message="User not found")

        if not verify_password(request.password, user.salt, user.password_hash):
            raise UnauthorizedError(
                f"Bad credentials for {request.username}", user_message="Invalid username or password"
            )

        session = await self.session_repository.save(build_session(user.username, self.session_ttl_seconds))

        return SessionResponse(
            session_id=session.session_id,
            username=session.username,
            ttl=self.session_ttl_seconds,
        )
