from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.session_repository import SessionRepository
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_session import GetCurrentSessionUseCase
from ...application.use_cases.auth.refresh_session import RefreshSessionUseCase
from ...application.use_cases.auth.logout_user import LogoutUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers credential and session use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        settings = get_settings()

        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository),
                session_repository=container.get(SessionRepository),
                session_ttl_seconds=settings.session_ttl_seconds,
            )
        )

        container.register_factory(
            GetCurrentSessionUseCase,
            lambda: GetCurrentSessionUseCase(
                session_repository=container.get(SessionRepository)
            )
        )

        container.register_factory(
            RefreshSessionUseCase,
            lambda: RefreshSessionUseCase(
                session_repository=container.get(SessionRepository),
                session_ttl_seconds=settings.session_ttl_seconds,
            )
        )

        container.register_factory(
            LogoutUserUseCase,
            lambda: LogoutUserUseCase(
                session_repository=container.get(SessionRepository)
            )
        )
