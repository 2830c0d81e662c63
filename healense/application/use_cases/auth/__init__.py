from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase
from .get_current_session import GetCurrentSessionUseCase
from .refresh_session import RefreshSessionUseCase
from .logout_user import LogoutUserUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentSessionUseCase",
    "RefreshSessionUseCase",
    "LogoutUserUseCase",
]
