# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.exceptions import ConflictError
from ....core.security import generate_salt, hash_password
from ...dto.auth_dto import CredentialsRequest

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: CredentialsRequest) -> User:
        """
        Register a new user

        Args:
            request: Registration request with username and password

        Returns:
            The stored User

        Raises:
            ConflictError: If the username is already taken
        """
        existing_user = await self.user_repository.find_by_username(request.username)
        if existing_user is not None:
            raise ConflictError(f"User {request.username} already exists", user_message="User already exists")

        salt = generate_salt()
        new_user = User(
            username=request.username,
            salt=salt,
            password_hash=hash_password(request.password, salt),
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.username}")
        return saved_user
