# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import ConflictError, InternalError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except PyMongoError as e:
            raise InternalError(f"Error finding user by username: {str(e)}")

        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Create a new user

        Args:
            user: User domain model to save

        Returns:
            The saved User

        Raises:
            ConflictError: If the username is already registered
        """
        if not user:
            raise ValueError("User cannot be None")

        try:
            await self.user_collection.insert_one(self._user_to_dict(user))
        except DuplicateKeyError:
            raise ConflictError(f"User {user.username} already exists", user_message="User already exists")
        except PyMongoError as e:
            raise InternalError(f"Error saving user: {str(e)}")
        return user

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        return User(
            username=document.get(UserFields.USERNAME, ""),
            salt=document.get(UserFields.SALT, ""),
            password_hash=document.get(UserFields.PASSWORD_HASH, ""),
        )

    def _user_to_dict(self, user: User) -> dict:
        return {
            UserFields.USERNAME: user.username,
            UserFields.SALT: user.salt,
            UserFields.PASSWORD_HASH: user.password_hash,
        }
