# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import InternalError
from ...domain.repositories.session_repository import SessionRepository
from ...domain.models.session import Session
from ...domain.constants import SessionFields
from ...utils.datetime_utils import utc_now, ensure_utc
from .mongo_connection import get_session_collection


class MongoSessionRepository(SessionRepository):
    """
    MongoDB implementation of SessionRepository.

    Expiry is checked on every read; the TTL index only removes stale
    documents eventually.
    """

    def __init__(self, session_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.session_collection = (
            session_collection if session_collection is not None else get_session_collection()
        )

    async def find_by_id(self, session_id: str) -> Optional[Session]:
        if not session_id:
            return None

        try:
            document = await self.session_collection.find_one({SessionFields.SESSION_ID: session_id})
        except PyMongoError as e:
            raise InternalError(f"Error finding session: {str(e)}")

        if document is None:
            return None

        session = Session(
            session_id=document[SessionFields.SESSION_ID],
            username=document.get(SessionFields.USERNAME, ""),
            expires_at=ensure_utc(document[SessionFields.EXPIRES_AT]),
        )
        if session.is_expired(utc_now()):
            return None
        return session

    async def save(self, session: Session) -> Session:
        try:
            await self.session_collection.replace_one(
                {SessionFields.SESSION_ID: session.session_id},
                {
                    SessionFields.SESSION_ID: session.session_id,
                    SessionFields.USERNAME: session.username,
                    SessionFields.EXPIRES_AT: session.expires_at,
                },
                upsert=True,
            )
        except PyMongoError as e:
            raise InternalError(f"Error saving session: {str(e)}")
        return session

    async def delete(self, session_id: str) -> None:
        if not session_id:
            return
        try:
            await self.session_collection.delete_one({SessionFields.SESSION_ID: session_id})
        except PyMongoError as e:
            raise InternalError(f"Error deleting session: {str(e)}")
