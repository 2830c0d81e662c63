"""
Unit tests for auth use cases (Register, Login, GetCurrentSession, Refresh, Logout).
"""
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError as PydanticValidationError

from healense.application.dto.auth_dto import CredentialsRequest, SessionResponse
from healense.application.use_cases.auth.get_current_session import GetCurrentSessionUseCase
from healense.application.use_cases.auth.login_user import LoginUserUseCase
from healense.application.use_cases.auth.logout_user import LogoutUserUseCase
from healense.application.use_cases.auth.refresh_session import RefreshSessionUseCase
from healense.application.use_cases.auth.register_user import RegisterUserUseCase
from healense.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from healense.core.security import generate_salt, hash_password
from healense.domain.models.session import Session
from healense.domain.models.user import User
from healense.utils.datetime_utils import utc_now


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


def _user(username: str, password: str) -> User:
    salt = generate_salt()
    return User(username=username, salt=salt, password_hash=hash_password(password, salt))


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = None
        mock_user_repo.save.side_effect = lambda user: user

        use_case = RegisterUserUseCase(mock_user_repo)
        result = await use_case.execute(CredentialsRequest(username="alice", password="pw123"))

        assert result.username == "alice"
        assert result.password_hash != "pw123"
        assert hash_password("pw123", result.salt) == result.password_hash
        mock_user_repo.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_register_duplicate_raises(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = _user("alice", "pw")

        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(ConflictError, match="already exists"):
            await use_case.execute(CredentialsRequest(username="alice", password="other"))
        mock_user_repo.save.assert_not_called()

    def test_empty_username_rejected_by_dto(self):
        with pytest.raises(PydanticValidationError):
            CredentialsRequest(username="", password="pw")


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success_persists_session(self, user_repo, session_repo):
        await user_repo.save(_user("alice", "pw123"))

        use_case = LoginUserUseCase(user_repo, session_repo, session_ttl_seconds=3600)
        result = await use_case.execute(CredentialsRequest(username="alice", password="pw123"))

        assert isinstance(result, SessionResponse)
        assert result.username == "alice"
        assert result.ttl == 3600
        stored = await session_repo.find_by_id(result.session_id)
        assert stored is not None
        assert stored.username == "alice"
        remaining = stored.expires_at - utc_now()
        assert timedelta(seconds=3590) < remaining <= timedelta(seconds=3600)

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, user_repo, session_repo):
        use_case = LoginUserUseCase(user_repo, session_repo, session_ttl_seconds=3600)
        with pytest.raises(NotFoundError):
            await use_case.execute(CredentialsRequest(username="ghost", password="pw"))
        assert session_repo.sessions == {}

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, user_repo, session_repo):
        await user_repo.save(_user("alice", "correct"))

        use_case = LoginUserUseCase(user_repo, session_repo, session_ttl_seconds=3600)
        with pytest.raises(UnauthorizedError):
            await use_case.execute(CredentialsRequest(username="alice", password="wrong"))
        assert session_repo.sessions == {}

    @pytest.mark.asyncio
    async def test_two_logins_give_distinct_tokens(self, user_repo, session_repo):
        await user_repo.save(_user("alice", "pw"))
        use_case = LoginUserUseCase(user_repo, session_repo, session_ttl_seconds=3600)

        first = await use_case.execute(CredentialsRequest(username="alice", password="pw"))
        second = await use_case.execute(CredentialsRequest(username="alice", password="pw"))

        assert first.session_id != second.session_id


class TestGetCurrentSessionUseCase:
    """Tests for GetCurrentSessionUseCase"""

    @pytest.mark.asyncio
    async def test_live_session_resolves(self, session_repo):
        session = Session(session_id="tok", username="alice", expires_at=utc_now() + timedelta(hours=1))
        await session_repo.save(session)

        result = await GetCurrentSessionUseCase(session_repo).execute("tok")
        assert result.username == "alice"

    @pytest.mark.asyncio
    async def test_missing_cookie_raises(self, session_repo):
        with pytest.raises(UnauthorizedError):
            await GetCurrentSessionUseCase(session_repo).execute(None)

    @pytest.mark.asyncio
    async def test_expired_session_raises(self, session_repo):
        await session_repo.save(
            Session(session_id="old", username="alice", expires_at=utc_now() - timedelta(seconds=1))
        )
        with pytest.raises(UnauthorizedError):
            await GetCurrentSessionUseCase(session_repo).execute("old")


class TestRefreshSessionUseCase:
    """Tests for RefreshSessionUseCase"""

    @pytest.mark.asyncio
    async def test_rotates_token(self, session_repo):
        await session_repo.save(
            Session(session_id="tok-1", username="alice", expires_at=utc_now() + timedelta(minutes=5))
        )

        result = await RefreshSessionUseCase(session_repo, session_ttl_seconds=3600).execute("tok-1")

        assert result.session_id != "tok-1"
        assert result.username == "alice"
        assert await session_repo.find_by_id("tok-1") is None
        refreshed = await session_repo.find_by_id(result.session_id)
        assert refreshed.expires_at - utc_now() > timedelta(minutes=59)

    @pytest.mark.asyncio
    async def test_expired_session_cannot_refresh(self, session_repo):
        await session_repo.save(
            Session(session_id="tok-1", username="alice", expires_at=utc_now() - timedelta(seconds=1))
        )
        with pytest.raises(UnauthorizedError):
            await RefreshSessionUseCase(session_repo, session_ttl_seconds=3600).execute("tok-1")


class TestLogoutUserUseCase:
    """Tests for LogoutUserUseCase"""

    @pytest.mark.asyncio
    async def test_logout_deletes_session(self, session_repo):
        await session_repo.save(
            Session(session_id="tok", username="alice", expires_at=utc_now() + timedelta(hours=1))
        )
        await LogoutUserUseCase(session_repo).execute("tok")
        assert await session_repo.find_by_id("tok") is None

    @pytest.mark.asyncio
    async def test_logout_is_idempotent(self, session_repo):
        use_case = LogoutUserUseCase(session_repo)
        await use_case.execute("never-existed")
        await use_case.execute(None)
