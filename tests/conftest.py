"""
Shared pytest fixtures for healense tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from healense.core.prompts import SYSTEM_RULES_CHAT
from tests.fakes import (
    InMemoryImageRepository,
    InMemoryMessageRepository,
    InMemoryRoomRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
    ScriptedChatModelClient,
)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_healense_db",
        "GROQ_API_KEY": "test_groq_key_placeholder",
        "COOKIE_SECURE": "true",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches the modules that read it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.session_ttl_seconds = 3600
    mock.cookie_secure = True
    mock.cors_allow_origin = "http://localhost:3000"
    mock.groq_api_key = "test_groq_key"
    mock.groq_base_url = "https://groq.test/openai/v1"
    mock.llm_model = "test-model"
    mock.llm_temperature = 0.4
    mock.llm_max_tokens = 256
    mock.llm_idle_timeout_seconds = 5.0
    mock.stream_queue_size = 8
    mock.system_prompt = SYSTEM_RULES_CHAT
    mock.message_page_size = 100
    mock.image_max_bytes = 1024

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("healense.core.config.get_settings", return_value=mock), patch(
        "healense.infrastructure.external.chat_model_client.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def session_repo():
    return InMemorySessionRepository()


@pytest.fixture
def room_repo():
    return InMemoryRoomRepository()


@pytest.fixture
def message_repo():
    return InMemoryMessageRepository()


@pytest.fixture
def image_repo():
    return InMemoryImageRepository()


@pytest.fixture
def chat_client():
    return ScriptedChatModelClient(deltas=["Hello", " there", "."])
