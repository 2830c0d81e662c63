# Standard library imports
import os
from typing import Final, Optional

# Local application imports
from .prompts import SYSTEM_RULES_CHAT


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "healense")

        # Session Configuration
        self.session_ttl_seconds: Final[int] = int(os.getenv("SESSION_TTL_SECONDS", "3600"))
        self.cookie_secure: Final[bool] = _env_bool("COOKIE_SECURE", "true")
        self.cors_allow_origin: Final[str] = os.getenv("CORS_ALLOW_ORIGIN", "http://localhost:3000")

        # Chat/LLM Configuration
        self.groq_api_key: Final[str] = os.getenv("GROQ_API_KEY", "")
        self.groq_base_url: Final[str] = os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1")
        self.llm_model: Final[str] = os.getenv("LLM_MODEL", "meta-llama/llama-4-scout-17b-16e-instruct")
        self.llm_temperature: Final[float] = float(os.getenv("LLM_TEMPERATURE", "0.4"))
        self.llm_max_tokens: Final[int] = int(os.getenv("LLM_MAX_TOKENS", "1024"))
        self.llm_idle_timeout_seconds: Final[float] = float(os.getenv("LLM_IDLE_TIMEOUT_SECONDS", "60"))
        self.stream_queue_size: Final[int] = int(os.getenv("STREAM_QUEUE_SIZE", "64"))
        self.system_prompt: Final[str] = os.getenv("SYSTEM_PROMPT") or SYSTEM_RULES_CHAT

        # Storage limits
        self.message_page_size: Final[int] = int(os.getenv("MESSAGE_PAGE_SIZE", "100"))
        self.image_max_bytes: Final[int] = int(os.getenv("IMAGE_MAX_BYTES", str(8 * 1024 * 1024)))

        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
