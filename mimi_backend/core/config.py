from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root for .env loading regardless of the working directory
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.
    """

    # Core app settings
    app_name: str = Field(default="mimi_backend")
    environment: str = Field(default="development")  # development | staging | production

    # HTTP server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080)
    api_prefix: str = Field(default="")

    # Observability
    log_level: str = Field(default="INFO")

    # OpenAI
    openai_api_key: Optional[SecretStr] = Field(
        default=None,
        description="OpenAI API key. Required unless MOCK_LLM is enabled.",
    )
    openai_model: str = Field(
        default="gpt-3.5-turbo",
        description="Chat completion model used for every question.",
    )
    openai_base_url: str = Field(default="https://api.openai.com/v1")
    mock_llm: bool = Field(
        default=False,
        description="Answer every question with canned data instead of calling OpenAI.",
    )

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return a cached settings instance for use as a dependency.
    """
    return Settings()
