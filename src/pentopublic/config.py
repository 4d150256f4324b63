"""Application settings, loaded from the environment and ``.env``."""
from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend
    API_BASE_URL: str = "http://127.0.0.1:8000"
    API_TIMEOUT_SECONDS: float = 15.0
    API_TOKEN: SecretStr | None = None

    # UI
    NOTIFICATION_SECONDS: float = 4.0

    LOG_LEVEL: str = "INFO"

    # Stand-in API credentials (devserver only)
    DEV_ADMIN_USERNAME: str = "admin"
    DEV_ADMIN_PASSWORD: SecretStr = SecretStr("admin")


settings = Settings()
