"""Service settings, read from the environment (and backend/.env when present)."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resume_agent.core.constants import RATE_LIMIT_PER_MINUTE


class Settings(BaseSettings):
    service_name: str = "resume-agent"
    service_version: str = "1.0.0"
    # Comma-separated; the Angular dev server by default.
    allowed_origins: str = "http://localhost:4200"
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    rate_limit_per_minute: int = RATE_LIMIT_PER_MINUTE

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_format", mode="before")
    @classmethod
    def _lowercase_format(cls, value):
        return value.lower() if isinstance(value, str) else value

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


_settings: Settings | None = None


def load_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
