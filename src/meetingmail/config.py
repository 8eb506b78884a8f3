"""MeetingMail configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Completion provider (OpenAI-compatible chat completions)
    groq_api_key: str = ""
    completion_base_url: str = "https://api.groq.com/openai/v1"
    completion_model: str = "llama-3.3-70b-versatile"
    completion_temperature: float = 0.3
    completion_max_tokens: int = 2000
    completion_timeout_seconds: float = 60.0

    # SMTP relay
    mail_host: str | None = None
    mail_port: int | None = None
    mail_user: str | None = None
    mail_pass: str | None = None
    mail_from: str | None = None  # Falls back to mail_user
    mail_timeout_seconds: float = 30.0

    # Transcript uploads
    max_upload_bytes: int = 10 * 1024 * 1024

    @field_validator(
        "mail_host", "mail_port", "mail_user", "mail_pass", "mail_from", mode="before"
    )
    @classmethod
    def blank_as_unset(cls, value):
        """Treat `MAIL_PORT=` and friends as not configured."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def completion_configured(self) -> bool:
        return bool(self.groq_api_key)

    @property
    def mail_configured(self) -> bool:
        """All of host, port, user and password must be present."""
        return bool(self.mail_host and self.mail_port and self.mail_user and self.mail_pass)

    @property
    def mail_sender(self) -> str | None:
        """From-address for outgoing mail."""
        return self.mail_from or self.mail_user

    @property
    def mail_use_ssl(self) -> bool:
        """Port 465 means implicit TLS."""
        return self.mail_port == 465


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
