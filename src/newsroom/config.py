"""Application configuration via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from newsroom.core.constants import (
    DEFAULT_PAYMENT_BASE,
    DEFAULT_PAYMENT_BONUS,
    DEFAULT_PAYMENT_MINIMUM_WORDS,
    DEFAULT_TRANSPORT_TIMEOUT,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Core
    env: Literal["development", "staging", "production"] = Field(
        default="development", alias="NEWSROOM_ENV"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", alias="NEWSROOM_LOG_LEVEL"
    )

    # Editorial
    editor_email: str = Field(
        default="editor@newsroom.local",
        description="Address that receives special news notifications",
    )

    # Journalist payments
    payment_minimum_words: int = Field(
        default=DEFAULT_PAYMENT_MINIMUM_WORDS,
        description="Body word count that must be exceeded to earn the bonus payment",
    )
    payment_base: float = Field(default=DEFAULT_PAYMENT_BASE)
    payment_bonus: float = Field(default=DEFAULT_PAYMENT_BONUS)

    @field_validator("payment_minimum_words", "payment_base", "payment_bonus")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("payment settings cannot be negative")
        return v

    # Mail (special news)
    mail_transport: Literal["smtp", "log"] = Field(default="log")
    smtp_host: str = Field(default="localhost")
    smtp_port: int = Field(default=465)
    smtp_username: str | None = Field(default=None)
    smtp_password: SecretStr | None = Field(default=None)
    smtp_use_ssl: bool = Field(default=True)

    # Dashboard
    dashboard_transport: Literal["webhook", "log"] = Field(default="log")
    dashboard_webhook_url: SecretStr | None = Field(
        default=None,
        description="Webhook that receives the batch of news to publish",
    )

    transport_timeout: float = Field(
        default=DEFAULT_TRANSPORT_TIMEOUT,
        description="Timeout in seconds for outbound mail and dashboard calls",
    )

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
