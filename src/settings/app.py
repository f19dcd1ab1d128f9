"""Application settings powered by Pydantic BaseSettings."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.features.observability.logging import PRODUCTION_ENVIRONMENT, default_log_level
from src.features.origin.patterns import parse_origin_list
from src.features.retry.constants import (
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_INITIAL_DELAY_MS,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MAX_RETRIES,
)
from src.features.retry.models import RetryOptions


DEVELOPMENT_ENVIRONMENT = "development"


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    environment: str = Field(
        default=DEVELOPMENT_ENVIRONMENT, validation_alias="NODE_ENV"
    )
    host: str = Field(default="0.0.0.0", validation_alias="HOST")  # noqa: S104
    port: int = Field(default=4000, ge=1, le=65535, validation_alias="PORT")

    # Comma-separated, e.g. "https://trust.example.com,https://trust.*.example.com"
    cors_trust_center_origins: str = Field(
        default="", validation_alias="CORS_TRUST_CENTER_ORIGINS"
    )

    log_level: str | None = Field(default=None, validation_alias="LOG_LEVEL")
    log_json: bool | None = Field(default=None, validation_alias="LOG_JSON")

    db_retry_max_retries: int = Field(
        default=DEFAULT_MAX_RETRIES, ge=0, validation_alias="DB_RETRY_MAX_RETRIES"
    )
    db_retry_initial_delay_ms: int = Field(
        default=DEFAULT_INITIAL_DELAY_MS,
        ge=0,
        validation_alias="DB_RETRY_INITIAL_DELAY_MS",
    )
    db_retry_max_delay_ms: int = Field(
        default=DEFAULT_MAX_DELAY_MS, ge=0, validation_alias="DB_RETRY_MAX_DELAY_MS"
    )
    db_retry_backoff_multiplier: float = Field(
        default=DEFAULT_BACKOFF_MULTIPLIER,
        gt=1.0,
        validation_alias="DB_RETRY_BACKOFF_MULTIPLIER",
    )

    @property
    def is_production(self) -> bool:
        """Whether NODE_ENV is production."""
        return self.environment == PRODUCTION_ENVIRONMENT

    @property
    def is_development(self) -> bool:
        """Whether NODE_ENV is development."""
        return self.environment == DEVELOPMENT_ENVIRONMENT

    @property
    def trust_center_origins(self) -> list[str]:
        """Allowed trust-center origin patterns, in configured order."""
        return parse_origin_list(self.cors_trust_center_origins)

    def resolved_log_level(self) -> int:
        """Get the numeric log level.

        LOG_LEVEL wins when set to a known level name; otherwise INFO in
        production and DEBUG elsewhere.
        """
        if self.log_level:
            level = logging.getLevelName(self.log_level.upper())
            if isinstance(level, int):
                return level
        return default_log_level(self.environment)

    def resolved_log_json(self) -> bool:
        """JSON logs unless LOG_JSON says otherwise; console logs in development."""
        if self.log_json is not None:
            return self.log_json
        return not self.is_development

    def retry_options(self) -> RetryOptions:
        """Build database retry options from the DB_RETRY_* variables."""
        return RetryOptions(
            max_retries=self.db_retry_max_retries,
            initial_delay_ms=self.db_retry_initial_delay_ms,
            max_delay_ms=self.db_retry_max_delay_ms,
            backoff_multiplier=self.db_retry_backoff_multiplier,
        )


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
