"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from phc_codec.domain.constants import MAX_SALT_LENGTH, RECOMMENDED_SALT_LENGTH


class Settings(BaseSettings):
    """Application configuration - single source of truth.

    All settings loaded from environment variables or .env files.
    The PHC format bounds are NOT configurable: they are part of the wire
    contract and live in phc_codec.domain.constants.

    Usage:
        settings = get_settings()
        print(settings.default_encoding)
        print(settings.argon2_memory_cost)
    """

    # Application
    environment: Literal["dev", "prod", "test"] = Field(default="dev")
    debug: bool = Field(default=False)
    app_name: str = Field(default="PHC Codec")
    app_version: str = Field(default="1.0.0")

    # Logging
    log_level: str = Field(default="INFO")

    # Codec
    default_encoding: Literal["auto", "phc", "legacy"] = Field(
        default="auto",
        description="Alphabet used when a request does not name one. "
        "'auto' picks it from the algorithm registry by exact identifier.",
    )
    expose_error_details: Optional[bool] = Field(
        default=None,
        description="Return the specific parse error code to API clients. "
        "Defaults to False in prod so clients cannot enumerate parser failures.",
    )

    # Hashing
    salt_length: int = Field(default=RECOMMENDED_SALT_LENGTH, ge=8, le=MAX_SALT_LENGTH)
    argon2_time_cost: int = Field(default=3, ge=1)
    argon2_memory_cost: int = Field(default=65536, ge=8)
    argon2_parallelism: int = Field(default=4, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the level name and reject unknown levels."""
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level

    @property
    def show_error_details(self) -> bool:
        """Whether API error responses carry the specific error code."""
        if self.expose_error_details is None:
            return not self.is_production
        return self.expose_error_details

    @property
    def encoding_preference(self) -> Optional[str]:
        """Explicit encoding to pass to the parser, or None for registry lookup."""
        return None if self.default_encoding == "auto" else self.default_encoding

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "prod"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "dev"

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the application lifecycle.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()
