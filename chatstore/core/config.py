"""Application configuration with validation."""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Store settings with validation.

    Values come from environment variables (case-insensitive) or a
    ``.env`` file in the working directory.
    """

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: 'json' for structured, 'text' for human-readable"
    )

    # Password hashing
    # bcrypt cost factor. Each increment doubles hashing time; tests drop it to 4.
    password_hash_rounds: int = Field(
        default=12,
        ge=4,
        le=31,
        description="bcrypt cost factor used by hash_password"
    )

    # Guest accounts
    guest_email_prefix: str = Field(
        default="guest",
        description="Prefix of synthesized guest emails (<prefix>-<epoch millis>)"
    )

    # Pagination
    default_page_limit: int = Field(
        default=20,
        gt=0,
        description="Page size used by chat pagination when no limit is given"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard Python logging levels."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v_upper

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in ('json', 'text'):
            raise ValueError("Invalid log format. Must be 'json' or 'text'")
        return v_lower

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        # Allow reading from environment variables with different case
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
