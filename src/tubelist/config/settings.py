"""
Application settings and configuration management.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from tubelist import __version__

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/87.0.4280.101 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="tubelist")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Storage
    dumps_dir: Path = Field(default=Path("./dumps"))
    logs_dir: Path = Field(default=Path("./logs"))

    # HTTP
    request_timeout: float = Field(default=30.0)
    retry_attempts: int = Field(default=3)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    consent_cookie: str = Field(default="SOCS=CAI")

    # Innertube request context
    default_gl: str = Field(default="US")
    default_hl: str = Field(default="en")

    # Diagnostics
    support_url: str = Field(default="https://github.com/tubelist/tubelist/issues")

    @field_validator("dumps_dir", "logs_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Ensure directory paths are Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("retry_attempts")
    @classmethod
    def validate_retry_attempts(cls, v: int) -> int:
        """Validate that the retry budget is not negative."""
        if v < 0:
            raise ValueError(f"retry_attempts must be >= 0, got {v}")
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
