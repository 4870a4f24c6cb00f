"""Configuration management for taskman."""

from loguru import logger
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.tokens import MAXARGS, MAXLINE
from .errors import ConfigurationError
from .logging_utils import configure_logging


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TASKMAN_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Parser limits
    max_line: int = Field(default=MAXLINE, ge=1, description="Longest input line kept, including terminator slot")
    max_args: int = Field(default=MAXARGS, ge=2, description="Token buffer capacity, including terminator slot")

    # Shell
    prompt: str = Field(default="taskman> ", description="Prompt shown by the interactive shell")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        logger.level(level)
        return level


def get_settings() -> Settings:
    """Build settings from the environment and configure logging.

    Returns:
        Settings instance
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid taskman settings: {exc}") from exc
    configure_logging(level=settings.log_level)
    return settings
