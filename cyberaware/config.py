"""
Configuration and logging setup for CyberAware.

Settings come from environment variables (a .env file is loaded first) and can
be overridden by CLI options.
"""

import logging
import os
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.console import Console
from rich.logging import RichHandler

from .errors import StartupError


ENV_PREFIX = "CYBERAWARE_"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class BotConfig(BaseModel):
    """Configuration for a chat session."""
    default_name: str = Field(default="User", min_length=1)
    seed: Optional[int] = None  # None means unseeded fallback choices
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    show_banner: bool = True

    @field_validator('default_name')
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default_name must not be blank")
        return value

    @field_validator('log_level')
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def _env_settings() -> dict[str, Any]:
    """Collect the settings present in the environment."""
    settings = {}
    for field_name in BotConfig.model_fields:
        value = os.getenv(ENV_PREFIX + field_name.upper())
        if value is not None and value != "":
            settings[field_name] = value
    return settings


def load_config(**overrides) -> BotConfig:
    """
    Build the session configuration.

    Args:
        **overrides: Values that take precedence over the environment
            (None values are ignored)

    Returns:
        Validated BotConfig

    Raises:
        StartupError: If a setting is invalid
    """
    load_dotenv()

    settings = _env_settings()
    settings.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return BotConfig(**settings)
    except ValidationError as e:
        raise StartupError(f"Invalid configuration: {e}", {"settings": settings})


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Install the rich console handler and an optional log file.

    Raises:
        StartupError: If the log file cannot be opened
    """
    handlers: list[logging.Handler] = [
        RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    ]
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            raise StartupError(f"Cannot open log file {log_file}: {e}", {"log_file": log_file}) from e
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=handlers,
        force=True
    )
