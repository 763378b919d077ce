"""Configuration loading from YAML and environment variables."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .engine.game import SessionConfig
from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = "config/game.yaml"
CONFIG_ENV = "FAIR_RPS_CONFIG"
LOG_LEVEL_ENV = "FAIR_RPS_LOG_LEVEL"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SessionSettings(BaseModel):
    """Input tokens."""
    model_config = ConfigDict(extra="forbid")

    help_token: str = "?"
    quit_token: str = "0"

    @field_validator("help_token", "quit_token")
    @classmethod
    def _check_token(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("token must not be empty")
        # A positive number would shadow a move selection.
        digits = value[1:] if value.startswith("+") else value
        if digits.isascii() and digits.isdigit() and int(digits) > 0:
            raise ValueError(f"token {value!r} collides with move numbers")
        return value

    @model_validator(mode="after")
    def _check_distinct(self) -> "SessionSettings":
        if self.help_token == self.quit_token:
            raise ValueError("help_token and quit_token must differ")
        return self

    def to_session_config(self) -> SessionConfig:
        return SessionConfig(help_token=self.help_token, quit_token=self.quit_token)


class LoggingSettings(BaseModel):
    """Log output."""
    model_config = ConfigDict(extra="forbid")

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"unknown level {value!r}, use one of {', '.join(LOG_LEVELS)}")
        return value

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


class DisplaySettings(BaseModel):
    """Console presentation."""
    model_config = ConfigDict(extra="forbid")

    show_banner: bool = True
    show_verification_hint: bool = True


class AppConfig(BaseModel):
    """Top-level configuration."""
    model_config = ConfigDict(extra="forbid")

    session: SessionSettings = Field(default_factory=SessionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


def _format_validation_error(error: ValidationError) -> list[str]:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        problems.append(f"{location}: {item['msg']}" if location else item["msg"])
    return problems


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration.

    Args:
        config_path: YAML file to read. Defaults to $FAIR_RPS_CONFIG, then
            config/game.yaml. The default file may be absent; an explicitly
            named one may not.

    Returns:
        The validated configuration with environment overrides applied.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    explicit = config_path or os.getenv(CONFIG_ENV)
    path = Path(explicit or DEFAULT_CONFIG_PATH)

    data: dict = {}
    if path.exists():
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError([f"not valid YAML: {e}"], source=str(path)) from e
        if not isinstance(data, dict):
            raise ConfigurationError(["top level must be a mapping"], source=str(path))
    elif explicit:
        raise ConfigurationError(["config file not found"], source=str(path))

    level = os.getenv(LOG_LEVEL_ENV)
    if level:
        data = {**data, "logging": {**(data.get("logging") or {}), "level": level}}

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(_format_validation_error(e), source=str(path)) from e
