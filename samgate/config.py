"""Runtime settings read from SAMGATE_* environment variables."""

import logging
import os

from pydantic import BaseModel, Field, field_validator
from rich.logging import RichHandler


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Settings for the CLI and HTTP service."""

    log_level: str = Field(default="WARNING", description="Root log level")
    encoding: str = Field(default="utf-8", description="Text encoding of SAM files")
    host: str = Field(default="127.0.0.1", description="Host the HTTP service binds to")
    port: int = Field(default=7879, description="Port of the HTTP service")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


ENV_VARS = {
    "log_level": "SAMGATE_LOG_LEVEL",
    "encoding": "SAMGATE_ENCODING",
    "host": "SAMGATE_HOST",
    "port": "SAMGATE_PORT",
}


def load_settings(**overrides) -> Settings:
    """Build settings from the environment; keyword overrides win when not None."""
    values = {}
    for name, env_var in ENV_VARS.items():
        env_value = os.getenv(env_var)
        if env_value:
            values[name] = env_value
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings.model_validate(values)


def configure_logging(settings: Settings) -> None:
    """Send log records through rich at the configured level."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
