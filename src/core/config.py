"""Application settings. Read from environment variables prefixed with CHESS_ (ex. CHESS_DATABASE_URL)"""

import os
from typing import Mapping, Optional, Self

from pydantic import BaseModel, ValidationError, field_validator

from src.core.exceptions import ConfigurationError

ENV_PREFIX = "CHESS_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    database_url: str = "sqlite:///./chess_variant.db"
    echo_sql: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Collect every CHESS_<FIELD> variable that matches a field name. Missing ones fall back to the defaults."""
        environ = os.environ if environ is None else environ
        values = {
            name: environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in environ
        }
        try:
            return cls(**values)
        except ValidationError as err:
            raise ConfigurationError(f"Invalid settings in environment: {err}") from err
