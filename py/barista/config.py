"""Runtime configuration for barista's logging.

Read from the environment:
    BARISTA_LOG_LEVEL       loguru level name (default WARNING)
    BARISTA_LOG_FORMAT      loguru format string
    BARISTA_TRACE_DISPATCH  log every _super resolution at TRACE
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"

_ENV_FIELDS = {
    "BARISTA_LOG_LEVEL": "log_level",
    "BARISTA_LOG_FORMAT": "log_format",
    "BARISTA_TRACE_DISPATCH": "trace_dispatch",
}


class BaristaConfig(BaseModel):
    log_level: str = "WARNING"
    log_format: str = DEFAULT_FORMAT
    trace_dispatch: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {LOG_LEVELS}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BaristaConfig":
        """Build a config from BARISTA_* variables; unset ones keep defaults."""
        env = os.environ if environ is None else environ
        raw = {field: env[var] for var, field in _ENV_FIELDS.items() if var in env}
        return cls(**raw)
