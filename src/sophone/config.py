"""Command-line front end configuration."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, field_validator

LOG_LEVEL_ENV = "SOPHONE_LOG_LEVEL"


class CLIConfig(BaseModel):
    """Settings for ``sophone`` invocations.

    Attributes:
        json_output: Print pydantic JSON instead of human-readable text.
        log_level: Name of the root logging level (e.g., "DEBUG").
    """

    json_output: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, **overrides: object) -> CLIConfig:
        """Build from ``SOPHONE_LOG_LEVEL``; keyword overrides win."""
        values: dict[str, object] = {}
        env_level = os.environ.get(LOG_LEVEL_ENV)
        if env_level:
            values["log_level"] = env_level
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
