from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "GREETER_"

LogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]


class Settings(BaseModel):
    """Listener and logging settings for the greeting server."""

    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = Field(default=80, ge=0, le=65535)
    log_level: LogLevel = "info"
    access_log: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``GREETER_*`` variables.

        Unset or empty variables keep the field default. Values are handed to
        pydantic as strings, so ``GREETER_PORT=abc`` raises ``ValidationError``.
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{name.upper()}", "")
            if raw.strip():
                values[name] = raw.strip()
        if "log_level" in values:
            values["log_level"] = values["log_level"].lower()
        return cls(**values)


def get_settings() -> Settings:
    return Settings.from_env()
