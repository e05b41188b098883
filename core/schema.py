"""
Pydantic schema for the YAML config file. Used by utils.config.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENABLE_ENV_VAR = "DEBUG_LOGGING_ENABLED"
LEGACY_ENABLE_ENV_VAR = "NSDebugEnabled"
DEFAULT_LOGGER_NAME = "aslog"
DEFAULT_FORMAT = "%(asctime)s.%(msecs)03d %(processName)s[%(process)d:%(thread)d] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Config file (aslog.yaml)
# ---------------------------------------------------------------------------


class LogSettingsSchema(BaseModel):
    """Keys accepted in aslog.yaml. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    build_with_debug_logging: bool = True
    debug_log_auto_enable: bool = False
    enable_env_var: str = DEFAULT_ENABLE_ENV_VAR
    logger_name: str = DEFAULT_LOGGER_NAME
    format: str = DEFAULT_FORMAT
    datefmt: str = DEFAULT_DATEFMT
    log_file: str | None = None
    basename_only: bool = False
    raise_write_errors: bool = True
    encoding: str = Field(default="utf-8", min_length=1)

    @field_validator("enable_env_var", "logger_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("format")
    @classmethod
    def has_message(cls, v: str) -> str:
        if "%(message)s" not in v:
            raise ValueError("format must contain %(message)s")
        return v

    @field_validator("log_file")
    @classmethod
    def empty_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()
