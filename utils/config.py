"""
Configuration loader: YAML + env overrides.
Build switches and the runtime enable default all come from here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from core.exceptions import ConfigError
from core.schema import (
    DEFAULT_DATEFMT,
    DEFAULT_ENABLE_ENV_VAR,
    DEFAULT_FORMAT,
    DEFAULT_LOGGER_NAME,
    LEGACY_ENABLE_ENV_VAR,
    LogSettingsSchema,
)

CONFIG_ENV_VAR = "ASLOG_CONFIG"
DEFAULT_CONFIG_FILE = "aslog.yaml"
TRUTHY = ("1", "true", "yes", "on")


def _coerce_bool(s: Any) -> bool:
    if isinstance(s, bool):
        return s
    return (str(s).strip().lower() in TRUTHY) if s else False


@dataclass(frozen=True)
class LogConfig:
    """Immutable logging configuration. Built from YAML + env."""

    build_with_debug_logging: bool = True
    debug_log_auto_enable: bool = False
    enable_env_var: str = DEFAULT_ENABLE_ENV_VAR
    logger_name: str = DEFAULT_LOGGER_NAME
    format: str = DEFAULT_FORMAT
    datefmt: str = DEFAULT_DATEFMT
    log_file: str | None = None
    basename_only: bool = False
    raise_write_errors: bool = True
    encoding: str = "utf-8"

    def with_overrides(self, **overrides: Any) -> LogConfig:
        """Return new config with replaced keys; None values are ignored."""
        known = {k: v for k, v in overrides.items() if v is not None and k in self.__dataclass_fields__}
        return replace(self, **known)

    def debug_enabled_at_start(self, environ: dict[str, str] | None = None) -> bool:
        """Auto-enable switch, or the enable env var (or its legacy alias) set truthy."""
        if self.debug_log_auto_enable:
            return True
        env = os.environ if environ is None else environ
        for name in (self.enable_env_var, LEGACY_ENABLE_ENV_VAR):
            if _coerce_bool(env.get(name)):
                return True
        return False


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", path=str(path)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}", path=str(path))
    return data


def _config_from_dict(data: dict[str, Any], source: str = "") -> LogConfig:
    """Validate a raw mapping and build LogConfig. Env overrides applied in load_config."""
    try:
        settings = LogSettingsSchema.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid logging config {source or '<dict>'}: {e}", path=source or None) from e
    return LogConfig(**settings.model_dump())


def load_config(config_path: str | Path | None = None, load_env_file: bool = True) -> LogConfig:
    """
    Load config from YAML file, then apply env overrides.
    Env vars: ASLOG_CONFIG, BUILD_WITH_DEBUG_LOGGING, DEBUG_LOG_AUTO_ENABLE,
    ASLOG_LOG_FILE, ASLOG_BASENAME_ONLY.
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))
    path = Path(config_path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE)
    cfg = _config_from_dict(_load_yaml(path), source=str(path))
    overrides: dict[str, Any] = {}
    if os.getenv("BUILD_WITH_DEBUG_LOGGING") is not None:
        overrides["build_with_debug_logging"] = _coerce_bool(os.getenv("BUILD_WITH_DEBUG_LOGGING"))
    if os.getenv("DEBUG_LOG_AUTO_ENABLE") is not None:
        overrides["debug_log_auto_enable"] = _coerce_bool(os.getenv("DEBUG_LOG_AUTO_ENABLE"))
    if os.getenv("ASLOG_LOG_FILE"):
        overrides["log_file"] = os.getenv("ASLOG_LOG_FILE", "").strip()
    if os.getenv("ASLOG_BASENAME_ONLY") is not None:
        overrides["basename_only"] = _coerce_bool(os.getenv("ASLOG_BASENAME_ONLY"))
    if not overrides:
        return cfg
    return cfg.with_overrides(**overrides)
