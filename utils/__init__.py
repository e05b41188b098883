"""Shared utilities: config, logger."""

from utils.config import LogConfig, load_config
from utils.logger import ActiveStreamHandler, get_logger, setup_logging, emit_line

__all__ = [
    "LogConfig",
    "load_config",
    "ActiveStreamHandler",
    "get_logger",
    "setup_logging",
    "emit_line",
]
