"""Base emission primitive: one non-propagating logger with a swappable stream handler."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

from core.exceptions import WriteFailureError
from core.models import Tier
from utils.config import LogConfig

TIER_LEVELS: dict[Tier, int] = {
    Tier.DEBUG: logging.DEBUG,
    Tier.NORMAL: logging.INFO,
    Tier.WARNING: logging.WARNING,
}


class ActiveStreamHandler(logging.StreamHandler):
    """StreamHandler whose failed writes surface to the caller as WriteFailureError."""

    def __init__(self, stream: IO[str] | None = None, raise_write_errors: bool = True) -> None:
        super().__init__(stream if stream is not None else sys.stderr)
        self.raise_write_errors = raise_write_errors

    def handleError(self, record: logging.LogRecord) -> None:
        exc = sys.exc_info()[1]
        # writing to a closed file raises ValueError, not OSError
        if self.raise_write_errors and isinstance(exc, (OSError, ValueError)):
            name = getattr(self.stream, "name", None)
            raise WriteFailureError(
                f"Write to log stream {name or self.stream!r} failed: {exc}",
                path=name if isinstance(name, str) else None,
            ) from exc
        super().handleError(record)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module/component. No side effects."""
    return logging.getLogger(name)


def setup_logging(config: LogConfig, stream: Any = None) -> tuple[logging.Logger, ActiveStreamHandler]:
    """
    Build a private output logger and its handler. Each call gets its own pair.
    The logger is not registered with logging.getLogger(), so two contexts
    sharing a logger_name never share a destination.
    """
    out = logging.Logger(config.logger_name, logging.DEBUG)
    out.propagate = False
    handler = ActiveStreamHandler(stream, raise_write_errors=config.raise_write_errors)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.datefmt))
    out.addHandler(handler)
    return out, handler


def emit_line(logger: logging.Logger, tier: Tier, line: str) -> None:
    """Hand a rendered line to the logger. No args, so no second %-pass."""
    logger.log(TIER_LEVELS[tier], line)
