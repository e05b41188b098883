"""Core layer: interfaces, models, exceptions."""

from core.interfaces import IOutputStream
from core.models import (
    Tier,
    CallSite,
    LogEvent,
    Lazy,
    lazy,
    WARNING_MARKER,
)
from core.exceptions import (
    LoggingError,
    FormatMismatchError,
    RedirectError,
    PathInvalidError,
    PermissionDeniedError,
    WriteFailureError,
    ConfigError,
)

__all__ = [
    "IOutputStream",
    "Tier",
    "CallSite",
    "LogEvent",
    "Lazy",
    "lazy",
    "WARNING_MARKER",
    "LoggingError",
    "FormatMismatchError",
    "RedirectError",
    "PathInvalidError",
    "PermissionDeniedError",
    "WriteFailureError",
    "ConfigError",
]
