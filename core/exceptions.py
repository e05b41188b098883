"""Custom exceptions for the logging utility. No generic Exception usage."""

from __future__ import annotations


class LoggingError(Exception):
    """Base exception for logging failures."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path or ""
        super().__init__(message)


class FormatMismatchError(LoggingError, TypeError):
    """Format string and arguments do not agree."""

    pass


class RedirectError(LoggingError):
    """Log destination could not be switched to the requested file."""

    pass


class PathInvalidError(RedirectError):
    """Redirect target does not name an openable file (missing dir, is a dir, bad name)."""

    pass


class PermissionDeniedError(RedirectError):
    """Redirect target exists or would be created somewhere we may not write."""

    pass


class WriteFailureError(LoggingError):
    """Writing a line to the active output stream failed."""

    pass


class ConfigError(LoggingError):
    """Invalid or missing configuration."""

    pass
