"""
Abstract interfaces for the logging utility.
The logger never touches a stream directly; it goes through an IOutputStream.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.models import Tier


class IOutputStream(ABC):
    """Active log destination: stderr by default, or a redirected file."""

    @abstractmethod
    def emit(self, line: str, tier: Tier) -> None:
        """Write one rendered line (the base primitive adds preamble and newline)."""
        ...

    @abstractmethod
    def redirect_to(self, path: str) -> None:
        """Swap destination to path (append). All-or-nothing: raises RedirectError and keeps the old one."""
        ...

    @abstractmethod
    def restore_default(self) -> None:
        """Close any redirected file and go back to stderr. No-op when already there."""
        ...

    @property
    @abstractmethod
    def active_path(self) -> str | None:
        """Path of the redirected file, or None when writing to stderr."""
        ...

    def close(self) -> None:
        """Release the destination. Default: restore stderr."""
        self.restore_default()
