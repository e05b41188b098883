"""
Data models for log events.
Uses dataclasses for DTOs; the pydantic config schema lives in core.schema.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from core.exceptions import FormatMismatchError

WARNING_MARKER = "WARNING"


class Tier(str, Enum):
    """Logging call category: own gating and marker rules."""

    DEBUG = "debug"
    NORMAL = "normal"
    WARNING = "warning"

    @property
    def gated(self) -> bool:
        return self is Tier.DEBUG

    @property
    def marker(self) -> str:
        return WARNING_MARKER if self is Tier.WARNING else ""


class Lazy:
    """Argument whose value is computed only when the line is rendered."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[], Any]) -> None:
        if not callable(fn):
            raise TypeError(f"lazy() needs a callable, got {type(fn).__name__}")
        self._fn = fn

    def resolve(self) -> Any:
        return self._fn()

    def __repr__(self) -> str:
        return f"Lazy({self._fn!r})"


def lazy(fn: Callable[[], Any]) -> Lazy:
    """Wrap a zero-argument callable as a deferred log argument."""
    return Lazy(fn)


@dataclass(frozen=True)
class CallSite:
    """Where a log call came from. Any part may be missing."""

    source_file: str | None = None
    line_number: int | None = None
    function: str | None = None

    def render(self, basename_only: bool = False) -> str:
        """'file:line function' with absent parts left out."""
        parts: list[str] = []
        if self.source_file is not None:
            name = os.path.basename(self.source_file) if basename_only else self.source_file
            parts.append(f"{name}:{self.line_number}" if self.line_number is not None else name)
        if self.function:
            parts.append(self.function)
        return " ".join(parts)


@dataclass(frozen=True)
class LogEvent:
    """One log call: tier, optional call site, format and its arguments."""

    tier: Tier
    fmt: str
    args: tuple[Any, ...] = ()
    site: CallSite = field(default_factory=CallSite)

    def message(self) -> str:
        """Format the message the way the logging module does: only when args are given."""
        if not self.args:
            return str(self.fmt)
        args = tuple(a.resolve() if isinstance(a, Lazy) else a for a in self.args)
        # a lone mapping feeds %(name)s placeholders, as in logging.LogRecord
        if len(args) == 1 and isinstance(args[0], dict) and args[0]:
            values: Any = args[0]
        else:
            values = args
        try:
            return str(self.fmt) % values
        except (TypeError, ValueError, KeyError) as e:
            raise FormatMismatchError(f"format {self.fmt!r} does not match arguments {args!r}: {e}") from e

    def render(self, basename_only: bool = False) -> str:
        """[marker ][file:line ][function ]message"""
        head = [p for p in (self.tier.marker, self.site.render(basename_only)) if p]
        head.append(self.message())
        return " ".join(head)
