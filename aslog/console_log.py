"""
ConsoleLog: tiered logging with call-site annotation and a redirectable destination.

Three tiers share one render + emit path:
  - debug:   gated by the runtime enable flag; no work at all when off
  - normal:  always emitted
  - warning: always emitted, prefixed with "WARNING"
Each tier has a plain, a file+line and a file+line+function variant.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from core.exceptions import RedirectError
from core.interfaces import IOutputStream
from core.models import CallSite, LogEvent, Tier
from services.output_stream import OutputStreamService
from utils.config import LogConfig, load_config

logger = logging.getLogger(__name__)


class ConsoleLog:
    """Explicit logging context. aslog.default_log() holds the process-wide one."""

    def __init__(
        self,
        config: LogConfig | None = None,
        output: IOutputStream | None = None,
        enabled: bool | None = None,
    ) -> None:
        self.config = config or load_config()
        self.output = output or OutputStreamService(self.config)
        self._flag_lock = threading.Lock()
        self._enabled = self.config.debug_enabled_at_start() if enabled is None else bool(enabled)
        if self.config.log_file:
            try:
                self.output.redirect_to(self.config.log_file)
            except RedirectError:
                self.output.close()
                raise

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    @property
    def logging_enabled(self) -> bool:
        return self._enabled

    def set_logging_enabled(self, on: bool) -> None:
        """Enable/disable the debug tier. Last write wins."""
        with self._flag_lock:
            self._enabled = bool(on)

    def debug_log_on(self) -> None:
        self.set_logging_enabled(True)

    def debug_log_off(self) -> None:
        self.set_logging_enabled(False)

    def redirect_to(self, file_path: str) -> None:
        """Send all tiers to file_path (append). Raises RedirectError and keeps the old destination on failure."""
        self.output.redirect_to(file_path)

    def restore_default_stream(self) -> None:
        self.output.restore_default()

    @property
    def active_path(self) -> str | None:
        return self.output.active_path

    @property
    def is_redirected(self) -> bool:
        return self.output.active_path is not None

    def close(self) -> None:
        self.output.close()

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def emit(self, tier: Tier, site: CallSite, fmt: str, args: tuple[Any, ...]) -> None:
        """Render and write one event. Debug tier returns before any formatting when disabled."""
        if tier.gated and not self._enabled:
            return
        event = LogEvent(tier=tier, fmt=fmt, args=args, site=site)
        self.output.emit(event.render(basename_only=self.config.basename_only), tier)

    # debug tier

    def debug_log(self, fmt: str, *args: Any) -> None:
        if self._enabled:
            self.emit(Tier.DEBUG, CallSite(), fmt, args)

    def debug_log_at(self, source_file: str, line_number: int, fmt: str, *args: Any) -> None:
        if self._enabled:
            self.emit(Tier.DEBUG, CallSite(source_file, line_number), fmt, args)

    def debug_log_in(self, source_file: str, line_number: int, function: str, fmt: str, *args: Any) -> None:
        if self._enabled:
            self.emit(Tier.DEBUG, CallSite(source_file, line_number, function), fmt, args)

    # normal tier

    def log(self, fmt: str, *args: Any) -> None:
        self.emit(Tier.NORMAL, CallSite(), fmt, args)

    def log_at(self, source_file: str, line_number: int, fmt: str, *args: Any) -> None:
        self.emit(Tier.NORMAL, CallSite(source_file, line_number), fmt, args)

    def log_in(self, source_file: str, line_number: int, function: str, fmt: str, *args: Any) -> None:
        self.emit(Tier.NORMAL, CallSite(source_file, line_number, function), fmt, args)

    # warning tier

    def warn(self, fmt: str, *args: Any) -> None:
        self.emit(Tier.WARNING, CallSite(), fmt, args)

    def warn_at(self, source_file: str, line_number: int, fmt: str, *args: Any) -> None:
        self.emit(Tier.WARNING, CallSite(source_file, line_number), fmt, args)

    def warn_in(self, source_file: str, line_number: int, function: str, fmt: str, *args: Any) -> None:
        self.emit(Tier.WARNING, CallSite(source_file, line_number, function), fmt, args)


_default: ConsoleLog | None = None
_default_lock = threading.Lock()


def default_log() -> ConsoleLog:
    """Process-wide ConsoleLog, built from load_config() on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = ConsoleLog()
                logger.debug("Default ConsoleLog created (debug tier %s)", "on" if _default.logging_enabled else "off")
    return _default


def set_default_log(log: ConsoleLog | None) -> ConsoleLog | None:
    """Replace the process-wide ConsoleLog (tests, embedding). Returns the previous one."""
    global _default
    with _default_lock:
        previous, _default = _default, log
    return previous
