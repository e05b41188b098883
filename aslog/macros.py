"""
Call-site capturing shortcuts over the process-wide ConsoleLog.

Debug shortcuts (dnslog, dlog, dfnlog, dlog_on, dlog_off) are bound at import:
real functions when debug logging is built in, a no-op otherwise. "Built in"
means the interpreter runs without -O (__debug__) and BUILD_WITH_DEBUG_LOGGING
is not switched off (in the environment or a .env file in the working
directory). Python evaluates call arguments before the call, so wrap
expensive or side-effecting arguments in lazy(), or guard the call with
`if __debug__:` which the compiler drops under -O.

Normal (fllog, fnlog) and warning (nswarn, warn, fnwarn) shortcuts always work.
"""

from __future__ import annotations

import sys
from typing import Any

from aslog.console_log import default_log
from core.models import CallSite, Tier
from utils.config import load_config

DEBUG_LOGGING_BUILT: bool = __debug__ and load_config().build_with_debug_logging


def _site(with_function: bool) -> CallSite:
    # two frames up: past this helper and the shortcut itself
    frame = sys._getframe(2)
    code = frame.f_code
    return CallSite(code.co_filename, frame.f_lineno, code.co_qualname if with_function else None)


def _noop(*args: Any, **kwargs: Any) -> None:
    return None


def _dnslog(fmt: str, *args: Any) -> None:
    log = default_log()
    if log.logging_enabled:
        log.emit(Tier.DEBUG, CallSite(), fmt, args)


def _dlog(fmt: str, *args: Any) -> None:
    log = default_log()
    if log.logging_enabled:
        log.emit(Tier.DEBUG, _site(False), fmt, args)


def _dfnlog(fmt: str, *args: Any) -> None:
    log = default_log()
    if log.logging_enabled:
        log.emit(Tier.DEBUG, _site(True), fmt, args)


def _dlog_on() -> None:
    default_log().set_logging_enabled(True)


def _dlog_off() -> None:
    default_log().set_logging_enabled(False)


if DEBUG_LOGGING_BUILT:
    dnslog = _dnslog
    dlog = _dlog
    dfnlog = _dfnlog
    dlog_on = _dlog_on
    dlog_off = _dlog_off
else:
    dnslog = dlog = dfnlog = dlog_on = dlog_off = _noop


def fllog(fmt: str, *args: Any) -> None:
    """Log with the caller's file and line."""
    default_log().emit(Tier.NORMAL, _site(False), fmt, args)


def fnlog(fmt: str, *args: Any) -> None:
    """Log with the caller's file, line and function."""
    default_log().emit(Tier.NORMAL, _site(True), fmt, args)


def nswarn(fmt: str, *args: Any) -> None:
    default_log().emit(Tier.WARNING, CallSite(), fmt, args)


def warn(fmt: str, *args: Any) -> None:
    default_log().emit(Tier.WARNING, _site(False), fmt, args)


def fnwarn(fmt: str, *args: Any) -> None:
    default_log().emit(Tier.WARNING, _site(True), fmt, args)
