"""Enhanced console logging: debug/normal/warning tiers, call-site annotation, file redirection."""

from aslog.console_log import ConsoleLog, default_log, set_default_log
from aslog.macros import (
    DEBUG_LOGGING_BUILT,
    dnslog,
    dlog,
    dfnlog,
    dlog_on,
    dlog_off,
    fllog,
    fnlog,
    nswarn,
    warn,
    fnwarn,
)
from core.models import lazy

__all__ = [
    "ConsoleLog",
    "default_log",
    "set_default_log",
    "DEBUG_LOGGING_BUILT",
    "dnslog",
    "dlog",
    "dfnlog",
    "dlog_on",
    "dlog_off",
    "fllog",
    "fnlog",
    "nswarn",
    "warn",
    "fnwarn",
    "lazy",
]
