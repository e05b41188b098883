"""
Unit tests for ConsoleLog tiers and gating.
Uses a fake IOutputStream so only the rendered message content is checked.
"""

from __future__ import annotations

import pytest

from aslog.console_log import ConsoleLog
from core.exceptions import FormatMismatchError, PathInvalidError
from core.interfaces import IOutputStream
from core.models import Tier, lazy
from utils.config import LogConfig


# ---------------------------------------------------------------------------
# Fake implementations (test doubles)
# ---------------------------------------------------------------------------


class FakeOutputStream(IOutputStream):
    """Records emitted lines and redirect calls; never touches a real stream."""

    def __init__(self, fail_paths: tuple[str, ...] = ()) -> None:
        self.lines: list[tuple[Tier, str]] = []
        self.fail_paths = fail_paths
        self._path: str | None = None
        self.closed = False

    def emit(self, line: str, tier: Tier) -> None:
        self.lines.append((tier, line))

    def redirect_to(self, path: str) -> None:
        if path in self.fail_paths:
            raise PathInvalidError(f"cannot open {path}", path=path)
        self._path = path

    def restore_default(self) -> None:
        self._path = None

    def close(self) -> None:
        self.closed = True
        super().close()

    @property
    def active_path(self) -> str | None:
        return self._path

    @property
    def texts(self) -> list[str]:
        return [line for _, line in self.lines]


def _make(enabled: bool = True, **config: object) -> tuple[ConsoleLog, FakeOutputStream]:
    out = FakeOutputStream()
    return ConsoleLog(LogConfig(**config), output=out, enabled=enabled), out


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def test_plain_has_no_annotation() -> None:
    log, out = _make()
    log.debug_log("count=%d name=%s", 3, "x")
    log.log("plain %s", "normal")
    assert out.texts == ["count=3 name=x", "plain normal"]


def test_with_location_contains_file_and_line_verbatim() -> None:
    log, out = _make()
    log.debug_log_at("src/app/module.py", 42, "hello %s", "world")
    log.log_at("/abs/path/other.py", 7, "value %.2f", 1.5)
    assert out.texts == [
        "src/app/module.py:42 hello world",
        "/abs/path/other.py:7 value 1.50",
    ]


def test_with_location_and_function_order() -> None:
    log, out = _make()
    log.debug_log_in("a.py", 1, "Widget.draw", "x=%r", 5)
    log.log_in("b.py", 2, "main", "done")
    assert out.texts == ["a.py:1 Widget.draw x=5", "b.py:2 main done"]


def test_warning_marker_on_every_variant() -> None:
    log, out = _make(enabled=False)
    log.warn("disk %d%% full", 91)
    log.warn_at("c.py", 10, "slow")
    log.warn_in("c.py", 11, "run", "slower")
    assert out.texts == [
        "WARNING disk 91% full",
        "WARNING c.py:10 slow",
        "WARNING c.py:11 run slower",
    ]
    assert all(tier is Tier.WARNING for tier, _ in out.lines)


def test_no_args_leaves_percent_alone() -> None:
    log, out = _make()
    log.log("100% literal")
    assert out.texts == ["100% literal"]


def test_no_args_keeps_doubled_percent() -> None:
    # the %-pass only runs when arguments are given, as in the logging module
    log, out = _make()
    log.log("50%% done")
    log.log("50%% of %d", 8)
    assert out.texts == ["50%% done", "50% of 8"]


def test_mapping_argument() -> None:
    log, out = _make()
    log.log("%(user)s logged in", {"user": "ann"})
    assert out.texts == ["ann logged in"]


def test_basename_only_strips_directories() -> None:
    log, out = _make(basename_only=True)
    log.warn_at("/home/dev/project/pkg/mod.py", 3, "x")
    assert out.texts == ["WARNING mod.py:3 x"]


def test_format_mismatch_raises_and_emits_nothing() -> None:
    log, out = _make()
    with pytest.raises(FormatMismatchError):
        log.log("%d items", "not-a-number")
    with pytest.raises(FormatMismatchError):
        log.warn("%s and %s", "one")
    assert out.lines == []


# ---------------------------------------------------------------------------
# Debug gating
# ---------------------------------------------------------------------------


def test_disabled_debug_does_no_work() -> None:
    log, out = _make(enabled=False)
    counter = {"n": 0}

    def bump() -> int:
        counter["n"] += 1
        return counter["n"]

    for _ in range(100):
        log.debug_log("%d", lazy(bump))
        log.debug_log_at("f.py", 1, "%d", lazy(bump))
        log.debug_log_in("f.py", 1, "fn", "%d", lazy(bump))
    assert counter["n"] == 0
    assert out.lines == []


def test_disabled_debug_skips_format_check() -> None:
    log, out = _make(enabled=False)
    log.debug_log("%d", "never formatted")
    assert out.lines == []


def test_enable_flag_last_write_wins() -> None:
    log, out = _make(enabled=False)
    log.set_logging_enabled(True)
    log.debug_log("first")
    log.set_logging_enabled(False)
    log.debug_log("second")
    log.debug_log_on()
    log.debug_log_on()
    log.debug_log("third")
    log.debug_log_off()
    log.debug_log("fourth")
    assert out.texts == ["first", "third"]


def test_normal_and_warning_ignore_enable_flag() -> None:
    log, out = _make(enabled=False)
    log.log_at("x.py", 1, "normal")
    log.warn("warned")
    assert out.texts == ["x.py:1 normal", "WARNING warned"]


def test_lazy_argument_resolved_when_enabled() -> None:
    log, out = _make()
    log.debug_log("value=%s", lazy(lambda: "computed"))
    assert out.texts == ["value=computed"]


def test_enabled_default_from_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEBUG_LOGGING_ENABLED", raising=False)
    monkeypatch.delenv("NSDebugEnabled", raising=False)
    assert not ConsoleLog(LogConfig(), output=FakeOutputStream()).logging_enabled
    assert ConsoleLog(LogConfig(debug_log_auto_enable=True), output=FakeOutputStream()).logging_enabled
    monkeypatch.setenv("DEBUG_LOGGING_ENABLED", "YES")
    assert ConsoleLog(LogConfig(), output=FakeOutputStream()).logging_enabled


# ---------------------------------------------------------------------------
# Control passthrough
# ---------------------------------------------------------------------------


def test_log_file_in_config_redirects_at_start() -> None:
    out = FakeOutputStream()
    log = ConsoleLog(LogConfig(log_file="/var/tmp/app.log"), output=out, enabled=False)
    assert log.active_path == "/var/tmp/app.log"
    assert log.is_redirected
    log.restore_default_stream()
    log.restore_default_stream()
    assert not log.is_redirected


def test_failed_redirect_keeps_destination() -> None:
    out = FakeOutputStream(fail_paths=("/root/forbidden",))
    log = ConsoleLog(LogConfig(), output=out, enabled=False)
    log.redirect_to("/tmp/a.log")
    with pytest.raises(PathInvalidError):
        log.redirect_to("/root/forbidden")
    assert log.active_path == "/tmp/a.log"


def test_unopenable_log_file_closes_output() -> None:
    out = FakeOutputStream(fail_paths=("/missing/dir/app.log",))
    with pytest.raises(PathInvalidError):
        ConsoleLog(LogConfig(log_file="/missing/dir/app.log"), output=out, enabled=False)
    assert out.closed
    assert out.active_path is None
