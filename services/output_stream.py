"""
Output stream service: implements IOutputStream on top of the logging module.
Each service owns its logger and ActiveStreamHandler; redirect swaps its stream under a lock.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import IO

from core.exceptions import PathInvalidError, PermissionDeniedError
from core.interfaces import IOutputStream
from core.models import Tier
from utils.config import LogConfig
from utils.logger import emit_line, setup_logging

logger = logging.getLogger(__name__)


def _open_for_append(path: str, encoding: str) -> IO[str]:
    """Open path in append mode. Never creates directories."""
    try:
        return open(path, "a", encoding=encoding)
    except PermissionError as e:
        raise PermissionDeniedError(f"Permission denied opening log file {path!r}: {e}", path=path) from e
    except (OSError, ValueError) as e:
        raise PathInvalidError(f"Cannot open log file {path!r}: {e}", path=path) from e


class OutputStreamService(IOutputStream):
    """Production destination: stderr by default, a single appended file when redirected."""

    def __init__(self, config: LogConfig, default_stream: IO[str] | None = None) -> None:
        self._config = config
        self._default_stream = default_stream
        self._lock = threading.Lock()
        self._file: IO[str] | None = None
        self._path: str | None = None
        self._logger, self._handler = setup_logging(config, stream=self.default_stream)

    @property
    def default_stream(self) -> IO[str]:
        """Explicit default if given, else whatever sys.stderr is right now."""
        return self._default_stream if self._default_stream is not None else sys.stderr

    @property
    def active_path(self) -> str | None:
        return self._path

    @property
    def is_redirected(self) -> bool:
        return self._file is not None

    def emit(self, line: str, tier: Tier) -> None:
        emit_line(self._logger, tier, line)

    def _swap(self, stream: IO[str]) -> None:
        if self._file is not None and self._file.closed:
            # setStream would flush the dead file first
            self._handler.acquire()
            try:
                self._handler.stream = stream
            finally:
                self._handler.release()
        else:
            # flushes and swaps under the handler lock
            self._handler.setStream(stream)

    def redirect_to(self, path: str) -> None:
        path = str(path)
        with self._lock:
            new_file = _open_for_append(path, self._config.encoding)
            self._swap(new_file)
            previous, self._file, self._path = self._file, new_file, path
            if previous is not None:
                previous.close()
        logger.debug("Log output redirected to %s", path)

    def restore_default(self) -> None:
        with self._lock:
            if self._file is None:
                return
            self._swap(self.default_stream)
            previous, self._file, self._path = self._file, None, None
            previous.close()
        logger.debug("Log output restored to stderr")

    def close(self) -> None:
        """Close any redirected file. Later lines still reach the default stream."""
        self.restore_default()
        self._handler.flush()
