"""Delivery – FileFallbackSink, the last-resort newline-delimited JSON file."""
from __future__ import annotations

import asyncio
import os
import threading
from pathlib import Path

from mp_logship.kernel.errors import LocalPersistenceError
from mp_logship.observability.logging import get_logger
from mp_logship.records import LogRecord

logger = get_logger(__name__)

DEFAULT_FALLBACK_FILENAME = "fallback-logs.json"

_path_locks: dict[Path, threading.Lock] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    """Return the lock shared by every sink appending to *path*."""
    key = path.absolute()
    with _path_locks_guard:
        return _path_locks.setdefault(key, threading.Lock())


class FileFallbackSink:
    """Appends one JSON line per record to ``<directory>/<filename>``.

    The directory is created on demand. Each record is written with a single
    ``write`` on a file opened in append mode while holding a per-path lock,
    so lines from concurrent callers in this process never interleave, even
    across sink instances; other processes rely on ``O_APPEND`` semantics for
    single writes.

    Parameters
    ----------
    directory:
        Directory holding the fallback file.
    filename:
        Name of the fallback file inside *directory*.
    fsync:
        When ``True`` each append is flushed to stable storage.
    """

    def __init__(
        self,
        directory: str | os.PathLike[str],
        filename: str = DEFAULT_FALLBACK_FILENAME,
        fsync: bool = True,
    ) -> None:
        self._directory = Path(directory)
        self._path = self._directory / filename
        self._fsync = fsync
        self._lock = _lock_for(self._path)

    @property
    def path(self) -> Path:
        return self._path

    async def save(self, record: LogRecord) -> None:
        await asyncio.to_thread(self._append, record)

    def _append(self, record: LogRecord) -> None:
        with self._lock:
            try:
                data = (record.to_json() + "\n").encode("utf-8")
                self._directory.mkdir(parents=True, exist_ok=True)
                with open(self._path, "ab") as fh:
                    fh.write(data)
                    fh.flush()
                    if self._fsync:
                        os.fsync(fh.fileno())
            except (OSError, ValueError, RecursionError) as exc:
                logger.error("local.append_failed", path=str(self._path), error=repr(exc))
                raise LocalPersistenceError(str(self._path), cause=exc) from exc


__all__ = ["DEFAULT_FALLBACK_FILENAME", "FileFallbackSink"]
