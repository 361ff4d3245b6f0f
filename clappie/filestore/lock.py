"""Exclusive advisory locks on a companion ``.lock`` file."""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import TracebackType

if os.name == "nt":
    import msvcrt

    def _lock_fd(fd: int) -> None:
        os.lseek(fd, 0, os.SEEK_SET)
        while True:
            try:
                msvcrt.locking(fd, msvcrt.LK_LOCK, 1)
                return
            except OSError:
                continue

    def _try_lock_fd(fd: int) -> bool:
        os.lseek(fd, 0, os.SEEK_SET)
        try:
            msvcrt.locking(fd, msvcrt.LK_NBLCK, 1)
        except OSError:
            return False
        return True

    def _unlock_fd(fd: int) -> None:
        os.lseek(fd, 0, os.SEEK_SET)
        try:
            msvcrt.locking(fd, msvcrt.LK_UNLCK, 1)
        except OSError:
            pass

else:
    import fcntl

    def _lock_fd(fd: int) -> None:
        fcntl.flock(fd, fcntl.LOCK_EX)

    def _try_lock_fd(fd: int) -> bool:
        try:
            fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        except OSError:
            return False
        return True

    def _unlock_fd(fd: int) -> None:
        fcntl.flock(fd, fcntl.LOCK_UN)


_POLL_INTERVAL = 0.01


class LockTimeout(TimeoutError):
    """Raised when a lock cannot be acquired in time."""


class FileLock:
    """An exclusive lock on ``<path>.lock``, shared across threads and processes.

    Usable as a context manager, which blocks until the lock is held.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path) + ".lock"
        self._mutex = threading.Lock()
        self._fd: int | None = None

    def _open(self) -> int:
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        return os.open(self.path, os.O_CREAT | os.O_RDWR, 0o600)

    def lock(self) -> None:
        """Acquire the lock, waiting as long as it takes."""
        self._mutex.acquire()
        try:
            fd = self._open()
            try:
                _lock_fd(fd)
            except BaseException:
                os.close(fd)
                raise
        except BaseException:
            self._mutex.release()
            raise
        self._fd = fd

    def try_lock(self) -> bool:
        """Acquire the lock if it is free right now; return whether it was."""
        if not self._mutex.acquire(blocking=False):
            return False
        try:
            fd = self._open()
        except BaseException:
            self._mutex.release()
            raise
        if not _try_lock_fd(fd):
            os.close(fd)
            self._mutex.release()
            return False
        self._fd = fd
        return True

    def unlock(self) -> None:
        """Release the lock and remove the lock file."""
        if not self._mutex.locked():
            raise RuntimeError("lock is not held")
        fd, self._fd = self._fd, None
        try:
            if fd is not None:
                _unlock_fd(fd)
                os.close(fd)
                try:
                    os.remove(self.path)
                except OSError:
                    pass
        finally:
            self._mutex.release()

    @contextmanager
    def with_timeout(self, timeout: float) -> Iterator[FileLock]:
        """Hold the lock for the block, giving up after ``timeout`` seconds."""
        deadline = time.monotonic() + timeout
        while not self.try_lock():
            if time.monotonic() > deadline:
                raise LockTimeout(f"lock timeout after {timeout}s")
            time.sleep(_POLL_INTERVAL)
        try:
            yield self
        finally:
            self.unlock()

    def __enter__(self) -> FileLock:
        self.lock()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unlock()