"""Values paired with a mutex or a reader-writer lock."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Guarded(Generic[T]):
    """A value protected by a mutex.

    ``load`` and ``store`` take the lock themselves. Inside ``locked()`` the
    lock is held and ``value`` may be read and written directly.
    """

    def __init__(self, value: Optional[T] = None) -> None:
        self.value = value
        self._lock = threading.Lock()

    def load(self) -> Optional[T]:
        """Read the value under the lock."""
        with self._lock:
            return self.value

    def store(self, value: T) -> None:
        """Replace the value under the lock."""
        with self._lock:
            self.value = value

    @contextmanager
    def locked(self) -> Iterator["Guarded[T]"]:
        """Hold the lock for the duration of the block."""
        with self._lock:
            yield self


class _RWLock:
    """Reader-writer lock; a waiting writer keeps new readers out."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()


class RWGuarded(Generic[T]):
    """A value protected by a reader-writer lock.

    Many readers may hold ``read_locked()`` at once; ``write_locked()`` and
    ``store`` are exclusive.
    """

    def __init__(self, value: Optional[T] = None) -> None:
        self.value = value
        self._lock = _RWLock()

    def load(self) -> Optional[T]:
        """Read the value under a shared lock."""
        with self.read_locked():
            return self.value

    def store(self, value: T) -> None:
        """Replace the value under the exclusive lock."""
        with self.write_locked():
            self.value = value

    @contextmanager
    def read_locked(self) -> Iterator["RWGuarded[T]"]:
        """Hold a shared lock for the duration of the block."""
        self._lock.acquire_read()
        try:
            yield self
        finally:
            self._lock.release_read()

    @contextmanager
    def write_locked(self) -> Iterator["RWGuarded[T]"]:
        """Hold the exclusive lock for the duration of the block."""
        self._lock.acquire_write()
        try:
            yield self
        finally:
            self._lock.release_write()