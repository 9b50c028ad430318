"""Multiple-reader / single-writer lock.

Readers share the lock with each other; a writer holds it alone. Once a
writer is waiting, new readers queue behind it so writes are not starved
by a steady stream of reads.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class ReadWriteLock:
    """Reader/writer lock built on threading.Condition.

    Not reentrant: a thread holding the write lock must not acquire it (or
    the read lock) again.

    Example:
        lock = ReadWriteLock()
        with lock.shared():
            value = data.get(key)
        with lock.exclusive():
            data[key] = value
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_shared(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_shared(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_shared() called without a reader")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_exclusive(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            except BaseException:
                # Readers parked behind this writer must be able to proceed
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer = True

    def release_exclusive(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_exclusive() called without a writer")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def shared(self) -> Iterator[None]:
        """Hold the lock in shared (read) mode for the block."""
        self.acquire_shared()
        try:
            yield
        finally:
            self.release_shared()

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        """Hold the lock in exclusive (write) mode for the block."""
        self.acquire_exclusive()
        try:
            yield
        finally:
            self.release_exclusive()
