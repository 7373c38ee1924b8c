"""A mutex that lets a waiting thread in before the holder can re-lock."""

from __future__ import annotations

import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Guard(Generic[T]):
    """A held lock; releasing it (or leaving its ``with`` block) unlocks."""

    def __init__(self, lock: threading.Lock, value: T) -> None:
        self._lock = lock
        self._value = value
        self._held = True

    @property
    def value(self) -> T:
        if not self._held:
            raise RuntimeError("guard already released")
        return self._value

    def release(self) -> None:
        if not self._held:
            raise RuntimeError("guard already released")
        self._held = False
        self._lock.release()

    def __enter__(self) -> T:
        return self.value

    def __exit__(self, *exc_info) -> None:
        if self._held:
            self.release()


class FairMutex(Generic[T]):
    """A fair mutex.

    An extra lock makes sure that a waiting thread gets the lock before a
    single thread can take it again.
    """

    def __init__(self, data: T) -> None:
        self._data = data
        self._data_lock = threading.Lock()
        self._next = threading.Lock()

    def lease(self) -> Guard[None]:
        """Reserve the next lock, blocking if someone else holds a lease."""
        self._next.acquire()
        return Guard(self._next, None)

    def lock(self) -> Guard[T]:
        """Lock the mutex fairly."""
        with self._next:
            self._data_lock.acquire()
        return Guard(self._data_lock, self._data)

    def lock_unfair(self) -> Guard[T]:
        """Lock the mutex without waiting for a lease."""
        self._data_lock.acquire()
        return Guard(self._data_lock, self._data)

    def try_lock_unfair(self) -> Optional[Guard[T]]:
        """Lock without blocking; ``None`` if the mutex is held."""
        if not self._data_lock.acquire(blocking=False):
            return None
        return Guard(self._data_lock, self._data)