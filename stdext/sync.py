"""Thread-safe wrappers: a mutex and a reader-writer lock around a value."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class LockGuard(Generic[T]):
    """Access to a locked value; releases the lock on context exit or release()."""

    def __init__(
        self, owner: Any, release: Callable[[], None], writable: bool
    ) -> None:
        self._owner = owner
        self._release = release
        self._writable = writable
        self._held = True

    @property
    def value(self) -> T:
        self._check_held()
        return self._owner._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._check_held()
        if not self._writable:
            raise AttributeError("read guard does not allow assignment")
        self._owner._value = new_value

    def release(self) -> None:
        self._check_held()
        self._held = False
        self._release()

    def _check_held(self) -> None:
        if not self._held:
            raise RuntimeError("lock guard already released")

    def __enter__(self) -> "LockGuard[T]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._held:
            self.release()


class Mutex(Generic[T]):
    """A value guarded by a lock that one thread holds at a time."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.Lock()

    def lock(self) -> LockGuard[T]:
        """Block until the lock is acquired and return a guard."""
        self._lock.acquire()
        return LockGuard(self, self._lock.release, writable=True)


class RwLock(Generic[T]):
    """A value readable by many threads at once or writable by one."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False

    def read(self) -> LockGuard[T]:
        """Block until no writer holds the lock and return a read guard."""
        with self._cond:
            self._cond.wait_for(lambda: not self._writer)
            self._readers += 1
        return LockGuard(self, self._release_read, writable=False)

    def write(self) -> LockGuard[T]:
        """Block until the lock is free and return a write guard."""
        with self._cond:
            self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            self._writer = True
        return LockGuard(self, self._release_write, writable=True)

    def _release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            self._cond.notify_all()

    def _release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()


def mutex(value: T) -> Mutex[T]:
    """Wrap a value in a Mutex."""
    return Mutex(value)


def rw_lock(value: T) -> RwLock[T]:
    """Wrap a value in an RwLock."""
    return RwLock(value)