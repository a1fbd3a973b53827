"""Value wrappers: shared holders and cells with interior mutability."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class BorrowError(RuntimeError):
    """Raised when a RefCell borrow conflicts with an active one."""


@dataclass(frozen=True)
class Shared(Generic[T]):
    """An immutable holder for a value; equality compares the held values."""

    value: T


def arc(value: T) -> Shared[T]:
    """Wrap a value in a shared holder."""
    return Shared(value)


def rc(value: T) -> Shared[T]:
    """Wrap a value in a shared holder."""
    return Shared(value)


def boxed(value: T) -> Shared[T]:
    """Wrap a value in a holder."""
    return Shared(value)


class Cell(Generic[T]):
    """A mutable slot whose value is read and written whole."""

    def __init__(self, value: T) -> None:
        self._value = value

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value

    def replace(self, value: T) -> T:
        """Store a new value and return the previous one."""
        old, self._value = self._value, value
        return old

    def __repr__(self) -> str:
        return f"Cell({self._value!r})"


class _Borrow(Generic[T]):
    """An active borrow of a RefCell, released on context exit or release()."""

    def __init__(self, owner: "RefCell[T]", mutable: bool) -> None:
        self._owner = owner
        self._mutable = mutable
        self._active = True

    @property
    def value(self) -> T:
        self._check_active()
        return self._owner._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._check_active()
        if not self._mutable:
            raise BorrowError("cannot assign through a shared borrow")
        self._owner._value = new_value

    def release(self) -> None:
        self._check_active()
        self._active = False
        if self._mutable:
            self._owner._writing = False
        else:
            self._owner._readers -= 1

    def _check_active(self) -> None:
        if not self._active:
            raise BorrowError("borrow already released")

    def __enter__(self) -> "_Borrow[T]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._active:
            self.release()


class RefCell(Generic[T]):
    """A mutable slot with run-time checked shared and exclusive borrows."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._readers = 0
        self._writing = False

    def borrow(self) -> _Borrow[T]:
        """Start a shared borrow; fails while an exclusive one is active."""
        if self._writing:
            raise BorrowError("already mutably borrowed")
        self._readers += 1
        return _Borrow(self, mutable=False)

    def borrow_mut(self) -> _Borrow[T]:
        """Start an exclusive borrow; fails while any borrow is active."""
        if self._writing or self._readers:
            raise BorrowError("already borrowed")
        self._writing = True
        return _Borrow(self, mutable=True)

    def replace(self, value: T) -> T:
        """Store a new value and return the previous one."""
        if self._writing or self._readers:
            raise BorrowError("already borrowed")
        old, self._value = self._value, value
        return old

    def __repr__(self) -> str:
        return f"RefCell({self._value!r})"


def cell(value: T) -> Cell[T]:
    """Wrap a value in a Cell."""
    return Cell(value)


def refcell(value: T) -> RefCell[T]:
    """Wrap a value in a RefCell."""
    return RefCell(value)