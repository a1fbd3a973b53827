"""Concise constructors for the common container types."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Any, Generic, Iterable, Iterator, TypeVar

from sortedcontainers import SortedDict, SortedSet

T = TypeVar("T")


class _MaxItem(Generic[T]):
    """Wrapper that reverses ordering so heapq behaves as a max-heap."""

    __slots__ = ("item",)

    def __init__(self, item: T) -> None:
        self.item = item

    def __lt__(self, other: "_MaxItem[T]") -> bool:
        return other.item < self.item


class BinaryHeap(Generic[T]):
    """A max-heap: the greatest item is always popped first."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._heap = [_MaxItem(item) for item in items]
        heapq.heapify(self._heap)

    def push(self, item: T) -> None:
        """Add an item to the heap."""
        heapq.heappush(self._heap, _MaxItem(item))

    def pop(self) -> T:
        """Remove and return the greatest item."""
        if not self._heap:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._heap).item

    def peek(self) -> T:
        """Return the greatest item without removing it."""
        if not self._heap:
            raise IndexError("peek into an empty heap")
        return self._heap[0].item

    def into_sorted_vec(self) -> list[T]:
        """Return the items as a list in ascending order."""
        return sorted(entry.item for entry in self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[T]:
        return (entry.item for entry in self._heap)

    def __repr__(self) -> str:
        return f"BinaryHeap({self.into_sorted_vec()!r})"


def hash_map(*args: tuple[Any, Any]) -> dict:
    """Build a dict from ``(key, value)`` pairs; later keys overwrite earlier ones."""
    result: dict = {}
    for key, value in args:
        result[key] = value
    return result


def b_tree_map(*args: tuple[Any, Any]) -> SortedDict:
    """Build a key-ordered map from ``(key, value)`` pairs."""
    result = SortedDict()
    for key, value in args:
        result[key] = value
    return result


def hash_set(*args: Any) -> set:
    """Build a set from the given elements."""
    return set(args)


def b_tree_set(*args: Any) -> SortedSet:
    """Build an ordered set from the given elements."""
    return SortedSet(args)


def binary_heap(*args: Any) -> BinaryHeap:
    """Build a max-heap from the given elements."""
    return BinaryHeap(args)


def linked_list(*args: Any) -> deque:
    """Build a double-ended list, appending elements to the back in order."""
    return deque(args)


def vector(*args: Any) -> list:
    """Build a list from the given elements."""
    return list(args)


def vector_deque(*args: Any) -> deque:
    """Build a double-ended queue from the given elements."""
    return deque(args)


def string(value: Any = "") -> str:
    """Build a string, empty when no value is given."""
    return str(value)