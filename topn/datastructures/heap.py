from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, Optional, Set, TypeVar

T = TypeVar("T")


class MinPriorityQueue(Generic[T]):
    """A binary min-heap that holds each value at most once.

    The heap lives in a 1-indexed arena: slot 0 is unused, so the parent of
    slot ``i`` is ``i // 2`` and its children are ``2 * i`` and ``2 * i + 1``.
    A companion set mirrors the stored values for O(1) duplicate checks.
    """

    __slots__ = ("_data", "_members", "_size")

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._data: List[Optional[T]] = [None]
        self._members: Set[T] = set()
        self._size: int = 0  # also the index of the last populated slot
        if it:
            for value in it:
                self.insert(value)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _less(self, i: int, j: int) -> bool:
        return self._data[i] < self._data[j]

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]

    def _sift_up(self, idx: int) -> None:
        while idx > 1 and self._less(idx, idx // 2):
            self._swap(idx, idx // 2)
            idx //= 2

    def _sift_down(self, idx: int) -> None:
        n = self._size
        while 2 * idx <= n:
            child = 2 * idx
            if child < n and self._less(child + 1, child):
                child += 1
            if not self._less(child, idx):
                break
            self._swap(idx, child)
            idx = child

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, value: T) -> None:
        """Add value unless it is already stored (O(log n))."""
        if value in self._members:
            return
        self._data.append(value)
        self._size += 1
        self._members.add(value)
        self._sift_up(self._size)

    def delete_min(self) -> Optional[T]:
        """Remove and return the smallest value, or ``None`` when empty (O(log n))."""
        if self.is_empty():
            return None
        top = self._data[1]
        self._swap(1, self._size)
        self._data.pop()
        self._size -= 1
        self._sift_down(1)
        self._members.discard(top)
        return top

    def peek(self) -> Optional[T]:
        """Return the smallest value without removing it (O(1))."""
        return self._data[1] if self._size else None

    def is_empty(self) -> bool:
        return self._size == 0

    def count(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __iter__(self) -> Iterator[T]:
        # Arena order, not sorted order
        return iter(self._data[1:self._size + 1])

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"MinPriorityQueue({self._data[1:self._size + 1]!r})"
