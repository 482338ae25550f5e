"""
Streaming top-N selection.

Each offered value is inserted into a deduplicated min-priority-queue; when
the queue grows past the limit the current minimum is evicted right away.
Memory stays proportional to the limit, not to the length of the stream.
"""

from __future__ import annotations

from typing import Iterable, List

from .datastructures import MinPriorityQueue
from .logger import logger


class TopNSelector:
    """Keep the ``limit`` largest distinct values seen so far."""

    __slots__ = ("limit", "offered", "evicted", "_queue")

    def __init__(self, limit: int) -> None:
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ValueError(f"Invalid maximum size {limit!r}.")
        if limit <= 0:
            raise ValueError("Maximum size must be greater than zero.")
        self.limit = limit
        self.offered = 0
        self.evicted = 0
        self._queue: MinPriorityQueue[int] = MinPriorityQueue()

    def offer(self, value: int) -> None:
        """Insert value, then evict the minimum if the queue is over the limit."""
        self.offered += 1
        self._queue.insert(value)
        # A value below the current minimum is admitted and evicted straight away
        if self._queue.count() > self.limit:
            self._queue.delete_min()
            self.evicted += 1

    def offer_all(self, values: Iterable[int]) -> "TopNSelector":
        for value in values:
            self.offer(value)
        return self

    def __len__(self) -> int:
        return self._queue.count()

    @property
    def queue(self) -> MinPriorityQueue[int]:
        return self._queue

    def drain(self) -> List[int]:
        """Empty the queue, returning the retained values in ascending order."""
        ascending = []
        while not self._queue.is_empty():
            ascending.append(self._queue.delete_min())
        logger().debug(f"Drained {len(ascending)} values (offered={self.offered}, evicted={self.evicted})")
        return ascending

    def largest(self) -> List[int]:
        """Empty the queue, returning the retained values largest first."""
        return self.drain()[::-1]


def top_n(values: Iterable[int], limit: int) -> List[int]:
    """Return the ``limit`` largest distinct values in descending order."""
    return TopNSelector(limit).offer_all(values).largest()
