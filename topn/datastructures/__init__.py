from .heap import MinPriorityQueue

__all__ = [
    "MinPriorityQueue",
]
