"""Bounded-memory selection of the N largest distinct integers in a file."""

from .datastructures import MinPriorityQueue
from .selector import TopNSelector, top_n

__all__ = [
    "MinPriorityQueue",
    "TopNSelector",
    "top_n",
]

__version__ = "1.0.0"
