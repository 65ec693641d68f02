"""
Search primitives.

Provides the building blocks the tour solvers are made of:
- SearchNode: A partial tour with its accumulated cost
- PriorityQueue: Binary min-heap with a pluggable key
- FifoQueue: First-in first-out frontier
- EmptyQueueError: Raised when removing from an empty frontier
"""

from tsp_search.search.frontier import EmptyQueueError, FifoQueue, PriorityQueue
from tsp_search.search.node import SearchNode

__all__ = [
    "SearchNode",
    "PriorityQueue",
    "FifoQueue",
    "EmptyQueueError",
]
