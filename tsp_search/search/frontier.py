"""
Frontier containers for the tour solvers.

PriorityQueue is a binary min-heap over a Python list. Ordering comes from
a key function supplied by the caller, so the queue knows nothing about
tours. FifoQueue exposes the same surface over a deque for breadth-first
expansion.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised when removing from an empty frontier."""


class PriorityQueue(Generic[T]):
    """
    Binary min-heap ordered by key(item), smallest first.

    Keys are computed once on enqueue and stored next to the item. Items
    with equal keys come out in heap-structural order, which is not the
    insertion order.

    Example:
        queue = PriorityQueue(key=lambda node: node.priority)
        queue.enqueue(node)
        cheapest = queue.dequeue()
    """

    def __init__(self, key: Callable[[T], Any] | None = None) -> None:
        """
        Initialize an empty queue.

        Args:
            key: Maps an item to its ordering key. Items are compared
                directly when omitted.
        """
        self._key = key if key is not None else _identity
        self._heap: list[tuple[Any, T]] = []

    @property
    def size(self) -> int:
        """Number of items currently held."""
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def enqueue(self, item: T) -> None:
        """Add an item and sift it up to its place."""
        heap = self._heap
        heap.append((self._key(item), item))

        child = len(heap) - 1
        while child > 0:
            parent = (child - 1) // 2
            if not heap[child][0] < heap[parent][0]:
                break
            heap[child], heap[parent] = heap[parent], heap[child]
            child = parent

    def dequeue(self) -> T:
        """
        Remove and return the item with the smallest key.

        Raises:
            EmptyQueueError: If the queue holds no items
        """
        heap = self._heap
        if not heap:
            raise EmptyQueueError("dequeue from an empty priority queue")

        _, front = heap[0]
        last = heap.pop()
        if not heap:
            return front
        heap[0] = last

        last_index = len(heap) - 1
        parent = 0
        while True:
            child = parent * 2 + 1
            if child > last_index:
                break
            right = child + 1
            # Prefer the left child unless the right one is strictly smaller
            if right <= last_index and heap[right][0] < heap[child][0]:
                child = right
            if not heap[child][0] < heap[parent][0]:
                break
            heap[parent], heap[child] = heap[child], heap[parent]
            parent = child

        return front

    def peek(self) -> T:
        """Return the smallest item without removing it."""
        if not self._heap:
            raise EmptyQueueError("peek into an empty priority queue")
        return self._heap[0][1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={self.size})"


class FifoQueue(Generic[T]):
    """First-in first-out frontier with the PriorityQueue interface."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    @property
    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def dequeue(self) -> T:
        if not self._items:
            raise EmptyQueueError("dequeue from an empty FIFO queue")
        return self._items.popleft()

    def peek(self) -> T:
        if not self._items:
            raise EmptyQueueError("peek into an empty FIFO queue")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"FifoQueue(size={self.size})"


def _identity(item: Any) -> Any:
    return item
