"""Bounded FIFO queues and a double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueOverflow(Exception):
    """Raised when a value is added to a full queue."""


class QueueUnderflow(Exception):
    """Raised when a value is taken from an empty queue."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class CircularQueue:
    """A ring-buffer queue that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = 10) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear; raise QueueOverflow when full."""
        if len(self._items) == self.capacity:
            raise QueueOverflow("Queue Overflow")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front; raise QueueUnderflow when empty."""
        if not self._items:
            raise QueueUnderflow("Queue Underflow")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue({list(self._items)!r}, capacity={self.capacity})"


class LinearQueue:
    """A linear array queue whose slots are only reclaimed once it is empty.

    Every enqueue uses up one of ``capacity`` slots; dequeuing does not free
    a slot until the queue has been emptied completely.
    """

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()
        self._slots_used = 0

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear; raise QueueOverflow when no slot is left."""
        if self._slots_used == self.capacity:
            raise QueueOverflow("Queue is full. Cannot enqueue.")
        self._items.append(value)
        self._slots_used += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front; raise QueueUnderflow when empty."""
        if not self._items:
            raise QueueUnderflow("Queue is empty")
        value = self._items.popleft()
        if not self._items:
            self._slots_used = 0
        return value

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LinearQueue({list(self._items)!r}, capacity={self.capacity})"


class Deque:
    """A double-ended queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push_front(self, value: Any) -> None:
        """Insert a value before the current front."""
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        """Insert a value after the current rear."""
        self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the front value; raise QueueUnderflow when empty."""
        if not self._items:
            raise QueueUnderflow("Deque is empty")
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the rear value; raise QueueUnderflow when empty."""
        if not self._items:
            raise QueueUnderflow("Deque is empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"