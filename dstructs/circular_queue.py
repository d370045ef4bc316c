"""Bounded FIFO queue stored in a ring buffer, and a palindrome check."""

from __future__ import annotations

from typing import Any

from dstructs.stack import Stack


class QueueFullError(OverflowError):
    """Raised when enqueueing onto a queue that has reached its capacity."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing from an empty queue."""


class CircularQueue:
    """A first-in, first-out queue of fixed capacity backed by a ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._total = 0

    def _advance(self, index: int) -> int:
        return (index + 1) % self.capacity

    def is_empty(self) -> bool:
        return self._total == 0

    def is_full(self) -> bool:
        return self._total == self.capacity

    def enqueue(self, item: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[self._tail] = item
        self._tail = self._advance(self._tail)
        self._total += 1

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = self._advance(self._head)
        self._total -= 1
        return item

    def __len__(self) -> int:
        return self._total

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity}, size={self._total})"


def is_palindrome(text: str) -> bool:
    """Tell whether the letters of ``text`` read the same in both directions.

    Only alphabetic characters are compared; case is significant.
    """
    letters = [char for char in text if char.isalpha()]
    queue = CircularQueue(len(letters))
    stack = Stack(len(letters))
    for char in letters:
        queue.enqueue(char)
        stack.push(char)
    while not queue.is_empty():
        if queue.dequeue() != stack.pop():
            return False
    return True