"""Bounded LIFO stack and small utilities built on it."""

from __future__ import annotations

from typing import Any


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class StackEmptyError(IndexError):
    """Raised when reading or popping from an empty stack."""


class Stack:
    """A last-in, first-out container holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, item: Any) -> None:
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self._items!r})"


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing every character and popping them back."""
    stack = Stack(len(text))
    for char in text:
        stack.push(char)
    reversed_chars = []
    while not stack.is_empty():
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)


_BINARY_DIGITS = 32


def to_binary(number: int) -> str:
    """Return the binary digits of a non-negative number below 2**32."""
    if number < 0:
        raise ValueError("number must not be negative")
    stack = Stack(_BINARY_DIGITS)
    while True:
        stack.push(number % 2)
        number //= 2
        if number <= 0:
            break
    digits = []
    while not stack.is_empty():
        digits.append(str(stack.pop()))
    return "".join(digits)