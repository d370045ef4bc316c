"""Singly linked lists: a plain one and one kept in ascending order."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass
class _Cell:
    item: Any
    next: Optional[_Cell] = None


def _cells(head: Optional[_Cell]) -> Iterator[_Cell]:
    cell = head
    while cell is not None:
        yield cell
        cell = cell.next


class LinkedList:
    """A singly linked list of items in insertion order."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Cell] = None
        if items is not None:
            self.extend(items)

    @classmethod
    def random(
        cls, size: int, bound: int, rng: Optional[_random.Random] = None
    ) -> LinkedList:
        """Build a list of ``size`` random items in ``range(bound)``.

        Each new item is placed at the front, so the last one drawn comes first.
        """
        rng = rng if rng is not None else _random.Random()
        result = cls()
        for _ in range(size):
            result._head = _Cell(rng.randrange(bound), result._head)
        return result

    def __iter__(self) -> Iterator[Any]:
        return (cell.item for cell in _cells(self._head))

    def __len__(self) -> int:
        return sum(1 for _ in _cells(self._head))

    def extend(self, other: Iterable[Any]) -> None:
        """Append the items of ``other`` at the end of this list."""
        items = list(other)
        if not items:
            return
        tail = None
        for tail in _cells(self._head):
            pass
        for item in items:
            cell = _Cell(item)
            if tail is None:
                self._head = cell
            else:
                tail.next = cell
            tail = cell

    def clear(self) -> None:
        """Drop every item."""
        self._head = None

    def render(self) -> str:
        """Return the items one per line."""
        return "".join(f"{item}\n" for item in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


class SortedList:
    """A singly linked list that keeps its items in ascending order."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Cell] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.insert(item)

    def _locate(self, item: Any) -> tuple[Optional[_Cell], Optional[_Cell]]:
        """Return the cell before the first item not less than ``item``, and that cell."""
        previous = None
        current = self._head
        while current is not None and current.item < item:
            previous, current = current, current.next
        return previous, current

    def insert(self, item: Any) -> None:
        """Insert ``item`` at its place; equal items are allowed."""
        previous, current = self._locate(item)
        cell = _Cell(item, current)
        if previous is None:
            self._head = cell
        else:
            previous.next = cell
        self._size += 1

    def remove(self, item: Any) -> None:
        """Remove one occurrence of ``item``; do nothing if it is absent."""
        previous, current = self._locate(item)
        if current is None or current.item > item:
            return
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        self._size -= 1

    def __contains__(self, item: Any) -> bool:
        _, current = self._locate(item)
        return current is not None and current.item == item

    def __iter__(self) -> Iterator[Any]:
        return (cell.item for cell in _cells(self._head))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SortedList({list(self)!r})"