"""A map kept as a linked list ordered by key."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Tuple, Union


@dataclass
class _Entry:
    key: Any
    value: Any
    next: Optional[_Entry] = None


class SortedMap:
    """Key to value map whose keys are always held in ascending order."""

    def __init__(
        self, pairs: Union[Mapping, Iterable[Tuple[Any, Any]], None] = None
    ) -> None:
        self._head: Optional[_Entry] = None
        self._size = 0
        if pairs is not None:
            if isinstance(pairs, Mapping):
                pairs = pairs.items()
            for key, value in pairs:
                self[key] = value

    def _entries(self) -> Iterator[_Entry]:
        entry = self._head
        while entry is not None:
            yield entry
            entry = entry.next

    def _locate(self, key: Any) -> Tuple[Optional[_Entry], Optional[_Entry]]:
        """Return the entry before the first key not less than ``key``, and that entry."""
        previous = None
        current = self._head
        while current is not None and key > current.key:
            previous, current = current, current.next
        return previous, current

    def _find(self, key: Any) -> Optional[_Entry]:
        _, current = self._locate(key)
        if current is not None and current.key == key:
            return current
        return None

    def _unlink(self, previous: Optional[_Entry], current: _Entry) -> None:
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        self._size -= 1

    def __setitem__(self, key: Any, value: Any) -> None:
        previous, current = self._locate(key)
        if current is not None and current.key == key:
            current.value = value
            return
        entry = _Entry(key, value, current)
        if previous is None:
            self._head = entry
        else:
            previous.next = entry
        self._size += 1

    def __getitem__(self, key: Any) -> Any:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __delitem__(self, key: Any) -> None:
        previous, current = self._locate(key)
        if current is None or current.key != key:
            raise KeyError(key)
        self._unlink(previous, current)

    def discard(self, key: Any) -> None:
        """Remove ``key`` if present; do nothing otherwise."""
        previous, current = self._locate(key)
        if current is not None and current.key == key:
            self._unlink(previous, current)

    def get(self, key: Any, default: Any = None) -> Any:
        entry = self._find(key)
        return default if entry is None else entry.value

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return (entry.key for entry in self._entries())

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        return ((entry.key, entry.value) for entry in self._entries())

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def __str__(self) -> str:
        return "[" + ",".join(f"({key},{value})" for key, value in self.items()) + "]"

    def __repr__(self) -> str:
        return f"SortedMap({list(self.items())!r})"