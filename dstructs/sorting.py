"""In-place sorting of sequences and searches over them."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence


def swap(values: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange the items at positions ``i`` and ``j``."""
    values[i], values[j] = values[j], values[i]


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by repeatedly swapping adjacent items out of order."""
    n = len(values)
    for passes in range(1, n):
        for j in range(n - passes):
            if values[j] > values[j + 1]:
                swap(values, j, j + 1)


def merge(values: MutableSequence[Any], first: int, middle: int, last: int) -> None:
    """Merge the sorted runs ``values[first:middle+1]`` and ``values[middle+1:last+1]``."""
    left = values[first : middle + 1]
    right = values[middle + 1 : last + 1]
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    values[first : last + 1] = merged


def _merge_sort(values: MutableSequence[Any], first: int, last: int) -> None:
    if last <= first:
        return
    middle = (first + last) // 2
    _merge_sort(values, first, middle)
    _merge_sort(values, middle + 1, last)
    merge(values, first, middle, last)


def merge_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by merge sort."""
    _merge_sort(values, 0, len(values) - 1)


def linear_search(item: Any, values: Sequence[Any]) -> bool:
    """Tell whether ``item`` occurs in ``values`` by checking each position."""
    return any(item == value for value in values)


def binary_search(item: Any, values: Sequence[Any]) -> bool:
    """Tell whether ``item`` occurs in the ascending sequence ``values``."""
    low = 0
    high = len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        if item == values[middle]:
            return True
        if item < values[middle]:
            high = middle - 1
        else:
            low = middle + 1
    return False