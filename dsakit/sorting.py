"""Sorting of integer sequences."""

from __future__ import annotations

from collections.abc import Iterable


def sort_ascending(values: Iterable[int]) -> list[int]:
    """Return the values as a new list in ascending order."""
    return sorted(values)


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, ordered by selection sort.

    Each pass moves the first occurrence of the smallest remaining value
    to the front of the unsorted part. The input is left untouched.
    """
    items = list(values)
    for position in range(len(items) - 1):
        smallest = min(range(position, len(items)), key=items.__getitem__)
        if smallest != position:
            items[position], items[smallest] = items[smallest], items[position]
    return items