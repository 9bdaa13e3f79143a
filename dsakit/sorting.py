"""Comparison sorts: bubble, merge and quick sort."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by bubble sort."""
    values = list(items)
    count = len(values)
    for sweep in range(count - 1):
        swapped = False
        for j in range(count - 1 - sweep):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return values


def merge_sort(items: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by top-down merge sort."""
    values = list(items)
    return _merge_sort(values)


def _merge_sort(values: Sequence[int]) -> list[int]:
    if len(values) <= 1:
        return list(values)
    mid = len(values) // 2
    return list(heapq.merge(_merge_sort(values[:mid]), _merge_sort(values[mid:])))


def _partition(values: list[int], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by quick sort with the last value as pivot."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(values, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return values