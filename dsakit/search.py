"""Searching and selection over sequences of integers."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from functools import reduce


def binary_search(items: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in the ascending ``items``, or -1 when absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def binary_search_recursive(items: Sequence[int], target: int) -> int:
    """Recursive binary search; return the index of ``target`` or -1 when absent."""

    def search(left: int, right: int) -> int:
        if left > right:
            return -1
        mid = left + (right - left) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            return search(left, mid - 1)
        return search(mid + 1, right)

    return search(0, len(items) - 1)


def linear_search(items: Sequence[int], key: int) -> int:
    """Return the index of the first occurrence of ``key``, or -1 when absent."""
    return next((index for index, value in enumerate(items) if value == key), -1)


def peak_index(items: Sequence[int]) -> int:
    """Return the index of the peak of a mountain array, or -1 when there is none."""
    start, end = 1, len(items) - 2
    while start <= end:
        mid = start + (end - start) // 2
        if items[mid - 1] < items[mid] > items[mid + 1]:
            return mid
        if items[mid] > items[mid - 1]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def single_element(items: Sequence[int]) -> int:
    """Return the one value of a sorted sequence that does not appear twice."""
    last = len(items) - 1
    start, end = 0, last
    while start <= end:
        mid = start + (end - start) // 2
        same_as_left = mid > 0 and items[mid - 1] == items[mid]
        same_as_right = mid < last and items[mid] == items[mid + 1]
        if not same_as_left and not same_as_right:
            return items[mid]
        if mid % 2 == 0:
            if same_as_left:
                end = mid - 1
            else:
                start = mid + 1
        elif same_as_left:
            start = mid + 1
        else:
            end = mid - 1
    raise ValueError("no single element found")


def largest(items: Sequence[int]) -> int:
    """Return the largest value."""
    if not items:
        raise ValueError("largest() of an empty sequence")
    return max(items)


def second_largest(items: Sequence[int]) -> int:
    """Return the largest value strictly smaller than the maximum."""
    if not items:
        raise ValueError("second_largest() of an empty sequence")
    first = items[0]
    second: int | None = None
    for value in items:
        if value > first:
            second, first = first, value
        elif value < first and (second is None or value > second):
            second = value
    if second is None:
        raise ValueError("sequence has no second largest value")
    return second


def find_unique(items: Sequence[int]) -> int:
    """Return the value that appears an odd number of times when all others pair up."""
    return reduce(operator.xor, items, 0)