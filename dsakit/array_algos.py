"""Classic array problems: k-sum, two pointers, prefix products and partitioning."""

from __future__ import annotations

import heapq
import operator
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return the distinct triplets, each in ascending order, whose values sum to zero."""
    values = sorted(nums)
    count = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, count - 1
        while j < k:
            current = first + values[j] + values[k]
            if current > 0:
                k -= 1
            elif current < 0:
                j += 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct quadruplets, each in ascending order, whose values sum to ``target``."""
    values = sorted(nums)
    count = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j = i + 1
        while j < count:
            p, q = j + 1, count - 1
            while p < q:
                current = first + values[j] + values[p] + values[q]
                if current < target:
                    p += 1
                elif current > target:
                    q -= 1
                else:
                    result.append([first, values[j], values[p], values[q]])
                    p += 1
                    q -= 1
                    while p < q and values[p] == values[p - 1]:
                        p += 1
            j += 1
            while j < count and values[j] == values[j - 1]:
                j += 1
    return result


def pair_sum(items: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two values of the ascending ``items`` that sum to ``target``; None when there are none."""
    left, right = 0, len(items) - 1
    while left < right:
        current = items[left] + items[right]
        if current == target:
            return items[left], items[right]
        if current > target:
            right -= 1
        else:
            left += 1
    return None


def max_water(heights: Sequence[int]) -> int:
    """Return the largest area of water held between two of the vertical lines."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, min(heights[left], heights[right]) * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def max_subarray(items: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of values."""
    current = 0
    best: int | None = None
    for value in items:
        current += value
        if best is None or current > best:
            best = current
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("max_subarray() of an empty sequence")
    return best


def majority_element(items: Iterable[int]) -> int:
    """Return the value that occurs in more than half of the positions."""
    candidate = None
    votes = 0
    seen = False
    for value in items:
        seen = True
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    if not seen:
        raise ValueError("majority_element() of an empty sequence")
    return candidate


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other value."""
    if not nums:
        return []
    prefixes = accumulate(nums[:-1], operator.mul, initial=1)
    suffixes = list(accumulate(reversed(nums[1:]), operator.mul, initial=1))
    return [p * s for p, s in zip(prefixes, reversed(suffixes))]


def sorted_union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the ascending union, without repeats, of two ascending sequences."""
    return [value for value, _ in groupby(heapq.merge(first, second))]


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list, keeping repeats."""
    return list(heapq.merge(first, second))


def rotate_right(items: Sequence[int], k: int) -> list[int]:
    """Return the values rotated ``k`` places to the right."""
    if not items:
        return []
    k %= len(items)
    return [*items[len(items) - k :], *items[: len(items) - k]]


def move_zeros(items: Iterable[int]) -> list[int]:
    """Return the values with every zero moved to the end, others kept in order."""
    values = list(items)
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def remove_duplicates(items: Iterable[int]) -> list[int]:
    """Return an ascending sequence with repeated values collapsed to one."""
    return [value for value, _ in groupby(items)]


def sort_binary(items: Iterable[int]) -> list[int]:
    """Sort a sequence made only of zeros and ones."""
    values = list(items)
    if any(value not in (0, 1) for value in values):
        raise ValueError("values must be 0 or 1")
    zeros = values.count(0)
    return [0] * zeros + [1] * (len(values) - zeros)


def sort_012(items: Iterable[int]) -> list[int]:
    """Sort a sequence of zeros, ones and twos in one pass (Dutch national flag)."""
    values = list(items)
    if any(value not in (0, 1, 2) for value in values):
        raise ValueError("values must be 0, 1 or 2")
    low, mid, high = 0, 0, len(values) - 1
    while mid <= high:
        if values[mid] == 0:
            values[low], values[mid] = values[mid], values[low]
            low += 1
            mid += 1
        elif values[mid] == 1:
            mid += 1
        else:
            values[mid], values[high] = values[high], values[mid]
            high -= 1
    return values


def max_score(cards: Sequence[int], k: int) -> int:
    """Return the largest total of ``k`` cards taken from either end of the row."""
    if not 0 <= k <= len(cards):
        raise ValueError("k must be between 0 and the number of cards")
    left = sum(cards[:k])
    right = 0
    best = left
    for taken in range(1, k + 1):
        left -= cards[k - taken]
        right += cards[-taken]
        best = max(best, left + right)
    return best