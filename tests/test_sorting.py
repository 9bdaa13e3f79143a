import random

import pytest

from dsakit.sorting import bubble_sort, merge_sort, quick_sort

_rng = random.Random(1234)
RANDOM_CASES = [[_rng.randint(-50, 50) for _ in range(size)] for size in (0, 1, 2, 7, 30, 101)]

SOURCE_CASES = [
    ([5, 2, 9, 1, 0], [0, 1, 2, 5, 9]),
    ([38, 27, 43, 3, 9, 82, 10], [3, 9, 10, 27, 38, 43, 82]),
    ([4, 3, 6, 2, 8, 1], [1, 2, 3, 4, 6, 8]),
    ([4, 9, 1, 10, 6], [1, 4, 6, 9, 10]),
]


@pytest.mark.parametrize(("items", "expected"), SOURCE_CASES)
def test_source_cases(items, expected):
    assert bubble_sort(items) == expected
    assert merge_sort(items) == expected
    assert quick_sort(items) == expected


@pytest.mark.parametrize("items", RANDOM_CASES)
def test_random_cases_match_builtin(items):
    expected = sorted(items)
    assert bubble_sort(items) == expected
    assert merge_sort(items) == expected
    assert quick_sort(items) == expected


def test_input_not_mutated():
    items = [3, 1, 2]
    assert bubble_sort(items) == [1, 2, 3]
    assert items == [3, 1, 2]
    assert merge_sort(items) == [1, 2, 3]
    assert items == [3, 1, 2]
    assert quick_sort(items) == [1, 2, 3]
    assert items == [3, 1, 2]


def test_duplicates():
    items = [2, 2, 1, 1, 3, 3]
    expected = [1, 1, 2, 2, 3, 3]
    assert bubble_sort(items) == expected
    assert merge_sort(items) == expected
    assert quick_sort(items) == expected


def test_sorted_and_reversed_input():
    already = list(range(200))
    assert bubble_sort(already) == already
    assert merge_sort(already) == already
    assert quick_sort(already) == already
    assert bubble_sort(reversed(already)) == already
    assert merge_sort(reversed(already)) == already
    assert quick_sort(reversed(already)) == already


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert bubble_sort([42]) == [42]
    assert merge_sort([42]) == [42]
    assert quick_sort([42]) == [42]


def test_accepts_iterables():
    items = (9, -1, 4)
    assert bubble_sort(iter(items)) == [-1, 4, 9]
    assert merge_sort(iter(items)) == [-1, 4, 9]
    assert quick_sort(iter(items)) == [-1, 4, 9]