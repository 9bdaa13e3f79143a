"""Backtracking searches: combinations, queens, permutations, subsets, sudoku and Hanoi."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

EMPTY = "."
DIGITS = "123456789"


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every combination of candidates, each usable any number of times, summing to ``target``.

    Combinations come in the order found when each candidate is taken as often
    as possible before moving on to the next one.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(remaining: int, index: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        if index >= len(values):
            return
        value = values[index]
        if value <= remaining:
            chosen.append(value)
            search(remaining - value, index)
            chosen.pop()
        search(remaining, index + 1)

    search(target, 0)
    return result


def n_queens(n: int) -> list[list[list[int]]]:
    """Return every placement of ``n`` non-attacking queens on an ``n`` by ``n`` board.

    Each board is a list of rows where 1 marks a queen and 0 an empty square.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[list[int]]] = []
    placement: list[int] = []
    columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append([[1 if col == queen else 0 for col in range(n)] for queen in placement])
            return
        for col in range(n):
            if col in columns or row - col in falling or row + col in rising:
                continue
            placement.append(col)
            columns.add(col)
            falling.add(row - col)
            rising.add(row + col)
            place(row + 1)
            placement.pop()
            columns.remove(col)
            falling.remove(row - col)
            rising.remove(row + col)

    place(0)
    return solutions


def permutations(items: Iterable[Any]) -> list[list[Any]]:
    """Return every ordering of the items, by position, in lexicographic order of positions."""
    values = list(items)
    result: list[list[Any]] = []
    current: list[Any] = []
    used = [False] * len(values)

    def search() -> None:
        if len(current) == len(values):
            result.append(list(current))
            return
        for index, value in enumerate(values):
            if used[index]:
                continue
            used[index] = True
            current.append(value)
            search()
            current.pop()
            used[index] = False

    search()
    return result


def subsets(items: Iterable[Any]) -> list[list[Any]]:
    """Return every subset of the items, leaving each item out before taking it."""
    values = list(items)
    result: list[list[Any]] = []
    chosen: list[Any] = []

    def search(index: int) -> None:
        if index == len(values):
            result.append(list(chosen))
            return
        search(index + 1)
        chosen.append(values[index])
        search(index + 1)
        chosen.pop()

    search(0)
    return result


def subset_sums(items: Iterable[int]) -> list[int]:
    """Return the sum of every subset, taking each item before leaving it out."""
    values = list(items)
    result: list[int] = []

    def search(index: int, running: int) -> None:
        if index == len(values):
            result.append(running)
            return
        search(index + 1, running + values[index])
        search(index + 1, running)

    search(0, 0)
    return result


def _box(row: int, col: int) -> int:
    return (row // 3) * 3 + col // 3


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a solved copy of a 9 by 9 sudoku whose empty cells hold ``"."``.

    Raises ValueError when the board is malformed, its givens conflict, or it has no solution.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("board must be 9 by 9")
    rows: list[set[str]] = [set() for _ in range(9)]
    cols: list[set[str]] = [set() for _ in range(9)]
    boxes: list[set[str]] = [set() for _ in range(9)]
    empty: list[tuple[int, int]] = []
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == EMPTY:
                empty.append((r, c))
                continue
            if cell not in DIGITS or len(cell) != 1:
                raise ValueError(f"invalid cell {cell!r}")
            b = _box(r, c)
            if cell in rows[r] or cell in cols[c] or cell in boxes[b]:
                raise ValueError(f"digit {cell} repeated at row {r}, column {c}")
            rows[r].add(cell)
            cols[c].add(cell)
            boxes[b].add(cell)

    def fill(position: int) -> bool:
        if position == len(empty):
            return True
        r, c = empty[position]
        b = _box(r, c)
        for digit in DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in boxes[b]:
                continue
            grid[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            boxes[b].add(digit)
            if fill(position + 1):
                return True
            rows[r].remove(digit)
            cols[c].remove(digit)
            boxes[b].remove(digit)
            grid[r][c] = EMPTY
        return False

    if not fill(0):
        raise ValueError("sudoku has no solution")
    return grid


def hanoi_moves(
    n: int, source: str = "A", helper: str = "B", destination: str = "C"
) -> list[tuple[str, str]]:
    """Return the moves, as (from, to) pairs, that carry ``n`` disks from source to destination."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    moves: list[tuple[str, str]] = []

    def move(count: int, start: str, spare: str, end: str) -> None:
        if count == 0:
            return
        move(count - 1, start, end, spare)
        moves.append((start, end))
        move(count - 1, spare, start, end)

    move(n, source, helper, destination)
    return moves