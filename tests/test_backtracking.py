import itertools

import pytest

from dsakit.backtracking import (
    combination_sum,
    hanoi_moves,
    n_queens,
    permutations,
    solve_sudoku,
    subset_sums,
    subsets,
)

PUZZLE = [
    list("53..7...."),
    list("6..195..."),
    list(".98....6."),
    list("8...6...3"),
    list("4..8.3..1"),
    list("7...2...6"),
    list(".6....28."),
    list("...419..5"),
    list("....8..79"),
]

CONFLICTING = [
    ["5", "3", ".", ".", "7", ".", ".", ".", "."],
    ["6", ".", ".", "1", "9", "5", ".", ".", "."],
    [".", "9", "8", ".", ".", ".", ".", "6", "."],
    ["8", ".", ".", "8", ".", "6", ".", ".", "3"],
    ["4", ".", "9", ".", ".", "8", ".", "7", "9"],
    ["7", ".", ".", ".", "6", ".", ".", ".", "2"],
    [".", "6", ".", ".", ".", ".", "2", "8", "."],
    [".", ".", ".", "4", "1", "9", ".", ".", "5"],
    ["1", "9", "5", ".", ".", ".", ".", "8", "."],
]


def _is_complete_sudoku(grid):
    full = set("123456789")
    rows_ok = all(set(row) == full for row in grid)
    cols_ok = all({grid[r][c] for r in range(9)} == full for c in range(9))
    boxes_ok = all(
        {grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)} == full
        for br in (0, 3, 6)
        for bc in (0, 3, 6)
    )
    return rows_ok and cols_ok and boxes_ok


def test_combination_sum_worked_example():
    assert combination_sum([2, 3, 5], 8) == [[2, 2, 2, 2], [2, 3, 3], [3, 5]]


def test_combination_sum_results_hit_target():
    for combo in combination_sum([2, 3, 6, 7], 13):
        assert sum(combo) == 13
        assert combo == sorted(combo)


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 2], 4)


def test_n_queens_boards_are_valid():
    boards = n_queens(6)
    assert boards
    for board in boards:
        queens = [(r, row.index(1)) for r, row in enumerate(board)]
        assert all(sum(row) == 1 for row in board)
        assert len({c for _, c in queens}) == 6
        assert len({r - c for r, c in queens}) == 6
        assert len({r + c for r, c in queens}) == 6


def test_n_queens_eight_count():
    assert len(n_queens(8)) == 92


def test_n_queens_unsolvable_and_negative():
    assert n_queens(3) == []
    with pytest.raises(ValueError):
        n_queens(-1)


def test_permutations_match_itertools_order():
    items = [1, 2, 3, 4]
    assert permutations(items) == [list(p) for p in itertools.permutations(items)]


def test_subsets_cover_power_set():
    items = [3, 1, 2]
    result = subsets(items)
    assert len(result) == 2 ** len(items)
    expected = {frozenset(c) for k in range(4) for c in itertools.combinations(items, k)}
    assert {frozenset(s) for s in result} == expected
    assert result[0] == []
    assert result[-1] == items


def test_subset_sums_agree_with_subsets():
    items = [3, 1, 2]
    sums = subset_sums(items)
    assert sorted(sums) == sorted(sum(s) for s in subsets(items))
    assert sums[0] == sum(items)
    assert sums[-1] == 0


def test_solve_sudoku_keeps_givens_and_completes():
    solved = solve_sudoku(PUZZLE)
    assert _is_complete_sudoku(solved)
    for r in range(9):
        for c in range(9):
            if PUZZLE[r][c] != ".":
                assert solved[r][c] == PUZZLE[r][c]
    assert PUZZLE[0][2] == "."


def test_solve_sudoku_rejects_conflicting_givens():
    with pytest.raises(ValueError):
        solve_sudoku(CONFLICTING)


def test_solve_sudoku_rejects_bad_shape():
    with pytest.raises(ValueError):
        solve_sudoku([list("123")])


def test_hanoi_single_disk():
    assert hanoi_moves(1, "A", "B", "C") == [("A", "C")]


def test_hanoi_moves_are_legal_and_minimal():
    n = 5
    moves = hanoi_moves(n, "A", "B", "C")
    assert len(moves) == 2**n - 1
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for start, end in moves:
        disk = pegs[start].pop()
        assert not pegs[end] or pegs[end][-1] > disk
        pegs[end].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))


def test_hanoi_negative():
    with pytest.raises(ValueError):
        hanoi_moves(-2)