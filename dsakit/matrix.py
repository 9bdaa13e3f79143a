"""Operations on matrices stored as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def add_matrix(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same shape")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix as text, one row per line, values separated by two spaces."""
    return "".join("  ".join(str(value) for value in row) + "\n" for row in matrix)


def largest_row_sum(matrix: Matrix) -> int:
    """Return the largest sum over the rows of the matrix."""
    if not matrix:
        raise ValueError("matrix has no rows")
    return max(sum(row) for row in matrix)


def contains(matrix: Matrix, target: int) -> bool:
    """Tell whether ``target`` appears anywhere in the matrix."""
    return any(target in row for row in matrix)


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return the transpose of the matrix."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def rotate_90(matrix: Matrix) -> list[list[int]]:
    """Return the matrix rotated a quarter turn clockwise."""
    _shape(matrix)
    return [list(column) for column in zip(*reversed(matrix))]


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the values of the matrix read clockwise in a spiral from the top left."""
    rows, cols = _shape(matrix)
    result: list[int] = []
    top, bottom = 0, rows - 1
    left, right = 0, cols - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(reversed(matrix[bottom][left : right + 1]))
            bottom -= 1
        if left <= right:
            result.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
            left += 1
    return result


def wave_order(matrix: Matrix) -> list[int]:
    """Return the values column by column, downwards on even columns and upwards on odd ones."""
    result: list[int] = []
    for index, column in enumerate(zip(*matrix)):
        result.extend(column if index % 2 == 0 else reversed(column))
    return result