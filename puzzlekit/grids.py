"""Puzzles over two-dimensional grids given as lists of rows."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Iterable, MutableSequence, Sequence

_EMPTY_CELL = "."
# Arrow codes 1..4 point right, left, down and up.
_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _no_duplicates(cells: Iterable[str]) -> bool:
    filled = [cell for cell in cells if cell != _EMPTY_CELL]
    return len(filled) == len(set(filled))


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Return True if no filled digit repeats in any row, column or 3x3 box.

    Empty cells are written as ``'.'``; the board need not be solvable.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")
    boxes = (
        [board[row][col] for row in range(top, top + 3) for col in range(left, left + 3)]
        for top in (0, 3, 6)
        for left in (0, 3, 6)
    )
    return (
        all(_no_duplicates(row) for row in board)
        and all(_no_duplicates(column) for column in zip(*board))
        and all(_no_duplicates(box) for box in boxes)
    )


def rotate(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("rotate needs a square matrix")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def set_zeroes(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        if r in zero_rows:
            row[:] = [0] * len(row)
        else:
            for c in zero_cols:
                row[c] = 0


def trap_rain_water(height_map: Sequence[Sequence[int]]) -> int:
    """Return the volume of water an elevation map holds after rain."""
    if not height_map or not height_map[0]:
        raise ValueError("trap_rain_water needs a non-empty height map")
    rows, cols = len(height_map), len(height_map[0])
    if rows <= 1 or cols <= 1:
        return 0

    heap: list[tuple[int, int, int]] = []
    visited: set[tuple[int, int]] = set()
    for r in range(rows):
        for c in range(cols):
            if r in (0, rows - 1) or c in (0, cols - 1):
                heap.append((height_map[r][c], r, c))
                visited.add((r, c))
    heapq.heapify(heap)

    trapped = 0
    while heap:
        level, r, c = heapq.heappop(heap)
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in visited:
                visited.add((nr, nc))
                height = height_map[nr][nc]
                trapped += max(0, level - height)
                heapq.heappush(heap, (max(level, height), nr, nc))
    return trapped


def min_cost_path(grid: Sequence[Sequence[int]]) -> int:
    """Fewest arrow changes needed to walk from the top-left to the bottom-right cell.

    Each cell holds 1 (right), 2 (left), 3 (down) or 4 (up); following a
    cell's arrow is free and leaving it any other way costs one change.
    """
    if not grid or not grid[0]:
        raise ValueError("min_cost_path needs a non-empty grid")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("all grid rows must have the same length")
    if any(value not in (1, 2, 3, 4) for row in grid for value in row):
        raise ValueError("grid cells must be arrow codes 1 to 4")

    unreached = rows * cols + 1
    cost = [[unreached] * cols for _ in range(rows)]
    cost[0][0] = 0
    queue: deque[tuple[int, int]] = deque([(0, 0)])
    while queue:
        r, c = queue.popleft()
        arrow = grid[r][c] - 1
        for index, (dr, dc) in enumerate(_DIRECTIONS):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            step = 0 if index == arrow else 1
            if cost[r][c] + step < cost[nr][nc]:
                cost[nr][nc] = cost[r][c] + step
                if step:
                    queue.append((nr, nc))
                else:
                    queue.appendleft((nr, nc))
    return cost[rows - 1][cols - 1]