from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np


Coordinate = Tuple[int, int]

EMPTY = 0


class GameGrid:
    """Fixed-size board of palette indices.

    The grid uses 0 for empty cells and positive integers for filled cells.
    Integer values are 1-based indices into the session's color palette.
    Coordinates are ``(row, col)`` with row 0 at the top.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = int(rows)
        self.cols = int(cols)
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        for row, col in cells:
            if not self.is_inside(row, col):
                return False
            if self.grid[row, col] != EMPTY:
                return False
        return True

    def get(self, row: int, col: int) -> int:
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        if not self.is_inside(row, col):
            raise IndexError(f"cell {(row, col)} outside {self.rows}x{self.cols} board")
        self.grid[row, col] = value

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def get_max_height(self) -> int:
        non_empty_rows = np.where(np.any(self.grid != EMPTY, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.rows - int(non_empty_rows[0])

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def load(self, state: np.ndarray) -> None:
        """Replace the contents with ``state``; the shape must match."""
        state = np.asarray(state, dtype=np.int8)
        if state.shape != self.grid.shape:
            raise ValueError(f"expected shape {self.grid.shape}, got {state.shape}")
        self.grid[...] = state
