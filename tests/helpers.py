from __future__ import annotations

from typing import Sequence

import numpy as np

from puyo_chain.game import GameGrid

# Letters follow the default palette order: red, green, blue, yellow, purple
LETTERS = {".": 0, "R": 1, "G": 2, "B": 3, "Y": 4, "P": 5}


def board_from_rows(rows: Sequence[str]) -> np.ndarray:
    """Build a board array from strings such as ``"R.G..."``, top row first."""
    return np.array([[LETTERS[ch] for ch in row] for row in rows], dtype=np.int8)


def grid_from_rows(rows: Sequence[str]) -> GameGrid:
    grid = GameGrid(len(rows), len(rows[0]))
    grid.load(board_from_rows(rows))
    return grid


def rows_from_grid(grid: GameGrid) -> list[str]:
    names = {v: k for k, v in LETTERS.items()}
    return ["".join(names[int(v)] for v in row) for row in grid.grid]
