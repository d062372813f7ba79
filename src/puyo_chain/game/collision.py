"""Pure placement rules for the falling pair."""

from __future__ import annotations

from typing import Tuple

from .grid import Coordinate, GameGrid
from .pieces import SATELLITE_OFFSETS, Orientation, Piece


def occupied_cells(anchor: Coordinate, orientation: Orientation) -> Tuple[Coordinate, Coordinate]:
    """Return ``(anchor_cell, satellite_cell)`` for a pair at ``anchor``."""
    row, col = anchor
    d_row, d_col = SATELLITE_OFFSETS[Orientation(orientation)]
    return (row, col), (row + d_row, col + d_col)


def piece_cells(piece: Piece) -> Tuple[Coordinate, Coordinate]:
    return occupied_cells(piece.anchor, piece.orientation)


def can_place(grid: GameGrid, anchor: Coordinate, orientation: Orientation) -> bool:
    return grid.can_place(occupied_cells(anchor, orientation))


def can_place_piece(grid: GameGrid, piece: Piece) -> bool:
    return can_place(grid, piece.anchor, piece.orientation)
