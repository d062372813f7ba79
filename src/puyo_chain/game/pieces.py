from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict, Tuple


class Orientation(IntEnum):
    """Where the satellite sits relative to the anchor."""

    VERTICAL = 0  # below
    RIGHT = 1
    INVERTED = 2  # above
    LEFT = 3

    def rotated(self) -> "Orientation":
        return Orientation((self + 1) % 4)


# (d_row, d_col) of the satellite cell
SATELLITE_OFFSETS: Dict[Orientation, Tuple[int, int]] = {
    Orientation.VERTICAL: (1, 0),
    Orientation.RIGHT: (0, 1),
    Orientation.INVERTED: (-1, 0),
    Orientation.LEFT: (0, -1),
}


@dataclass(frozen=True)
class NextPiece:
    colors: Tuple[int, int]

    @classmethod
    def draw(cls, rng: random.Random, palette_size: int) -> "NextPiece":
        return cls((rng.randint(1, palette_size), rng.randint(1, palette_size)))


@dataclass(frozen=True)
class Piece:
    """Falling pair: ``colors[0]`` is the anchor's, ``colors[1]`` the satellite's."""

    colors: Tuple[int, int]
    row: int
    col: int
    orientation: Orientation = Orientation.VERTICAL

    @property
    def anchor(self) -> Tuple[int, int]:
        return self.row, self.col

    def moved(self, d_row: int, d_col: int) -> "Piece":
        return replace(self, row=self.row + d_row, col=self.col + d_col)

    def rotated(self) -> "Piece":
        return replace(self, orientation=self.orientation.rotated())

    @classmethod
    def spawn(cls, next_piece: NextPiece, cols: int) -> "Piece":
        return cls(colors=next_piece.colors, row=0, col=cols // 2, orientation=Orientation.VERTICAL)
