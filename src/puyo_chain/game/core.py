from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np

from .clearing import ChainResult, resolve_chains
from .collision import can_place_piece, piece_cells
from .grid import EMPTY, Coordinate, GameGrid
from .pieces import NextPiece, Piece
from .rules import ScoringRules

logger = logging.getLogger(__name__)

DEFAULT_PALETTE = ("red", "green", "blue", "yellow", "purple")


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    NONE = 4


@dataclass
class GameConfig:
    rows: int = 12
    cols: int = 6
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    tick_interval_ms: int = 500
    clear_threshold: int = 4
    random_seed: Optional[int] = None
    max_episode_steps: int = 10000

    def __post_init__(self) -> None:
        self.palette = tuple(self.palette)
        if self.rows < 2:
            raise ValueError(f"rows must be >= 2, got {self.rows}")
        if self.cols < 1:
            raise ValueError(f"cols must be >= 1, got {self.cols}")
        if not 2 <= len(self.palette) <= 127:
            raise ValueError(f"palette needs between 2 and 127 colors, got {len(self.palette)}")
        if self.clear_threshold < 2:
            raise ValueError(f"clear_threshold must be >= 2, got {self.clear_threshold}")
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")

    @property
    def palette_size(self) -> int:
        return len(self.palette)


ActiveCell = Tuple[Coordinate, int]


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to renderers. ``active`` is None once the game is over."""

    board: np.ndarray
    active: Optional[Tuple[ActiveCell, ActiveCell]]
    next_colors: Tuple[int, int]
    score: int
    game_over: bool
    last_chain: int


class PuyoGame:
    """One play session: board, falling pair, next pair, score and the game-over latch.

    Every command runs to completion, including fixation, chain resolution
    and the next spawn, before it returns.
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rules = ScoringRules(clear_threshold=self.config.clear_threshold)
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.rows, self.config.cols)
        self.score = 0
        self.game_over = False
        self.current_piece: Optional[Piece] = None
        self.next_piece = NextPiece((1, 1))
        self.pieces_placed = 0
        self.cells_cleared_total = 0
        self.max_chain = 0
        self.last_chain = 0
        self.reset()

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.grid.reset()
        self.score = 0
        self.game_over = False
        self.pieces_placed = 0
        self.cells_cleared_total = 0
        self.max_chain = 0
        self.last_chain = 0
        self.next_piece = self._random_next()
        self._spawn_piece()
        logger.info("session reset on %dx%d board", self.grid.rows, self.grid.cols)

    def _random_next(self) -> NextPiece:
        return NextPiece.draw(self.rng, self.config.palette_size)

    def _spawn_piece(self) -> None:
        self.current_piece = Piece.spawn(self.next_piece, self.grid.cols)
        self.next_piece = self._random_next()
        logger.debug("spawned %s, next %s", self.current_piece, self.next_piece.colors)
        # No room at the spawn point: the pair locks where it stands, which ends the game.
        if not can_place_piece(self.grid, self.current_piece):
            self._lock_piece()

    # -- inbound commands -------------------------------------------------

    def tick(self) -> Optional[ChainResult]:
        if self.game_over:
            return None
        return self._move_down()

    def soft_drop(self) -> Optional[ChainResult]:
        if self.game_over:
            return None
        return self._move_down()

    def move_left(self) -> None:
        if self.game_over:
            return
        self._move(-1)

    def move_right(self) -> None:
        if self.game_over:
            return
        self._move(1)

    def rotate(self) -> None:
        if self.game_over or self.current_piece is None:
            return
        rotated = self.current_piece.rotated()
        if can_place_piece(self.grid, rotated):
            self.current_piece = rotated

    def _move(self, d_col: int) -> None:
        if self.current_piece is None:
            return
        moved = self.current_piece.moved(0, d_col)
        if can_place_piece(self.grid, moved):
            self.current_piece = moved

    def _move_down(self) -> Optional[ChainResult]:
        assert self.current_piece is not None
        moved = self.current_piece.moved(1, 0)
        if can_place_piece(self.grid, moved):
            self.current_piece = moved
            return None
        return self._lock_piece()

    # -- fixation ---------------------------------------------------------

    def _fix_piece(self) -> bool:
        """Write the pair into the board. Returns False, writing nothing, if a cell is unusable."""
        assert self.current_piece is not None
        cells = piece_cells(self.current_piece)
        # Both targets are checked before either is written.
        if not self.grid.can_place(cells):
            return False
        for (row, col), color in zip(cells, self.current_piece.colors):
            self.grid.set(row, col, color)
        return True

    def _lock_piece(self) -> Optional[ChainResult]:
        if not self._fix_piece():
            self.game_over = True
            logger.info("game over with score %d after %d pieces", self.score, self.pieces_placed)
            return None
        self.pieces_placed += 1
        logger.debug("fixed %s", self.current_piece)
        result = resolve_chains(self.grid, self.rules)
        self.score += result.score_delta
        self.cells_cleared_total += result.cells_cleared
        self.last_chain = result.chain_count
        self.max_chain = max(self.max_chain, result.chain_count)
        self._spawn_piece()
        return result

    # -- dispatch ---------------------------------------------------------

    def step(self, action: Action | int) -> Tuple[np.ndarray, int, bool, dict]:
        action = Action(int(action))
        if self.game_over:
            return self.get_state(), 0, True, {}

        score_before = self.score
        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.SOFT_DROP:
            self.soft_drop()
        elif action == Action.NONE:
            pass

        info = {
            "score": self.score,
            "pieces_placed": self.pieces_placed,
            "last_chain": self.last_chain,
        }
        return self.get_state(), self.score - score_before, self.game_over, info

    # -- outbound views ---------------------------------------------------

    def active_cells(self) -> Optional[Tuple[ActiveCell, ActiveCell]]:
        if self.current_piece is None or self.game_over:
            return None
        anchor, satellite = piece_cells(self.current_piece)
        return (anchor, self.current_piece.colors[0]), (satellite, self.current_piece.colors[1])

    def active_color_at(self, row: int, col: int) -> int:
        """Color of the falling pair at ``(row, col)``, or EMPTY if the pair is not there."""
        cells = self.active_cells()
        if cells is None:
            return EMPTY
        for cell, color in cells:
            if cell == (row, col):
                return color
        return EMPTY

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid; negative marks the falling pair
        state = self.grid.clone_state()
        cells = self.active_cells()
        if cells is not None:
            for (row, col), color in cells:
                if self.grid.is_inside(row, col):
                    state[row, col] = -color
        return state

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self.grid.clone_state(),
            active=self.active_cells(),
            next_colors=self.next_piece.colors,
            score=self.score,
            game_over=self.game_over,
            last_chain=self.last_chain,
        )

    def color_name(self, value: int) -> Optional[str]:
        value = abs(int(value))
        if value == EMPTY:
            return None
        return self.config.palette[value - 1]

    def get_game_stats(self) -> dict:
        return {
            "final_score": self.score,
            "pieces_placed": self.pieces_placed,
            "cells_cleared": self.cells_cleared_total,
            "max_chain": self.max_chain,
            "max_height": self.grid.get_max_height(),
            "avg_score_per_piece": self.score / max(1, self.pieces_placed),
        }
