"""Cluster detection, chain clearing and gravity compaction.

A pass scans the board in row-major order, flood-filling each unvisited
colored cell to find its 4-connected same-color region. Every region at or
above the clear threshold is emptied in one simultaneous step, the pass is
scored ``cells * chain`` and the columns are compacted. Passes repeat until
one finds nothing to clear.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .grid import EMPTY, Coordinate, GameGrid
from .rules import ScoringRules

logger = logging.getLogger(__name__)

NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class ClearStep:
    chain: int
    cells_cleared: int
    score: int
    clusters: int


@dataclass
class ChainResult:
    steps: List[ClearStep] = field(default_factory=list)

    @property
    def chain_count(self) -> int:
        return len(self.steps)

    @property
    def cells_cleared(self) -> int:
        return sum(step.cells_cleared for step in self.steps)

    @property
    def score_delta(self) -> int:
        return sum(step.score for step in self.steps)


def flood_region(grid: np.ndarray, start: Coordinate, visited: np.ndarray) -> List[Coordinate]:
    """Collect the same-color region containing ``start`` using an explicit stack.

    Cells are marked in ``visited`` as they are popped.
    """
    rows, cols = grid.shape
    color = grid[start]
    stack = [start]
    region: List[Coordinate] = []
    while stack:
        row, col = stack.pop()
        if visited[row, col]:
            continue
        visited[row, col] = True
        region.append((row, col))
        for d_row, d_col in NEIGHBOR_OFFSETS:
            n_row, n_col = row + d_row, col + d_col
            if 0 <= n_row < rows and 0 <= n_col < cols and not visited[n_row, n_col] and grid[n_row, n_col] == color:
                stack.append((n_row, n_col))
    return region


def find_regions(grid: np.ndarray) -> List[List[Coordinate]]:
    """Return every same-color region on the board, in scan order."""
    rows, cols = grid.shape
    visited = np.zeros((rows, cols), dtype=np.bool_)
    regions: List[List[Coordinate]] = []
    for row in range(rows):
        for col in range(cols):
            if grid[row, col] == EMPTY or visited[row, col]:
                continue
            regions.append(flood_region(grid, (row, col), visited))
    return regions


def find_clusters(grid: np.ndarray, threshold: int = 4) -> List[List[Coordinate]]:
    return [region for region in find_regions(grid) if len(region) >= threshold]


def apply_gravity(grid: np.ndarray) -> bool:
    """Settle every column in place, keeping the stacking order. Returns True if anything moved."""
    rows, cols = grid.shape
    moved = False
    for col in range(cols):
        column = grid[:, col]
        filled = column[column != EMPTY]
        settled = np.zeros(rows, dtype=grid.dtype)
        if filled.size:
            settled[rows - filled.size :] = filled
        if not np.array_equal(settled, column):
            grid[:, col] = settled
            moved = True
    return moved


def clear_pass(grid: GameGrid, rules: ScoringRules, chain: int) -> Optional[ClearStep]:
    """Run a single detect/clear/compact pass as chain level ``chain``.

    Returns None, leaving the board untouched, when nothing qualifies.
    """
    clusters = [region for region in find_regions(grid.grid) if rules.qualifies(len(region))]
    if not clusters:
        return None
    cells = [cell for cluster in clusters for cell in cluster]
    for row, col in cells:
        grid.grid[row, col] = EMPTY
    apply_gravity(grid.grid)
    return ClearStep(
        chain=chain,
        cells_cleared=len(cells),
        score=rules.score_for_pass(len(cells), chain),
        clusters=len(clusters),
    )


def resolve_chains(grid: GameGrid, rules: Optional[ScoringRules] = None) -> ChainResult:
    rules = rules or ScoringRules()
    result = ChainResult()
    # Every pass that clears removes at least clear_threshold cells, so this is bounded.
    while True:
        step = clear_pass(grid, rules, result.chain_count + 1)
        if step is None:
            break
        logger.debug(
            "chain %d: cleared %d cells in %d clusters for %d points",
            step.chain, step.cells_cleared, step.clusters, step.score,
        )
        result.steps.append(step)
    return result
