"""Game module for Puyo Chain.

Exports the core game engine and supporting classes:
- GameGrid: Board of palette indices
- Piece, NextPiece, Orientation: The falling pair and its rotation states
- occupied_cells, can_place: Placement rules
- resolve_chains: Cluster clearing, chain scoring and gravity
- ScoringRules: Clear threshold and pass scoring
- PuyoGame: Session state and the commands that drive it
"""

from .grid import EMPTY, GameGrid
from .pieces import NextPiece, Orientation, Piece
from .collision import can_place, occupied_cells
from .clearing import ChainResult, ClearStep, apply_gravity, find_clusters, find_regions, resolve_chains
from .rules import ScoringRules
from .core import Action, GameConfig, GameSnapshot, PuyoGame

__all__ = [
    "EMPTY",
    "GameGrid",
    "NextPiece",
    "Orientation",
    "Piece",
    "can_place",
    "occupied_cells",
    "ChainResult",
    "ClearStep",
    "apply_gravity",
    "find_clusters",
    "find_regions",
    "resolve_chains",
    "ScoringRules",
    "Action",
    "GameConfig",
    "GameSnapshot",
    "PuyoGame",
]
