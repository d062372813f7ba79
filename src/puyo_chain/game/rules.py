from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    clear_threshold: int = 4

    def __post_init__(self) -> None:
        if self.clear_threshold < 2:
            raise ValueError(f"clear_threshold must be >= 2, got {self.clear_threshold}")

    def qualifies(self, cluster_size: int) -> bool:
        return cluster_size >= self.clear_threshold

    def score_for_pass(self, cells_cleared: int, chain: int) -> int:
        # Every cluster popped in one pass shares that pass's chain multiplier.
        if cells_cleared <= 0 or chain <= 0:
            return 0
        return cells_cleared * chain
