"""Gymnasium environments for Puyo Chain."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register the default 12x6 environment
register(
    id="PuyoChain-12x6-v0",
    entry_point="puyo_chain.env.puyo_env:PuyoChainEnv",
)

__all__ = ["PuyoChain-12x6-v0"]
