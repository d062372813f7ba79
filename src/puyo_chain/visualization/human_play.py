from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict

import pygame

from puyo_chain.game import GameConfig, PuyoGame
from .renderer import Renderer


def key_bindings(game: PuyoGame) -> Dict[int, Callable[[], object]]:
    return {
        pygame.K_LEFT: game.move_left,
        pygame.K_RIGHT: game.move_right,
        pygame.K_UP: game.rotate,
        pygame.K_DOWN: game.soft_drop,
    }


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Puyo Chain with the keyboard")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--tick-ms", type=int, default=500)
    p.add_argument("--verbose", action="store_true")
    return p


def run(config: GameConfig | None = None) -> None:
    game = PuyoGame(config)
    keys = key_bindings(game)

    pygame.init()
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(game.config.palette, cell_size=36)
        screen = pygame.display.set_mode(renderer.window_size(game.grid.rows, game.grid.cols))
        pygame.display.set_caption("Puyo Chain")

        last_tick = pygame.time.get_ticks()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and game.game_over:
                        game.reset()
                        last_tick = pygame.time.get_ticks()
                    elif event.key in keys:
                        keys[event.key]()

            # Fall timer stops once the game is over
            now = pygame.time.get_ticks()
            if not game.game_over and now - last_tick >= game.config.tick_interval_ms:
                game.tick()
                last_tick = now

            renderer.draw(screen, game.snapshot())
            clock.tick(60)
    finally:
        pygame.quit()


def main() -> None:  # pragma: no cover
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(GameConfig(random_seed=args.seed, tick_interval_ms=args.tick_ms))


if __name__ == "__main__":  # pragma: no cover
    main()
