from __future__ import annotations

from typing import Tuple

import pygame

from puyo_chain.game import GameSnapshot


def _color_for_name(name: str) -> Tuple[int, int, int]:
    try:
        color = pygame.Color(name)
    except ValueError:
        return (200, 200, 200)
    return color.r, color.g, color.b


class Renderer:
    def __init__(self, palette: Tuple[str, ...], cell_size: int = 30, margin: int = 20) -> None:
        self.colors = [_color_for_name(name) for name in palette]
        self.cell_size = cell_size
        self.margin = margin
        self.font = pygame.font.SysFont(None, 28)

    def window_size(self, rows: int, cols: int) -> Tuple[int, int]:
        side_panel_w = 4 * self.cell_size
        return (self.margin * 3 + cols * self.cell_size + side_panel_w,
                self.margin * 2 + rows * self.cell_size)

    def _draw_puyo(self, surf: pygame.Surface, x: int, y: int, value: int) -> None:
        radius = self.cell_size // 2 - 2
        center = (x + self.cell_size // 2, y + self.cell_size // 2)
        pygame.draw.circle(surf, self.colors[value - 1], center, radius)

    def _board_surface(self, snapshot: GameSnapshot) -> pygame.Surface:
        rows, cols = snapshot.board.shape
        surf = pygame.Surface((cols * self.cell_size, rows * self.cell_size))
        surf.fill((30, 30, 36))
        for row in range(rows):
            for col in range(cols):
                rect = pygame.Rect(col * self.cell_size, row * self.cell_size,
                                   self.cell_size - 1, self.cell_size - 1)
                pygame.draw.rect(surf, (40, 40, 48), rect)
                value = int(snapshot.board[row, col])
                if value:
                    self._draw_puyo(surf, rect.x, rect.y, value)
        if snapshot.active is not None:
            for (row, col), value in snapshot.active:
                self._draw_puyo(surf, col * self.cell_size, row * self.cell_size, value)
        return surf

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        rows, cols = snapshot.board.shape
        screen.fill((10, 10, 14))
        screen.blit(self._board_surface(snapshot), (self.margin, self.margin))

        # Side panel: next pair, score and chain
        x0 = self.margin * 2 + cols * self.cell_size
        screen.blit(self.font.render("NEXT", True, (230, 230, 230)), (x0, self.margin))
        for i, value in enumerate(snapshot.next_colors):
            self._draw_puyo(screen, x0, self.margin + 24 + i * self.cell_size, value)
        y = self.margin + 40 + 2 * self.cell_size
        screen.blit(self.font.render(f"Score {snapshot.score}", True, (230, 230, 230)), (x0, y))
        if snapshot.last_chain > 1:
            screen.blit(self.font.render(f"{snapshot.last_chain} chain", True, (235, 210, 60)), (x0, y + 28))
        if snapshot.game_over:
            text = self.font.render("Game Over - R to restart", True, (255, 255, 255))
            rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
            screen.blit(text, rect)
        pygame.display.flip()
