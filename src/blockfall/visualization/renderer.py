from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame

from blockfall.game import FallingBlockGame, PIECE_COLORS


def _color_for_value(v: int) -> Tuple[int, int, int]:
    if v == 0:
        return (20, 20, 26)
    return PIECE_COLORS.get(abs(v), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, hud_width: int = 180) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.hud_width = hud_width
        self._font: pygame.font.Font | None = None

    def window_size(self, game: FallingBlockGame) -> Tuple[int, int]:
        width = game.grid.width * self.cell_size + self.margin * 3 + self.hud_width
        height = game.grid.height * self.cell_size + self.margin * 2
        return width, height

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), rect)
        return surf

    def _hud_lines(self, game: FallingBlockGame) -> list[str]:
        lines = [f"Score: {game.score}", f"Level: {game.level}", f"Lines: {game.lines_cleared_total}"]
        if game.paused:
            lines.append("Paused")
        if game.game_over:
            lines += ["Game Over!", "R to restart"]
        return lines

    def draw(self, screen: pygame.Surface, game: FallingBlockGame) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(game.get_state()), (self.margin, self.margin))
        hud_x = self.margin * 2 + game.grid.width * self.cell_size
        for i, line in enumerate(self._hud_lines(game)):
            text = self._font.render(line, True, (255, 255, 255))
            screen.blit(text, (hud_x, self.margin + i * 32))
        pygame.display.flip()
