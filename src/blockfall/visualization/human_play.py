from __future__ import annotations

from typing import Callable, Dict

import pygame

from blockfall.game import FallingBlockGame
from .renderer import Renderer


def _key_bindings(game: FallingBlockGame) -> Dict[int, Callable[[], object]]:
    return {
        pygame.K_LEFT: game.move_left,
        pygame.K_RIGHT: game.move_right,
        pygame.K_UP: game.rotate,
        pygame.K_DOWN: game.soft_drop,
        pygame.K_SPACE: game.toggle_pause,
        pygame.K_r: game.reset,
    }


def run() -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlockGame()
        renderer = Renderer(cell_size=28)
        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Blockfall")
        bindings = _key_bindings(game)

        last_fall = pygame.time.get_ticks()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        command = bindings.get(event.key)
                        if command is not None:
                            command()

            # Gravity; the interval is re-read so a level change applies from the next tick
            now = pygame.time.get_ticks()
            if game.paused or game.game_over:
                last_fall = now
            elif now - last_fall >= game.drop_interval:
                game.tick()
                last_fall = now

            renderer.draw(screen, game)
            clock.tick(60)
        print(f"Final score: {game.score} (level {game.level}, {game.lines_cleared_total} lines)")
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
