from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np

from .grid import GameGrid
from .pieces import Piece, random_piece
from .rules import ScoringRules

logger = logging.getLogger(__name__)

# Widest spawn shape is 4 cells, tallest is 3.
MIN_WIDTH = 6
MIN_HEIGHT = 3


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    NONE = 4
    PAUSE = 5
    RESET = 6


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < MIN_WIDTH:
            raise ValueError(f"width must be at least {MIN_WIDTH}, got {self.width}")
        if self.height < MIN_HEIGHT:
            raise ValueError(f"height must be at least {MIN_HEIGHT}, got {self.height}")


@dataclass
class LockResult:
    lines_cleared: int
    points: int
    game_over: bool


class FallingBlockGame:
    """Single game session: the well, the falling piece, score and level.

    Every command is a silent no-op when it does not apply (blocked move,
    paused session, finished game). Only `toggle_pause` and `reset` work
    while paused, and only `reset` works after game over.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.score = 0
        self.level = 1
        self.lines_cleared_total = 0
        self.paused = False
        self.game_over = False
        self.drop_interval = self.rules.initial_interval
        self.current_piece: Optional[Piece] = None
        self.current_x = 0
        self.current_y = 0
        self.reset()

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.grid.reset()
        self.current_piece = None
        self.score = 0
        self.level = 1
        self.lines_cleared_total = 0
        self.drop_interval = self.rules.initial_interval
        self.paused = False
        self.game_over = False
        self._spawn_piece()

    @property
    def position(self) -> Tuple[int, int]:
        return self.current_x, self.current_y

    @property
    def accepts_input(self) -> bool:
        return self.current_piece is not None and not self.game_over and not self.paused

    def _spawn_piece(self) -> None:
        # Spawn is not checked for overlap; a blocked spawn ends the game when it locks at row 0.
        self.current_piece = random_piece(self.rng)
        self.current_x = self.grid.width // 2 - 1
        self.current_y = 0

    def move(self, dx: int) -> None:
        if not self.accepts_input:
            return
        new_x = self.current_x + dx
        if not self.grid.collides(self.current_piece.shape, new_x, self.current_y):
            self.current_x = new_x

    def move_left(self) -> None:
        self.move(-1)

    def move_right(self) -> None:
        self.move(1)

    def rotate(self) -> None:
        if not self.accepts_input:
            return
        rotated = self.current_piece.rotated()
        if not self.grid.collides(rotated.shape, self.current_x, self.current_y):
            self.current_piece = rotated

    def soft_drop(self) -> Optional[LockResult]:
        """Move the piece one row down, locking it in place if that is blocked."""
        if not self.accepts_input:
            return None
        next_y = self.current_y + 1
        if not self.grid.collides(self.current_piece.shape, self.current_x, next_y):
            self.current_y = next_y
            return None
        result = self._lock_piece()
        if not result.game_over:
            self._spawn_piece()
        return result

    def tick(self) -> Optional[LockResult]:
        """Gravity step, called by the external timer every `drop_interval`."""
        return self.soft_drop()

    def toggle_pause(self) -> None:
        if self.game_over:
            return
        self.paused = not self.paused

    def _lock_piece(self) -> LockResult:
        assert self.current_piece is not None
        piece = self.current_piece
        self.grid.merge(piece.shape, self.current_x, self.current_y, piece.identity)
        lines = self.grid.clear_completed_rows()
        points = 0
        if lines > 0:
            points = self.rules.score_for_lines(lines, self.level)
            self.score += points
            self.lines_cleared_total += lines
            new_level = self.rules.next_level(self.level, lines)
            if new_level != self.level:
                logger.debug("level %d -> %d", self.level, new_level)
            self.level = new_level
            self.drop_interval = self.rules.drop_interval(self.level)
            logger.debug("cleared %d rows for %d points", lines, points)
        logger.debug("locked %s at (%d, %d)", piece.kind.name, self.current_x, self.current_y)

        if self.current_y <= 0:
            self.game_over = True
            self.current_piece = None
            logger.debug("game over with score %d", self.score)
        return LockResult(lines_cleared=lines, points=points, game_over=self.game_over)

    def step(self, action: Action) -> Tuple[np.ndarray, int, bool, dict]:
        score_before = self.score

        if action == Action.RESET:
            self.reset()
            score_before = self.score
        elif action == Action.PAUSE:
            self.toggle_pause()
        elif action == Action.LEFT:
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
            "level": self.level,
            "lines_cleared_total": self.lines_cleared_total,
            "paused": self.paused,
            "drop_interval": self.drop_interval,
        }
        return self.get_state(), self.score - score_before, self.game_over, info

    def get_state(self) -> np.ndarray:
        # Overlay the falling piece on a copy of the grid; negative values mark it
        state = self.grid.clone_state()
        if self.current_piece is not None and not self.game_over:
            for x, y in self.current_piece.cells_at(self.current_x, self.current_y):
                if 0 <= y < self.grid.height and 0 <= x < self.grid.width:
                    state[y, x] = -self.current_piece.identity
        return state
