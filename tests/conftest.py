import numpy as np
import pytest

from blockfall.game import FallingBlockGame, GameConfig, Piece, TetrominoType


@pytest.fixture
def game():
    return FallingBlockGame(GameConfig(random_seed=7))


def place(game, kind, x, y, shape=None):
    """Put a specific piece under control at (x, y)."""
    piece = Piece.spawn(kind)
    if shape is not None:
        piece = Piece(kind, np.array(shape, dtype=np.int8))
    game.current_piece = piece
    game.current_x = x
    game.current_y = y
    return piece


def fill_row(grid, row, gap=None, value=int(TetrominoType.T)):
    grid.grid[row, :] = value
    if gap is not None:
        grid.grid[row, gap] = 0
