"""Game module for Blockfall.

Exports the core game engine and supporting classes:
- GameGrid: Well representation, collision testing and row clearing
- Piece: Tetromino shape paired with its identity
- TetrominoType: Enum of catalog pieces
- rotate: Clockwise rotation of a shape matrix
- ScoringRules: Score table, level and gravity interval rules
- FallingBlockGame: Game session state machine
"""

from .grid import GameGrid
from .pieces import BASE_SHAPES, PIECE_COLORS, Piece, TetrominoType, random_piece, rotate
from .rules import ScoringRules
from .core import Action, FallingBlockGame, GameConfig, LockResult

__all__ = [
    "GameGrid",
    "BASE_SHAPES",
    "PIECE_COLORS",
    "Piece",
    "TetrominoType",
    "random_piece",
    "rotate",
    "ScoringRules",
    "Action",
    "FallingBlockGame",
    "GameConfig",
    "LockResult",
]
