from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    L = 2
    J = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    shape = np.array(rows, dtype=np.int8)
    shape.flags.writeable = False
    return shape


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _frozen([[1, 1, 1, 1]]),
    TetrominoType.L: _frozen([[1, 0], [1, 0], [1, 1]]),
    TetrominoType.J: _frozen([[0, 1], [0, 1], [1, 1]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    TetrominoType.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    TetrominoType.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
}

PIECE_COLORS: Dict[TetrominoType, Tuple[int, int, int]] = {
    TetrominoType.I: (6, 182, 212),   # cyan
    TetrominoType.L: (249, 115, 22),  # orange
    TetrominoType.J: (59, 130, 246),  # blue
    TetrominoType.O: (234, 179, 8),   # yellow
    TetrominoType.S: (34, 197, 94),   # green
    TetrominoType.T: (168, 85, 247),  # purple
    TetrominoType.Z: (239, 68, 68),   # red
}


def rotate(shape: Shape) -> Shape:
    """Rotate a shape 90 degrees clockwise.

    Transposes the matrix and reverses each resulting row, so a 1x4 shape
    becomes 4x1. The input is never modified.
    """
    rotated = np.array(shape, dtype=np.int8).T[:, ::-1].copy()
    rotated.flags.writeable = False
    return rotated


@dataclass(frozen=True, eq=False)
class Piece:
    kind: TetrominoType
    shape: Shape

    @staticmethod
    def spawn(kind: TetrominoType) -> "Piece":
        return Piece(kind, BASE_SHAPES[kind])

    @property
    def identity(self) -> int:
        return int(self.kind)

    def rotated(self) -> "Piece":
        return Piece(self.kind, rotate(self.shape))

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        h, w = self.shape.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if self.shape[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells


def random_piece(rng: random.Random) -> Piece:
    """Uniform draw over the catalog; every spawn is independent."""
    kind = rng.choice(list(TetrominoType))
    return Piece.spawn(kind)
