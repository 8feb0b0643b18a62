"""
Tests for the piece catalog and rotation.
"""

import random

import numpy as np
import pytest

from blockfall.game import BASE_SHAPES, PIECE_COLORS, Piece, TetrominoType, random_piece, rotate


class TestRotate:

    def test_rotates_clockwise(self):
        shape = np.array([[1, 0], [1, 0], [1, 1]], dtype=np.int8)
        expected = np.array([[1, 1, 1], [1, 0, 0]], dtype=np.int8)
        assert np.array_equal(rotate(shape), expected)

    def test_line_piece_turns_vertical(self):
        rotated = rotate(BASE_SHAPES[TetrominoType.I])
        assert rotated.shape == (4, 1)
        assert rotated.sum() == 4

    @pytest.mark.parametrize("kind", list(TetrominoType))
    def test_four_turns_return_original(self, kind):
        shape = BASE_SHAPES[kind]
        turned = shape
        for _ in range(4):
            turned = rotate(turned)
        assert np.array_equal(turned, shape)

    def test_does_not_touch_catalog_shape(self):
        before = BASE_SHAPES[TetrominoType.T].copy()
        rotate(BASE_SHAPES[TetrominoType.T])
        assert np.array_equal(BASE_SHAPES[TetrominoType.T], before)

    def test_result_is_read_only(self):
        rotated = rotate(BASE_SHAPES[TetrominoType.S])
        with pytest.raises(ValueError):
            rotated[0, 0] = 1


class TestCatalog:

    def test_seven_kinds_with_distinct_identities_and_colors(self):
        assert len(BASE_SHAPES) == 7
        assert len({int(k) for k in TetrominoType}) == 7
        assert 0 not in {int(k) for k in TetrominoType}
        assert len(set(PIECE_COLORS.values())) == 7

    def test_every_shape_has_four_cells(self):
        for shape in BASE_SHAPES.values():
            assert int(shape.sum()) == 4

    def test_catalog_shapes_are_read_only(self):
        with pytest.raises(ValueError):
            BASE_SHAPES[TetrominoType.O][0, 0] = 0

    def test_rotated_piece_is_new_value(self):
        piece = Piece.spawn(TetrominoType.L)
        turned = piece.rotated()
        assert turned is not piece
        assert turned.kind == TetrominoType.L
        assert piece.shape.shape == (3, 2)
        assert turned.shape.shape == (2, 3)

    def test_cells_at_offsets_shape(self):
        piece = Piece.spawn(TetrominoType.S)
        assert piece.cells_at(4, 2) == [(5, 2), (6, 2), (4, 3), (5, 3)]

    def test_random_piece_draws_every_kind(self):
        rng = random.Random(0)
        seen = {random_piece(rng).kind for _ in range(200)}
        assert seen == set(TetrominoType)
