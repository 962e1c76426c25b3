"""Engine tests on square boards."""

import pytest

from reversi.errors import IllegalMoveError, InvalidPositionError
from reversi.models import BoardType, Cell, CubePosition, OffsetPosition

from conftest import occupied


class TestSquareOpening:

    def test_initial_discs(self, square_engine):
        assert square_engine.cell_at(OffsetPosition(3, 3)) is Cell.BLACK
        assert square_engine.cell_at(OffsetPosition(4, 4)) is Cell.BLACK
        assert square_engine.cell_at(OffsetPosition(4, 3)) is Cell.WHITE
        assert square_engine.cell_at(OffsetPosition(3, 4)) is Cell.WHITE
        assert square_engine.get_score(Cell.BLACK) == 2
        assert square_engine.get_score(Cell.WHITE) == 2
        assert occupied(square_engine) == 4

    def test_opening_moves_row_major(self, square_engine):
        assert square_engine.legal_moves(Cell.BLACK) == [
            OffsetPosition(4, 2),
            OffsetPosition(5, 3),
            OffsetPosition(2, 4),
            OffsetPosition(3, 5),
        ]

    def test_corners(self, square_engine):
        assert square_engine.get_corners() == [
            OffsetPosition(0, 0),
            OffsetPosition(0, 7),
            OffsetPosition(7, 0),
            OffsetPosition(7, 7),
        ]

    def test_small_board_layout(self, make_engine):
        engine = make_engine(BoardType.SQUARE, 1)
        assert engine.cell_at(OffsetPosition(0, 0)) is Cell.BLACK
        assert engine.cell_at(OffsetPosition(1, 0)) is Cell.WHITE
        # Every slot is taken and nobody can move.
        assert engine.is_game_over()
        assert engine.get_winner() is None


class TestSquareCaptures:

    def test_horizontal_capture(self, square_engine):
        square_engine.execute_move(OffsetPosition(5, 3))
        assert square_engine.get_score(Cell.BLACK) == 4
        assert square_engine.get_score(Cell.WHITE) == 1
        assert square_engine.cell_at(OffsetPosition(4, 3)) is Cell.BLACK

    def test_reply_and_diagonal_capture(self, square_engine, play):
        play(square_engine, [OffsetPosition(5, 3), OffsetPosition(5, 4)])
        assert square_engine.get_score(Cell.BLACK) == 3
        assert square_engine.get_score(Cell.WHITE) == 3
        assert square_engine.cell_at(OffsetPosition(4, 4)) is Cell.WHITE

        target = OffsetPosition(5, 5)
        assert square_engine.count_captures(target, Cell.BLACK) == 2
        square_engine.execute_move(target)
        assert square_engine.cell_at(OffsetPosition(5, 4)) is Cell.BLACK
        assert square_engine.cell_at(OffsetPosition(4, 4)) is Cell.BLACK
        assert square_engine.get_score(Cell.BLACK) + square_engine.get_score(Cell.WHITE) == 7

    def test_illegal_square_move(self, square_engine):
        with pytest.raises(IllegalMoveError):
            square_engine.execute_move(OffsetPosition(0, 0))

    @pytest.mark.parametrize("pos", [
        OffsetPosition(8, 0),
        OffsetPosition(0, -1),
        CubePosition(0, 0, 0),
    ])
    def test_off_board(self, square_engine, pos):
        with pytest.raises(InvalidPositionError):
            square_engine.execute_move(pos)

    def test_pass_ends_game(self, square_engine):
        square_engine.pass_turn()
        square_engine.pass_turn()
        assert square_engine.is_game_over()
        assert square_engine.get_winner() is None

    def test_adjacency_uses_chebyshev_distance(self, square_engine):
        corner = OffsetPosition(7, 7)
        assert square_engine.is_adjacent_to_corner(corner, OffsetPosition(6, 6))
        assert not square_engine.is_adjacent_to_corner(corner, OffsetPosition(5, 6))
