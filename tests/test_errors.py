"""Tests for reversi/errors.py - error hierarchy."""

import pytest

from reversi.errors import (
    ConfigurationError,
    IllegalMoveError,
    InvalidArgumentError,
    InvalidPositionError,
    InvalidStateError,
    ReversiError,
)
from reversi.models import Cell, OffsetPosition


class TestReversiError:

    def test_default_code(self):
        err = ReversiError("boom")
        assert err.code == "REVERSI_ERROR"
        assert str(err) == "[REVERSI_ERROR] boom"

    def test_custom_code_and_context(self):
        err = ReversiError("boom", code="CUSTOM", context={"size": 0})
        assert str(err) == "[CUSTOM] boom (size=0)"
        assert err.to_dict() == {
            "code": "CUSTOM",
            "message": "boom",
            "context": {"size": 0},
        }


class TestHierarchy:

    @pytest.mark.parametrize("cls", [
        InvalidArgumentError,
        InvalidPositionError,
        IllegalMoveError,
        ConfigurationError,
    ])
    def test_argument_errors_are_value_errors(self, cls):
        assert issubclass(cls, InvalidArgumentError)
        assert issubclass(cls, ValueError)
        assert issubclass(cls, ReversiError)

    def test_state_error_is_runtime_error(self):
        assert issubclass(InvalidStateError, RuntimeError)
        assert not issubclass(InvalidStateError, ValueError)

    def test_catch_all_by_base(self):
        with pytest.raises(ReversiError):
            raise InvalidStateError("Game has not started")


class TestContext:

    def test_position_context(self):
        err = InvalidPositionError("Invalid Position", position=OffsetPosition(9, 0))
        assert err.code == "INVALID_POSITION"
        assert err.context == {"position": "Position[q=9, r=0]"}

    def test_illegal_move_context(self):
        pos = OffsetPosition(0, 0)
        err = IllegalMoveError("Invalid move", position=pos, player=Cell.WHITE)
        assert err.position == pos
        assert err.player is Cell.WHITE
        assert err.context == {"position": "Position[q=0, r=0]", "player": "White"}
        assert str(err) == "[ILLEGAL_MOVE] Invalid move (position=Position[q=0, r=0], player=White)"

    def test_context_not_shared_between_instances(self):
        first = InvalidPositionError("a", position=OffsetPosition(1, 1))
        second = InvalidPositionError("b")
        assert second.context == {}
        assert first.context != second.context
