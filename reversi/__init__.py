"""Reversi rules engine for hexagonal and square boards.

    from reversi import BoardType, Cell, GameEngine

    engine = GameEngine(BoardType.SQUARE, size=4)
    engine.start_game()
    engine.execute_move(engine.create_position(5, 3))
"""

from reversi.board import Board, create_board
from reversi.errors import (
    ConfigurationError,
    IllegalMoveError,
    InvalidArgumentError,
    InvalidPositionError,
    InvalidStateError,
    ReversiError,
)
from reversi.game_engine import GameEngine, ModelStatusListener
from reversi.models import BoardType, Cell, CubePosition, GameStatus, OffsetPosition, Position

__all__ = [
    "Board",
    "BoardType",
    "Cell",
    "ConfigurationError",
    "CubePosition",
    "GameEngine",
    "GameStatus",
    "IllegalMoveError",
    "InvalidArgumentError",
    "InvalidPositionError",
    "InvalidStateError",
    "ModelStatusListener",
    "OffsetPosition",
    "Position",
    "ReversiError",
    "create_board",
]
