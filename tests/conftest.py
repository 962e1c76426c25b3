"""
Shared pytest fixtures for reversi tests.

Engine fixtures are function-scoped factories so every test gets an
isolated game.
"""

from pathlib import Path
import sys
from typing import Callable, Iterable, List, Optional, Tuple

import pytest

# Ensure the project root is on sys.path so `import reversi` works without
# an editable install.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from reversi.game_engine import GameEngine
from reversi.models import BoardType, Cell, CubePosition, OffsetPosition, Position


# =============================================================================
# LISTENERS
# =============================================================================


class RecordingListener:
    """Listener that records every notification as a tuple."""

    def __init__(self) -> None:
        self.events: List[Tuple] = []

    def on_turn_changed(self, current: Cell) -> None:
        self.events.append(("turn", current))

    def on_board_changed(self) -> None:
        self.events.append(("board",))

    def on_score_changed(self, black_score: int, white_score: int) -> None:
        self.events.append(("score", black_score, white_score))

    def kinds(self) -> List[str]:
        return [event[0] for event in self.events]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def recording_listener() -> RecordingListener:
    return RecordingListener()


# =============================================================================
# ENGINE FACTORIES
# =============================================================================


@pytest.fixture
def make_engine() -> Callable[..., GameEngine]:
    """Factory fixture for engines.

    Usage:
        engine = make_engine(BoardType.SQUARE, 4)
        engine = make_engine(size=2, started=False)
    """

    def _make(
        board_type: BoardType = BoardType.HEXAGONAL,
        size: int = 3,
        started: bool = True,
    ) -> GameEngine:
        engine = GameEngine(board_type, size)
        if started:
            engine.start_game()
        return engine

    return _make


@pytest.fixture
def hex_engine(make_engine) -> GameEngine:
    """Started hexagonal engine of radius 3."""
    return make_engine(BoardType.HEXAGONAL, 3)


@pytest.fixture
def square_engine(make_engine) -> GameEngine:
    """Started 8x8 square engine."""
    return make_engine(BoardType.SQUARE, 4)


@pytest.fixture
def play() -> Callable[[GameEngine, Iterable[Optional[Position]]], GameEngine]:
    """Apply a sequence of moves to an engine; ``None`` means pass."""

    def _play(engine: GameEngine, moves: Iterable[Optional[Position]]) -> GameEngine:
        for move in moves:
            if move is None:
                engine.pass_turn()
            else:
                engine.execute_move(move)
        return engine

    return _play


def hex_pos(q: int, r: int, s: int) -> CubePosition:
    return CubePosition(q, r, s)


def sq_pos(q: int, r: int) -> OffsetPosition:
    return OffsetPosition(q, r)


def occupied(engine: GameEngine) -> int:
    return sum(1 for cell in engine.get_board().values() if cell is not None)


# Hex radius-2 game ending 8-4 for BLACK.
HEX2_BLACK_WINS: List[Optional[CubePosition]] = [
    CubePosition(2, -1, -1),
    CubePosition(-2, 1, 1),
    None,
    CubePosition(1, -2, 1),
    CubePosition(-1, -1, 2),
    CubePosition(1, 1, -2),
    CubePosition(-1, 2, -1),
]

# Hex radius-2 game ending 5-5 after two consecutive passes.
HEX2_TIE: List[Optional[CubePosition]] = HEX2_BLACK_WINS[:5] + [None, None]

# BLACK passes every turn and is wiped out on hex radius 2.
HEX2_BLACK_ONLY_PASSES: List[Optional[CubePosition]] = [
    None,
    CubePosition(-2, 1, 1),
    None,
    CubePosition(1, -2, 1),
    None,
    CubePosition(1, 1, -2),
]
