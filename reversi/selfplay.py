"""Headless self-play between two strategy players.

``play_match`` runs a complete game on a fresh engine and returns a
:class:`MatchResult`. It is used by ``scripts/run_selfplay.py`` and by
tests that exercise whole games.
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field

from .ai.player import StrategyPlayer
from .errors import ConfigurationError
from .game_engine import GameEngine
from .metrics import GAMES_COMPLETED
from .models import BoardType, Cell

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 3
DEFAULT_MAX_TURNS = 1000

BOARD_SIZE_ENV = "REVERSI_DEFAULT_BOARD_SIZE"


def get_default_board_size() -> int:
    """Return ``$REVERSI_DEFAULT_BOARD_SIZE`` or :data:`DEFAULT_BOARD_SIZE`."""
    raw = os.getenv(BOARD_SIZE_ENV)
    if not raw:
        return DEFAULT_BOARD_SIZE
    try:
        size = int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid {BOARD_SIZE_ENV}: {raw}",
            context={"value": raw},
        ) from e
    if size <= 0:
        raise ConfigurationError(
            f"{BOARD_SIZE_ENV} must be positive",
            context={"value": raw},
        )
    return size


class MatchResult(BaseModel):
    """Outcome of one self-play game"""
    board_type: BoardType
    size: int
    black_strategy: str
    white_strategy: str
    winner: Cell | None = None
    black_score: int
    white_score: int
    moves: list[str] = Field(default_factory=list)
    passes: int = 0
    turns: int = 0
    completed: bool = True


def play_match(
    black: StrategyPlayer,
    white: StrategyPlayer,
    board_type: BoardType = BoardType.HEXAGONAL,
    size: int | None = None,
    max_turns: int = DEFAULT_MAX_TURNS,
) -> MatchResult:
    """Play ``black`` against ``white`` until the game ends or ``max_turns``.

    Every turn is either a move (recorded as the position key) or a pass
    (recorded as ``"pass"``). ``completed`` is False when the turn limit
    stopped the game first; ``winner`` is then left unset.
    ``size`` defaults to :func:`get_default_board_size`.
    """
    if black.cell is not Cell.BLACK or white.cell is not Cell.WHITE:
        raise ConfigurationError(
            "Players must control BLACK and WHITE respectively",
            context={"black": str(black.cell), "white": str(white.cell)},
        )

    if size is None:
        size = get_default_board_size()
    engine = GameEngine(board_type, size)
    engine.start_game()
    players = {Cell.BLACK: black, Cell.WHITE: white}

    moves: list[str] = []
    passes = 0
    turns = 0
    while not engine.is_game_over() and turns < max_turns:
        player = players[engine.current_turn]
        played = player.take_turn(engine)
        if played is None:
            passes += 1
            moves.append("pass")
        else:
            moves.append(played.to_key())
        turns += 1

    completed = engine.is_game_over()
    winner = engine.get_winner() if completed else None
    if completed:
        outcome = winner.value if winner is not None else "tie"
        GAMES_COMPLETED.labels(board_type=engine.board_type.value, outcome=outcome).inc()
    else:
        logger.warning("Match stopped after %d turns without finishing", turns)

    result = MatchResult(
        board_type=engine.board_type,
        size=engine.size,
        black_strategy=black.name,
        white_strategy=white.name,
        winner=winner,
        black_score=engine.get_score(Cell.BLACK),
        white_score=engine.get_score(Cell.WHITE),
        moves=moves,
        passes=passes,
        turns=turns,
        completed=completed,
    )
    logger.info(
        "Match finished: winner=%s black=%d white=%d turns=%d",
        winner, result.black_score, result.white_score, turns,
    )
    return result
