"""Strategy-driven player.

A :class:`StrategyPlayer` owns one colour and one strategy. On its turn it
asks the strategy for candidates, applies the tie-break, and either plays
the chosen position or passes when the strategy offers nothing.
"""

from __future__ import annotations

import logging

from ..errors import InvalidStateError
from ..game_engine import GameEngine
from ..metrics import STRATEGY_DECISIONS
from ..models import Cell, Position
from .base import ReadOnlyEngine, Strategy

logger = logging.getLogger(__name__)


class StrategyPlayer:
    """AI player for one colour.

    Args:
        cell: The colour this player controls.
        strategy: Policy used to pick moves.
        name: Label used in logs and metrics; defaults to the strategy class.
    """

    def __init__(self, cell: Cell, strategy: Strategy, name: str | None = None) -> None:
        self.cell = Cell(cell)
        self.strategy = strategy
        self.name = name or type(strategy).__name__

    def choose_move(self, engine: ReadOnlyEngine) -> Position | None:
        """Return the strategy's pick for this colour, or ``None`` to pass."""
        positions = self.strategy.choose_positions(engine, self.cell)
        return self.strategy.choose_best_position(positions)

    def take_turn(self, engine: GameEngine) -> Position | None:
        """Play (or pass) on ``engine``; returns the position played.

        Raises:
            InvalidStateError: It is not this player's turn.
        """
        if engine.current_turn != self.cell:
            raise InvalidStateError(
                "Not this player's turn",
                context={"player": str(self.cell), "turn": str(engine.current_turn)},
            )
        move = self.choose_move(engine)
        if move is None:
            engine.pass_turn()
            STRATEGY_DECISIONS.labels(strategy=self.name, outcome="pass").inc()
            logger.debug("%s (%s) passes", self.cell, self.name)
            return None
        engine.execute_move(move)
        STRATEGY_DECISIONS.labels(strategy=self.name, outcome="move").inc()
        logger.debug("%s (%s) plays %s", self.cell, self.name, move)
        return move

    def __repr__(self) -> str:
        return f"StrategyPlayer(cell={self.cell.value}, strategy={self.strategy!r})"
