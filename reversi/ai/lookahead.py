"""One-ply lookahead strategy.

For every legal move the strategy plays the move on a private engine built
from a snapshot of the board, then asks how good the resulting position is
for the opponent. Moves leaving the opponent the least advantage are kept.

Simulation never touches the engine being queried: each candidate gets a
fresh :class:`~reversi.board.Board` built from ``engine.get_board()`` and
``engine.size``, owned only by the throwaway simulated engine.
"""

from __future__ import annotations

import logging

from ..board import Board
from ..game_engine import GameEngine
from ..models import Cell, Position
from . import strategy_utils
from .base import ReadOnlyEngine
from .heuristic_strategies import (
    AvoidNeighboringCornersStrategy,
    GoForCornersStrategy,
    MaximumCaptureStrategy,
)
from .heuristic_weights import LookaheadWeights, get_lookahead_weights

logger = logging.getLogger(__name__)


class MinimizeOpponentAdvantageStrategy:
    """Pick the moves that minimise the opponent's follow-up prospects.

    Args:
        weights: Signal weights; defaults to :func:`get_lookahead_weights`.
    """

    def __init__(self, weights: LookaheadWeights | None = None) -> None:
        self.weights = weights if weights is not None else get_lookahead_weights()
        self._corners = GoForCornersStrategy()
        self._avoid_corners = AvoidNeighboringCornersStrategy()
        self._max_capture = MaximumCaptureStrategy()

    def choose_positions(self, engine: ReadOnlyEngine, cell: Cell) -> list[Position]:
        best: list[Position] = []
        min_advantage: int | None = None
        for move in strategy_utils.legal_moves(engine, cell):
            advantage = self.simulate_and_score(engine, move, cell)
            if min_advantage is None or advantage < min_advantage:
                min_advantage = advantage
                best = [move]
            elif advantage == min_advantage:
                best.append(move)
        logger.debug(
            "MinimizeOpponentAdvantage: %d candidates at advantage %s",
            len(best), min_advantage,
        )
        return best

    def choose_best_position(self, positions: list[Position]) -> Position | None:
        return strategy_utils.choose_best_position(positions)

    def simulate_and_score(self, engine: ReadOnlyEngine, move: Position, cell: Cell) -> int:
        """Play ``move`` for ``cell`` on a private copy and score the opponent."""
        snapshot = Board(engine.board_type, engine.size, engine.get_board())
        simulated = GameEngine.from_board(snapshot, current_turn=cell, record_metrics=False)
        simulated.execute_move(move)
        return self.opponent_advantage(simulated, cell.opponent)

    def opponent_advantage(self, engine: ReadOnlyEngine, opponent: Cell) -> int:
        """Weighted count of the good options ``opponent`` has in ``engine``."""
        advantage = 0
        if self._corners.choose_positions(engine, opponent):
            advantage += self.weights.corner
        if self._avoid_corners.choose_positions(engine, opponent):
            advantage += self.weights.avoid_corner
        if any(
            engine.count_captures(pos, opponent) > 1
            for pos in self._max_capture.choose_positions(engine, opponent)
        ):
            advantage += self.weights.multi_capture
        return advantage

    def __repr__(self) -> str:
        return f"MinimizeOpponentAdvantageStrategy(weights={self.weights!r})"
