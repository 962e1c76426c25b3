"""Single-criterion heuristic strategies.

Each policy filters the legal moves for a colour by one rule and leaves
the final pick to the shared tie-break in
:func:`reversi.ai.strategy_utils.choose_best_position`:

- :class:`MaximumCaptureStrategy`: moves flipping the most discs.
- :class:`GoForCornersStrategy`: board corners that are legal right now.
- :class:`AvoidNeighboringCornersStrategy`: moves not next to any corner.

These are cheap one-rule filters. Combine them with
:class:`~reversi.ai.try_two.TryTwo` to build fallback sequences.
"""

from __future__ import annotations

import logging

from ..models import Cell, Position
from . import strategy_utils
from .base import ReadOnlyEngine

logger = logging.getLogger(__name__)

__all__ = [
    "AvoidNeighboringCornersStrategy",
    "GoForCornersStrategy",
    "MaximumCaptureStrategy",
]


class MaximumCaptureStrategy:
    """Keep the legal moves with the highest capture count (ties kept)."""

    def choose_positions(self, engine: ReadOnlyEngine, cell: Cell) -> list[Position]:
        best: list[Position] = []
        max_captures = 0
        for pos in strategy_utils.legal_moves(engine, cell):
            captures = engine.count_captures(pos, cell)
            if captures > max_captures:
                max_captures = captures
                best = [pos]
            elif captures == max_captures:
                best.append(pos)
        logger.debug("MaxCapture: %d candidates capturing %d", len(best), max_captures)
        return best

    def choose_best_position(self, positions: list[Position]) -> Position | None:
        return strategy_utils.choose_best_position(positions)

    def __repr__(self) -> str:
        return "MaximumCaptureStrategy()"


class GoForCornersStrategy:
    """Keep the engine's corners that are currently legal for ``cell``."""

    def choose_positions(self, engine: ReadOnlyEngine, cell: Cell) -> list[Position]:
        corners = [
            corner for corner in engine.get_corners()
            if engine.is_legal_move(corner, cell)
        ]
        logger.debug("GoForCorners: %d corner moves", len(corners))
        return corners

    def choose_best_position(self, positions: list[Position]) -> Position | None:
        return strategy_utils.choose_best_position(positions)

    def __repr__(self) -> str:
        return "GoForCornersStrategy()"


class AvoidNeighboringCornersStrategy:
    """Keep legal moves that are not adjacent to any corner."""

    def choose_positions(self, engine: ReadOnlyEngine, cell: Cell) -> list[Position]:
        corners = engine.get_corners()
        safe = [
            pos for pos in strategy_utils.legal_moves(engine, cell)
            if not any(engine.is_adjacent_to_corner(corner, pos) for corner in corners)
        ]
        logger.debug("AvoidNeighboringCorners: %d safe moves", len(safe))
        return safe

    def choose_best_position(self, positions: list[Position]) -> Position | None:
        return strategy_utils.choose_best_position(positions)

    def __repr__(self) -> str:
        return "AvoidNeighboringCornersStrategy()"
