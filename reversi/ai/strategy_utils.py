"""Small helpers shared by every strategy implementation."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import Cell, Position
from .base import ReadOnlyEngine


def legal_moves(engine: ReadOnlyEngine, cell: Cell) -> list[Position]:
    """Enumerate legal moves for ``cell`` over the engine's coordinate range.

    Positions are produced row by row (``r`` outer, ``q`` inner). For hex
    boards some generated triples fall outside the hexagon; the legality
    check rejects them.
    """
    low, high = engine.coordinate_range()
    moves = []
    for r in range(low, high + 1):
        for q in range(low, high + 1):
            pos = engine.create_position(q, r)
            if engine.is_legal_move(pos, cell):
                moves.append(pos)
    return moves


def choose_best_position(positions: Iterable[Position] | None) -> Position | None:
    """Deterministic tie-break: smallest row ``r``, then smallest column ``q``.

    The result does not depend on the order of ``positions``. Returns
    ``None`` when there are no candidates.
    """
    if not positions:
        return None
    return min(positions, key=lambda pos: (pos.r, pos.q), default=None)
