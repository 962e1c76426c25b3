"""Fallback composition of strategies."""

from __future__ import annotations

from ..errors import ConfigurationError
from ..models import Cell, Position
from . import strategy_utils
from .base import ReadOnlyEngine, Strategy


class TryTwo:
    """Use ``first``'s candidates, falling back to ``second`` when empty.

    Nesting is right-associative: ``TryTwo(a, TryTwo(b, c))`` tries ``a``,
    then ``b``, then ``c``. :meth:`chain` builds that shape from a flat
    sequence.
    """

    def __init__(self, first: Strategy, second: Strategy) -> None:
        self._first = first
        self._second = second

    @property
    def first(self) -> Strategy:
        return self._first

    @property
    def second(self) -> Strategy:
        return self._second

    @classmethod
    def chain(cls, *strategies: Strategy) -> Strategy:
        """Right-fold ``strategies`` into nested ``TryTwo`` fallbacks."""
        if len(strategies) < 2:
            raise ConfigurationError(
                "TryTwo strategy requires at least two strategies.",
                context={"count": len(strategies)},
            )
        result = strategies[-1]
        for strategy in reversed(strategies[:-1]):
            result = cls(strategy, result)
        return result

    def choose_positions(self, engine: ReadOnlyEngine, cell: Cell) -> list[Position]:
        first_choice = self._first.choose_positions(engine, cell)
        if first_choice:
            return first_choice
        return self._second.choose_positions(engine, cell)

    def choose_best_position(self, positions: list[Position]) -> Position | None:
        return strategy_utils.choose_best_position(positions)

    def __repr__(self) -> str:
        return f"TryTwo({self._first!r}, {self._second!r})"
