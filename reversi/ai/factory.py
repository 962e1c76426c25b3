"""Strategy factory.

Builds strategies from short names so that scripts and configuration can
describe a policy as a list of tokens. ``TryTwo`` is a prefix operator
taking the next two strategy expressions, which may themselves be
``TryTwo`` expressions:

    create_strategy(["MaxCapture"])
    create_strategy(["TryTwo", "ChooseCorners", "MaxCapture"])
    create_strategy(
        ["TryTwo", "ChooseCorners", "TryTwo", "AvoidNextToCorners", "MaxCapture"]
    )
    # -> TryTwo(GoForCorners, TryTwo(AvoidNeighboringCorners, MaximumCapture))

Names are matched case-insensitively. Unknown names and malformed
expressions raise :class:`~reversi.errors.ConfigurationError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from ..errors import ConfigurationError
from .base import Strategy
from .heuristic_strategies import (
    AvoidNeighboringCornersStrategy,
    GoForCornersStrategy,
    MaximumCaptureStrategy,
)
from .lookahead import MinimizeOpponentAdvantageStrategy
from .try_two import TryTwo

logger = logging.getLogger(__name__)

__all__ = [
    "StrategyType",
    "create_strategy",
    "get_strategy_by_name",
    "list_strategy_names",
]


class StrategyType(str, Enum):
    """Strategy name enumeration"""
    CHOOSE_CORNERS = "ChooseCorners"
    MAX_CAPTURE = "MaxCapture"
    AVOID_NEXT_TO_CORNERS = "AvoidNextToCorners"
    MINIMIZE_OPPONENT = "MinimizeOpponent"
    TRY_TWO = "TryTwo"


_STRATEGY_BUILDERS: dict[StrategyType, Callable[[], Strategy]] = {
    StrategyType.CHOOSE_CORNERS: GoForCornersStrategy,
    StrategyType.MAX_CAPTURE: MaximumCaptureStrategy,
    StrategyType.AVOID_NEXT_TO_CORNERS: AvoidNeighboringCornersStrategy,
    StrategyType.MINIMIZE_OPPONENT: MinimizeOpponentAdvantageStrategy,
}

_NAME_LOOKUP: dict[str, StrategyType] = {t.value.lower(): t for t in StrategyType}


def _parse_type(name: str) -> StrategyType:
    try:
        return _NAME_LOOKUP[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown strategy name: {name}",
            context={"known": ", ".join(list_strategy_names())},
        ) from None


def list_strategy_names() -> list[str]:
    return [t.value for t in StrategyType]


def get_strategy_by_name(name: str) -> Strategy:
    """Instantiate a single, non-composite strategy by name."""
    strategy_type = _parse_type(name)
    if strategy_type is StrategyType.TRY_TWO:
        raise ConfigurationError("TryTwo strategy requires at least two strategies.")
    return _STRATEGY_BUILDERS[strategy_type]()


def _parse(tokens: Sequence[str], index: int) -> tuple[Strategy, int]:
    if index >= len(tokens):
        raise ConfigurationError(
            "Invalid strategy configuration for TryTwo.",
            context={"tokens": " ".join(tokens)},
        )
    strategy_type = _parse_type(tokens[index])
    if strategy_type is StrategyType.TRY_TWO:
        first, index = _parse(tokens, index + 1)
        second, index = _parse(tokens, index)
        return TryTwo(first, second), index
    return _STRATEGY_BUILDERS[strategy_type](), index + 1


def create_strategy(tokens: Sequence[str] | str) -> Strategy:
    """Build a strategy from a token list (or a whitespace-separated string)."""
    if isinstance(tokens, str):
        tokens = tokens.split()
    tokens = list(tokens)
    if not tokens:
        raise ConfigurationError("Strategy list cannot be empty.")
    strategy, consumed = _parse(tokens, 0)
    if consumed != len(tokens):
        raise ConfigurationError(
            "Unexpected tokens after strategy expression.",
            context={"extra": " ".join(tokens[consumed:])},
        )
    logger.debug("Built strategy %r from %s", strategy, tokens)
    return strategy
