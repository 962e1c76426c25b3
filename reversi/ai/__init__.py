"""Move-selection strategies for Reversi.

The recommended entry point is the factory:

    from reversi.ai import create_strategy

    strategy = create_strategy(["TryTwo", "ChooseCorners", "MaxCapture"])
    best = strategy.choose_best_position(strategy.choose_positions(engine, Cell.BLACK))

Architecture:
- base.py: Strategy / ReadOnlyEngine protocols
- strategy_utils.py: legal-move enumeration and tie-break helpers
- heuristic_strategies.py: MaximumCapture, GoForCorners, AvoidNeighboringCorners
- try_two.py: TryTwo fallback combinator
- lookahead.py: one-ply MinimizeOpponentAdvantage
- heuristic_weights.py: configurable lookahead weights
- factory.py: build strategies from names
- player.py: StrategyPlayer (move or pass)
"""

from reversi.ai.base import ReadOnlyEngine, Strategy
from reversi.ai.factory import (
    StrategyType,
    create_strategy,
    get_strategy_by_name,
    list_strategy_names,
)
from reversi.ai.heuristic_strategies import (
    AvoidNeighboringCornersStrategy,
    GoForCornersStrategy,
    MaximumCaptureStrategy,
)
from reversi.ai.heuristic_weights import LookaheadWeights, get_lookahead_weights
from reversi.ai.lookahead import MinimizeOpponentAdvantageStrategy
from reversi.ai.player import StrategyPlayer
from reversi.ai.strategy_utils import choose_best_position, legal_moves
from reversi.ai.try_two import TryTwo

__all__ = [
    "AvoidNeighboringCornersStrategy",
    "GoForCornersStrategy",
    "LookaheadWeights",
    "MaximumCaptureStrategy",
    "MinimizeOpponentAdvantageStrategy",
    "ReadOnlyEngine",
    "Strategy",
    "StrategyPlayer",
    "StrategyType",
    "TryTwo",
    "choose_best_position",
    "create_strategy",
    "get_lookahead_weights",
    "get_strategy_by_name",
    "legal_moves",
    "list_strategy_names",
]
