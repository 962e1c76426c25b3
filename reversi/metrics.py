"""Prometheus metrics for the Reversi engine.

This module centralises counters so that the engine, strategy players and
self-play runner can record lightweight telemetry without each call site
having to manage its own metric instances. Labels are kept coarse
(board type, strategy name, outcome) to bound cardinality.
"""

from __future__ import annotations

from typing import Final

from prometheus_client import Counter

MOVES_EXECUTED: Final[Counter] = Counter(
    "reversi_moves_executed_total",
    "Total number of moves executed by game engines, labeled by board_type.",
    labelnames=("board_type",),
)

TURNS_PASSED: Final[Counter] = Counter(
    "reversi_turns_passed_total",
    "Total number of passed turns, labeled by board_type.",
    labelnames=("board_type",),
)

STRATEGY_DECISIONS: Final[Counter] = Counter(
    "reversi_strategy_decisions_total",
    (
        "Total strategy player decisions, labeled by strategy and outcome "
        "(move or pass)."
    ),
    labelnames=("strategy", "outcome"),
)

GAMES_COMPLETED: Final[Counter] = Counter(
    "reversi_games_completed_total",
    "Total completed self-play games, labeled by board_type and outcome.",
    labelnames=("board_type", "outcome"),
)
