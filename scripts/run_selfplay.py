#!/usr/bin/env python3
"""Run headless self-play games between two strategies.

Usage:
    # Corner-seeking with capture fallback vs. lookahead, hex radius 3
    python scripts/run_selfplay.py \\
        --black TryTwo ChooseCorners MaxCapture \\
        --white MinimizeOpponent

    # Square 8x8 board, several games, verbose engine logs
    python scripts/run_selfplay.py --board-type square --size 4 --games 5 --verbose

Each finished game is printed as one JSON line.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Setup path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from reversi.ai import StrategyPlayer, create_strategy, list_strategy_names
from reversi.errors import ReversiError
from reversi.logging_config import setup_logging
from reversi.models import BoardType, Cell
from reversi.selfplay import BOARD_SIZE_ENV, DEFAULT_MAX_TURNS, play_match


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Reversi strategies against each other.",
        epilog=f"Strategy names: {', '.join(list_strategy_names())}",
    )
    parser.add_argument(
        "--board-type",
        choices=[t.value for t in BoardType],
        default=BoardType.HEXAGONAL.value,
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help=f"Board size (default: ${BOARD_SIZE_ENV} or 3)",
    )
    parser.add_argument("--black", nargs="+", default=["MaxCapture"])
    parser.add_argument("--white", nargs="+", default=["MaxCapture"])
    parser.add_argument("--games", type=int, default=1)
    parser.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS)
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        logger = setup_logging("reversi", level="DEBUG" if args.verbose else None)
    except ReversiError as e:
        print(f"Invalid logging configuration: {e}", file=sys.stderr)
        return 1

    try:
        black = StrategyPlayer(Cell.BLACK, create_strategy(args.black), name=" ".join(args.black))
        white = StrategyPlayer(Cell.WHITE, create_strategy(args.white), name=" ".join(args.white))
        for _ in range(args.games):
            result = play_match(
                black,
                white,
                board_type=BoardType(args.board_type),
                size=args.size,
                max_turns=args.max_turns,
            )
            print(json.dumps(result.model_dump(mode="json")))
    except ReversiError as e:
        logger.error("Self-play failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
