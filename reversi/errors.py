"""
Reversi Error Hierarchy

Unified exception hierarchy for the rules engine and strategy framework.
All custom exceptions inherit from ReversiError for easy catching and
filtering.

Two categories exist:

- ``InvalidArgumentError``: the caller supplied a wrong value (off-board
  position, illegal move, bad board size, unknown strategy name). The
  engine state is left unchanged and the caller may recover.
- ``InvalidStateError``: the operation is forbidden in the current
  lifecycle phase (e.g. moving before ``start_game``). This is a usage bug
  in the caller.

Usage:
    from reversi.errors import IllegalMoveError, InvalidStateError

    try:
        engine.execute_move(pos)
    except IllegalMoveError as e:
        logger.warning(f"Rejected move: {e.message}")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigurationError",
    "IllegalMoveError",
    "InvalidArgumentError",
    "InvalidPositionError",
    "InvalidStateError",
    "ReversiError",
]


class ReversiError(Exception):
    """Base exception for all Reversi errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "REVERSI_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Argument Errors
# =============================================================================


class InvalidArgumentError(ReversiError, ValueError):
    """Caller supplied a structurally or semantically wrong value."""
    code: str = "INVALID_ARGUMENT"


class InvalidPositionError(InvalidArgumentError):
    """Position lies outside the board for its topology and size."""
    code: str = "INVALID_POSITION"

    def __init__(
        self,
        message: str,
        position: Any = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if position is not None:
            self.context["position"] = str(position)


class IllegalMoveError(InvalidArgumentError):
    """Move violates the flip-capture rule.

    Attributes:
        position: The rejected target position
        player: The colour that attempted the move
    """
    code: str = "ILLEGAL_MOVE"

    def __init__(
        self,
        message: str,
        position: Any = None,
        player: Any = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.position = position
        self.player = player
        if position is not None:
            self.context["position"] = str(position)
        if player is not None:
            self.context["player"] = str(player)


class ConfigurationError(InvalidArgumentError):
    """Invalid strategy or runtime configuration."""
    code: str = "CONFIGURATION_ERROR"


# =============================================================================
# State Errors
# =============================================================================


class InvalidStateError(ReversiError, RuntimeError):
    """Operation requested in a lifecycle phase that forbids it.

    Raised for calls before ``start_game``, a second ``start_game``,
    asking for the winner of an unfinished game, or passing past the
    pass-count safety threshold.
    """
    code: str = "INVALID_STATE"
