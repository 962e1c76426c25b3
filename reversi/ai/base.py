"""
Strategy protocols for Reversi move selection.

Strategies are composed, not inherited: every policy implements the
single :class:`Strategy` capability interface, and composite policies
(:class:`~reversi.ai.try_two.TryTwo`,
:class:`~reversi.ai.lookahead.MinimizeOpponentAdvantageStrategy`) wrap
other implementations of the same interface. Shared helpers such as legal
move enumeration and the tie-break live as free functions in
:mod:`reversi.ai.strategy_utils`.

Strategies only ever see the engine through :class:`ReadOnlyEngine`; they
never call ``execute_move`` or ``pass_turn`` on the real engine.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import BoardType, Cell, Position


@runtime_checkable
class ReadOnlyEngine(Protocol):
    """Query surface of :class:`~reversi.game_engine.GameEngine`."""

    @property
    def size(self) -> int:
        ...

    @property
    def board_type(self) -> BoardType:
        ...

    @property
    def current_turn(self) -> Cell:
        ...

    def get_score(self, cell: Cell) -> int:
        ...

    def get_winner(self) -> Cell | None:
        ...

    def cell_at(self, pos: Position) -> Cell | None:
        ...

    def get_board(self) -> dict[Position, Cell | None]:
        ...

    def is_legal_move(self, pos: Position, cell: Cell) -> bool:
        ...

    def is_game_over(self) -> bool:
        ...

    def has_legal_move(self, cell: Cell) -> bool:
        ...

    def count_captures(self, pos: Position, cell: Cell) -> int:
        ...

    def create_position(self, q: int, r: int) -> Position:
        ...

    def coordinate_range(self) -> tuple[int, int]:
        ...

    def get_corners(self) -> list[Position]:
        ...

    def is_adjacent_to_corner(self, corner: Position, pos: Position) -> bool:
        ...


@runtime_checkable
class Strategy(Protocol):
    """Move-selection policy.

    ``choose_positions`` returns the positions this policy considers
    acceptable for ``cell``; an empty list means the policy has nothing to
    offer, not necessarily that no legal move exists.
    ``choose_best_position`` applies the deterministic tie-break.
    """

    def choose_positions(self, engine: ReadOnlyEngine, cell: Cell) -> list[Position]:
        ...

    def choose_best_position(self, positions: list[Position]) -> Position | None:
        ...
