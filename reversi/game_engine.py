"""Core game engine for Reversi on hexagonal and square boards.

The engine owns a :class:`~reversi.board.Board`, the current turn, both
players' scores, the consecutive-pass counter and the list of registered
listeners. It implements the flip-capture rule:

    A move at ``pos`` for ``cell`` is legal iff ``pos`` is on the board,
    empty, and in at least one grid direction the adjacent cells form a
    non-empty contiguous run of the opponent's discs immediately followed
    by a disc of ``cell``.

Every such run is flipped when the move is executed. The same rule holds
for both topologies; only the direction set differs (6 on hex, 8 on
square).

Lifecycle is ``WAITING -> ACTIVE -> FINISHED``. Operations that need a
started game raise :class:`~reversi.errors.InvalidStateError` before
``start_game``.

Listeners are notified synchronously, in registration order, before the
mutating call returns. After ``execute_move`` the order is board, turn,
score; after ``pass_turn`` only the turn notification fires.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from .board import Board
from .errors import IllegalMoveError, InvalidArgumentError, InvalidPositionError, InvalidStateError
from .metrics import MOVES_EXECUTED, TURNS_PASSED
from .models import BoardType, Cell, GameStatus, Position

logger = logging.getLogger(__name__)

__all__ = ["GameEngine", "ModelStatusListener"]

# Two consecutive passes end the game.
MAX_CONSECUTIVE_PASSES = 2


@runtime_checkable
class ModelStatusListener(Protocol):
    """Callbacks fired by :class:`GameEngine` after state changes."""

    def on_turn_changed(self, current: Cell) -> None:
        ...

    def on_board_changed(self) -> None:
        ...

    def on_score_changed(self, black_score: int, white_score: int) -> None:
        ...


class GameEngine:
    """Reversi rules engine.

    Args:
        board_type: Board topology; hexagonal by default.
        size: Positive board size (hex radius, or half the square side).
    """

    def __init__(self, board_type: BoardType = BoardType.HEXAGONAL, size: int = 3) -> None:
        if size <= 0:
            raise InvalidArgumentError(
                "Size should always be positive", context={"size": size}
            )
        self._board = Board(board_type, size)
        self._current_turn = Cell.BLACK
        self._scores: dict[Cell, int] = {Cell.BLACK: 0, Cell.WHITE: 0}
        self._pass_count = 0
        self._started = False
        self._listeners: list[ModelStatusListener] = []
        self._record_metrics = True

    @classmethod
    def from_board(
        cls,
        board: Board,
        current_turn: Cell = Cell.BLACK,
        pass_count: int = 0,
        record_metrics: bool = True,
    ) -> GameEngine:
        """Build an already-started engine over a copy of ``board``.

        Scores are recounted from the discs on the board. This is the
        simulation path used by lookahead strategies: the new engine owns
        its grid exclusively and shares nothing with ``board``.
        """
        engine = cls.__new__(cls)
        engine._board = board.copy()
        engine._current_turn = Cell(current_turn)
        engine._scores = {
            Cell.BLACK: engine._board.count(Cell.BLACK),
            Cell.WHITE: engine._board.count(Cell.WHITE),
        }
        engine._pass_count = pass_count
        engine._started = True
        engine._listeners = []
        engine._record_metrics = record_metrics
        return engine

    def clone(self, current_turn: Cell | None = None) -> GameEngine:
        """Return an independent started copy of this engine.

        Listeners are not copied and the clone does not record metrics.
        """
        self._check_started()
        return GameEngine.from_board(
            self._board,
            current_turn=current_turn or self._current_turn,
            pass_count=self._pass_count,
            record_metrics=False,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def status(self) -> GameStatus:
        if not self._started:
            return GameStatus.WAITING
        if self.is_game_over():
            return GameStatus.FINISHED
        return GameStatus.ACTIVE

    def start_game(self) -> None:
        """Place the opening discs and start the game. Callable once."""
        if self._started:
            raise InvalidStateError("Cannot start the game more than once")
        for pos, cell in self._board.geometry.initial_layout(self._board.size):
            self._place_disc(pos, cell)
            self._scores[cell] += 1
        self._started = True
        logger.debug(
            "Started %s game of size %d", self._board.board_type.value, self._board.size
        )
        self._notify_score_changed()
        self._notify_turn_changed()

    def _check_started(self) -> None:
        if not self._started:
            raise InvalidStateError("Game has not started")

    # ------------------------------------------------------------------
    # Capture rule
    # ------------------------------------------------------------------

    def _run_to_flip(self, pos: Position, direction: Position, cell: Cell) -> list[Position]:
        """Opponent discs bounded by ``cell`` when stepping from ``pos``.

        Returns an empty list when the run is empty, runs off the board or
        ends on an empty slot.
        """
        run: list[Position] = []
        p = pos.offset(direction)
        while self._board.is_valid(p):
            occupant = self._board.cell_at(p)
            if occupant is None:
                return []
            if occupant == cell:
                return run
            run.append(p)
            p = p.offset(direction)
        return []

    def _captured_runs(self, pos: Position, cell: Cell) -> list[list[Position]]:
        return [
            run
            for direction in self._board.geometry.directions
            if (run := self._run_to_flip(pos, direction, cell))
        ]

    def is_legal_move(self, pos: Position, cell: Cell) -> bool:
        """Return True if ``cell`` may play at ``pos``."""
        if not self._board.is_valid(pos):
            return False
        if self._board.cell_at(pos) is not None:
            return False
        return any(
            self._run_to_flip(pos, direction, cell)
            for direction in self._board.geometry.directions
        )

    def count_captures(self, pos: Position, cell: Cell) -> int:
        """Number of discs ``cell`` would flip at ``pos``; 0 if illegal."""
        if not self.is_legal_move(pos, cell):
            return 0
        return sum(len(run) for run in self._captured_runs(pos, cell))

    def has_legal_move(self, cell: Cell) -> bool:
        return any(
            self._board.cell_at(pos) is None and self.is_legal_move(pos, cell)
            for pos in self._board.positions()
        )

    def legal_moves(self, cell: Cell) -> list[Position]:
        """Every legal move for ``cell`` in row-major order."""
        return [pos for pos in self._board.positions() if self.is_legal_move(pos, cell)]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _place_disc(self, pos: Position, cell: Cell) -> None:
        if self._board.cell_at(pos) is not None:
            raise InvalidStateError("Cell is already filled", context={"position": str(pos)})
        self._board.place(pos, cell)

    def execute_move(self, pos: Position) -> None:
        """Play the current player's disc at ``pos`` and flip captures.

        Raises:
            InvalidStateError: The game has not started or is already over.
            InvalidPositionError: ``pos`` is off the board.
            IllegalMoveError: The move captures nothing or ``pos`` is taken.
        """
        self._check_started()
        mover = self._current_turn
        if not self._board.is_valid(pos):
            raise InvalidPositionError("Cannot be an invalid position", position=pos)
        if self.is_game_over():
            raise InvalidStateError("Cannot execute a move if game is over")
        if not self.is_legal_move(pos, mover):
            raise IllegalMoveError("Invalid move", position=pos, player=mover)

        runs = self._captured_runs(pos, mover)
        self._place_disc(pos, mover)
        self._scores[mover] += 1
        for run in runs:
            for flip in run:
                self._board.place(flip, mover)
                self._scores[mover] += 1
                self._scores[mover.opponent] -= 1

        self._current_turn = mover.opponent
        self._pass_count = 0
        if self._record_metrics:
            MOVES_EXECUTED.labels(board_type=self._board.board_type.value).inc()
        logger.debug(
            "%s played %s flipping %d", mover, pos, sum(len(run) for run in runs)
        )

        self._notify_board_changed()
        self._notify_turn_changed()
        self._notify_score_changed()

    def pass_turn(self) -> None:
        """Hand the turn to the opponent without moving."""
        self._check_started()
        if self._pass_count > MAX_CONSECUTIVE_PASSES:
            raise InvalidStateError(
                "Pass Turn Count cannot be greater than 2",
                context={"pass_count": self._pass_count},
            )
        passer = self._current_turn
        self._current_turn = passer.opponent
        self._pass_count += 1
        if self._record_metrics:
            TURNS_PASSED.labels(board_type=self._board.board_type.value).inc()
        logger.debug("%s passed (consecutive passes: %d)", passer, self._pass_count)
        self._notify_turn_changed()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_game_over(self) -> bool:
        self._check_started()
        if self._pass_count >= MAX_CONSECUTIVE_PASSES:
            return True
        if self.has_legal_move(self._current_turn):
            return False
        return not self.has_legal_move(self._current_turn.opponent)

    def get_winner(self) -> Cell | None:
        """Higher-scoring colour, or ``None`` for a tie."""
        self._check_started()
        if not self.is_game_over():
            raise InvalidStateError("Game is not over.")
        black = self._scores[Cell.BLACK]
        white = self._scores[Cell.WHITE]
        if black > white:
            return Cell.BLACK
        if white > black:
            return Cell.WHITE
        return None

    def get_score(self, cell: Cell) -> int:
        self._check_started()
        score = self._scores[Cell(cell)]
        if score < 0:
            raise InvalidStateError("Individual scores should be non-negative.")
        return score

    @property
    def current_turn(self) -> Cell:
        self._check_started()
        return self._current_turn

    @property
    def pass_count(self) -> int:
        return self._pass_count

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def board_type(self) -> BoardType:
        return self._board.board_type

    def cell_at(self, pos: Position) -> Cell | None:
        self._check_started()
        if not self._board.is_valid(pos):
            raise InvalidPositionError("Invalid position", position=pos)
        return self._board.cell_at(pos)

    def get_board(self) -> dict[Position, Cell | None]:
        """Snapshot of every on-board position and its disc."""
        return self._board.cells()

    def board_copy(self) -> Board:
        return self._board.copy()

    def get_corners(self) -> list[Position]:
        return self._board.geometry.corners(self._board.size)

    def is_adjacent_to_corner(self, corner: Position, pos: Position) -> bool:
        return self._board.geometry.is_adjacent(corner, pos)

    def create_position(self, q: int, r: int) -> Position:
        return self._board.geometry.make_position(q, r)

    def coordinate_range(self) -> tuple[int, int]:
        """Inclusive ``(low, high)`` bounds for iterating both coordinates."""
        return self._board.geometry.coordinate_range(self._board.size)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: ModelStatusListener) -> None:
        self._listeners.append(listener)

    def _notify_turn_changed(self) -> None:
        for listener in self._listeners:
            listener.on_turn_changed(self._current_turn)

    def _notify_board_changed(self) -> None:
        for listener in self._listeners:
            listener.on_board_changed()

    def _notify_score_changed(self) -> None:
        for listener in self._listeners:
            listener.on_score_changed(self._scores[Cell.BLACK], self._scores[Cell.WHITE])

    def __repr__(self) -> str:
        return (
            f"GameEngine(type={self._board.board_type.value}, size={self._board.size}, "
            f"turn={self._current_turn.value}, black={self._scores[Cell.BLACK]}, "
            f"white={self._scores[Cell.WHITE]})"
        )
