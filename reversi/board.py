"""Board storage for the Reversi engine.

A ``Board`` maps on-board positions to the disc occupying them. Empty
slots are simply absent from the mapping, so a slot is either
``Cell.BLACK``, ``Cell.WHITE`` or ``None`` with no third state.

The board knows nothing about legality: ``place`` validates the position
against the topology but does not check occupancy. That is the engine's
job.
"""

from __future__ import annotations

from collections.abc import Mapping

from .errors import InvalidArgumentError, InvalidPositionError
from .geometry import get_geometry
from .models import BoardType, Cell, Position

__all__ = ["Board", "create_board"]


class Board:
    """Fixed-size grid for one topology.

    Args:
        board_type: Hexagonal or square topology.
        size: Positive size parameter (hex radius, or half the square side).
        cells: Optional existing grid to start from. It is copied, so the
            new board never aliases the caller's mapping.
    """

    def __init__(
        self,
        board_type: BoardType,
        size: int,
        cells: Mapping[Position, Cell | None] | None = None,
    ) -> None:
        if size <= 0:
            raise InvalidArgumentError(
                "Size cannot be non-positive", context={"size": size}
            )
        self._board_type = BoardType(board_type)
        self._geometry = get_geometry(self._board_type)
        self._size = size
        self._grid: dict[Position, Cell] = {}
        if cells is not None:
            for pos, cell in cells.items():
                if cell is None:
                    continue
                if not self.is_valid(pos):
                    raise InvalidPositionError("Invalid Position", position=pos)
                self._grid[pos] = Cell(cell)

    @property
    def size(self) -> int:
        return self._size

    @property
    def board_type(self) -> BoardType:
        return self._board_type

    @property
    def geometry(self):
        return self._geometry

    def is_valid(self, pos: Position) -> bool:
        """Return True if ``pos`` lies on this board."""
        return self._geometry.is_valid(pos, self._size)

    def cell_at(self, pos: Position) -> Cell | None:
        """Return the disc at ``pos`` or ``None`` if the slot is empty."""
        if not self.is_valid(pos):
            raise InvalidPositionError("Invalid Position", position=pos)
        return self._grid.get(pos)

    def place(self, pos: Position, cell: Cell) -> None:
        """Put ``cell`` at ``pos``, overwriting any existing disc."""
        if not self.is_valid(pos):
            raise InvalidPositionError("Invalid Position", position=pos)
        self._grid[pos] = cell

    def positions(self) -> list[Position]:
        """Every on-board position in row-major order."""
        return self._geometry.positions(self._size)

    def cells(self) -> dict[Position, Cell | None]:
        """Snapshot of the full grid; empty slots map to ``None``."""
        return {pos: self._grid.get(pos) for pos in self.positions()}

    def occupied_count(self) -> int:
        return len(self._grid)

    def count(self, cell: Cell) -> int:
        return sum(1 for c in self._grid.values() if c == cell)

    def copy(self) -> Board:
        """Return an independent board with the same size and discs."""
        return Board(self._board_type, self._size, self._grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._board_type == other._board_type
            and self._size == other._size
            and self._grid == other._grid
        )

    def __repr__(self) -> str:
        return (
            f"Board(type={self._board_type.value}, size={self._size}, "
            f"occupied={len(self._grid)})"
        )


def create_board(
    board_type: BoardType,
    size: int,
    cells: Mapping[Position, Cell | None] | None = None,
) -> Board:
    """Build a board of ``board_type``; ``cells`` is copied when given."""
    return Board(board_type, size, cells)
