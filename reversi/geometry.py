"""Board geometry for the two supported topologies.

Each topology supplies the same small set of operations, parameterised by
the board size ``n``:

- ``is_valid``: coordinate constraints (hex: cube invariant and every
  coordinate within ``±n``; square: both coordinates in ``[0, 2n)``),
- ``directions``: the 6 (hex) or 8 (square) unit step vectors used for
  line scans,
- ``corners``: the 4 extremal positions used by corner heuristics,
- ``is_adjacent``: one grid step or less apart,
- ``initial_layout``: the opening discs placed by ``start_game``,
- ``positions`` / ``coordinate_range`` / ``make_position`` for iteration.

The topology set is closed: ``get_geometry`` maps each ``BoardType`` to
its geometry and nothing else is registered.

Usage:
    from reversi.geometry import get_geometry

    geo = get_geometry(BoardType.HEXAGONAL)
    geo.is_valid(CubePosition(1, 1, -2), size=3)  # True
"""

from __future__ import annotations

from .models import BoardType, Cell, CubePosition, OffsetPosition, Position

__all__ = [
    "HEX_DIRECTIONS",
    "SQUARE_DIRECTIONS",
    "HexGeometry",
    "SquareGeometry",
    "get_geometry",
]

# Hexagonal directions (6 neighbors)
HEX_DIRECTIONS: tuple[CubePosition, ...] = (
    CubePosition(1, 0, -1),
    CubePosition(-1, 0, 1),
    CubePosition(0, 1, -1),
    CubePosition(0, -1, 1),
    CubePosition(1, -1, 0),
    CubePosition(-1, 1, 0),
)

# Square board directions (8 neighbors)
SQUARE_DIRECTIONS: tuple[OffsetPosition, ...] = (
    OffsetPosition(-1, -1),
    OffsetPosition(0, -1),
    OffsetPosition(1, -1),
    OffsetPosition(-1, 1),
    OffsetPosition(0, 1),
    OffsetPosition(1, 1),
    OffsetPosition(-1, 0),
    OffsetPosition(1, 0),
)


class HexGeometry:
    """Cube-coordinate hexagon of radius ``size`` centred on the origin."""

    board_type = BoardType.HEXAGONAL
    directions = HEX_DIRECTIONS

    @staticmethod
    def is_valid(position: Position, size: int) -> bool:
        if not isinstance(position, CubePosition):
            return False
        return (
            position.q + position.r + position.s == 0
            and abs(position.q) <= size
            and abs(position.r) <= size
            and abs(position.s) <= size
        )

    @staticmethod
    def make_position(q: int, r: int) -> CubePosition:
        return CubePosition(q, r, -q - r)

    @staticmethod
    def coordinate_range(size: int) -> tuple[int, int]:
        return (-size, size)

    @staticmethod
    def positions(size: int) -> list[CubePosition]:
        """All on-board cells, row-major (r ascending, then q ascending)."""
        result = []
        for r in range(-size, size + 1):
            q1 = max(-size, -r - size)
            q2 = min(size, -r + size)
            for q in range(q1, q2 + 1):
                result.append(CubePosition(q, r, -q - r))
        return result

    @staticmethod
    def corners(size: int) -> list[CubePosition]:
        return [
            CubePosition(-size, size, 0),
            CubePosition(size, -size, 0),
            CubePosition(0, -size, size),
            CubePosition(0, size, -size),
        ]

    @staticmethod
    def is_adjacent(a: Position, b: Position) -> bool:
        return (
            abs(a.q - b.q) <= 1
            and abs(a.r - b.r) <= 1
            and abs(a.s - b.s) <= 1
        )

    @staticmethod
    def initial_layout(size: int) -> list[tuple[CubePosition, Cell]]:
        # Six discs alternating around the (empty) centre.
        return [
            (CubePosition(0, -1, 1), Cell.BLACK),
            (CubePosition(1, -1, 0), Cell.WHITE),
            (CubePosition(-1, 1, 0), Cell.BLACK),
            (CubePosition(0, 1, -1), Cell.WHITE),
            (CubePosition(-1, 0, 1), Cell.WHITE),
            (CubePosition(1, 0, -1), Cell.BLACK),
        ]


class SquareGeometry:
    """Square grid of side ``2 * size`` with (0, 0) in the top-left."""

    board_type = BoardType.SQUARE
    directions = SQUARE_DIRECTIONS

    @staticmethod
    def is_valid(position: Position, size: int) -> bool:
        if not isinstance(position, OffsetPosition):
            return False
        side = 2 * size
        return 0 <= position.q < side and 0 <= position.r < side

    @staticmethod
    def make_position(q: int, r: int) -> OffsetPosition:
        return OffsetPosition(q, r)

    @staticmethod
    def coordinate_range(size: int) -> tuple[int, int]:
        return (0, 2 * size - 1)

    @staticmethod
    def positions(size: int) -> list[OffsetPosition]:
        side = 2 * size
        return [OffsetPosition(q, r) for r in range(side) for q in range(side)]

    @staticmethod
    def corners(size: int) -> list[OffsetPosition]:
        last = 2 * size - 1
        return [
            OffsetPosition(0, 0),
            OffsetPosition(0, last),
            OffsetPosition(last, 0),
            OffsetPosition(last, last),
        ]

    @staticmethod
    def is_adjacent(a: Position, b: Position) -> bool:
        return abs(a.q - b.q) <= 1 and abs(a.r - b.r) <= 1

    @staticmethod
    def initial_layout(size: int) -> list[tuple[OffsetPosition, Cell]]:
        c = size
        return [
            (OffsetPosition(c - 1, c - 1), Cell.BLACK),
            (OffsetPosition(c, c - 1), Cell.WHITE),
            (OffsetPosition(c - 1, c), Cell.WHITE),
            (OffsetPosition(c, c), Cell.BLACK),
        ]


_GEOMETRIES: dict[BoardType, type[HexGeometry] | type[SquareGeometry]] = {
    BoardType.HEXAGONAL: HexGeometry,
    BoardType.SQUARE: SquareGeometry,
}


def get_geometry(board_type: BoardType) -> type[HexGeometry] | type[SquareGeometry]:
    """Return the geometry for ``board_type``."""
    return _GEOMETRIES[BoardType(board_type)]
