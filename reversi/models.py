"""
Pydantic models for Reversi game state.

Positions are immutable value objects; they never own board state. Hex
boards address cells with cube coordinates ``(q, r, s)``, square boards
with offset coordinates ``(q, r)`` where ``q`` is the column and ``r`` the
row.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict


class Cell(str, Enum):
    """Disc colour. There is no empty member; an empty slot is ``None``."""
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> Cell:
        return Cell.WHITE if self is Cell.BLACK else Cell.BLACK

    def __str__(self) -> str:
        return self.value.capitalize()


class BoardType(str, Enum):
    """Board topology enumeration"""
    HEXAGONAL = "hexagonal"
    SQUARE = "square"


class GameStatus(str, Enum):
    """Game lifecycle enumeration"""
    WAITING = "waiting"
    ACTIVE = "active"
    FINISHED = "finished"


class CubePosition(BaseModel):
    """Hex cell in cube coordinates; on-board cells satisfy q + r + s == 0."""
    model_config = ConfigDict(frozen=True)

    q: int
    r: int
    s: int

    def __init__(self, q: int, r: int, s: int, **data) -> None:
        super().__init__(q=q, r=r, s=s, **data)

    def offset(self, direction: CubePosition) -> CubePosition:
        """Return this position translated by ``direction``."""
        return CubePosition(self.q + direction.q, self.r + direction.r, self.s + direction.s)

    def to_key(self) -> str:
        return f"{self.q},{self.r},{self.s}"

    def __str__(self) -> str:
        return f"Position[q={self.q}, r={self.r}, s={self.s}]"

    __repr__ = __str__


class OffsetPosition(BaseModel):
    """Square cell; ``q`` is the column and ``r`` the row."""
    model_config = ConfigDict(frozen=True)

    q: int
    r: int

    def __init__(self, q: int, r: int, **data) -> None:
        super().__init__(q=q, r=r, **data)

    def offset(self, direction: OffsetPosition) -> OffsetPosition:
        """Return this position translated by ``direction``."""
        return OffsetPosition(self.q + direction.q, self.r + direction.r)

    def to_key(self) -> str:
        return f"{self.q},{self.r}"

    def __str__(self) -> str:
        return f"Position[q={self.q}, r={self.r}]"

    __repr__ = __str__


Position = Union[CubePosition, OffsetPosition]
