"""Draughts pieces and their colours."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

CELL_SIZE = 100

Position = tuple[float, float]


class Color(Enum):
    """The two sides of the board, valued by their RGB colour."""

    WHITE = (255, 255, 255)
    BLACK = (0, 0, 0)


@dataclass(eq=False)
class Pawn:
    """A piece on the board; its position is the pixel centre of its cell."""

    color: Color
    position: Position
    is_alive: bool = True
    is_queen: bool = False

    def cell(self) -> tuple[int, int]:
        """Return the (column, row) of the cell the pawn stands on."""
        x, y = self.position
        return int(x) // CELL_SIZE, int(y) // CELL_SIZE

    def change_position(self, position: Position) -> None:
        """Move the pawn to a new pixel position."""
        x, y = position
        self.position = (x, y)


def _center(x: int, y: int) -> tuple[int, int]:
    half = CELL_SIZE // 2
    return x * CELL_SIZE + half, y * CELL_SIZE + half


def _cell_of(position: Position) -> tuple[int, int]:
    x, y = position
    return int(x) // CELL_SIZE, int(y) // CELL_SIZE