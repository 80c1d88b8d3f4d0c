"""The 8x8 board holding the pawns."""

from __future__ import annotations

from collections.abc import Iterator

from .pawn import CELL_SIZE, Color, Pawn, _center

BOARD_CELLS = 8
GRAY = (130, 130, 130)
DARKGRAY = (80, 80, 80)
PINK = (255, 109, 194)
PAWN_RADIUS = 40
RING_RADIUS = 45


def _empty_grid() -> list[list[Pawn | None]]:
    return [[None] * BOARD_CELLS for _ in range(BOARD_CELLS)]


class Board:
    """A grid of cells indexed as ``grid[row][column]``."""

    def __init__(self) -> None:
        self.grid: list[list[Pawn | None]] = _empty_grid()

    def fill_pawns(self) -> None:
        """Clear the board and set up the starting position."""
        self.grid = _empty_grid()
        for row in range(3):
            for col in range(BOARD_CELLS):
                if (row + col) % 2 == 1:
                    self.grid[row][col] = Pawn(Color.BLACK, _center(col, row))
        for row in range(5, BOARD_CELLS):
            for col in range(BOARD_CELLS):
                if (row + col) % 2 == 1:
                    self.grid[row][col] = Pawn(Color.WHITE, _center(col, row))

    @staticmethod
    def _check(x: int, y: int) -> None:
        if not (0 <= x < BOARD_CELLS and 0 <= y < BOARD_CELLS):
            raise IndexError(f"cell ({x}, {y}) is off the board")

    def at(self, x: int, y: int) -> Pawn | None:
        """Return the pawn at column ``x``, row ``y``, or None."""
        self._check(x, y)
        return self.grid[y][x]

    def place(self, x: int, y: int, pawn: Pawn | None) -> None:
        """Put a pawn (or nothing) on a cell."""
        self._check(x, y)
        self.grid[y][x] = pawn

    def remove(self, x: int, y: int) -> Pawn | None:
        """Empty a cell and return what stood there."""
        self._check(x, y)
        pawn = self.grid[y][x]
        self.grid[y][x] = None
        return pawn

    def pawns(self) -> Iterator[Pawn]:
        """Yield every pawn on the board, row by row."""
        for row in self.grid:
            for pawn in row:
                if pawn is not None:
                    yield pawn

    def draw_board(self, surface) -> None:
        """Paint the checkered cells."""
        import pygame

        for row in range(BOARD_CELLS):
            for col in range(BOARD_CELLS):
                color = GRAY if (row + col) % 2 == 0 else DARKGRAY
                rect = (row * CELL_SIZE, col * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                pygame.draw.rect(surface, color, rect)

    def draw_pawns(self, surface) -> None:
        """Paint the living pawns, ringing the queens."""
        import pygame

        for pawn in self.pawns():
            if not pawn.is_alive:
                continue
            pygame.draw.circle(surface, pawn.color.value, pawn.position, PAWN_RADIUS)
            if pawn.is_queen:
                pygame.draw.circle(
                    surface, PINK, pawn.position, RING_RADIUS,
                    width=RING_RADIUS - PAWN_RADIUS,
                )