"""Move and capture rules."""

from __future__ import annotations

from collections.abc import Iterator

from .board import BOARD_CELLS, Board
from .pawn import Color, Pawn, Position, _center

_DIAGONALS = ((-1, -1), (1, -1), (-1, 1), (1, 1))
_SEARCH_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def is_inside_board(x: int, y: int) -> bool:
    """Tell whether a cell lies on the board."""
    return 0 <= x < BOARD_CELLS and 0 <= y < BOARD_CELLS


def where_is_beating_available(pawn: Pawn | None, board: Board) -> list[Position]:
    """Return the landing squares of every capture the pawn can make."""
    if pawn is None or not pawn.is_alive:
        return []
    gx, gy = pawn.cell()
    result: list[Position] = []

    if not pawn.is_queen:
        for dx, dy in _DIAGONALS:
            mid_x, mid_y = gx + dx, gy + dy
            end_x, end_y = gx + 2 * dx, gy + 2 * dy
            if not (is_inside_board(mid_x, mid_y) and is_inside_board(end_x, end_y)):
                continue
            mid = board.at(mid_x, mid_y)
            if mid is not None and mid.color is not pawn.color and board.at(end_x, end_y) is None:
                result.append(_center(end_x, end_y))
        return result

    for dx, dy in _DIAGONALS:
        x, y = gx + dx, gy + dy
        enemy_found = False
        while is_inside_board(x, y):
            current = board.at(x, y)
            if current is None:
                if enemy_found:
                    result.append(_center(x, y))
            elif enemy_found or current.color is pawn.color:
                break
            else:
                enemy_found = True
            x += dx
            y += dy
    return result


def _capture_paths(
    grid: list[list[Pawn | None]],
    x: int,
    y: int,
    path: list,
    color: Color,
) -> Iterator[list]:
    beaten = False
    for dx, dy in _SEARCH_DIAGONALS:
        mid_x, mid_y = x + dx, y + dy
        dest_x, dest_y = x + 2 * dx, y + 2 * dy
        if not (is_inside_board(mid_x, mid_y) and is_inside_board(dest_x, dest_y)):
            continue
        mid = grid[mid_y][mid_x]
        if mid is None or mid.color is color or grid[dest_y][dest_x] is not None:
            continue
        mover = grid[y][x]
        grid[y][x] = None
        grid[mid_y][mid_x] = None
        grid[dest_y][dest_x] = mover
        yield from _capture_paths(grid, dest_x, dest_y, [*path, (dest_x, dest_y)], color)
        grid[dest_y][dest_x] = None
        grid[mid_y][mid_x] = mid
        grid[y][x] = mover
        beaten = True
    if not beaten and len(path) > 1:
        yield path


def multiple_beatings(pawn: Pawn, board: Board) -> list[list]:
    """Return the longest capture chains, searched from the pawn's stored position."""
    grid = [row[:] for row in board.grid]
    start_x, start_y = (int(coord) for coord in pawn.position)
    paths = list(_capture_paths(grid, start_x, start_y, [pawn.position], pawn.color))
    if not paths:
        return []
    longest = max(len(path) for path in paths)
    return [path for path in paths if len(path) == longest]


def legal_moves(pawn: Pawn | None, board: Board) -> list[list[Position]]:
    """Return the pawn's moves as paths of positions starting at the pawn."""
    if pawn is None or not pawn.is_alive:
        return []
    if where_is_beating_available(pawn, board):
        return multiple_beatings(pawn, board)

    start = pawn.position
    gx, gy = pawn.cell()
    result: list[list[Position]] = []

    if not pawn.is_queen:
        dy = -1 if pawn.color is Color.WHITE else 1
        for dx in (-1, 1):
            x, y = gx + dx, gy + dy
            if is_inside_board(x, y) and board.at(x, y) is None:
                result.append([start, _center(x, y)])
        return result

    for dx, dy in _DIAGONALS:
        x, y = gx + dx, gy + dy
        while is_inside_board(x, y) and board.at(x, y) is None:
            result.append([start, _center(x, y)])
            x += dx
            y += dy
    return result