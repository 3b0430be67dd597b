"""
Garden grid helpers.

A garden is a square list of rows indexed garden[y][x]. Neighbor order is
fixed (up, down, left, right) so effects that enumerate neighbors behave
the same on every run.
"""

from __future__ import annotations
from typing import Iterator, Optional

from .cards import Tile
from .state import Garden

# (dx, dy) for up, down, left, right
DIRECTIONS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


def empty_garden(size: int) -> Garden:
    return [[None for _ in range(size)] for _ in range(size)]


def in_bounds(x: int, y: int, size: int) -> bool:
    return 0 <= x < size and 0 <= y < size


def neighbors(garden: Garden, x: int, y: int) -> list[Optional[Tile]]:
    """
    The four orthogonal neighbors of (x, y).

    Positions outside the grid are reported as empty (None).
    """
    size = len(garden)
    result: list[Optional[Tile]] = []
    for dx, dy in DIRECTIONS:
        nx, ny = x + dx, y + dy
        result.append(garden[ny][nx] if in_bounds(nx, ny, size) else None)
    return result


def is_full(garden: Garden) -> bool:
    return all(cell is not None for row in garden for cell in row)


def empty_cells(garden: Garden) -> Iterator[tuple[int, int]]:
    """(x, y) of every empty cell, row by row."""
    for y, row in enumerate(garden):
        for x, cell in enumerate(row):
            if cell is None:
                yield x, y


def iter_tiles(garden: Garden) -> Iterator[tuple[int, int, Tile]]:
    """(x, y, tile) of every occupied cell, row by row."""
    for y, row in enumerate(garden):
        for x, cell in enumerate(row):
            if cell is not None:
                yield x, y, cell
