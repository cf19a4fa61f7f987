"""Tile grid: terrain, sight blocking and explored memory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True)
class Tile:
    """A single map cell."""

    blocked: bool
    blocks_sight: bool
    explored: bool = False

    @classmethod
    def wall(cls) -> Tile:
        return cls(blocked=True, blocks_sight=True)

    @classmethod
    def empty(cls) -> Tile:
        return cls(blocked=False, blocks_sight=False)


class TileGrid:
    """2D tile grid backed by a flat list.

    Every coordinate in ``[0, width) x [0, height)`` is addressable.
    Anything outside raises ``IndexError``: callers never reach past the
    edge, because the generator always leaves a wall border.
    """

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._tiles: list[Tile] = [Tile.wall() for _ in range(width * height)]

    # -- access --

    def _idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        return self._tiles[self._idx(x, y)]

    def is_blocked(self, x: int, y: int) -> bool:
        return self._tiles[self._idx(x, y)].blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        return self._tiles[self._idx(x, y)].blocks_sight

    # -- carving --

    def carve(self, x: int, y: int) -> None:
        """Turn a cell into open floor, keeping its explored memory."""
        tile = self._tiles[self._idx(x, y)]
        tile.blocked = False
        tile.blocks_sight = False

    def mark_explored(self, x: int, y: int) -> None:
        self._tiles[self._idx(x, y)].explored = True

    # -- iteration --

    def coords(self) -> Iterator[tuple[int, int]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield every cell on the line from (x0,y0) to (x1,y1), both ends included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    cx, cy = x0, y0
    while True:
        yield cx, cy
        if cx == x1 and cy == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            cx += sx
        if e2 < dx:
            err += dx
            cy += sy
