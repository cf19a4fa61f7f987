"""Field of view and explored memory.

Vision is a disc of radius ``r`` around the viewer (``dx² + dy² <= r²``).
A tile inside the disc is visible when the Bresenham line from the viewer
crosses no sight-blocking tile before reaching it. With ``light_walls`` the
blocking tile itself is lit, so room walls show up around the player.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from dungeon.core.grid import bresenham

if TYPE_CHECKING:
    from dungeon.core.grid import TileGrid
    from dungeon.core.models import Vector2

logger = logging.getLogger(__name__)

TileRecord = tuple[int, int, bool, bool, bool]


def compute_fov(
    grid: TileGrid,
    ox: int,
    oy: int,
    radius: int,
    light_walls: bool = True,
) -> frozenset[tuple[int, int]]:
    """Return every (x, y) visible from (ox, oy) within *radius*."""
    visible: set[tuple[int, int]] = {(ox, oy)}
    r2 = radius * radius
    for y in range(max(0, oy - radius), min(grid.height, oy + radius + 1)):
        for x in range(max(0, ox - radius), min(grid.width, ox + radius + 1)):
            if (x - ox) ** 2 + (y - oy) ** 2 > r2:
                continue
            if _ray_reaches(grid, ox, oy, x, y, light_walls):
                visible.add((x, y))
    return frozenset(visible)


def _ray_reaches(grid: TileGrid, ox: int, oy: int, tx: int, ty: int, light_walls: bool) -> bool:
    for cx, cy in bresenham(ox, oy, tx, ty):
        if cx == ox and cy == oy:
            continue
        if cx == tx and cy == ty:
            return light_walls or not grid.blocks_sight(cx, cy)
        if grid.blocks_sight(cx, cy):
            return False
    return True


class VisibilityEngine:
    """Keeps the current visible set and writes the explored flags.

    ``update`` only recomputes when the viewer moved; recomputing from the
    same origin would give the same set, so skipping it is safe.
    """

    __slots__ = ("_grid", "_radius", "_light_walls", "_visible", "_origin")

    def __init__(self, grid: TileGrid, radius: int, light_walls: bool = True) -> None:
        self._grid = grid
        self._radius = radius
        self._light_walls = light_walls
        self._visible: frozenset[tuple[int, int]] = frozenset()
        self._origin: tuple[int, int] | None = None

    @property
    def visible(self) -> frozenset[tuple[int, int]]:
        return self._visible

    def compute(self, origin: Vector2) -> frozenset[tuple[int, int]]:
        return compute_fov(self._grid, origin.x, origin.y, self._radius, self._light_walls)

    def update(self, origin: Vector2, force: bool = False) -> bool:
        """Refresh visibility for *origin*. Returns True if it recomputed."""
        key = (origin.x, origin.y)
        if not force and key == self._origin:
            return False
        self._visible = self.compute(origin)
        self._origin = key
        for x, y in self._visible:
            self._grid.mark_explored(x, y)
        logger.debug("FOV recomputed at %s: %d tiles visible", origin, len(self._visible))
        return True

    def is_visible(self, x: int, y: int) -> bool:
        return (x, y) in self._visible

    def tile_records(self) -> Iterator[TileRecord]:
        """Yield (x, y, visible, explored, blocks_sight) for every tile."""
        grid = self._grid
        visible = self._visible
        for x, y in grid.coords():
            tile = grid.tile(x, y)
            yield x, y, (x, y) in visible, tile.explored, tile.blocks_sight
