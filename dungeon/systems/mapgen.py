"""Dungeon generator — rectangular rooms joined by L-shaped tunnels.

Rooms are proposed ``max_rooms`` times. A proposal that touches or overlaps
an accepted room is dropped (the budget counts attempts, not successes).
Each accepted room after the first is tunnelled to the previous one, so the
room graph is a chain and therefore connected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dungeon.core.entity_builder import ORC, TROLL, make_monster, make_player
from dungeon.core.entity_store import PLAYER, EntityStore
from dungeon.core.enums import Domain
from dungeon.core.grid import TileGrid
from dungeon.core.models import Rect, Vector2

if TYPE_CHECKING:
    from dungeon.config import GameConfig
    from dungeon.systems.rng import DeterministicRNG, RngStream

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GeneratedMap:
    """Everything the generator hands over to a new game."""

    grid: TileGrid
    entities: EntityStore
    start: Vector2
    rooms: list[Rect] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Carving primitives
# ---------------------------------------------------------------------------

def create_room(room: Rect, grid: TileGrid) -> None:
    for cell in room.interior():
        grid.carve(cell.x, cell.y)


def create_h_tunnel(x1: int, x2: int, y: int, grid: TileGrid) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        grid.carve(x, y)


def create_v_tunnel(y1: int, y2: int, x: int, grid: TileGrid) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        grid.carve(x, y)


def connect_rooms(prev: Vector2, new: Vector2, horizontal_first: bool, grid: TileGrid) -> None:
    """Carve an L-shaped corridor between two room centers."""
    if horizontal_first:
        create_h_tunnel(prev.x, new.x, prev.y, grid)
        create_v_tunnel(prev.y, new.y, new.x, grid)
    else:
        create_v_tunnel(prev.y, new.y, prev.x, grid)
        create_h_tunnel(prev.x, new.x, new.y, grid)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

class MapGenerator:
    """Builds a fully carved grid, the player and the monster population."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: GameConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def generate(self) -> GeneratedMap:
        cfg = self._config
        grid = TileGrid(cfg.map_width, cfg.map_height)
        entities = EntityStore()
        entities.add(make_player(PLAYER))

        rooms_rng = self._rng.stream(Domain.MAP_GEN)
        tunnel_rng = self._rng.stream(Domain.TUNNEL)
        spawn_rng = self._rng.stream(Domain.SPAWN)

        rooms: list[Rect] = []
        start = Vector2(0, 0)

        for attempt in range(cfg.max_rooms):
            w = rooms_rng.randint(cfg.room_min_size, cfg.room_max_size)
            h = rooms_rng.randint(cfg.room_min_size, cfg.room_max_size)
            x = rooms_rng.randint(0, cfg.map_width - w - 1)
            y = rooms_rng.randint(0, cfg.map_height - h - 1)
            new_room = Rect.from_size(x, y, w, h)

            if any(new_room.intersects(other) for other in rooms):
                logger.debug("Room attempt %d at %s rejected (overlap)", attempt, new_room)
                continue

            create_room(new_room, grid)
            center = new_room.center()

            if not rooms:
                # Player goes in first so no monster spawns on the start cell
                start = center
                entities.set_pos(PLAYER, center.x, center.y)

            self.place_monsters(new_room, grid, entities, spawn_rng)

            if rooms:
                prev_center = rooms[-1].center()
                connect_rooms(prev_center, center, tunnel_rng.chance(0.5), grid)

            rooms.append(new_room)

        logger.info(
            "Generated %dx%d dungeon: %d/%d rooms, %d monsters (seed=%d)",
            cfg.map_width, cfg.map_height, len(rooms), cfg.max_rooms,
            len(entities) - 1, self._rng.seed,
        )
        return GeneratedMap(grid=grid, entities=entities, start=start, rooms=rooms)

    def place_monsters(
        self,
        room: Rect,
        grid: TileGrid,
        entities: EntityStore,
        rng: RngStream,
    ) -> int:
        """Spawn up to ``max_room_monsters`` inside *room*; occupied cells are skipped."""
        cfg = self._config
        num_monsters = rng.randint(0, cfg.max_room_monsters)
        placed = 0
        for _ in range(num_monsters):
            x = rng.randint(room.x1 + 1, room.x2 - 1)
            y = rng.randint(room.y1 + 1, room.y2 - 1)
            if entities.is_blocked(x, y, grid):
                logger.debug("Monster cell (%d, %d) occupied, skipped", x, y)
                continue
            species = TROLL if rng.chance(cfg.troll_chance) else ORC
            entities.add(make_monster(entities.next_id(), species, Vector2(x, y)))
            placed += 1
        return placed
