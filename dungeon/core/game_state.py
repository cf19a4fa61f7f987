"""Mutable authoritative game state — only mutated by the turn controller."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dungeon.core.entity_store import EntityStore
from dungeon.core.grid import TileGrid
from dungeon.core.models import Entity, Rect, Vector2
from dungeon.utils.message_log import MessageLog

if TYPE_CHECKING:
    from dungeon.systems.mapgen import GeneratedMap


class GameState:
    """The single source of truth for one game run."""

    __slots__ = ("seed", "turn", "grid", "entities", "messages", "rooms", "start", "player_dead")

    def __init__(
        self,
        seed: int,
        grid: TileGrid,
        entities: EntityStore,
        messages: MessageLog,
        rooms: list[Rect] | None = None,
        start: Vector2 | None = None,
    ) -> None:
        self.seed: int = seed
        self.turn: int = 0
        self.grid: TileGrid = grid
        self.entities: EntityStore = entities
        self.messages: MessageLog = messages
        self.rooms: list[Rect] = rooms or []
        self.start: Vector2 = start or entities.player.pos
        self.player_dead: bool = False

    @classmethod
    def from_generated(cls, seed: int, generated: GeneratedMap, message_capacity: int) -> GameState:
        return cls(
            seed=seed,
            grid=generated.grid,
            entities=generated.entities,
            messages=MessageLog(message_capacity),
            rooms=generated.rooms,
            start=generated.start,
        )

    @property
    def player(self) -> Entity:
        return self.entities.player

    def is_blocked(self, x: int, y: int) -> bool:
        return self.entities.is_blocked(x, y, self.grid)
