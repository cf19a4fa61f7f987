"""Core data models and game representation."""

from dungeon.core.enums import AIState, Command, DeathPolicy, PlayerAction, TerminationReason
from dungeon.core.models import Entity, Fighter, Rect, Vector2
from dungeon.core.grid import Tile, TileGrid
from dungeon.core.entity_store import PLAYER, EntityStore
from dungeon.core.snapshot import Snapshot

__all__ = [
    "AIState",
    "Command",
    "DeathPolicy",
    "Entity",
    "EntityStore",
    "Fighter",
    "PLAYER",
    "PlayerAction",
    "Rect",
    "Snapshot",
    "TerminationReason",
    "Tile",
    "TileGrid",
    "Vector2",
]
