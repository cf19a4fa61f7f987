"""Immutable render snapshot — what a render sink or the API gets to see."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dungeon.core.models import Color

if TYPE_CHECKING:
    from dungeon.core.game_state import GameState
    from dungeon.systems.visibility import TileRecord, VisibilityEngine
    from dungeon.utils.message_log import Message


@dataclass(frozen=True, slots=True)
class EntityRecord:
    """One visible entity to draw.

    ``layer`` is the draw-order hint: 0 for non-blocking entities (corpses),
    1 for blockers, so blockers are painted on top.
    """

    id: int
    x: int
    y: int
    glyph: str
    color: Color
    layer: int
    name: str


def visible_entity_records(state: GameState, visibility: VisibilityEngine) -> list[EntityRecord]:
    """Entities inside the FOV, non-blocking first (stable within a layer)."""
    records = [
        EntityRecord(
            id=e.id, x=e.pos.x, y=e.pos.y, glyph=e.glyph, color=e.color,
            layer=1 if e.blocks else 0, name=e.name,
        )
        for e in state.entities
        if visibility.is_visible(e.pos.x, e.pos.y)
    ]
    records.sort(key=lambda r: r.layer)
    return records


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only copy of everything needed to draw one frame."""

    turn: int
    seed: int
    width: int
    height: int
    tiles: tuple[TileRecord, ...]
    entities: tuple[EntityRecord, ...]
    player_hp: int
    player_max_hp: int
    player_alive: bool
    messages: tuple[Message, ...]

    @classmethod
    def from_state(cls, state: GameState, visibility: VisibilityEngine) -> Snapshot:
        fighter = state.player.fighter
        return cls(
            turn=state.turn,
            seed=state.seed,
            width=state.grid.width,
            height=state.grid.height,
            tiles=tuple(visibility.tile_records()),
            entities=tuple(visible_entity_records(state, visibility)),
            player_hp=fighter.hp if fighter else 0,
            player_max_hp=fighter.max_hp if fighter else 0,
            player_alive=state.player.alive,
            messages=tuple(state.messages.latest()),
        )

    def tile_flags(self) -> list[int]:
        """Per-tile render flags in row-major order: bit0 visible, bit1 explored, bit2 blocks sight."""
        return [
            (1 if visible else 0) | (2 if explored else 0) | (4 if blocks_sight else 0)
            for _, _, visible, explored, blocks_sight in self.tiles
        ]
