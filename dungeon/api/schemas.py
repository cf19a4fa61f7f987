"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dungeon.core.snapshot import Snapshot


# --- Map ---

class MapResponse(BaseModel):
    width: int
    height: int
    grid: list[int] = Field(
        description=(
            "RLE-encoded per-tile render flags [value, count, ...] in row-major order. "
            "bit0 = visible, bit1 = explored, bit2 = blocks sight."
        ),
    )


# --- Game state ---

class EntitySchema(BaseModel):
    id: int
    name: str
    x: int
    y: int
    glyph: str
    color: str
    layer: int = Field(0, description="Draw order: 0 = floor items and corpses, 1 = blockers")


class MessageSchema(BaseModel):
    text: str
    color: str


class PlayerSchema(BaseModel):
    hp: int
    max_hp: int
    alive: bool


class GameStateResponse(BaseModel):
    turn: int
    phase: str
    termination: str | None = None
    compact: bool = False
    player: PlayerSchema
    entities: list[EntitySchema] = Field(default_factory=list)
    messages: list[MessageSchema] = Field(default_factory=list)


# --- Commands ---

class CommandResponse(BaseModel):
    action: str
    state: GameStateResponse


class ControlResponse(BaseModel):
    status: str
    message: str
    turn: int = 0


# --- Config ---

class GameConfigResponse(BaseModel):
    seed: int
    map_width: int
    map_height: int
    room_min_size: int
    room_max_size: int
    max_rooms: int
    max_room_monsters: int
    torch_radius: int
    engage_distance: float
    message_capacity: int


# --- Serialization helpers ---

def rle_encode(values: list[int]) -> list[int]:
    """RLE encode: [value, count, value, count, ...]."""
    rle: list[int] = []
    if not values:
        return rle
    cur_val = values[0]
    cur_count = 1
    for v in values[1:]:
        if v == cur_val:
            cur_count += 1
        else:
            rle.append(cur_val)
            rle.append(cur_count)
            cur_val = v
            cur_count = 1
    rle.append(cur_val)
    rle.append(cur_count)
    return rle


def build_state_response(
    snapshot: Snapshot,
    phase: str,
    termination: str | None,
    compact: bool,
) -> GameStateResponse:
    return GameStateResponse(
        turn=snapshot.turn,
        phase=phase,
        termination=termination,
        compact=compact,
        player=PlayerSchema(
            hp=snapshot.player_hp,
            max_hp=snapshot.player_max_hp,
            alive=snapshot.player_alive,
        ),
        entities=[
            EntitySchema(
                id=e.id, name=e.name, x=e.x, y=e.y, glyph=e.glyph,
                color=e.color.as_hex(), layer=e.layer,
            )
            for e in snapshot.entities
        ],
        messages=[MessageSchema(text=m.text, color=m.color.as_hex()) for m in snapshot.messages],
    )
