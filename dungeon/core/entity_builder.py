"""EntityBuilder — fluent API for constructing Entity instances.

Usage::

    orc = (
        EntityBuilder(entity_id=3)
        .named("orc")
        .at(Vector2(12, 7))
        .drawn_as("o", GREEN)
        .with_fighter(hp=10, defense=0, power=3, on_death=DeathPolicy.MONSTER)
        .with_ai(AiKind.BASIC)
        .build()
    )

``make_player`` and ``make_monster`` wrap the stat presets used by the
map generator.
"""

from __future__ import annotations

from dataclasses import dataclass

from dungeon.core.enums import AiKind, DeathPolicy
from dungeon.core.models import (
    DARKER_GREEN, GREEN, WHITE, Color, Entity, Fighter, Vector2,
)


class EntityBuilder:
    """Fluent builder for Entity construction.

    All ``with_*`` / setter methods return ``self`` for chaining.
    Call ``build()`` to produce the final Entity.
    """

    __slots__ = (
        "_eid", "_name", "_pos", "_glyph", "_color",
        "_blocks", "_alive", "_fighter", "_ai",
    )

    def __init__(self, entity_id: int) -> None:
        self._eid = entity_id
        self._name: str = "unknown"
        self._pos: Vector2 = Vector2(0, 0)
        self._glyph: str = "?"
        self._color: Color = WHITE
        self._blocks: bool = True
        self._alive: bool = True
        self._fighter: Fighter | None = None
        self._ai: AiKind | None = None

    def named(self, name: str) -> EntityBuilder:
        self._name = name
        return self

    def at(self, pos: Vector2) -> EntityBuilder:
        self._pos = pos
        return self

    def drawn_as(self, glyph: str, color: Color) -> EntityBuilder:
        self._glyph = glyph
        self._color = color
        return self

    def blocking(self, blocks: bool = True) -> EntityBuilder:
        self._blocks = blocks
        return self

    def with_fighter(
        self, hp: int, defense: int, power: int, on_death: DeathPolicy,
    ) -> EntityBuilder:
        self._fighter = Fighter(
            max_hp=hp, hp=hp, defense=defense, power=power, on_death=on_death,
        )
        return self

    def with_ai(self, ai: AiKind = AiKind.BASIC) -> EntityBuilder:
        self._ai = ai
        return self

    def build(self) -> Entity:
        return Entity(
            id=self._eid,
            name=self._name,
            pos=self._pos,
            glyph=self._glyph,
            color=self._color,
            blocks=self._blocks,
            alive=self._alive,
            fighter=self._fighter,
            ai=self._ai,
        )


@dataclass(frozen=True, slots=True)
class Species:
    """Stat preset for a monster kind."""

    name: str
    glyph: str
    color: Color
    hp: int
    defense: int
    power: int


ORC = Species(name="orc", glyph="o", color=GREEN, hp=10, defense=0, power=3)
TROLL = Species(name="troll", glyph="T", color=DARKER_GREEN, hp=16, defense=1, power=4)

PLAYER_HP = 30
PLAYER_DEFENSE = 2
PLAYER_POWER = 5


def make_player(entity_id: int = 0, pos: Vector2 = Vector2(0, 0)) -> Entity:
    return (
        EntityBuilder(entity_id)
        .named("player")
        .at(pos)
        .drawn_as("@", WHITE)
        .with_fighter(
            hp=PLAYER_HP, defense=PLAYER_DEFENSE, power=PLAYER_POWER,
            on_death=DeathPolicy.PLAYER,
        )
        .build()
    )


def make_monster(entity_id: int, species: Species, pos: Vector2) -> Entity:
    return (
        EntityBuilder(entity_id)
        .named(species.name)
        .at(pos)
        .drawn_as(species.glyph, species.color)
        .with_fighter(
            hp=species.hp, defense=species.defense, power=species.power,
            on_death=DeathPolicy.MONSTER,
        )
        .with_ai(AiKind.BASIC)
        .build()
    )
