"""Core data models: Vector2, Color, Rect, Fighter, Entity."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dungeon.core.enums import AiKind, DeathPolicy


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def distance(self, other: Vector2) -> float:
        """Euclidean distance."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Color:
    """24-bit RGB color."""

    r: int
    g: int
    b: int

    def as_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# Palette used by entities and messages
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
DARK_RED = Color(191, 0, 0)
DARK_YELLOW = Color(191, 191, 0)
GREEN = Color(0, 255, 0)
DARKER_GREEN = Color(0, 127, 0)
LIGHT_RED = Color(255, 114, 114)
DARKER_RED = Color(127, 0, 0)

# Tile palettes: lit when visible, dim when only remembered
COLOR_DARK_WALL = Color(0, 0, 100)
COLOR_LIGHT_WALL = Color(130, 110, 50)
COLOR_DARK_GROUND = Color(50, 50, 150)
COLOR_LIGHT_GROUND = Color(200, 180, 50)


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned room footprint. The boundary ring stays wall."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Rect:
        return cls(x, y, x + w, y + h)

    def center(self) -> Vector2:
        return Vector2((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: Rect) -> bool:
        """True if the closed rectangles overlap; shared edges count."""
        return (
            self.x1 <= other.x2 and self.x2 >= other.x1
            and self.y1 <= other.y2 and self.y2 >= other.y1
        )

    def interior(self) -> list[Vector2]:
        """Cells carved to floor when the room is created."""
        return [
            Vector2(x, y)
            for x in range(self.x1 + 1, self.x2)
            for y in range(self.y1 + 1, self.y2)
        ]


@dataclass(slots=True)
class Fighter:
    """Combat component: hp, defense, power and what happens on death."""

    max_hp: int
    hp: int
    defense: int
    power: int
    on_death: DeathPolicy


@dataclass(slots=True)
class Entity:
    """Anything that lives on the map: the player, monsters, corpses."""

    id: int
    name: str
    pos: Vector2
    glyph: str
    color: Color
    blocks: bool = True
    alive: bool = False
    fighter: Fighter | None = None
    ai: AiKind | None = None

    def distance_to(self, other: Entity) -> float:
        return self.pos.distance(other.pos)
