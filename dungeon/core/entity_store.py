"""Index-stable entity arena.

Entities are appended during generation and never removed; a dead monster
stays in place as a corpse. Indices are therefore stable for the whole run
and double as entity identity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from dungeon.core.models import Entity, Vector2

if TYPE_CHECKING:
    from dungeon.core.grid import TileGrid

PLAYER = 0


class EntityStore:
    """Ordered collection of entities; the player is always index 0."""

    __slots__ = ("_entities",)

    def __init__(self) -> None:
        self._entities: list[Entity] = []

    def add(self, entity: Entity) -> int:
        idx = len(self._entities)
        if entity.id != idx:
            entity.id = idx
        self._entities.append(entity)
        return idx

    def next_id(self) -> int:
        return len(self._entities)

    @property
    def player(self) -> Entity:
        return self._entities[PLAYER]

    def __getitem__(self, idx: int) -> Entity:
        return self._entities[idx]

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    # -- positions --

    def pos(self, idx: int) -> Vector2:
        return self._entities[idx].pos

    def set_pos(self, idx: int, x: int, y: int) -> None:
        self._entities[idx].pos = Vector2(x, y)

    def is_blocked(self, x: int, y: int, grid: TileGrid) -> bool:
        """True if the tile is blocked or a blocking entity stands on it."""
        if grid.is_blocked(x, y):
            return True
        return any(e.blocks and e.pos.x == x and e.pos.y == y for e in self._entities)

    def fighter_at(self, x: int, y: int) -> int | None:
        """Index of the first living combat-capable entity on the cell."""
        for idx, e in enumerate(self._entities):
            if e.fighter is not None and e.alive and e.pos.x == x and e.pos.y == y:
                return idx
        return None

    # -- paired access --

    def pair(self, first: int, second: int) -> tuple[Entity, Entity]:
        """Return two distinct entities for an attacker/defender interaction.

        Equal indices mean the caller lost track of who is who; that is a
        bug, so it raises instead of handing back the same object twice.
        """
        if first == second:
            raise ValueError(f"pair() needs two distinct entities, got index {first} twice")
        return self._entities[first], self._entities[second]

    def ai_indices(self) -> list[int]:
        return [idx for idx, e in enumerate(self._entities) if e.ai is not None]
