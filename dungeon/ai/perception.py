"""Perception helpers — what a monster can see and where it should step."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from dungeon.core.models import Vector2

if TYPE_CHECKING:
    from dungeon.core.models import Entity
    from dungeon.systems.visibility import VisibilityEngine


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (0.5 -> 1, -0.5 -> -1)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Perception:
    """Stateless perception utilities."""

    __slots__ = ()

    @staticmethod
    def can_see_player(monster: Entity, visibility: VisibilityEngine) -> bool:
        """Symmetric sight: a monster standing in the player's FOV sees the player."""
        return visibility.is_visible(monster.pos.x, monster.pos.y)

    @staticmethod
    def step_toward(origin: Vector2, target: Vector2) -> Vector2:
        """Unit vector toward *target*, rounded per axis onto the grid.

        Both axes can be non-zero, so the step may be diagonal.
        """
        dx = target.x - origin.x
        dy = target.y - origin.y
        distance = math.hypot(dx, dy)
        if distance == 0:
            return Vector2(0, 0)
        return Vector2(round_half_away(dx / distance), round_half_away(dy / distance))
