"""Outcome values for player and monster actions.

Gameplay results (a blocked step, a blow that does nothing, swinging at a
corpse) are ordinary values, never exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass

from dungeon.core.models import Vector2


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of a single-step move attempt."""

    actor_id: int
    origin: Vector2
    target: Vector2
    moved: bool

    def __repr__(self) -> str:
        verb = "moved" if self.moved else "blocked"
        return f"Move(entity={self.actor_id}, {self.origin}->{self.target}, {verb})"


@dataclass(frozen=True, slots=True)
class AttackOutcome:
    """Result of one melee attack."""

    attacker_id: int
    defender_id: int
    damage: int = 0
    killed: bool = False
    ignored: bool = False

    @property
    def hit(self) -> bool:
        return self.damage > 0

    def __repr__(self) -> str:
        if self.ignored:
            return f"Attack(entity={self.attacker_id} -> {self.defender_id}, ignored)"
        return (
            f"Attack(entity={self.attacker_id} -> {self.defender_id}, "
            f"damage={self.damage}, killed={self.killed})"
        )
