"""Melee combat and death handling.

Damage is ``attacker.power - defender.defense``. A positive difference is
subtracted from the defender's hp in full; anything else is a complete
block and leaves hp untouched.

Death side effects use a strategy registry keyed by DeathPolicy. To add a
new policy:
  1. Add a DeathPolicy member.
  2. Subclass DeathHandler and register it in DEATH_HANDLERS.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from dungeon.actions.base import AttackOutcome
from dungeon.core.enums import DeathPolicy
from dungeon.core.models import DARK_RED, DARK_YELLOW, RED

if TYPE_CHECKING:
    from dungeon.core.game_state import GameState
    from dungeon.core.models import Entity

logger = logging.getLogger(__name__)

CORPSE_GLYPH = "%"


# ---------------------------------------------------------------------------
# Death policies
# ---------------------------------------------------------------------------

class DeathHandler(ABC):
    """Side effect applied once when a fighter's hp drops to zero or below."""

    @property
    @abstractmethod
    def policy(self) -> DeathPolicy:
        """The DeathPolicy this handler implements."""

    @abstractmethod
    def apply(self, entity: Entity, state: GameState) -> None:
        """Transform *entity* and record the death in *state*."""


class PlayerDeathHandler(DeathHandler):
    """The run is over: mark it and leave the player as a corpse glyph."""

    @property
    def policy(self) -> DeathPolicy:
        return DeathPolicy.PLAYER

    def apply(self, entity: Entity, state: GameState) -> None:
        state.player_dead = True
        entity.glyph = CORPSE_GLYPH
        entity.color = DARK_RED
        state.messages.add("You died!", RED)
        logger.info("Turn %d: player died", state.turn)


class MonsterDeathHandler(DeathHandler):
    """Turn the monster into an inert corpse that neither blocks nor thinks."""

    @property
    def policy(self) -> DeathPolicy:
        return DeathPolicy.MONSTER

    def apply(self, entity: Entity, state: GameState) -> None:
        state.messages.add(f"{entity.name} is dead!", DARK_RED)
        logger.info("Turn %d: entity %d (%s) died", state.turn, entity.id, entity.name)
        entity.glyph = CORPSE_GLYPH
        entity.color = DARK_RED
        entity.blocks = False
        entity.ai = None
        entity.name = f"remains of {entity.name}"


DEATH_HANDLERS: dict[DeathPolicy, DeathHandler] = {
    handler.policy: handler
    for handler in (PlayerDeathHandler(), MonsterDeathHandler())
}


def get_death_handler(policy: DeathPolicy) -> DeathHandler:
    return DEATH_HANDLERS[policy]


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

def compute_damage(attacker: Entity, defender: Entity) -> int:
    """Raw power minus defense; may be zero or negative."""
    power = attacker.fighter.power if attacker.fighter else 0
    defense = defender.fighter.defense if defender.fighter else 0
    return power - defense


class CombatResolver:
    """Stateless handler for melee attacks."""

    __slots__ = ()

    def attack(self, attacker: Entity, defender: Entity, state: GameState) -> AttackOutcome:
        if defender.fighter is None or not defender.alive:
            logger.debug(
                "Entity %d attack on %d ignored — target dead or not a fighter",
                attacker.id, defender.id,
            )
            return AttackOutcome(attacker.id, defender.id, ignored=True)

        damage = compute_damage(attacker, defender)
        if damage <= 0:
            state.messages.add(
                f"{attacker.name} attacks {defender.name} but it has no effect!", DARK_YELLOW,
            )
            logger.debug("Entity %d attack on %d had no effect", attacker.id, defender.id)
            return AttackOutcome(attacker.id, defender.id)

        state.messages.add(
            f"{attacker.name} attacks {defender.name} for {damage} hit points.", attacker.color,
        )
        killed = self.take_damage(defender, damage, state)
        logger.debug(
            "Entity %d (%s) hits entity %d (%s) for %d [HP: %d/%d]",
            attacker.id, attacker.name, defender.id, defender.name, damage,
            max(defender.fighter.hp, 0), defender.fighter.max_hp,
        )
        return AttackOutcome(attacker.id, defender.id, damage=damage, killed=killed)

    @staticmethod
    def take_damage(entity: Entity, damage: int, state: GameState) -> bool:
        """Apply positive *damage*; returns True if this blow killed the entity."""
        fighter = entity.fighter
        if fighter is None or damage <= 0:
            return False
        fighter.hp -= damage
        if fighter.hp <= 0 and entity.alive:
            entity.alive = False
            get_death_handler(fighter.on_death).apply(entity, state)
            return True
        return False
