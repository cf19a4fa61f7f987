"""AIController — per-turn monster decision.

Nothing is remembered between turns: every call looks at the current
visibility and distance and picks one of

  IDLE        — the monster is outside the player's field of view;
  APPROACHING — visible but at least ``engage_distance`` away: one step
                along the rounded direction to the player;
  ATTACKING   — visible, closer than ``engage_distance``: melee the player
                if the player is still alive.

Monsters never path around obstacles. A blocked step is a wasted turn.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.actions.move import move_by
from dungeon.ai.perception import Perception
from dungeon.core.entity_store import PLAYER
from dungeon.core.enums import AIState

if TYPE_CHECKING:
    from dungeon.actions.combat import CombatResolver
    from dungeon.core.game_state import GameState
    from dungeon.systems.visibility import VisibilityEngine

logger = logging.getLogger(__name__)


class AIController:
    """Dispatches monster decisions. Holds no per-monster state."""

    __slots__ = ("_combat", "_engage_distance")

    def __init__(self, combat: CombatResolver, engage_distance: float = 2.0) -> None:
        self._combat = combat
        self._engage_distance = engage_distance

    def decide(self, monster_id: int, state: GameState, visibility: VisibilityEngine) -> AIState:
        """Classify the monster's situation without acting on it."""
        monster = state.entities[monster_id]
        if not Perception.can_see_player(monster, visibility):
            return AIState.IDLE
        if monster.distance_to(state.player) >= self._engage_distance:
            return AIState.APPROACHING
        return AIState.ATTACKING

    def take_turn(self, monster_id: int, state: GameState, visibility: VisibilityEngine) -> AIState:
        decision = self.decide(monster_id, state, visibility)
        player = state.player

        if decision == AIState.APPROACHING:
            step = Perception.step_toward(state.entities.pos(monster_id), player.pos)
            outcome = move_by(monster_id, step.x, step.y, state)
            logger.debug("Entity %d approaching: %r", monster_id, outcome)

        elif decision == AIState.ATTACKING:
            if player.fighter is not None and player.fighter.hp > 0:
                monster, target = state.entities.pair(monster_id, PLAYER)
                outcome = self._combat.attack(monster, target, state)
                logger.debug("Entity %d attacking: %r", monster_id, outcome)

        return decision
