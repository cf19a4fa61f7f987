"""Single-step movement and the player's bump-to-attack rule."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.actions.base import AttackOutcome, MoveOutcome
from dungeon.core.entity_store import PLAYER
from dungeon.core.models import Vector2

if TYPE_CHECKING:
    from dungeon.actions.combat import CombatResolver
    from dungeon.core.game_state import GameState

logger = logging.getLogger(__name__)


def move_by(idx: int, dx: int, dy: int, state: GameState) -> MoveOutcome:
    """Move entity *idx* one step unless terrain or a blocking entity is in the way."""
    origin = state.entities.pos(idx)
    target = Vector2(origin.x + dx, origin.y + dy)
    if state.is_blocked(target.x, target.y):
        logger.debug("Entity %d blocked at %s", idx, target)
        return MoveOutcome(idx, origin, target, moved=False)
    state.entities.set_pos(idx, target.x, target.y)
    return MoveOutcome(idx, origin, target, moved=True)


def player_move_or_attack(
    dx: int,
    dy: int,
    state: GameState,
    combat: CombatResolver,
) -> MoveOutcome | AttackOutcome:
    """Attack whatever fighter stands on the target cell, otherwise step there."""
    origin = state.entities.pos(PLAYER)
    x, y = origin.x + dx, origin.y + dy

    target_id = state.entities.fighter_at(x, y)
    if target_id is not None and target_id != PLAYER:
        player, target = state.entities.pair(PLAYER, target_id)
        return combat.attack(player, target, state)
    return move_by(PLAYER, dx, dy, state)
