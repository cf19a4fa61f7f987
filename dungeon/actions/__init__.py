"""Action system: movement, melee combat and their outcome values."""

from dungeon.actions.base import AttackOutcome, MoveOutcome
from dungeon.actions.combat import CombatResolver
from dungeon.actions.move import move_by, player_move_or_attack

__all__ = ["AttackOutcome", "CombatResolver", "MoveOutcome", "move_by", "player_move_or_attack"]
