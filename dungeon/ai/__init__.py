"""AI layer: perception and per-turn monster decisions."""

from dungeon.ai.brain import AIController
from dungeon.ai.perception import Perception

__all__ = ["AIController", "Perception"]
