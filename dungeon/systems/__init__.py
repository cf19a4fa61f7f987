"""Game systems: RNG, dungeon generation, field of view."""

from dungeon.systems.rng import DeterministicRNG
from dungeon.systems.mapgen import MapGenerator
from dungeon.systems.visibility import VisibilityEngine

__all__ = ["DeterministicRNG", "MapGenerator", "VisibilityEngine"]
