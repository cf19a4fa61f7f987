"""Enumerations used throughout the game."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    MAP_GEN = 0
    SPAWN = 1
    TUNNEL = 2


@unique
class DeathPolicy(IntEnum):
    """Side effect applied when a Fighter's hp drops to zero or below."""

    PLAYER = 0
    MONSTER = 1


@unique
class AiKind(IntEnum):
    """AI capabilities an entity can carry."""

    BASIC = 0


@unique
class AIState(IntEnum):
    """Per-turn monster decision, re-evaluated from scratch every turn."""

    IDLE = 0
    APPROACHING = 1
    ATTACKING = 2


@unique
class Command(IntEnum):
    """Discrete commands produced by an input source."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    TOGGLE_DISPLAY = 4
    QUIT = 5
    UNRECOGNIZED = 6


@unique
class PlayerAction(IntEnum):
    """Result of handling one command."""

    TOOK_TURN = 0
    DIDNT_TAKE_TURN = 1
    EXIT = 2


@unique
class TurnPhase(IntEnum):
    """Turn controller states."""

    AWAITING_INPUT = 0
    RESOLVING = 1
    TERMINATED = 2


@unique
class TerminationReason(IntEnum):
    """Why the game loop stopped."""

    PLAYER_QUIT = 0
    PLAYER_DIED = 1


# Movement offsets for the directional commands
COMMAND_OFFSETS: dict[Command, tuple[int, int]] = {
    Command.UP: (0, -1),
    Command.DOWN: (0, 1),
    Command.LEFT: (-1, 0),
    Command.RIGHT: (1, 0),
}
