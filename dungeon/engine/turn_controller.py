"""TurnController — the game's single state machine.

Cycle:
  1. Render — refresh the FOV if the player moved, then draw the frame
  2. Input — block on the input source for one command
  3. Player — move, attack, toggle the display or quit
  4. Monsters — if a turn was taken and the player lives, every entity with
     an AI acts once, in collection order

Once the player is dead only QUIT does anything; the loop keeps rendering
but the simulation is frozen.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dungeon.actions.combat import CombatResolver
from dungeon.actions.move import player_move_or_attack
from dungeon.ai.brain import AIController
from dungeon.core.enums import (
    COMMAND_OFFSETS, Command, PlayerAction, TerminationReason, TurnPhase,
)
from dungeon.core.game_state import GameState
from dungeon.core.models import RED
from dungeon.core.snapshot import Snapshot, visible_entity_records
from dungeon.systems.mapgen import MapGenerator
from dungeon.systems.rng import DeterministicRNG
from dungeon.systems.visibility import VisibilityEngine

if TYPE_CHECKING:
    from dungeon.config import GameConfig
    from dungeon.engine.interfaces import InputSource, RenderSink

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome stranger! Prepare to perish in this horror dungeon."


class TurnController:
    """Sequences render, input, player action and the monster pass."""

    __slots__ = (
        "_config",
        "_state",
        "_visibility",
        "_render_sink",
        "_input_source",
        "_combat",
        "_ai",
        "_phase",
        "_termination",
    )

    def __init__(
        self,
        config: GameConfig,
        state: GameState,
        render_sink: RenderSink,
        input_source: InputSource | None = None,
        visibility: VisibilityEngine | None = None,
    ) -> None:
        self._config = config
        self._state = state
        self._render_sink = render_sink
        self._input_source = input_source
        self._visibility = visibility or VisibilityEngine(
            state.grid, config.torch_radius, config.fov_light_walls,
        )
        self._combat = CombatResolver()
        self._ai = AIController(self._combat, config.engage_distance)
        self._phase = TurnPhase.AWAITING_INPUT
        self._termination: TerminationReason | None = None

    @classmethod
    def new_game(
        cls,
        config: GameConfig,
        render_sink: RenderSink,
        input_source: InputSource | None = None,
    ) -> TurnController:
        """Generate a dungeon from ``config.seed`` and greet the player."""
        generated = MapGenerator(config, DeterministicRNG(config.seed)).generate()
        state = GameState.from_generated(config.seed, generated, config.message_capacity)
        state.messages.add(WELCOME_MESSAGE, RED)
        logger.info("New game (seed=%d), player at %s", config.seed, state.player.pos)
        return cls(config, state, render_sink, input_source)

    # -- properties --

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def visibility(self) -> VisibilityEngine:
        return self._visibility

    @property
    def render_sink(self) -> RenderSink:
        return self._render_sink

    @property
    def phase(self) -> TurnPhase:
        return self._phase

    @property
    def termination(self) -> TerminationReason | None:
        return self._termination

    @property
    def terminated(self) -> bool:
        return self._phase == TurnPhase.TERMINATED

    # -- cycle --

    def refresh_visibility(self) -> bool:
        """Recompute the FOV if the player moved since the last refresh."""
        return self._visibility.update(self._state.player.pos)

    def render(self) -> None:
        self.refresh_visibility()
        sink = self._render_sink
        state = self._state
        fighter = state.player.fighter
        sink.draw_tiles(self._visibility.tile_records())
        sink.draw_entities(visible_entity_records(state, self._visibility))
        sink.draw_panel(
            fighter.hp if fighter else 0,
            fighter.max_hp if fighter else 0,
            state.messages.latest(),
        )
        sink.present()

    def snapshot(self) -> Snapshot:
        self.refresh_visibility()
        return Snapshot.from_state(self._state, self._visibility)

    def handle(self, command: Command) -> PlayerAction:
        """Apply the player's command. Monsters are not moved here."""
        if command == Command.QUIT:
            return PlayerAction.EXIT

        if not self._state.player.alive:
            return PlayerAction.DIDNT_TAKE_TURN

        if command == Command.TOGGLE_DISPLAY:
            self._render_sink.toggle_display_mode()
            return PlayerAction.DIDNT_TAKE_TURN

        offset = COMMAND_OFFSETS.get(command)
        if offset is None:
            return PlayerAction.DIDNT_TAKE_TURN

        outcome = player_move_or_attack(offset[0], offset[1], self._state, self._combat)
        logger.debug("Turn %d: player %r", self._state.turn, outcome)
        return PlayerAction.TOOK_TURN

    def run_monsters(self) -> None:
        """One AI pass over every entity that currently has an AI."""
        for idx in self._state.entities.ai_indices():
            self._ai.take_turn(idx, self._state, self._visibility)

    def advance(self, command: Command | None) -> PlayerAction:
        """Resolve one command: player action, then the monster pass."""
        if self.terminated:
            return PlayerAction.EXIT
        if command is None:
            command = Command.QUIT

        self.refresh_visibility()
        self._phase = TurnPhase.RESOLVING
        action = self.handle(command)

        if action == PlayerAction.EXIT:
            self._terminate()
            return action

        if action == PlayerAction.TOOK_TURN:
            if self._state.player.alive:
                self.run_monsters()
            self._state.turn += 1

        self._phase = TurnPhase.AWAITING_INPUT
        return action

    def cycle(self) -> PlayerAction:
        """Render, wait for one command and resolve it."""
        if self._input_source is None:
            raise RuntimeError("TurnController.cycle() needs an input source")
        self.render()
        return self.advance(self._input_source.next_command())

    def run(self) -> TerminationReason:
        """Play until the player quits (or the input closes)."""
        logger.info("=== Game started (seed=%d) ===", self._state.seed)
        while not self.terminated:
            self.cycle()
        reason = self._termination if self._termination is not None else TerminationReason.PLAYER_QUIT
        logger.info("=== Game finished at turn %d: %s ===", self._state.turn, reason.name)
        return reason

    def _terminate(self) -> None:
        self._phase = TurnPhase.TERMINATED
        self._termination = (
            TerminationReason.PLAYER_DIED if self._state.player_dead
            else TerminationReason.PLAYER_QUIT
        )
