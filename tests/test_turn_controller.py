"""E2E tests for the turn controller: player turn, monster pass, termination."""

import logging
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from dungeon.config import GameConfig
from dungeon.core.enums import Command, PlayerAction, TerminationReason, TurnPhase
from dungeon.core.models import Vector2
from dungeon.engine.interfaces import NullRenderSink
from dungeon.engine.turn_controller import WELCOME_MESSAGE, TurnController
from tests.helpers.dungeon_arena import DungeonArena, RecordingSink


# ---------------------------------------------------------------------------
# Full fight
# ---------------------------------------------------------------------------

class TestFightE2E:
    """Player walks up to an orc and kills it in three swings."""

    def test_fight_sequence(self):
        arena = DungeonArena()
        arena.place_player((5, 5))
        orc = arena.add_orc((7, 5))

        # Step next to the orc; it is now adjacent and strikes first
        assert arena.step(Command.RIGHT) == [PlayerAction.TOOK_TURN]
        assert arena.player.pos == Vector2(6, 5)
        assert arena.player.fighter.hp == 29
        assert arena.state.turn == 1
        assert arena.message_texts() == ["orc attacks player for 1 hit points."]

        # Two swings: 10 -> 5, orc answers
        arena.step(Command.RIGHT)
        assert orc.fighter.hp == 5
        assert arena.player.fighter.hp == 28
        assert arena.message_texts()[-2:] == [
            "player attacks orc for 5 hit points.",
            "orc attacks player for 1 hit points.",
        ]
        assert arena.player.pos == Vector2(6, 5)

        # Killing blow: the corpse no longer acts
        arena.step(Command.RIGHT)
        assert not orc.alive
        assert orc.ai is None
        assert arena.player.fighter.hp == 28
        assert arena.message_texts()[-1] == "orc is dead!"

        # The corpse does not block
        arena.step(Command.RIGHT)
        assert arena.player.pos == Vector2(7, 5)
        assert arena.state.turn == 4

    def test_message_log_keeps_latest(self):
        arena = DungeonArena()
        arena.place_player((5, 5))
        arena.add_monster((6, 5), hp=100, defense=0, power=3)
        arena.step(*([Command.RIGHT] * 10))
        assert len(arena.state.messages) == arena.config.message_capacity
        assert arena.message_texts()[-1] == "orc attacks player for 1 hit points."


class TestPlayerDeath:
    def _doomed(self) -> DungeonArena:
        arena = DungeonArena()
        arena.place_player((5, 5))
        arena.player.fighter.hp = 1
        arena.add_orc((6, 5))
        return arena

    def test_monster_kills_player(self):
        arena = self._doomed()
        arena.step(Command.UP)
        assert arena.state.player_dead
        assert not arena.player.alive
        assert arena.player.glyph == "%"
        assert "You died!" in arena.message_texts()

    def test_world_frozen_after_death(self):
        arena = self._doomed()
        arena.step(Command.UP)
        turn = arena.state.turn
        pos = arena.player.pos
        actions = arena.step(Command.RIGHT, Command.DOWN, Command.TOGGLE_DISPLAY)
        assert actions == [PlayerAction.DIDNT_TAKE_TURN] * 3
        assert arena.state.turn == turn
        assert arena.player.pos == pos
        assert not arena.sink.compact

    def test_quit_after_death_reports_death(self):
        arena = self._doomed()
        arena.step(Command.UP)
        assert arena.step(Command.QUIT) == [PlayerAction.EXIT]
        assert arena.controller.terminated
        assert arena.controller.termination == TerminationReason.PLAYER_DIED


class TestCommands:
    def test_toggle_does_not_take_a_turn(self):
        arena = DungeonArena()
        orc = arena.add_orc((12, 5))
        before = orc.pos
        assert arena.step(Command.TOGGLE_DISPLAY) == [PlayerAction.DIDNT_TAKE_TURN]
        assert arena.sink.compact
        assert arena.state.turn == 0
        assert orc.pos == before
        arena.step(Command.TOGGLE_DISPLAY)
        assert not arena.sink.compact

    def test_unrecognized_does_nothing(self):
        arena = DungeonArena()
        assert arena.step(Command.UNRECOGNIZED) == [PlayerAction.DIDNT_TAKE_TURN]
        assert arena.state.turn == 0
        assert arena.controller.phase == TurnPhase.AWAITING_INPUT

    def test_wall_bump_still_takes_turn(self):
        arena = DungeonArena()
        arena.place_player((1, 5))
        orc = arena.add_orc((5, 5))
        assert arena.step(Command.LEFT) == [PlayerAction.TOOK_TURN]
        assert arena.state.turn == 1
        assert orc.pos == Vector2(4, 5)

    def test_quit(self):
        arena = DungeonArena()
        assert arena.step(Command.QUIT) == [PlayerAction.EXIT]
        assert arena.controller.phase == TurnPhase.TERMINATED
        assert arena.controller.termination == TerminationReason.PLAYER_QUIT

    def test_closed_input_is_quit(self):
        arena = DungeonArena()
        assert arena.controller.advance(None) == PlayerAction.EXIT
        assert arena.controller.termination == TerminationReason.PLAYER_QUIT

    def test_nothing_happens_after_termination(self):
        arena = DungeonArena()
        arena.place_player((5, 5))
        arena.step(Command.QUIT)
        assert arena.step(Command.RIGHT) == [PlayerAction.EXIT]
        assert arena.player.pos == Vector2(5, 5)


class TestLoop:
    def test_run_renders_each_cycle(self):
        sink = RecordingSink()
        arena = DungeonArena(sink=sink, commands=[Command.RIGHT, Command.LEFT, Command.QUIT])
        reason = arena.controller.run()
        assert reason == TerminationReason.PLAYER_QUIT
        assert sink.frames == 3
        assert arena.state.turn == 2

    def test_run_reports_player_quit(self, caplog):
        caplog.set_level(logging.INFO, logger="dungeon.engine.turn_controller")
        arena = DungeonArena(commands=[Command.QUIT])
        assert arena.controller.run() is TerminationReason.PLAYER_QUIT
        assert "Game finished at turn 0: PLAYER_QUIT" in caplog.text

    def test_run_stops_when_input_closes(self):
        sink = RecordingSink()
        arena = DungeonArena(sink=sink, commands=[Command.DOWN])
        assert arena.controller.run() == TerminationReason.PLAYER_QUIT
        assert sink.frames == 2

    def test_frame_contents(self):
        sink = RecordingSink()
        arena = DungeonArena(sink=sink)
        arena.place_player((5, 5))
        arena.add_orc((7, 5))
        arena.controller.render()
        assert [r.glyph for r in sink.last_entities] == ["@", "o"]
        assert sink.last_panel[:2] == (30, 30)

    def test_cycle_without_input_raises(self):
        arena = DungeonArena()
        with pytest.raises(RuntimeError):
            arena.controller.cycle()


class TestNewGame:
    def test_new_game_greets_player(self):
        controller = TurnController.new_game(GameConfig(seed=7), NullRenderSink())
        assert [m.text for m in controller.state.messages] == [WELCOME_MESSAGE]
        assert controller.state.seed == 7
        assert controller.phase == TurnPhase.AWAITING_INPUT

    def test_player_sees_start_room(self):
        controller = TurnController.new_game(GameConfig(seed=7), NullRenderSink())
        controller.refresh_visibility()
        start = controller.state.start
        assert controller.visibility.is_visible(start.x, start.y)
        assert controller.state.grid.tile(start.x, start.y).explored

    def test_same_seed_same_first_frame(self):
        a = TurnController.new_game(GameConfig(seed=3), NullRenderSink()).snapshot()
        b = TurnController.new_game(GameConfig(seed=3), NullRenderSink()).snapshot()
        assert a == b
