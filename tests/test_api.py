"""Tests for the HTTP surface: GameManager, route handlers and payload helpers."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from dungeon.api import dependencies
from dungeon.api.app import create_app
from dungeon.api.engine_manager import GameManager
from dungeon.api.routes.config import get_config
from dungeon.api.routes.control import CommandName, ControlAction, command, control
from dungeon.api.routes.map import get_map
from dungeon.api.routes.state import get_state
from dungeon.api.schemas import rle_encode
from dungeon.config import GameConfig
from dungeon.core.enums import Command, PlayerAction
from dungeon.engine.turn_controller import WELCOME_MESSAGE


@pytest.fixture
def manager():
    return GameManager(GameConfig(seed=11))


class TestRLE:
    def test_runs(self):
        assert rle_encode([1, 1, 2, 2, 2, 1]) == [1, 2, 2, 3, 1, 1]

    def test_empty(self):
        assert rle_encode([]) == []


class TestGameManager:
    def test_starts_with_a_game(self, manager):
        view = manager.get_view()
        assert manager.started
        assert view.phase == "AWAITING_INPUT"
        assert view.termination is None
        assert view.snapshot.turn == 0

    def test_submit_toggle(self, manager):
        action, view = manager.submit(Command.TOGGLE_DISPLAY)
        assert action == PlayerAction.DIDNT_TAKE_TURN
        assert view.compact

    def test_submit_quit_terminates(self, manager):
        action, view = manager.submit(Command.QUIT)
        assert action == PlayerAction.EXIT
        assert view.phase == "TERMINATED"
        assert view.termination == "PLAYER_QUIT"

    def test_reset_starts_over(self, manager):
        manager.submit(Command.QUIT)
        manager.reset()
        view = manager.get_view()
        assert view.phase == "AWAITING_INPUT"
        assert not view.compact

    def test_stopped_manager(self, manager):
        manager.stop()
        assert manager.get_view() is None
        with pytest.raises(RuntimeError):
            manager.submit(Command.UP)


class TestRoutes:
    def test_state(self, manager):
        resp = get_state(manager=manager)
        assert resp.turn == 0
        assert resp.player.hp == resp.player.max_hp == 30
        assert resp.messages[0].text == WELCOME_MESSAGE
        assert resp.messages[0].color == "#ff0000"
        assert any(e.glyph == "@" for e in resp.entities)

    def test_map_decodes_to_full_grid(self, manager):
        resp = get_map(manager=manager)
        assert (resp.width, resp.height) == (80, 43)
        assert sum(resp.grid[1::2]) == 80 * 43
        assert all(0 <= v <= 7 for v in resp.grid[0::2])

    def test_command_toggle(self, manager):
        resp = command(CommandName.toggle, manager=manager)
        assert resp.action == "DIDNT_TAKE_TURN"
        assert resp.state.compact

    def test_command_quit(self, manager):
        resp = command(CommandName.quit, manager=manager)
        assert resp.action == "EXIT"
        assert resp.state.termination == "PLAYER_QUIT"

    def test_reset(self, manager):
        command(CommandName.quit, manager=manager)
        resp = control(ControlAction.reset, manager=manager)
        assert resp.status == "ok"
        assert get_state(manager=manager).phase == "AWAITING_INPUT"

    def test_config(self, manager):
        resp = get_config(manager=manager)
        assert resp.seed == 11
        assert resp.message_capacity == 6

    def test_no_game_is_503(self, manager):
        manager.stop()
        with pytest.raises(HTTPException) as exc:
            dependencies.get_running_game(manager=manager)
        assert exc.value.status_code == 503
        with pytest.raises(HTTPException):
            get_state(manager=manager)

    def test_reset_after_stop(self, manager):
        manager.stop()
        control(ControlAction.reset, manager=manager)
        assert dependencies.get_running_game(manager=manager) is manager


class TestApp:
    def test_routes_registered(self):
        app = create_app(GameConfig())
        paths = set(app.openapi()["paths"])
        assert "/api/v1/map" in paths
        assert "/api/v1/state" in paths
        assert "/api/v1/command/{command}" in paths
        assert "/api/v1/control/{action}" in paths
        assert "/api/v1/config" in paths

    def test_dependency_requires_manager(self):
        dependencies.set_game_manager(None)
        with pytest.raises(RuntimeError):
            dependencies.get_game_manager()

    def test_dependency_returns_manager(self, manager):
        dependencies.set_game_manager(manager)
        try:
            assert dependencies.get_game_manager() is manager
        finally:
            dependencies.set_game_manager(None)


class TestHTTP:
    """Real requests through the app, lifespan included."""

    @pytest.fixture
    def client(self):
        with TestClient(create_app(GameConfig(seed=11, log_level="WARNING"))) as client:
            yield client

    def test_state_endpoint(self, client):
        resp = client.get("/api/v1/state")
        assert resp.status_code == 200
        body = resp.json()
        assert body["turn"] == 0
        assert body["phase"] == "AWAITING_INPUT"
        assert body["termination"] is None

    def test_map_endpoint(self, client):
        body = client.get("/api/v1/map").json()
        assert (body["width"], body["height"]) == (80, 43)
        assert sum(body["grid"][1::2]) == 80 * 43

    def test_unknown_command_is_422(self, client):
        assert client.post("/api/v1/command/bogus").status_code == 422

    def test_unknown_control_action_is_422(self, client):
        assert client.post("/api/v1/control/explode").status_code == 422

    def test_quit_round_trip(self, client):
        resp = client.post("/api/v1/command/quit")
        assert resp.status_code == 200
        body = resp.json()
        assert body["action"] == "EXIT"
        assert body["state"]["phase"] == "TERMINATED"
        assert body["state"]["termination"] == "PLAYER_QUIT"

        state = client.get("/api/v1/state").json()
        assert state["termination"] == "PLAYER_QUIT"

        assert client.post("/api/v1/control/reset").json()["status"] == "ok"
        state = client.get("/api/v1/state").json()
        assert state["phase"] == "AWAITING_INPUT"
        assert state["termination"] is None

    def test_toggle_keeps_the_turn(self, client):
        body = client.post("/api/v1/command/toggle").json()
        assert body["action"] == "DIDNT_TAKE_TURN"
        assert body["state"]["compact"] is True
        assert body["state"]["turn"] == 0

    def test_config_endpoint(self, client):
        body = client.get("/api/v1/config").json()
        assert body["seed"] == 11
        assert body["torch_radius"] == 10
