"""POST /api/v1/command/{command} and /api/v1/control/{action}."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from dungeon.api.dependencies import get_game_manager, get_running_game
from dungeon.api.engine_manager import GameManager
from dungeon.api.schemas import CommandResponse, ControlResponse, build_state_response
from dungeon.core.enums import Command

router = APIRouter()


class CommandName(str, Enum):
    up = "up"
    down = "down"
    left = "left"
    right = "right"
    toggle = "toggle"
    quit = "quit"


_COMMANDS: dict[CommandName, Command] = {
    CommandName.up: Command.UP,
    CommandName.down: Command.DOWN,
    CommandName.left: Command.LEFT,
    CommandName.right: Command.RIGHT,
    CommandName.toggle: Command.TOGGLE_DISPLAY,
    CommandName.quit: Command.QUIT,
}


class ControlAction(str, Enum):
    reset = "reset"


@router.post("/command/{command}", response_model=CommandResponse)
def command(
    command: CommandName,
    manager: GameManager = Depends(get_running_game),
) -> CommandResponse:
    action, view = manager.submit(_COMMANDS[command])
    return CommandResponse(
        action=action.name,
        state=build_state_response(view.snapshot, view.phase, view.termination, view.compact),
    )


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    manager: GameManager = Depends(get_game_manager),
) -> ControlResponse:
    match action:
        case ControlAction.reset:
            manager.reset()
            view = manager.get_view()
            turn = view.snapshot.turn if view else 0
            return ControlResponse(status="ok", message="Dungeon regenerated.", turn=turn)
