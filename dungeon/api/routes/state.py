"""GET /api/v1/state — turn, player, visible entities and the message log."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from dungeon.api.dependencies import get_running_game
from dungeon.api.engine_manager import GameManager
from dungeon.api.schemas import GameStateResponse, build_state_response

router = APIRouter()


@router.get("/state", response_model=GameStateResponse)
def get_state(manager: GameManager = Depends(get_running_game)) -> GameStateResponse:
    view = manager.get_view()
    if view is None:
        raise HTTPException(status_code=503, detail="No game running.")
    return build_state_response(view.snapshot, view.phase, view.termination, view.compact)
