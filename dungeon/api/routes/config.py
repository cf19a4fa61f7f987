"""GET /api/v1/config — expose the game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dungeon.api.dependencies import get_game_manager
from dungeon.api.engine_manager import GameManager
from dungeon.api.schemas import GameConfigResponse

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(manager: GameManager = Depends(get_game_manager)) -> GameConfigResponse:
    cfg = manager.config
    return GameConfigResponse(
        seed=cfg.seed,
        map_width=cfg.map_width,
        map_height=cfg.map_height,
        room_min_size=cfg.room_min_size,
        room_max_size=cfg.room_max_size,
        max_rooms=cfg.max_rooms,
        max_room_monsters=cfg.max_room_monsters,
        torch_radius=cfg.torch_radius,
        engage_distance=cfg.engage_distance,
        message_capacity=cfg.message_capacity,
    )
