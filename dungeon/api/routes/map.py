"""GET /api/v1/map — per-tile render flags for the three-state map."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from dungeon.api.dependencies import get_running_game
from dungeon.api.engine_manager import GameManager
from dungeon.api.schemas import MapResponse, rle_encode

router = APIRouter()


@router.get("/map", response_model=MapResponse)
def get_map(manager: GameManager = Depends(get_running_game)) -> MapResponse:
    view = manager.get_view()
    if view is None:
        raise HTTPException(status_code=503, detail="No game running.")
    snap = view.snapshot
    return MapResponse(width=snap.width, height=snap.height, grid=rle_encode(snap.tile_flags()))
