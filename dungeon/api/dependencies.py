"""FastAPI dependency injection — the GameManager singleton and a running-game guard."""

from __future__ import annotations

from fastapi import Depends, HTTPException

from dungeon.api.engine_manager import GameManager

_game_manager: GameManager | None = None


def set_game_manager(manager: GameManager | None) -> None:
    global _game_manager
    _game_manager = manager


def get_game_manager() -> GameManager:
    if _game_manager is None:
        raise RuntimeError("GameManager not initialized — server not started correctly.")
    return _game_manager


def get_running_game(manager: GameManager = Depends(get_game_manager)) -> GameManager:
    """Like ``get_game_manager`` but answers 503 while no game is loaded."""
    if not manager.started:
        raise HTTPException(
            status_code=503,
            detail="No game running. POST /api/v1/control/reset to start one.",
        )
    return manager
