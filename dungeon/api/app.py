"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dungeon.api.dependencies import set_game_manager
from dungeon.api.engine_manager import GameManager
from dungeon.api.routes import api_router
from dungeon.config import GameConfig
from dungeon.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = GameManager(_config)
        set_game_manager(manager)
        logger.info("API server started — dungeon ready (seed=%d).", _config.seed)
        yield
        manager.stop()
        set_game_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Dungeon Turn Simulation",
        description=(
            "Turn-based dungeon crawl played over HTTP.\n\n"
            "## API Groups\n\n"
            "- **Map** — Per-tile render flags (visible / explored / blocks sight)\n"
            "- **State** — Turn counter, player stats, visible entities, message log\n"
            "- **Control** — Player commands and dungeon reset\n"
            "- **Config** — Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Map", "description": "Tile flags for the lit / remembered / hidden rendering policy."},
            {"name": "State", "description": "Everything a client needs to draw the current frame."},
            {"name": "Control", "description": "One command per request; each taken turn also runs the monsters."},
            {"name": "Config", "description": "Read-only game configuration parameters."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
