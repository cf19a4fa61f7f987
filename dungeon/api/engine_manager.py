"""GameManager — owns the running game for the HTTP surface.

FastAPI runs sync endpoints on a thread pool, so every command and every
snapshot is taken under one lock: turns never interleave and readers never
see a half-resolved turn.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dungeon.core.enums import Command, PlayerAction
from dungeon.engine.interfaces import NullRenderSink
from dungeon.engine.turn_controller import TurnController

if TYPE_CHECKING:
    from dungeon.config import GameConfig
    from dungeon.core.snapshot import Snapshot


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameView:
    """A snapshot plus the controller state it was taken in."""

    snapshot: Snapshot
    phase: str
    termination: str | None
    compact: bool


class GameManager:
    """Thread-safe wrapper around one TurnController."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._sink = NullRenderSink()
        self._controller: TurnController | None = None
        self._build()

    @property
    def started(self) -> bool:
        return self._controller is not None

    # -- access --

    def get_view(self) -> GameView | None:
        with self._lock:
            if self._controller is None:
                return None
            return self._view()

    def submit(self, command: Command) -> tuple[PlayerAction, GameView]:
        """Resolve one command and return the resulting frame."""
        with self._lock:
            if self._controller is None:
                raise RuntimeError("GameManager has no game — call reset() first.")
            action = self._controller.advance(command)
            logger.debug("Command %s -> %s", command.name, action.name)
            return action, self._view()

    # -- lifecycle --

    def reset(self) -> None:
        """Throw away the current game and generate a fresh one from the seed."""
        with self._lock:
            self._build()
        logger.info("GameManager reset (seed=%d).", self.config.seed)

    def stop(self) -> None:
        with self._lock:
            self._controller = None
        logger.info("GameManager stopped.")

    # -- internals --

    def _build(self) -> None:
        self._sink = NullRenderSink()
        self._controller = TurnController.new_game(self.config, self._sink)

    def _view(self) -> GameView:
        ctl = self._controller
        return GameView(
            snapshot=ctl.snapshot(),
            phase=ctl.phase.name,
            termination=ctl.termination.name if ctl.termination is not None else None,
            compact=self._sink.compact,
        )
