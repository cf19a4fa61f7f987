"""Seams to the outside world: where frames go and where commands come from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from dungeon.core.enums import Command
    from dungeon.core.snapshot import EntityRecord
    from dungeon.systems.visibility import TileRecord
    from dungeon.utils.message_log import Message


class RenderSink(ABC):
    """Receives one frame per turn cycle.

    Tile records are ``(x, y, visible, explored, blocks_sight)``. A sink
    should draw visible tiles lit, explored-but-not-visible tiles dim and
    skip tiles that were never explored.
    """

    @abstractmethod
    def draw_tiles(self, records: Iterable[TileRecord]) -> None:
        """Paint the map layer."""

    @abstractmethod
    def draw_entities(self, records: Iterable[EntityRecord]) -> None:
        """Paint entities, already ordered so blockers come last."""

    @abstractmethod
    def draw_panel(self, hp: int, max_hp: int, messages: Iterable[Message]) -> None:
        """Paint the HP bar and the message log."""

    @abstractmethod
    def present(self) -> None:
        """Flush the finished frame."""

    def toggle_display_mode(self) -> None:
        """Switch between the sink's display modes. Default: nothing to switch."""


class InputSource(ABC):
    """Produces one discrete command per call, blocking until one is available."""

    @abstractmethod
    def next_command(self) -> Command | None:
        """Return the next command, or None once the input is closed."""


class NullRenderSink(RenderSink):
    """Discards every frame; used for headless play through the API."""

    def __init__(self) -> None:
        self.compact = False

    def toggle_display_mode(self) -> None:
        self.compact = not self.compact

    def draw_tiles(self, records: Iterable[TileRecord]) -> None:
        pass

    def draw_entities(self, records: Iterable[EntityRecord]) -> None:
        pass

    def draw_panel(self, hp: int, max_hp: int, messages: Iterable[Message]) -> None:
        pass

    def present(self) -> None:
        pass
