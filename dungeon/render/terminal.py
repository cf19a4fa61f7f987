"""Terminal front end: an ANSI render sink and a line-based input source."""

from __future__ import annotations

import sys
import textwrap
from typing import IO, TYPE_CHECKING, Iterable

from dungeon.core.enums import Command
from dungeon.core.models import (
    COLOR_DARK_GROUND, COLOR_DARK_WALL, COLOR_LIGHT_GROUND, COLOR_LIGHT_WALL,
    DARKER_RED, LIGHT_RED, WHITE, Color,
)
from dungeon.engine.interfaces import InputSource, RenderSink

if TYPE_CHECKING:
    from dungeon.config import GameConfig
    from dungeon.core.snapshot import EntityRecord
    from dungeon.systems.visibility import TileRecord
    from dungeon.utils.message_log import Message

# (visible, wall) -> background color
TILE_COLORS: dict[tuple[bool, bool], Color] = {
    (False, True): COLOR_DARK_WALL,
    (False, False): COLOR_DARK_GROUND,
    (True, True): COLOR_LIGHT_WALL,
    (True, False): COLOR_LIGHT_GROUND,
}

# Glyphs for colorless output: same keys as TILE_COLORS
TILE_GLYPHS: dict[tuple[bool, bool], str] = {
    (False, True): "+",
    (False, False): ",",
    (True, True): "#",
    (True, False): ".",
}

_RESET = "\x1b[0m"


def _fg(c: Color) -> str:
    return f"\x1b[38;2;{c.r};{c.g};{c.b}m"


def _bg(c: Color) -> str:
    return f"\x1b[48;2;{c.r};{c.g};{c.b}m"


class _Cell:
    __slots__ = ("char", "fg", "bg")

    def __init__(self) -> None:
        self.char = " "
        self.fg: Color | None = None
        self.bg: Color | None = None


class TerminalRenderer(RenderSink):
    """Draws the map, the HP bar and the message log to a text stream.

    In compact display mode only the map is drawn.
    """

    def __init__(self, config: GameConfig, stream: IO[str] | None = None, color: bool = True) -> None:
        self._config = config
        self._stream = stream if stream is not None else sys.stdout
        self._color = color
        self.compact = False
        self._map: list[list[_Cell]] = []
        self._panel: list[list[_Cell]] = []
        self._clear()

    def _clear(self) -> None:
        cfg = self._config
        self._map = [[_Cell() for _ in range(cfg.map_width)] for _ in range(cfg.map_height)]
        self._panel = [[_Cell() for _ in range(cfg.screen_width)] for _ in range(cfg.panel_height)]

    # -- RenderSink --

    def toggle_display_mode(self) -> None:
        self.compact = not self.compact

    def draw_tiles(self, records: Iterable[TileRecord]) -> None:
        for x, y, visible, explored, wall in records:
            if not explored:
                continue
            cell = self._map[y][x]
            cell.bg = TILE_COLORS[(visible, wall)]
            if not self._color:
                cell.char = TILE_GLYPHS[(visible, wall)]

    def draw_entities(self, records: Iterable[EntityRecord]) -> None:
        for rec in records:
            cell = self._map[rec.y][rec.x]
            cell.char = rec.glyph
            cell.fg = rec.color

    def draw_panel(self, hp: int, max_hp: int, messages: Iterable[Message]) -> None:
        cfg = self._config
        self._render_bar(1, 1, cfg.bar_width, "HP", hp, max_hp, LIGHT_RED, DARKER_RED)

        msg_x = cfg.bar_width + 2
        msg_width = cfg.screen_width - cfg.bar_width - 2
        y = cfg.message_capacity
        for msg in reversed(list(messages)):
            lines = textwrap.wrap(msg.text, msg_width) or [""]
            y -= len(lines)
            if y < 0:
                break
            for offset, line in enumerate(lines):
                self._print(self._panel, msg_x, y + offset, line, msg.color)

    def present(self) -> None:
        rows = [self._row(r) for r in self._map]
        if not self.compact:
            rows.extend(self._row(r) for r in self._panel)
        self._stream.write("\n".join(rows) + "\n")
        self._stream.flush()
        self._clear()

    # -- helpers --

    def _render_bar(
        self, x: int, y: int, total_width: int, name: str,
        value: int, maximum: int, bar_color: Color, back_color: Color,
    ) -> None:
        bar_width = int(value / maximum * total_width) if maximum > 0 else 0
        row = self._panel[y]
        for i in range(total_width):
            row[x + i].bg = bar_color if i < bar_width else back_color
            if not self._color:
                row[x + i].char = "=" if i < bar_width else "-"
        text = f"{name}: {value}/{maximum}"
        start = x + (total_width - len(text)) // 2
        self._print(self._panel, max(start, x), y, text, WHITE)

    @staticmethod
    def _print(buffer: list[list[_Cell]], x: int, y: int, text: str, color: Color) -> None:
        if not 0 <= y < len(buffer):
            return
        row = buffer[y]
        for i, ch in enumerate(text):
            if 0 <= x + i < len(row):
                row[x + i].char = ch
                row[x + i].fg = color

    def _row(self, cells: list[_Cell]) -> str:
        if not self._color:
            return "".join(c.char for c in cells).rstrip()
        parts: list[str] = []
        for c in cells:
            prefix = ""
            if c.bg is not None:
                prefix += _bg(c.bg)
            if c.fg is not None:
                prefix += _fg(c.fg)
            parts.append(f"{prefix}{c.char}{_RESET}" if prefix else c.char)
        return "".join(parts)


KEY_COMMANDS: dict[str, Command] = {
    "w": Command.UP, "k": Command.UP, "up": Command.UP, "\x1b[a": Command.UP,
    "s": Command.DOWN, "j": Command.DOWN, "down": Command.DOWN, "\x1b[b": Command.DOWN,
    "a": Command.LEFT, "h": Command.LEFT, "left": Command.LEFT, "\x1b[d": Command.LEFT,
    "d": Command.RIGHT, "l": Command.RIGHT, "right": Command.RIGHT, "\x1b[c": Command.RIGHT,
    "f": Command.TOGGLE_DISPLAY, "toggle": Command.TOGGLE_DISPLAY,
    "q": Command.QUIT, "quit": Command.QUIT, "esc": Command.QUIT, "\x1b": Command.QUIT,
}


def parse_command(text: str) -> Command:
    return KEY_COMMANDS.get(text.strip().lower(), Command.UNRECOGNIZED)


class StdinInputSource(InputSource):
    """Reads one command per line; EOF closes the input."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def next_command(self) -> Command | None:
        line = self._stream.readline()
        if line == "":
            return None
        return parse_command(line)
