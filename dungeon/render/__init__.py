"""Front ends that implement the render sink and input source seams."""

from dungeon.render.terminal import StdinInputSource, TerminalRenderer, parse_command

__all__ = ["StdinInputSource", "TerminalRenderer", "parse_command"]
