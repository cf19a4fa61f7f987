"""Engine layer: turn controller and its render/input seams."""

from dungeon.engine.interfaces import InputSource, NullRenderSink, RenderSink
from dungeon.engine.turn_controller import TurnController

__all__ = ["InputSource", "NullRenderSink", "RenderSink", "TurnController"]
