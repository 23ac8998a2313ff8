"""
Drawing interface the scene renders into.
"""
from typing import Protocol

from .vector2 import Vector2


class RenderSurface(Protocol):
    """
    Anything that can draw the two primitives the sketch needs. Discs are
    anchored at the top-left corner of their bounding box, not their center.
    """

    def fill_circle(self, top_left: Vector2, radius: float) -> None:
        ...

    def draw_line(self, start: Vector2, end: Vector2) -> None:
        ...
