"""
Represents a single draggable control point.
"""
from typing import Optional

from .config import DEFAULT_POINT_RADIUS
from .surface import RenderSurface
from .vector2 import Vector2


class ControlPoint:
    """
    A positioned, radius-tagged handle. The scene identifies a point by its
    index in the scene's point list, and curves refer to points only through
    that index.
    """

    def __init__(self, pos: Optional[Vector2] = None, radius: float = DEFAULT_POINT_RADIUS, index: int = 0):
        """
        Initializes a new ControlPoint.

        Args:
            pos: The position of the point's center. Defaults to the origin.
            radius: Radius of the disc drawn for this point.
            index: Position of the point in its owning scene.
        """
        self.pos = pos if pos is not None else Vector2(0, 0)
        self.radius = radius
        self.index = index
        self.draw_offset = self._compute_draw_offset()

    def __str__(self) -> str:
        return f"Point #{self.index} at {self.pos} (r={self.radius:g})"

    def _compute_draw_offset(self) -> Vector2:
        return self.pos - Vector2(self.radius, self.radius)

    def render(self, surface: RenderSurface):
        """Draws the point as a filled disc centered on its position."""
        self.draw_offset = self._compute_draw_offset()
        surface.fill_circle(self.draw_offset, self.radius)
