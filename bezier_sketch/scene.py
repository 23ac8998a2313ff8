"""
Owns the points and curves of a sketch and runs the per-frame interaction
state machine that creates, picks and drags them.
"""
import logging
from dataclasses import replace
from enum import Enum
from typing import List, Optional

from .config import SceneConfig
from .control_point import ControlPoint
from .curve_model import BezierCurve
from .errors import InvalidPointReferenceError
from .input_state import InputState
from .surface import RenderSurface
from .vector2 import Vector2, float_distance

logger = logging.getLogger(__name__)


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class Scene:
    """
    The sketch's point and curve collections plus the transient drag state.

    Call ``step`` once per frame with that frame's input snapshot. Points are
    identified by their index in ``points``; curves store those indices.
    """

    def __init__(self, config: Optional[SceneConfig] = None):
        self.config = (config or SceneConfig()).validate()
        self.points: List[ControlPoint] = []
        self.curves: List[BezierCurve] = []
        self._reset_interaction()

    def _reset_interaction(self):
        self.drag_state = DragState.IDLE
        self.drag_index: Optional[int] = None
        self.left_down_last_frame = False
        self.curve_key_down_last_frame = False

    @property
    def is_dragging(self) -> bool:
        return self.drag_state is DragState.DRAGGING

    # --- Collection Management ---

    def add_point(self, pos: Optional[Vector2] = None, radius: Optional[float] = None) -> ControlPoint:
        """Appends a point, using the configured radius when none is given."""
        point = ControlPoint(
            pos if pos is not None else Vector2(0, 0),
            radius if radius is not None else self.config.point_radius,
            index=len(self.points),
        )
        self.points.append(point)
        logger.debug("Added %s", point)
        return point

    def add_curve(self) -> Optional[BezierCurve]:
        """
        Appends a curve through the three most recently added points, using
        the newest as the first endpoint and the second newest as the control.

        Returns:
            The new curve, or None when fewer than three points exist.
        """
        count = len(self.points)
        if count < 3:
            logger.warning("Curve needs 3 points, only %d placed; ignoring.", count)
            return None
        curve = BezierCurve(count - 1, count - 2, count - 3, step=self.config.sample_step)
        self.curves.append(curve)
        logger.debug("Added %s", curve)
        return curve

    def clear(self):
        """Removes every point and curve."""
        self.points.clear()
        self.curves.clear()
        self._reset_interaction()
        logger.info("Scene cleared.")

    def set_click_radius(self, radius: float):
        self.config = replace(self.config, click_radius=radius).validate()

    def set_point_radius(self, radius: float):
        """Changes the radius used for points created from now on."""
        self.config = replace(self.config, point_radius=radius).validate()

    # --- Interaction ---

    def pick_point(self, mouse_pos: Vector2) -> Optional[int]:
        """
        Finds the point closest to the mouse within the click radius.

        Returns:
            Index of that point, or None if no point is close enough. On equal
            distances the earliest created point wins.
        """
        closest_index = None
        closest_distance = None
        for i, point in enumerate(self.points):
            distance = float_distance(point.pos, mouse_pos)
            if distance > self.config.click_radius:
                continue
            if closest_distance is None or distance < closest_distance:
                closest_distance = distance
                closest_index = i
        return closest_index

    def update(self, state: InputState):
        """Advances the interaction state machine by one frame."""
        left = state.left_down
        left_last = self.left_down_last_frame

        if state.shift_down and left and not left_last:
            self.add_point(state.mouse_pos)
        elif left_last and left and self.is_dragging and not state.shift_down:
            self.points[self.drag_index].pos = state.mouse_pos
        elif left and not left_last:
            self._begin_drag(state.mouse_pos)
        elif not left:
            self.drag_state = DragState.IDLE
            self.drag_index = None

        if state.curve_key_down and not self.curve_key_down_last_frame:
            self.add_curve()

        self.left_down_last_frame = left
        self.curve_key_down_last_frame = state.curve_key_down

    def _begin_drag(self, mouse_pos: Vector2):
        index = self.pick_point(mouse_pos)
        if index is None:
            self.drag_state = DragState.IDLE
            self.drag_index = None
            return
        self.drag_state = DragState.DRAGGING
        self.drag_index = index
        self.points[index].pos = mouse_pos
        logger.debug("Picked up point #%d at %s", index, mouse_pos)

    # --- Rendering ---

    def render(self, surface: RenderSurface):
        """Draws every point, then every curve."""
        for point in self.points:
            point.render(surface)
        for curve in list(self.curves):
            try:
                curve.render(surface, self.points)
            except InvalidPointReferenceError as e:
                logger.warning("Dropping curve: %s", e)
                self.curves.remove(curve)

    def step(self, state: InputState, surface: RenderSurface):
        """Runs one frame: the state machine, then rendering."""
        self.update(state)
        self.render(surface)
