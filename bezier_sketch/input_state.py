"""
Snapshot of the user's input for a single frame.
"""
from dataclasses import dataclass, field

from .vector2 import Vector2


@dataclass(frozen=True)
class InputState:
    """
    Input polled once per frame. The scene reads only this snapshot, so a
    frame's decisions and position writes always agree.
    """
    mouse_pos: Vector2 = field(default_factory=Vector2)
    left_down: bool = False
    shift_down: bool = False
    curve_key_down: bool = False
