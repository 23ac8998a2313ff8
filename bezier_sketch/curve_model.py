"""
Quadratic Bézier evaluation and the curve entity built from three points.
"""
import math
from typing import List, Sequence

from .config import DEFAULT_SAMPLE_STEP
from .control_point import ControlPoint
from .errors import InvalidPointReferenceError
from .surface import RenderSurface
from .vector2 import Vector2, lerp

# Absorbs float error in 1/step so exact divisors like 0.01 give 101 samples.
_STEP_TOLERANCE = 1e-9


def quadratic_bezier(p0: Vector2, p1: Vector2, p2: Vector2, t: float) -> Vector2:
    """Evaluates B(t) by repeated linear interpolation (de Casteljau)."""
    return lerp(lerp(p0, p1, t), lerp(p1, p2, t), t)


def sample_count(step: float) -> int:
    """
    Number of samples taken for a given parameter step: ceil(1/step) + 1.

    Raises:
        ValueError: If step is not positive.
    """
    if not step > 0:
        raise ValueError(f"Sample step must be positive, got {step!r}")
    return math.ceil(1.0 / step - _STEP_TOLERANCE) + 1


def sample_parameters(step: float) -> List[float]:
    """
    Parameter values 0, step, 2*step, ... with the last one clamped to
    exactly 1.0 when step does not divide 1 evenly.
    """
    count = sample_count(step)
    return [min(i * step, 1.0) for i in range(count - 1)] + [1.0]


class BezierCurve:
    """
    A quadratic Bézier segment defined by two endpoints and a control point.
    The curve starts (t=0) at the second endpoint and ends at the first.

    The curve only stores indices into the scene's point list and resolves
    them every time it is sampled, so points may move or the list may grow
    without invalidating the curve.
    """

    def __init__(self, endpoint_index_1: int, control_index: int, endpoint_index_2: int,
                 step: float = DEFAULT_SAMPLE_STEP):
        sample_count(step)
        self.endpoint_index_1 = endpoint_index_1
        self.control_index = control_index
        self.endpoint_index_2 = endpoint_index_2
        self.step = step
        self.samples: List[Vector2] = []

    def __str__(self) -> str:
        return (f"Curve({self.endpoint_index_1} -> {self.control_index} -> "
                f"{self.endpoint_index_2}, step={self.step:g})")

    @property
    def point_indices(self):
        return self.endpoint_index_1, self.control_index, self.endpoint_index_2

    def _resolve(self, points: Sequence[ControlPoint]) -> List[Vector2]:
        positions = []
        for index in self.point_indices:
            if not 0 <= index < len(points):
                raise InvalidPointReferenceError(
                    f"{self} refers to point {index}, but only {len(points)} exist")
            positions.append(points[index].pos)
        return positions

    def update_samples(self, points: Sequence[ControlPoint]) -> List[Vector2]:
        """
        Recomputes the polyline approximation from the current point positions.

        Args:
            points: The scene's point list the indices refer to.

        Returns:
            The freshly computed samples, running from the second endpoint
            (t=0) to the first endpoint (t=1).

        Raises:
            InvalidPointReferenceError: If any index is out of range.
        """
        end, control, start = self._resolve(points)
        self.samples = [quadratic_bezier(start, control, end, t) for t in sample_parameters(self.step)]
        return self.samples

    def render(self, surface: RenderSurface, points: Sequence[ControlPoint]):
        samples = self.update_samples(points)
        for start, end in zip(samples, samples[1:]):
            surface.draw_line(start, end)
