import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from bezier_sketch.input_state import InputState
from bezier_sketch.scene import Scene
from bezier_sketch.vector2 import Vector2


class RecordingSurface:
    """Collects draw calls instead of painting them."""

    def __init__(self):
        self.circles = []
        self.lines = []

    def fill_circle(self, top_left, radius):
        self.circles.append((top_left, radius))

    def draw_line(self, start, end):
        self.lines.append((start, end))


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scene():
    return Scene()


@pytest.fixture
def frame(scene, surface):
    """Runs one scene step from keyword input values."""
    def _frame(x=0, y=0, left=False, shift=False, curve_key=False):
        state = InputState(Vector2(x, y), left_down=left, shift_down=shift, curve_key_down=curve_key)
        scene.step(state, surface)
        return scene
    return _frame


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
