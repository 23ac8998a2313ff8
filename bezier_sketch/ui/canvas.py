"""
Canvas widget that hosts the sketch scene and drives its frame loop.
"""
from typing import Optional

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtGui import QPainter, QColor, QCursor, QGuiApplication, QKeyEvent, QMouseEvent
from PySide6.QtCore import Qt, QPoint, QTimer, Signal

from ..config import FRAME_INTERVAL_MS
from ..input_state import InputState
from ..scene import Scene
from ..vector2 import Vector2
from .painter_surface import PainterSurface

CURVE_KEY = Qt.Key.Key_C
BACKGROUND_COLOR = QColor("#282c34")


class Canvas(QWidget):
    """
    The drawing area. A timer repaints the widget every frame; each paint
    polls the input once and advances the scene by exactly one step.
    """
    pointCountChanged = Signal(int)
    curveCountChanged = Signal(int)
    mouseMoved = Signal(QPoint)

    def __init__(self, scene: Scene, frame_interval_ms: int = FRAME_INTERVAL_MS,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.scene = scene
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(True)

        self.left_down = False
        self.curve_key_down = False
        self._last_point_count = 0
        self._last_curve_count = 0
        self._last_mouse_pos = QPoint()

        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(frame_interval_ms)
        self.frame_timer.timeout.connect(self.update)
        self.frame_timer.start()

    def poll_input(self) -> InputState:
        """Samples mouse, modifier and curve key state for this frame."""
        pos = self.mapFromGlobal(QCursor.pos())
        if pos != self._last_mouse_pos:
            self._last_mouse_pos = pos
            self.mouseMoved.emit(pos)

        modifiers = QGuiApplication.keyboardModifiers()
        return InputState(
            mouse_pos=Vector2(pos.x(), pos.y()),
            left_down=self.left_down,
            shift_down=bool(modifiers & Qt.KeyboardModifier.ShiftModifier),
            curve_key_down=self.curve_key_down,
        )

    def paintEvent(self, event):
        state = self.poll_input()
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            self.scene.step(state, PainterSurface(painter))
        finally:
            painter.end()
        self._emit_counts()

    def _emit_counts(self):
        if len(self.scene.points) != self._last_point_count:
            self._last_point_count = len(self.scene.points)
            self.pointCountChanged.emit(self._last_point_count)
        if len(self.scene.curves) != self._last_curve_count:
            self._last_curve_count = len(self.scene.curves)
            self.curveCountChanged.emit(self._last_curve_count)

    # Qt grabs the mouse on press, so the matching release always arrives here.
    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.left_down = True

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.left_down = False

    def keyPressEvent(self, event: QKeyEvent):
        if event.key() == CURVE_KEY and not event.isAutoRepeat():
            self.curve_key_down = True
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent):
        if event.key() == CURVE_KEY and not event.isAutoRepeat():
            self.curve_key_down = False
            return
        super().keyReleaseEvent(event)

    # A dialog taking focus mid-drag can swallow the release.
    def focusOutEvent(self, event):
        self.left_down = False
        self.curve_key_down = False
        super().focusOutEvent(event)

    def clear(self):
        self.scene.clear()
        self.update()
