"""
Main application window that brings all UI components together.
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QMessageBox, QLabel, QMenuBar
from PySide6.QtGui import QKeySequence
from PySide6.QtCore import Qt, QTimer, QThread, QPoint

from .. import __version__
from ..config import AppConfig
from ..scene import Scene
from ..updater import UpdateWorker, show_update_dialog
from .canvas import Canvas
from .control_panel import ControlPanel

logger = logging.getLogger(__name__)


class MainWindow(QWidget):
    """
    The main window of the application, which connects the control panel
    to the canvas and its scene.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        super().__init__()
        self.config = config or AppConfig()
        self.setWindowTitle(f"Bezier Sketch - v{__version__}")
        self.setGeometry(100, 100, 1000, 800)

        self.scene = Scene(self.config.scene)
        self.update_thread = None

        self._init_ui()
        self._connect_signals()

        if self.config.update_url:
            QTimer.singleShot(500, self.check_for_updates)

    def _init_ui(self):
        """Initializes the user interface and layout."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.canvas = Canvas(self.scene, self.config.frame_interval_ms)
        self.control_panel = ControlPanel(
            self.config.scene.point_radius, self.config.scene.click_radius)
        # The scene uses exactly what the sliders show.
        self.scene.set_point_radius(self.control_panel.point_radius_slider.value())
        self.scene.set_click_radius(self.control_panel.click_radius_slider.value())

        self.menu_bar = QMenuBar(self)
        self._create_menus()

        main_layout.addWidget(self.menu_bar)
        main_layout.addWidget(self.control_panel)
        main_layout.addWidget(self.canvas)

        # Coordinate display label, overlaid on the canvas
        self.coord_label = QLabel("X: --, Y: --", self.canvas)
        self.coord_label.setAlignment(Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignRight)
        self.coord_label.setStyleSheet(
            "background-color: rgba(40, 44, 52, 0.7);"
            "color: white;"
            "padding: 3px 5px;"
            "border-radius: 3px;"
        )

    def check_for_updates(self):
        """Checks for a newer release using a background thread."""
        self.update_thread = QThread()
        self.update_worker = UpdateWorker(__version__, self.config.update_url)
        self.update_worker.moveToThread(self.update_thread)

        self.update_worker.update_found.connect(self.on_update_found)
        self.update_worker.error_occurred.connect(self.on_update_error)
        self.update_worker.finished.connect(self.update_thread.quit)
        self.update_thread.started.connect(self.update_worker.run)
        self.update_thread.finished.connect(self.update_thread.deleteLater)

        self.update_thread.start()

    def on_update_found(self, release_info):
        show_update_dialog(release_info, self)

    def on_update_error(self, error_message):
        """Shows a failed release check in the control panel."""
        self.control_panel.status_label.setText(error_message)

    def _create_menus(self):
        # File Menu
        file_menu = self.menu_bar.addMenu("&File")

        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut(QKeySequence("Alt+F4"))
        exit_action.triggered.connect(self.close)

        # Edit Menu
        edit_menu = self.menu_bar.addMenu("&Edit")

        clear_action = edit_menu.addAction("&Clear Scene")
        clear_action.setShortcut(QKeySequence("Ctrl+L"))
        clear_action.triggered.connect(self.clear_scene)

        # Help Menu
        help_menu = self.menu_bar.addMenu("&Help")

        keybinds_action = help_menu.addAction("View &Keybinds")
        keybinds_action.triggered.connect(self.show_keybinds_dialog)

    def show_keybinds_dialog(self):
        keybind_text = (
            "<b>Points:</b><br>"
            "&nbsp;&nbsp;Shift+Click: Add point<br>"
            "&nbsp;&nbsp;Click+Drag: Move nearest point within pick radius<br>"
            "<br><b>Curves:</b><br>"
            "&nbsp;&nbsp;C: Curve through the last three points<br>"
            "&nbsp;&nbsp;&nbsp;&nbsp;(newest and third newest are the ends,<br>"
            "&nbsp;&nbsp;&nbsp;&nbsp;second newest is the control point)<br>"
            "<br><b>General:</b><br>"
            "&nbsp;&nbsp;Ctrl+L: Clear scene<br>"
        )
        QMessageBox.information(self, "Keybinds", keybind_text)

    def _connect_signals(self):
        """Connects widget signals to their corresponding slots."""
        self.control_panel.point_radius_slider.valueChanged.connect(self.set_point_radius)
        self.control_panel.click_radius_slider.valueChanged.connect(self.set_click_radius)
        self.control_panel.clear_button.clicked.connect(self.clear_scene)
        self.canvas.pointCountChanged.connect(
            lambda count: self.control_panel.point_count_label.setText(f"Points: {count}")
        )
        self.canvas.curveCountChanged.connect(
            lambda count: self.control_panel.curve_count_label.setText(f"Curves: {count}")
        )
        self.canvas.mouseMoved.connect(self.update_coords)

    def update_coords(self, pos: QPoint):
        """Updates the coordinate display label."""
        self.coord_label.setText(f"X: {pos.x()}, Y: {pos.y()}")
        self.coord_label.adjustSize()

    def resizeEvent(self, event):
        """Handle window resize to reposition the coordinate label."""
        super().resizeEvent(event)
        if hasattr(self, "coord_label"):
            self.coord_label.adjustSize()
            margin = 5
            self.coord_label.move(
                self.canvas.width() - self.coord_label.width() - margin,
                self.canvas.height() - self.coord_label.height() - margin
            )

    def set_point_radius(self, value):
        """Sets the radius used for new points."""
        self.scene.set_point_radius(value)
        self.control_panel.set_point_radius_text(value)

    def set_click_radius(self, value):
        """Sets how close a click must be to grab a point."""
        self.scene.set_click_radius(value)
        self.control_panel.set_click_radius_text(value)

    def clear_scene(self):
        """Removes all points and curves."""
        self.canvas.clear()
        self.canvas.setFocus()
