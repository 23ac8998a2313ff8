# Top control panel widget with sliders, buttons, and labels.

from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QSlider, QPushButton, QSizePolicy
)
from PySide6.QtCore import Qt

from ..config import DEFAULT_CLICK_RADIUS, DEFAULT_POINT_RADIUS


class ControlPanel(QFrame):
    """
    The top control panel with the point and pick radius sliders, the
    scene counters and the clear button.
    """

    def __init__(self, point_radius: float = DEFAULT_POINT_RADIUS,
                 click_radius: float = DEFAULT_CLICK_RADIUS, parent=None):
        super().__init__(parent)
        self.setStyleSheet("background-color: #333; color: white; padding: 5px;")
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        layout = QHBoxLayout(self)

        self.point_radius_label = QLabel()
        self.point_radius_slider = QSlider(Qt.Orientation.Horizontal)
        self.point_radius_slider.setRange(1, 20)
        self.point_radius_slider.setFixedWidth(150)

        self.click_radius_label = QLabel()
        self.click_radius_slider = QSlider(Qt.Orientation.Horizontal)
        self.click_radius_slider.setRange(1, 80)
        self.click_radius_slider.setFixedWidth(150)

        self.clear_button = QPushButton("Clear")
        self.clear_button.setFixedWidth(120)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: #ffb86c;")

        self.point_count_label = QLabel("Points: 0")
        self.curve_count_label = QLabel("Curves: 0")

        layout.addWidget(self.point_radius_label)
        layout.addWidget(self.point_radius_slider)
        layout.addSpacing(20)
        layout.addWidget(self.click_radius_label)
        layout.addWidget(self.click_radius_slider)
        layout.addSpacing(20)
        layout.addWidget(self.clear_button)
        layout.addSpacing(20)
        layout.addWidget(self.point_count_label)
        layout.addWidget(self.curve_count_label)
        layout.addStretch()
        layout.addWidget(self.status_label)

        # Sliders are whole pixels; widen the range for larger configured values.
        for slider, value in ((self.point_radius_slider, point_radius),
                              (self.click_radius_slider, click_radius)):
            value = max(1, round(value))
            slider.setMaximum(max(slider.maximum(), value))
            slider.setValue(value)

        self.set_point_radius_text(self.point_radius_slider.value())
        self.set_click_radius_text(self.click_radius_slider.value())

    def set_point_radius_text(self, value: int):
        self.point_radius_label.setText(f"Point size: {value} px")

    def set_click_radius_text(self, value: int):
        self.click_radius_label.setText(f"Pick radius: {value} px")
