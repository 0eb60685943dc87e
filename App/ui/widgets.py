"""Widget factory for creating common UI patterns with reduced boilerplate.

This module provides factory functions to eliminate repetitive widget creation
code throughout the UI components.
"""

from typing import Tuple

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSlider, QWidget

from ui.styles import SIZES


class FloatSlider(QSlider):
    """QSlider over a float range, stepping in fixed increments.

    AIDEV-NOTE: QSlider is integer-only; the float value is
    range_min + position * step.
    """

    def __init__(
        self,
        range_min: float,
        range_max: float,
        step: float,
        orientation: Qt.Orientation = Qt.Orientation.Horizontal,
    ):
        super().__init__(orientation)
        self.range_min = range_min
        self.step = step
        self.setRange(0, round((range_max - range_min) / step))

    def float_value(self) -> float:
        return self.range_min + self.value() * self.step

    def set_float_value(self, value: float):
        self.setValue(round((value - self.range_min) / self.step))


class WidgetFactory:
    """Factory class for creating commonly used widget patterns."""

    @staticmethod
    def create_float_slider_with_label(
        range_min: float,
        range_max: float,
        step: float,
        value: float,
        label_format: str = "{:.2f}",
        label_width: int = SIZES.LABEL_MIN_WIDTH,
        tooltip: str = "",
    ) -> Tuple[FloatSlider, QLabel]:
        """Create a float slider with an auto-updating value label.

        The label automatically updates when the slider value changes.

        Args:
            range_min: Minimum value
            range_max: Maximum value
            step: Value increment per slider position
            value: Initial value
            label_format: Format string for label (use {} for value placeholder)
            label_width: Minimum width for label
            tooltip: Tooltip text

        Returns:
            Tuple of (slider, label)
        """
        slider = FloatSlider(range_min, range_max, step)
        slider.set_float_value(value)
        if tooltip:
            slider.setToolTip(tooltip)

        label = QLabel(label_format.format(slider.float_value()))
        label.setMinimumWidth(label_width)

        # Auto-connect slider to label
        slider.valueChanged.connect(
            lambda _: label.setText(label_format.format(slider.float_value()))
        )

        return slider, label

    @staticmethod
    def create_labeled_row(
        label_text: str,
        widget: QWidget,
    ) -> QHBoxLayout:
        """Create a horizontal layout with label and widget.

        Args:
            label_text: Text for the label
            widget: Widget to place after label

        Returns:
            QHBoxLayout with label and widget
        """
        layout = QHBoxLayout()
        layout.addWidget(QLabel(label_text))
        layout.addWidget(widget)
        return layout
