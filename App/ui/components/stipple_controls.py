"""Stipple rendering controls component."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QCheckBox, QGroupBox, QVBoxLayout, QWidget

from models import PARAM_RANGES, StippleParams
from ui.widgets import WidgetFactory


class StippleControlsWidget(QWidget):
    """Controls for the stipple pass.

    This component provides UI controls for every stipple parameter:
    - Density, dot size, threshold and randomness
    - Invert mode (white dots in bright areas)
    - Levels (blacks, mids, highlights)
    """

    # Signal emitted when any control value changes
    config_changed = pyqtSignal()

    # (attribute, label, label format, tooltip)
    STIPPLE_ROWS = [
        ("density", "Density:", "{:.1f}", "Grid density, higher = more dots"),
        ("dot_size", "Dot Size:", "{:.1f}", "Dot radius in canvas units"),
        ("threshold", "Threshold:", "{:.0f}", "Minimum darkness for any dot"),
        ("randomness", "Randomness:", "{:.2f}", "Position jitter as a fraction of grid spacing"),
    ]
    LEVELS_ROWS = [
        ("blacks", "Blacks:", "{:.2f}", "Input level mapped to black"),
        ("mids", "Mids:", "{:.2f}", "Midtone gamma, 0.5 = unchanged"),
        ("highlights", "Highlights:", "{:.2f}", "Input level mapped to white"),
    ]

    def __init__(self, config: StippleParams, parent=None):
        """Initialize stipple controls.

        Args:
            config: Shared parameter set (modified directly by this widget)
            parent: Parent widget
        """
        super().__init__(parent)
        self.config = config
        self.sliders = {}
        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Create and layout UI controls."""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        stipple_group = QGroupBox("Stipple")
        stipple_layout = QVBoxLayout()
        self._add_slider_rows(stipple_layout, self.STIPPLE_ROWS)

        # Invert checkbox
        self.invert_check = QCheckBox("Invert (white dots on black)")
        self.invert_check.setChecked(self.config.invert)
        self.invert_check.setToolTip("Draw dots in bright areas instead of dark")
        stipple_layout.addWidget(self.invert_check)
        stipple_group.setLayout(stipple_layout)
        layout.addWidget(stipple_group)

        levels_group = QGroupBox("Levels")
        levels_layout = QVBoxLayout()
        self._add_slider_rows(levels_layout, self.LEVELS_ROWS)
        levels_group.setLayout(levels_layout)
        layout.addWidget(levels_group)

        layout.addStretch()
        self.setLayout(layout)

    def _add_slider_rows(self, layout: QVBoxLayout, rows):
        for attr, text, label_format, tooltip in rows:
            range_min, range_max, step = PARAM_RANGES[attr]
            slider, label = WidgetFactory.create_float_slider_with_label(
                range_min=range_min,
                range_max=range_max,
                step=step,
                value=getattr(self.config, attr),
                label_format=label_format,
                tooltip=tooltip,
            )
            row = WidgetFactory.create_labeled_row(text, slider)
            row.addWidget(label)
            layout.addLayout(row)
            self.sliders[attr] = slider

    def _connect_signals(self):
        """Connect widget signals to config updates."""
        for attr, slider in self.sliders.items():
            slider.valueChanged.connect(
                lambda _, a=attr, s=slider: self._update_config(a, s.float_value())
            )
        self.invert_check.toggled.connect(lambda v: self._update_config("invert", v))

    def _update_config(self, attr: str, value):
        """Update config attribute and emit signal.

        Args:
            attr: Config attribute name
            value: New value
        """
        setattr(self.config, attr, value)
        self.config_changed.emit()

