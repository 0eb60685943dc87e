"""Main application window for Stipple Studio."""

from pathlib import Path

from PIL.ImageQt import ImageQt
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QPixmap
from PyQt6.QtWidgets import (
    QApplication,
    QDockWidget,
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QToolBar,
    QWidget,
)

from config_manager import ConfigManager
from image_processing import StippleError, StippleProcessor
from ui.components import StippleControlsWidget
from ui.console_panel import ConsolePanel
from ui.styles import SIZES, panel_stylesheet

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp *.tif *.tiff)"


class StippleWindow(QMainWindow):
    """Main window: image import, parameter controls, preview and export."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Stipple Studio")
        self.setMinimumSize(1000, 700)

        # Application state
        self.config_manager = ConfigManager()
        self.settings = self.config_manager.load()
        self.params = self.settings.params
        self.processor = StippleProcessor(
            max_width=self.settings.max_width,
            max_height=self.settings.max_height,
            seed=self.settings.seed,
        )

        # UI component references (created in _setup_ui)
        self.preview_label: QLabel
        self.controls: StippleControlsWidget
        self.console_panel: ConsolePanel

        self._setup_ui()
        self._connect_signals()
        self._update_actions()

    def _setup_ui(self):
        """Initialize the user interface."""
        self._create_toolbar()
        self._create_preview_area()
        self._create_dock_widgets()

    def _create_toolbar(self):
        """Create the main toolbar with import and export actions."""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.open_action = QAction("Open Image...", self)
        self.open_action.setToolTip("Select an image file (PNG, JPG, etc.)")
        toolbar.addAction(self.open_action)

        toolbar.addSeparator()

        self.download_action = QAction("Download SVG", self)
        self.download_action.setToolTip("Save the stipple as an SVG file")
        toolbar.addAction(self.download_action)

        self.copy_action = QAction("Copy SVG Code", self)
        self.copy_action.setToolTip("Copy the SVG document to the clipboard")
        toolbar.addAction(self.copy_action)

    def _create_preview_area(self):
        """Create the central stipple preview."""
        self.preview_label = QLabel("Upload an image to get started")
        self.preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.preview_label.setMinimumSize(*SIZES.PREVIEW_MIN_SIZE)
        self.preview_label.setStyleSheet(panel_stylesheet())

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.preview_label)
        self.setCentralWidget(scroll)

    def _create_dock_widgets(self):
        """Create Controls and Console panels as dockable widgets."""
        self.controls = StippleControlsWidget(self.params)
        self.controls.setMinimumWidth(SIZES.CONTROLS_MIN_WIDTH)
        self._create_dock_widget(
            "Controls", self.controls, Qt.DockWidgetArea.RightDockWidgetArea
        )

        self.console_panel = ConsolePanel()
        self._create_dock_widget(
            "Console", self.console_panel, Qt.DockWidgetArea.BottomDockWidgetArea
        )

    def _create_dock_widget(
        self, title: str, widget: QWidget, area: Qt.DockWidgetArea
    ) -> QDockWidget:
        """Create a dockable widget with standard settings."""
        dock = QDockWidget(title, self)
        dock.setWidget(widget)
        self.addDockWidget(area, dock)
        return dock

    def _connect_signals(self):
        """Connect all UI signals to handlers."""
        self.open_action.triggered.connect(self._browse_image)
        self.download_action.triggered.connect(self._download_svg)
        self.copy_action.triggered.connect(self._copy_svg)
        self.controls.config_changed.connect(self._refresh)

    # --- Handlers ---

    def _browse_image(self):
        """Ask for an image file and load it."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Image", "", IMAGE_FILTER
        )
        if file_path:
            self.open_image(file_path)

    def open_image(self, file_path: str):
        """Load an image and render it with the current parameters."""
        try:
            image = self.processor.load_image(file_path)
        except ValueError as e:
            self._report_error("Could not open image", e)
            return

        self.console_panel.log(
            f"Loaded {Path(file_path).name} ({image.width}x{image.height})"
        )
        self._refresh()

    def _refresh(self):
        """Recompute the scene if needed and repaint the preview."""
        if not self.processor.has_image:
            return

        try:
            if self.processor.needs_update(self.params):
                scene = self.processor.update(self.params)
                self.console_panel.log(f"{len(scene)} dots")
        except StippleError as e:
            self.console_panel.log_error(e)
            if not self.processor.has_scene:
                # Nothing rendered yet for this image
                self.preview_label.clear()
                self.preview_label.setText(f"Cannot render: {e}")
                self._update_actions()
            return

        preview = self.processor.render_preview(allow_empty=True)
        self.preview_label.setPixmap(QPixmap.fromImage(ImageQt(preview)))
        self._update_actions()

    def _download_svg(self):
        """Save the current scene to a user-chosen SVG file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save SVG", self.settings.export_filename, "SVG (*.svg)"
        )
        if not file_path:
            return

        try:
            path = self.processor.save_svg(file_path)
        except (StippleError, OSError) as e:
            self._report_error("Export failed", e)
            return
        self.console_panel.log(f"Saved {path}")

    def _copy_svg(self):
        """Copy the current scene's SVG document to the clipboard."""
        try:
            content = self.processor.export_svg()
        except StippleError as e:
            self._report_error("Failed to copy SVG code", e)
            return

        clipboard = QApplication.clipboard()
        if clipboard is None:
            return
        clipboard.setText(content)
        self.console_panel.log("SVG code copied to clipboard!")

    def _report_error(self, title: str, error: Exception):
        """Show an error dialog and log it to the console."""
        self.console_panel.log_error(error)
        QMessageBox.warning(self, title, f"{type(error).__name__}: {error}")

    def _update_actions(self):
        has_image = self.processor.has_image
        self.download_action.setEnabled(has_image)
        self.copy_action.setEnabled(has_image)

    def closeEvent(self, event):
        """Remember the current parameters as defaults for next launch."""
        success, error = self.config_manager.save(self.settings)
        if not success:
            print(f"Warning: Could not save config file: {error}")
        super().closeEvent(event)
